"""Draft session — stages edits to a configuration before publishing them.

Lifecycle::

    open ──set_assignment / reset_to_defaults──▶ open
    open ──commit──▶ committed
    open ──discard──▶ discarded

Only ``commit`` produces a new configuration, and only a fully valid one.
"""

import enum
import logging

from .assignment import PipelineConfig
from .catalog import ModelCatalog
from .defaults import DEFAULTS
from .errors import InvalidConfiguration, InvalidModelForRole, SessionClosed
from .roles import Role, family_of

logger = logging.getLogger(__name__)


class SessionState(str, enum.Enum):
    open = "open"
    committed = "committed"
    discarded = "discarded"


class DraftSession:
    """Working copy of a :class:`PipelineConfig` with commit/discard.

    ``committed`` is the last accepted value; ``working`` is the copy being
    edited. Neither is ever mutated in place, each edit swaps in a new
    ``PipelineConfig``.
    """

    def __init__(
        self,
        seed: PipelineConfig,
        catalog: ModelCatalog,
        defaults: PipelineConfig = DEFAULTS,
        working: PipelineConfig | None = None,
        revision: int = 0,
    ):
        self._catalog = catalog
        self._defaults = defaults
        self._committed = seed
        self._working = seed if working is None else working
        self._state = SessionState.open
        # Revision of the committed value this session was seeded from.
        self.revision = revision

    @classmethod
    def open(
        cls,
        seed: PipelineConfig,
        catalog: ModelCatalog,
        defaults: PipelineConfig = DEFAULTS,
        working: PipelineConfig | None = None,
        revision: int = 0,
    ) -> "DraftSession":
        """Start editing *seed*; pass *working* to resume an earlier edit."""
        session = cls(seed, catalog, defaults=defaults, working=working, revision=revision)
        logger.debug("Opened draft session at revision %d", revision)
        return session

    # ── read-only state ──────────────────────────────────────────────

    @property
    def committed(self) -> PipelineConfig:
        return self._committed

    @property
    def working(self) -> PipelineConfig:
        return self._working

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is SessionState.open

    def is_dirty(self) -> bool:
        return self._working != self._committed

    # ── edits ────────────────────────────────────────────────────────

    def set_assignment(self, role: Role | str, model_id: str) -> None:
        """Point *role* at *model_id*, leaving every other role untouched.

        Raises ``InvalidModelForRole`` (and changes nothing) when the
        role's provider family doesn't offer *model_id*.
        """
        self._ensure_open()
        role = Role(role)
        allowed = self._catalog.options_for(family_of(role))
        if model_id not in allowed:
            logger.warning("Rejected %r for %s", model_id, role.value)
            raise InvalidModelForRole(role, model_id, allowed)
        self._working = self._working.with_assignment(role, model_id)

    def reset_to_defaults(self) -> None:
        """Replace the whole working copy with the defaults."""
        self._ensure_open()
        self._working = self._defaults
        logger.info("Draft reset to default models")

    # ── close ────────────────────────────────────────────────────────

    def commit(self) -> PipelineConfig:
        """Validate the working copy and publish it as the committed value.

        Committing an already-committed session returns the same value
        again. On ``InvalidConfiguration`` the session stays open and the
        previously committed value is kept.
        """
        if self._state is SessionState.committed:
            return self._committed
        self._ensure_open()

        problems = self._catalog.check(self._working)
        if problems:
            logger.warning("Commit refused: %s", "; ".join(problems))
            raise InvalidConfiguration(problems)

        self._committed = self._working
        self._state = SessionState.committed
        logger.info("Committed model configuration: %s", self._committed.as_dict())
        return self._committed

    def discard(self) -> None:
        """Drop the working copy; the committed value stays in effect."""
        if self._state is not SessionState.open:
            return
        self._working = self._committed
        self._state = SessionState.discarded
        logger.info("Draft session discarded")

    def _ensure_open(self) -> None:
        if self._state is not SessionState.open:
            raise SessionClosed(f"draft session is already {self._state.value}")
