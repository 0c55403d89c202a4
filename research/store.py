"""Config store — owns the committed configuration for the host application."""

import logging
import threading
import weakref

from .assignment import PipelineConfig
from .catalog import ModelCatalog, default_catalog
from .defaults import DEFAULTS, check_defaults
from .errors import ForeignSession, InvalidConfiguration
from .session import DraftSession

logger = logging.getLogger(__name__)


class ConfigStore:
    """Holds the committed :class:`PipelineConfig` and publishes new ones.

    Readers take ``current`` without locking: a commit swaps the reference
    to a new immutable value and never edits the old one. Commits are
    serialised by a lock. When two sessions commit against the same
    starting point the later commit wins.
    """

    def __init__(
        self,
        catalog: ModelCatalog | None = None,
        initial: PipelineConfig | None = None,
        defaults: PipelineConfig = DEFAULTS,
    ):
        self._catalog = catalog or default_catalog()
        self._defaults = check_defaults(self._catalog, defaults)

        seed = initial or self._defaults
        problems = self._catalog.check(seed)
        if problems:
            raise InvalidConfiguration(problems)

        self._current = seed
        self._revision = 0
        self._lock = threading.Lock()
        self._opened: weakref.WeakSet[DraftSession] = weakref.WeakSet()
        self._published: weakref.WeakSet[DraftSession] = weakref.WeakSet()

    @property
    def catalog(self) -> ModelCatalog:
        return self._catalog

    @property
    def defaults(self) -> PipelineConfig:
        return self._defaults

    @property
    def current(self) -> PipelineConfig:
        return self._current

    @property
    def revision(self) -> int:
        """Number of commits accepted since the store was created."""
        return self._revision

    def snapshot(self) -> dict[str, str]:
        return self._current.as_dict()

    def open_session(self, working: PipelineConfig | None = None) -> DraftSession:
        """Start a draft seeded from the current committed value."""
        session = DraftSession.open(
            self._current,
            self._catalog,
            defaults=self._defaults,
            working=working,
            revision=self._revision,
        )
        self._opened.add(session)
        return session

    def commit(self, session: DraftSession) -> PipelineConfig:
        """Commit *session* and make its value the current configuration.

        A session this store already published is returned as-is. A session
        committed directly through ``DraftSession.commit()`` is published
        now. Raises ``ForeignSession`` for sessions opened by another store,
        and whatever ``session.commit()`` raises otherwise; the current value
        is left alone in both cases.
        """
        if session not in self._opened:
            raise ForeignSession("draft session was not opened by this store")

        with self._lock:
            if session in self._published:
                return session.committed

            config = session.commit()

            if session.revision < self._revision:
                logger.warning(
                    "Session from revision %d overwrites revision %d (last writer wins)",
                    session.revision, self._revision,
                )
            self._current = config
            self._revision += 1
            session.revision = self._revision
            self._published.add(session)
            logger.info("Model configuration now at revision %d", self._revision)
            return config
