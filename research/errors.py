"""Errors raised while editing or committing a model configuration."""

from collections.abc import Iterable


class ModelConfigError(Exception):
    """Base class for every model-configuration error."""


class InvalidModelForRole(ModelConfigError):
    """A model was assigned to a role whose provider family doesn't list it."""

    def __init__(self, role, model_id: str, allowed: Iterable[str]):
        self.role = role
        self.model_id = model_id
        self.allowed = tuple(allowed)
        role_name = getattr(role, "value", role)
        super().__init__(
            f"{model_id!r} is not available for {role_name} "
            f"(choose one of: {', '.join(self.allowed)})"
        )


class InvalidConfiguration(ModelConfigError):
    """A whole configuration uses models its roles may not, or isn't total.

    ``problems`` holds one human-readable line per offending entry.
    """

    def __init__(self, problems: Iterable[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems) or "invalid configuration")


class SessionClosed(ModelConfigError):
    """The draft session was already committed or discarded."""


class ForeignSession(ModelConfigError):
    """The draft session was opened by a different config store."""
