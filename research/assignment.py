"""Value types for a stage → model configuration."""

from collections.abc import Mapping
from dataclasses import dataclass, replace

from .errors import InvalidConfiguration
from .roles import Role


@dataclass(frozen=True)
class RoleAssignment:
    """A single stage bound to a single model."""

    role: Role
    model_id: str


@dataclass(frozen=True)
class PipelineConfig:
    """Complete mapping from every :class:`Role` to a model identifier.

    Instances are immutable. ``with_assignment`` returns a new value that
    differs in exactly one field; the other three are carried over as-is.
    Field names match the ``Role`` values so the two stay interchangeable.
    """

    query_generation: str
    web_search: str
    reflection: str
    answer: str

    def get(self, role: Role | str) -> str:
        return getattr(self, Role(role).value)

    def with_assignment(self, role: Role | str, model_id: str) -> "PipelineConfig":
        return replace(self, **{Role(role).value: model_id})

    def assignments(self) -> tuple[RoleAssignment, ...]:
        return tuple(RoleAssignment(role, self.get(role)) for role in Role)

    def as_dict(self) -> dict[str, str]:
        """Plain ``{role name: model id}`` mapping, in pipeline order."""
        return {role.value: self.get(role) for role in Role}

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "PipelineConfig":
        """Build a config from ``{role: model id}``; every role must be present.

        Keys may be :class:`Role` members or their string values.
        """
        problems = []
        values = {}
        seen = set()
        for key, model_id in mapping.items():
            try:
                role = Role(key)
            except ValueError:
                problems.append(f"unknown role {key!r}")
                continue
            seen.add(role)
            if not isinstance(model_id, str) or not model_id:
                problems.append(f"{role.value}: model id must be a non-empty string")
                continue
            values[role.value] = model_id

        for role in Role:
            if role not in seen:
                problems.append(f"{role.value}: no model assigned")

        if problems:
            raise InvalidConfiguration(problems)
        return cls(**values)
