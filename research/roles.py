"""Pipeline roles and the provider family each one is bound to."""

import enum

from .constants import ROLE_FAMILIES


class Role(str, enum.Enum):
    """One stage of the research pipeline, in execution order."""

    query_generation = "query_generation"
    web_search = "web_search"
    reflection = "reflection"
    answer = "answer"


class ProviderFamily(str, enum.Enum):
    openai = "openai"  # general reasoning
    gemini = "gemini"  # web-result synthesis


def bind_families(mapping: dict[str, str]) -> dict[Role, ProviderFamily]:
    """Turn ``{role name: family name}`` into enum keys; every role must appear."""
    binding = {Role(role): ProviderFamily(family) for role, family in mapping.items()}
    unbound = set(Role) - binding.keys()
    if unbound:
        names = ", ".join(sorted(r.value for r in unbound))
        raise ValueError(f"no provider family configured for: {names}")
    return binding


ROLE_FAMILY: dict[Role, ProviderFamily] = bind_families(ROLE_FAMILIES)


def family_of(role: Role | str) -> ProviderFamily:
    """Return the provider family *role* may draw its model from."""
    return ROLE_FAMILY[Role(role)]
