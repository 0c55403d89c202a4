"""Selection surface — one labelled field per role, ready to render."""

from dataclasses import dataclass

from .catalog import ModelCatalog, ModelOption
from .registry import STAGES
from .roles import ProviderFamily, Role, family_of
from .session import DraftSession


@dataclass(frozen=True)
class RoleField:
    """Everything a front end needs to draw one role's model selector."""

    role: Role
    label: str
    description: str
    family: ProviderFamily
    options: tuple[ModelOption, ...]
    selected: str


def build_form(session: DraftSession, catalog: ModelCatalog) -> list[RoleField]:
    """Return the four selector fields for *session*, in pipeline order.

    Options come straight from the catalog for the role's family, and
    ``selected`` reflects the session's working copy.
    """
    form = []
    for role in Role:
        stage = STAGES[role]
        family = family_of(role)
        form.append(
            RoleField(
                role=role,
                label=stage.label,
                description=stage.description,
                family=family,
                options=catalog.options(family),
                selected=session.working.get(role),
            )
        )
    return form
