"""Model catalog — which models each provider family offers."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .constants import CATALOG_LISTINGS
from .roles import ProviderFamily, Role, family_of


@dataclass(frozen=True)
class ModelOption:
    """One selectable model: its identifier and a display label."""

    value: str
    label: str


class ModelCatalog:
    """Read-only registry mapping a provider family to its models.

    Listings keep their declaration order so selection lists render the
    same way every time.
    """

    def __init__(self, listings: Mapping[str, Iterable]):
        self._options: dict[ProviderFamily, tuple[ModelOption, ...]] = {}
        for family, entries in listings.items():
            family = ProviderFamily(family)
            options = tuple(_to_option(entry) for entry in entries)
            if not options:
                raise ValueError(f"catalog lists no models for {family.value}")
            values = [option.value for option in options]
            if len(set(values)) != len(values):
                raise ValueError(f"catalog lists a model twice for {family.value}")
            self._options[family] = options

        missing = set(ProviderFamily) - self._options.keys()
        if missing:
            names = ", ".join(sorted(f.value for f in missing))
            raise ValueError(f"catalog has no listing for: {names}")

    def families(self) -> tuple[ProviderFamily, ...]:
        return tuple(self._options)

    def options(self, family: ProviderFamily | str) -> tuple[ModelOption, ...]:
        return self._options[ProviderFamily(family)]

    def options_for(self, family: ProviderFamily | str) -> tuple[str, ...]:
        """Model identifiers offered by *family*, in display order."""
        return tuple(option.value for option in self.options(family))

    def allows(self, role: Role | str, model_id: str) -> bool:
        return model_id in self.options_for(family_of(role))

    def label_for(self, model_id: str) -> str:
        for options in self._options.values():
            for option in options:
                if option.value == model_id:
                    return option.label
        return model_id

    def check(self, config) -> list[str]:
        """Return one problem line per role of *config* outside its family.

        An empty list means the whole configuration is valid.
        """
        problems = []
        for assignment in config.assignments():
            if not self.allows(assignment.role, assignment.model_id):
                family = family_of(assignment.role)
                problems.append(
                    f"{assignment.role.value}: {assignment.model_id!r} "
                    f"is not offered by {family.value}"
                )
        return problems


def _to_option(entry) -> ModelOption:
    if isinstance(entry, ModelOption):
        return entry
    if isinstance(entry, str):
        return ModelOption(value=entry, label=entry)
    value, label = entry
    return ModelOption(value=value, label=label)


def default_catalog() -> ModelCatalog:
    """Catalog built from ``RESEARCH_CONFIG["catalog"]``."""
    return ModelCatalog(CATALOG_LISTINGS)
