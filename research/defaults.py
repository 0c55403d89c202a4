"""Default model per stage, used for fresh sessions and resets."""

import logging

from .assignment import PipelineConfig
from .catalog import ModelCatalog
from .constants import DEFAULT_MODELS
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

DEFAULTS: PipelineConfig = PipelineConfig.from_mapping(DEFAULT_MODELS)


def check_defaults(
    catalog: ModelCatalog, defaults: PipelineConfig = DEFAULTS,
) -> PipelineConfig:
    """Verify every default is offered by the catalog; run once at startup.

    A failure here means the configuration file and the catalog disagree,
    which is a deployment defect rather than something a user can fix.
    """
    problems = catalog.check(defaults)
    if problems:
        logger.error("Default models are not in the catalog: %s", problems)
        raise InvalidConfiguration([f"default {p}" for p in problems])
    return defaults
