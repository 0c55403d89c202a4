"""Run plan — the per-run view of the configuration the orchestrator reads.

A plan is taken once at the start of a research run so that a commit
landing mid-run cannot switch models between stages.

Usage::

    python -m research.run_plan
"""

import logging
from dataclasses import dataclass

from .assignment import PipelineConfig
from .registry import STAGES
from .roles import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunPlan:
    """Frozen stage → model resolution for a single pipeline run."""

    config: PipelineConfig

    def model_for(self, role: Role | str) -> str:
        return self.config.get(role)

    def steps(self) -> list[tuple[Role, str]]:
        return [(role, self.model_for(role)) for role in Role]


def plan_run(config: PipelineConfig) -> RunPlan:
    plan = RunPlan(config=config)
    logger.info(
        "Run plan: %s",
        ", ".join(f"{role.value}={model}" for role, model in plan.steps()),
    )
    return plan


# ── CLI entry point ───────────────────────────────────────────────────

if __name__ == "__main__":
    from .store import ConfigStore

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    store = ConfigStore()
    for role, model in plan_run(store.current).steps():
        label = store.catalog.label_for(model)
        print(f"{STAGES[role].label:<24} {label}")
