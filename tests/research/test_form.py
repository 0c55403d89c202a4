"""Tests for the stage registry, the selection form and the run plan."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from research.catalog import default_catalog  # noqa: E402
from research.defaults import DEFAULTS  # noqa: E402
from research.form import RoleField, build_form  # noqa: E402
from research.registry import STAGES, Stage  # noqa: E402
from research.roles import ProviderFamily, Role  # noqa: E402
from research.run_plan import RunPlan, plan_run  # noqa: E402
from research.session import DraftSession  # noqa: E402

CATALOG = default_catalog()


# ---------------------------------------------------------------------------
# Stage registry
# ---------------------------------------------------------------------------


class TestStageRegistry:
    def test_every_role_is_registered(self):
        assert set(STAGES) == set(Role)

    @pytest.mark.parametrize("role", list(Role))
    def test_stage_has_label_and_description(self, role):
        stage = STAGES[role]
        assert isinstance(stage, Stage)
        assert stage.label
        assert stage.description.startswith("Model used to")

    def test_labels(self):
        assert [STAGES[r].label for r in Role] == [
            "Query Generation",
            "Web Search Processing",
            "Reflection & Analysis",
            "Final Answer",
        ]


# ---------------------------------------------------------------------------
# Selection form
# ---------------------------------------------------------------------------


class TestBuildForm:
    def test_one_field_per_role_in_pipeline_order(self):
        form = build_form(DraftSession.open(DEFAULTS, CATALOG), CATALOG)
        assert [f.role for f in form] == list(Role)
        assert all(isinstance(f, RoleField) for f in form)

    def test_options_come_from_role_family(self):
        form = build_form(DraftSession.open(DEFAULTS, CATALOG), CATALOG)
        by_role = {f.role: f for f in form}

        web = by_role[Role.web_search]
        assert web.family is ProviderFamily.gemini
        assert [o.value for o in web.options] == list(CATALOG.options_for("gemini"))

        answer = by_role[Role.answer]
        assert answer.family is ProviderFamily.openai
        assert [o.label for o in answer.options] == ["GPT-4.1", "GPT-4o", "o4 Mini", "o1"]

    def test_selected_tracks_working_copy(self):
        session = DraftSession.open(DEFAULTS, CATALOG)
        session.set_assignment(Role.reflection, "o1")
        form = build_form(session, CATALOG)
        selected = {f.role: f.selected for f in form}
        assert selected[Role.reflection] == "o1"
        assert selected[Role.query_generation] == "gpt-4.1"

    def test_selected_is_always_one_of_the_options(self):
        form = build_form(DraftSession.open(DEFAULTS, CATALOG), CATALOG)
        for field in form:
            assert field.selected in [o.value for o in field.options]


# ---------------------------------------------------------------------------
# Run plan
# ---------------------------------------------------------------------------


class TestRunPlan:
    def test_plan_resolves_each_stage(self):
        plan = plan_run(DEFAULTS)
        assert isinstance(plan, RunPlan)
        assert plan.model_for(Role.web_search) == "gemini-2.5-flash"
        assert plan.model_for("answer") == "gpt-4.1"

    def test_steps_in_pipeline_order(self):
        plan = plan_run(DEFAULTS)
        assert [role for role, _ in plan.steps()] == list(Role)

    def test_plan_unaffected_by_later_commit(self):
        from research.store import ConfigStore

        store = ConfigStore()
        plan = plan_run(store.current)

        session = store.open_session()
        session.set_assignment(Role.answer, "o1")
        store.commit(session)

        assert plan.model_for(Role.answer) == "gpt-4.1"
        assert plan_run(store.current).model_for(Role.answer) == "o1"
