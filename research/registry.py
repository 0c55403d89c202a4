"""Stage registry — maps each role to the text shown beside its selector."""

from dataclasses import dataclass

from .roles import Role


@dataclass(frozen=True)
class Stage:
    label: str
    description: str


STAGES: dict[Role, Stage] = {
    Role.query_generation: Stage(
        "Query Generation",
        "Model used to generate search queries from your research topic",
    ),
    Role.web_search: Stage(
        "Web Search Processing",
        "Model used to process and analyze web search results",
    ),
    Role.reflection: Stage(
        "Reflection & Analysis",
        "Model used to analyze results and identify knowledge gaps",
    ),
    Role.answer: Stage(
        "Final Answer",
        "Model used to compose the final comprehensive answer",
    ),
}
