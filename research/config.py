"""Model configuration — all tuneable values in one place."""

RESEARCH_CONFIG = {
    # Model used for each pipeline stage when nothing else is configured.
    "default_models": {
        "query_generation": "gpt-4.1",
        "web_search": "gemini-2.5-flash",
        "reflection": "gpt-4.1",
        "answer": "gpt-4.1",
    },
    # Provider family each stage is allowed to draw its model from.
    "role_families": {
        "query_generation": "openai",
        "web_search": "gemini",
        "reflection": "openai",
        "answer": "openai",
    },
    # Selectable models per provider family, in display order.
    "catalog": {
        "openai": [
            ("gpt-4.1", "GPT-4.1"),
            ("gpt-4o", "GPT-4o"),
            ("o4-mini", "o4 Mini"),
            ("o1", "o1"),
        ],
        "gemini": [
            ("gemini-2.5-flash", "Gemini 2.5 Flash"),
            ("gemini-2.0-flash", "Gemini 2.0 Flash"),
            ("gemini-2.5-pro", "Gemini 2.5 Pro"),
        ],
    },
    "cors_origins": ["http://localhost:5173"],
    # Oldest open draft sessions are dropped past this many.
    "max_open_sessions": 100,
}
