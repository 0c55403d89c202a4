"""Centralised constants for the research package.

Everything here is derived from ``RESEARCH_CONFIG`` so individual modules
never reach into the raw dict themselves.
"""

import os

from .config import RESEARCH_CONFIG

# ── Stage → model defaults ────────────────────────────────────────────

DEFAULT_MODELS: dict[str, str] = dict(RESEARCH_CONFIG["default_models"])

# ── Stage → provider family binding ───────────────────────────────────

ROLE_FAMILIES: dict[str, str] = dict(RESEARCH_CONFIG["role_families"])

# ── Catalog listings (family → [(model id, label), ...]) ──────────────

CATALOG_LISTINGS: dict[str, list[tuple[str, str]]] = {
    family: list(entries) for family, entries in RESEARCH_CONFIG["catalog"].items()
}

# ── HTTP ──────────────────────────────────────────────────────────────

API_PREFIX: str = "/api/model-config"
MAX_OPEN_SESSIONS: int = RESEARCH_CONFIG["max_open_sessions"]

# Comma-separated override, e.g. "http://localhost:5173,https://example.org".
_cors_env = os.environ.get("RESEARCH_CORS_ORIGINS")
CORS_ORIGINS: list[str] = (
    [origin.strip() for origin in _cors_env.split(",") if origin.strip()]
    if _cors_env
    else list(RESEARCH_CONFIG["cors_origins"])
)
