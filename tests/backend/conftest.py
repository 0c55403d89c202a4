import sys
from pathlib import Path

import pytest

# Ensure both the repo root (for the research package) and the backend
# directory (for the app package) are importable from the tests/ directory.
_repo_root = str(Path(__file__).resolve().parents[2])
sys.path.insert(0, _repo_root)
sys.path.insert(0, str(Path(_repo_root) / "backend"))

from app.main import app  # noqa: E402
from app.state import SessionRegistry, get_sessions, get_store  # noqa: E402
from research.store import ConfigStore  # noqa: E402


@pytest.fixture()
def store():
    """A fresh store seeded with the default models for each test."""
    return ConfigStore()


@pytest.fixture()
def sessions():
    return SessionRegistry()


@pytest.fixture()
def client(store, sessions):
    """
    Provide a Starlette TestClient whose requests use the per-test store
    and session registry instead of the process-wide ones.
    """
    from starlette.testclient import TestClient

    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_sessions] = lambda: sessions
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def session_id(client):
    """Open a draft session through the API and return its id."""
    resp = client.post("/api/model-config/sessions")
    assert resp.status_code == 201
    return resp.json()["session_id"]
