import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from research.catalog import ModelOption
from research.constants import API_PREFIX
from research.errors import (
    ForeignSession,
    InvalidConfiguration,
    InvalidModelForRole,
    SessionClosed,
)
from research.form import RoleField, build_form
from research.roles import Role
from research.session import DraftSession
from research.store import ConfigStore

from .schemas import (
    AssignmentUpdate,
    CatalogFamilyResponse,
    ConfigResponse,
    ModelOptionResponse,
    RoleFieldResponse,
    SessionResponse,
)
from .state import SessionRegistry, get_sessions, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix=API_PREFIX, tags=["model-config"])


def _option_response(option: ModelOption) -> ModelOptionResponse:
    return ModelOptionResponse(value=option.value, label=option.label)


def _field_response(field: RoleField) -> RoleFieldResponse:
    return RoleFieldResponse(
        role=field.role,
        label=field.label,
        description=field.description,
        family=field.family,
        options=[_option_response(o) for o in field.options],
        selected=field.selected,
    )


def _session_response(
    session_id: str, session: DraftSession, store: ConfigStore,
) -> SessionResponse:
    fields = build_form(session, store.catalog)
    return SessionResponse(
        session_id=session_id,
        state=session.state,
        working=session.working.as_dict(),
        dirty=session.is_dirty(),
        fields=[_field_response(field) for field in fields],
    )


def _get_open_session(session_id: str, sessions: SessionRegistry) -> DraftSession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.get("", response_model=ConfigResponse)
def get_config(store: ConfigStore = Depends(get_store)):
    return ConfigResponse(models=store.snapshot(), revision=store.revision)


@router.get("/catalog", response_model=list[CatalogFamilyResponse])
def get_catalog(store: ConfigStore = Depends(get_store)):
    catalog = store.catalog
    return [
        CatalogFamilyResponse(
            family=family,
            options=[_option_response(o) for o in catalog.options(family)],
        )
        for family in catalog.families()
    ]


@router.post("/sessions", response_model=SessionResponse, status_code=201)
def open_session(
    store: ConfigStore = Depends(get_store),
    sessions: SessionRegistry = Depends(get_sessions),
):
    session = store.open_session()
    session_id = sessions.add(session)
    return _session_response(session_id, session, store)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
def get_session(
    session_id: str,
    store: ConfigStore = Depends(get_store),
    sessions: SessionRegistry = Depends(get_sessions),
):
    session = _get_open_session(session_id, sessions)
    return _session_response(session_id, session, store)


@router.put("/sessions/{session_id}/assignments/{role}", response_model=SessionResponse)
def set_assignment(
    session_id: str,
    role: Role,
    body: AssignmentUpdate,
    store: ConfigStore = Depends(get_store),
    sessions: SessionRegistry = Depends(get_sessions),
):
    session = _get_open_session(session_id, sessions)
    try:
        session.set_assignment(role, body.model_id)
    except InvalidModelForRole as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": str(exc), "allowed": list(exc.allowed)},
        ) from exc
    return _session_response(session_id, session, store)


@router.post("/sessions/{session_id}/reset", response_model=SessionResponse)
def reset_session(
    session_id: str,
    store: ConfigStore = Depends(get_store),
    sessions: SessionRegistry = Depends(get_sessions),
):
    session = _get_open_session(session_id, sessions)
    session.reset_to_defaults()
    return _session_response(session_id, session, store)


@router.post("/sessions/{session_id}/commit", response_model=ConfigResponse)
def commit_session(
    session_id: str,
    store: ConfigStore = Depends(get_store),
    sessions: SessionRegistry = Depends(get_sessions),
):
    session = _get_open_session(session_id, sessions)
    try:
        store.commit(session)
    except InvalidConfiguration as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": str(exc), "problems": exc.problems},
        ) from exc
    except (SessionClosed, ForeignSession) as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    sessions.remove(session_id)
    return ConfigResponse(models=store.snapshot(), revision=store.revision)


@router.delete("/sessions/{session_id}", status_code=204)
def discard_session(
    session_id: str,
    sessions: SessionRegistry = Depends(get_sessions),
):
    session = _get_open_session(session_id, sessions)
    session.discard()
    sessions.remove(session_id)
    logger.info("Discarded session %s", session_id)
    return Response(status_code=204)
