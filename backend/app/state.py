"""Process-wide configuration store and open draft sessions."""

import logging
import threading
import uuid

from research.constants import MAX_OPEN_SESSIONS
from research.session import DraftSession
from research.store import ConfigStore

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Open draft sessions keyed by an opaque id handed to the client.

    Holds at most ``max_sessions``; opening one more drops the oldest.
    """

    def __init__(self, max_sessions: int = MAX_OPEN_SESSIONS):
        self._sessions: dict[str, DraftSession] = {}
        self._max_sessions = max_sessions
        self._lock = threading.Lock()

    def add(self, session: DraftSession) -> str:
        session_id = uuid.uuid4().hex
        with self._lock:
            while len(self._sessions) >= self._max_sessions:
                oldest = next(iter(self._sessions))
                self._sessions.pop(oldest).discard()
                logger.warning("Dropped abandoned session %s", oldest)
            self._sessions[session_id] = session
        logger.info("Opened session %s", session_id)
        return session_id

    def get(self, session_id: str) -> DraftSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def remove(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)


_store = ConfigStore()
_sessions = SessionRegistry()


def get_store() -> ConfigStore:
    return _store


def get_sessions() -> SessionRegistry:
    return _sessions
