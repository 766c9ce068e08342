import logging
import threading
import time
import uuid
from typing import Callable, Dict, Optional, Tuple
from uuid import UUID

from quizplay.core.config import settings
from quizplay.engine.session import PlaySession

logger = logging.getLogger(__name__)


class PlaySessionRegistry:
    """In-process store of in-progress play sessions, one ledger each.

    Sessions untouched for ``ttl_seconds`` are treated as abandoned: ``get``
    no longer returns them and ``create`` sweeps them out.
    """

    def __init__(self, ttl_seconds: float = None, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = settings.PLAY_SESSION_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self.clock = clock
        self._sessions: Dict[UUID, Tuple[PlaySession, float]] = {}
        self._lock = threading.Lock()

    def _expired(self, touched_at: float, now: float) -> bool:
        return now - touched_at > self.ttl_seconds

    def _sweep(self, now: float) -> None:
        stale = [sid for sid, (_, touched_at) in self._sessions.items() if self._expired(touched_at, now)]
        for session_id in stale:
            del self._sessions[session_id]
        if stale:
            logger.info("Dropped %s abandoned play sessions", len(stale))

    def create(self, session: PlaySession) -> UUID:
        session_id = uuid.uuid4()
        with self._lock:
            now = self.clock()
            self._sweep(now)
            self._sessions[session_id] = (session, now)
        return session_id

    def get(self, session_id: UUID) -> Optional[PlaySession]:
        with self._lock:
            entry = self._sessions.get(session_id)
            if entry is None:
                return None
            session, touched_at = entry
            now = self.clock()
            if self._expired(touched_at, now):
                del self._sessions[session_id]
                return None
            self._sessions[session_id] = (session, now)
            return session

    def discard(self, session_id: UUID) -> Optional[PlaySession]:
        with self._lock:
            entry = self._sessions.pop(session_id, None)
        return entry[0] if entry else None

    def __len__(self):
        with self._lock:
            return len(self._sessions)


play_sessions = PlaySessionRegistry()


def get_play_sessions() -> PlaySessionRegistry:
    return play_sessions
