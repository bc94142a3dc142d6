"""In-memory storage for generation sessions."""

from __future__ import annotations

from datetime import timedelta
from typing import Dict, List, Optional

from icongen.logger import Logger
from icongen.sessions.models import GenerationSession, utc_now


class SessionStore:
    """Session table owned by one server instance.

    Sessions live only as long as the process; nothing is persisted. Each
    server (and each test) constructs its own store.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._sessions: Dict[str, GenerationSession] = {}
        self.logger = logger

    def save_session(self, session: GenerationSession) -> None:
        self._sessions[session.session_id] = session
        if self.logger:
            self.logger.debug("Session stored", session_id=session.session_id)

    def load_session(self, session_id: str) -> Optional[GenerationSession]:
        return self._sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Remove a session; returns whether it existed."""
        removed = self._sessions.pop(session_id, None) is not None
        if removed and self.logger:
            self.logger.debug("Session deleted", session_id=session_id)
        return removed

    def list_sessions(self) -> List[str]:
        return list(self._sessions.keys())

    def purge_older_than(self, max_age: timedelta) -> int:
        """Evict sessions started more than ``max_age`` ago."""
        cutoff = utc_now() - max_age
        expired = [sid for sid in self.list_sessions() if self._sessions[sid].start_time < cutoff]
        for session_id in expired:
            del self._sessions[session_id]
        if expired and self.logger:
            self.logger.info("Purged expired sessions", count=len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions


__all__ = ["SessionStore"]
