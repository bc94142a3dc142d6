"""Generation sessions: state models, in-memory store and phase manager."""
from icongen.sessions.manager import PROMPT_REQUIRED_MESSAGE, SessionManager, new_session_id
from icongen.sessions.models import (
    ACTIVE_PHASES,
    PHASE_ORDER,
    GenerationContext,
    GenerationPhase,
    GenerationRequest,
    GenerationSession,
    PhaseRecord,
    PhaseResult,
    PhaseStatus,
)
from icongen.sessions.storage import SessionStore

__all__ = [
    "ACTIVE_PHASES",
    "PHASE_ORDER",
    "PROMPT_REQUIRED_MESSAGE",
    "GenerationContext",
    "GenerationPhase",
    "GenerationRequest",
    "GenerationSession",
    "PhaseRecord",
    "PhaseResult",
    "PhaseStatus",
    "SessionManager",
    "SessionStore",
    "new_session_id",
]
