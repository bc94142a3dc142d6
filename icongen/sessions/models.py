"""Generation session state models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class GenerationPhase(str, Enum):
    """Ordered stages of a generation session.

    Only the first three do work when creating a prompt; ``REFINEMENT`` and
    ``OUTPUT`` are reserved slots kept for reporting symmetry.
    """

    VALIDATION = "validation"
    ANALYSIS = "analysis"
    GENERATION = "generation"
    REFINEMENT = "refinement"
    OUTPUT = "output"


PHASE_ORDER: Tuple[GenerationPhase, ...] = (
    GenerationPhase.VALIDATION,
    GenerationPhase.ANALYSIS,
    GenerationPhase.GENERATION,
    GenerationPhase.REFINEMENT,
    GenerationPhase.OUTPUT,
)

ACTIVE_PHASES: Tuple[GenerationPhase, ...] = PHASE_ORDER[:3]


class PhaseStatus(str, Enum):
    """Status lifecycle of a single phase record."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class GenerationRequest:
    """A shape-validated create-prompt request."""

    prompt: str
    reference_paths: Tuple[str, ...] = ()
    style: Optional[str] = None


@dataclass
class PhaseRecord:
    """Status of one phase, mutated in place by the session manager."""

    phase: GenerationPhase
    status: PhaseStatus
    message: str
    timestamp: datetime = field(default_factory=utc_now)
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "phase": self.phase.value,
            "status": self.status.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.details:
            data["details"] = self.details
        return data


@dataclass
class GenerationContext:
    """Artifacts accumulated while a session moves through its phases."""

    validated_files: List[str] = field(default_factory=list)
    text_references: List[str] = field(default_factory=list)
    expert_prompt: Optional[str] = None
    suggested_filename: Optional[str] = None
    errors: List[str] = field(default_factory=list)


@dataclass
class GenerationSession:
    """One create-prompt request's lifecycle."""

    session_id: str
    request: GenerationRequest
    phase_records: List[PhaseRecord]
    current_phase: GenerationPhase
    start_time: datetime = field(default_factory=utc_now)
    context: GenerationContext = field(default_factory=GenerationContext)

    def record(self, phase: GenerationPhase) -> PhaseRecord:
        for record in self.phase_records:
            if record.phase is phase:
                return record
        raise KeyError(phase)

    @property
    def failed(self) -> bool:
        return bool(self.context.errors)

    def to_summary(self) -> Dict[str, Any]:
        """Diagnostic snapshot; excludes the expert prompt body."""
        return {
            "session_id": self.session_id,
            "current_phase": self.current_phase.value,
            "started_at": self.start_time.isoformat(),
            "phases": [record.to_dict() for record in self.phase_records],
            "validated_files": list(self.context.validated_files),
            "errors": list(self.context.errors),
        }


@dataclass(frozen=True)
class PhaseResult:
    """Outcome of running one phase.

    Expected failures are returned, not raised; ``error_code`` is set only
    when ``succeeded`` is False.
    """

    phase: GenerationPhase
    succeeded: bool
    message: str
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, phase: GenerationPhase, message: str) -> "PhaseResult":
        return cls(phase=phase, succeeded=True, message=message)

    @classmethod
    def fail(cls, phase: GenerationPhase, error_code: str, message: str) -> "PhaseResult":
        return cls(phase=phase, succeeded=False, message=message, error_code=error_code)
