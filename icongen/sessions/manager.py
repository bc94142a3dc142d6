"""Session manager driving the create-prompt phase pipeline."""

import secrets
import string
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from icongen.capabilities import MultimodalDetector
from icongen.exceptions import SessionNotFoundError
from icongen.logger import Logger
from icongen.prompts import PromptCompositor, derive_filename
from icongen.sessions.models import (
    ACTIVE_PHASES,
    PHASE_ORDER,
    GenerationPhase,
    GenerationRequest,
    GenerationSession,
    PhaseRecord,
    PhaseResult,
    PhaseStatus,
    utc_now,
)
from icongen.sessions.storage import SessionStore

SESSION_ID_PREFIX = "icon-gen"
SUPPORTED_EXTENSIONS = (".png", ".svg")

PROMPT_REQUIRED_MESSAGE = "prompt is required and must be a non-empty string"

_BASE36 = string.digits + string.ascii_lowercase

_PHASE_ERROR_CODES = {
    GenerationPhase.VALIDATION: "PHASE_VALIDATION_FAILED",
    GenerationPhase.ANALYSIS: "PHASE_VALIDATION_FAILED",
    GenerationPhase.GENERATION: "CONTEXT_BUILD_FAILED",
}


def new_session_id() -> str:
    """Allocate an id of the form ``icon-gen-<epoch-ms>-<6 base36 chars>``."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(6))
    return f"{SESSION_ID_PREFIX}-{int(time.time() * 1000)}-{suffix}"


class SessionManager:
    """Owns generation sessions and moves them through their phases.

    Phase methods return a :class:`PhaseResult` instead of raising for
    expected failures. The first failure is terminal: later phases refuse
    to run and leave their records ``pending``.
    """

    def __init__(
        self,
        session_store: SessionStore,
        compositor: PromptCompositor,
        detector: MultimodalDetector,
        logger: Logger,
    ) -> None:
        """
        Initialize the session manager.

        Args:
            session_store: In-memory table owning the sessions
            compositor: Builds the expert prompt from request and references
            detector: Gates PNG references on multimodal capability
            logger: Logger instance
        """
        self.session_store = session_store
        self.compositor = compositor
        self.detector = detector
        self.logger = logger

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def create_session(self, request: GenerationRequest) -> GenerationSession:
        """Allocate a session with every phase record ``pending``."""
        session_id = new_session_id()
        while session_id in self.session_store:
            session_id = new_session_id()

        created = utc_now()
        records = [
            PhaseRecord(
                phase=phase,
                status=PhaseStatus.PENDING,
                message="Waiting to start",
                timestamp=created,
            )
            for phase in PHASE_ORDER
        ]
        session = GenerationSession(
            session_id=session_id,
            request=request,
            phase_records=records,
            current_phase=GenerationPhase.VALIDATION,
            start_time=created,
        )
        self.session_store.save_session(session)
        self.logger.info(
            "Generation session created",
            session_id=session_id,
            reference_count=len(request.reference_paths),
            style=request.style,
        )
        return session

    def get_session(self, session_id: str) -> Optional[GenerationSession]:
        return self.session_store.load_session(session_id)

    def require_session(self, session_id: str) -> GenerationSession:
        """Like get_session, but raises SessionNotFoundError for unknown ids."""
        session = self.session_store.load_session(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def cleanup_session(self, session_id: str) -> bool:
        """Drop a session from the store; returns whether it existed."""
        removed = self.session_store.delete_session(session_id)
        if removed:
            self.logger.debug("Generation session cleaned up", session_id=session_id)
        return removed

    def get_processing_time_ms(self, session: GenerationSession) -> int:
        elapsed = utc_now() - session.start_time
        return max(0, int(elapsed.total_seconds() * 1000))

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def run_pipeline(self, session: GenerationSession) -> PhaseResult:
        """Run validation, analysis and context building, stopping at the first failure."""
        result = self.run_validation(session)
        if not result.succeeded:
            return result
        result = self.run_analysis(session)
        if not result.succeeded:
            return result
        return self.run_context_building(session)

    def run_validation(self, session: GenerationSession) -> PhaseResult:
        phase = GenerationPhase.VALIDATION
        blocked = self._start_phase(session, phase)
        if blocked:
            return blocked

        request = session.request
        if not request.prompt or not request.prompt.strip():
            return self._fail_phase(session, phase, PROMPT_REQUIRED_MESSAGE)

        validated: List[str] = []
        has_png = False
        for reference in request.reference_paths:
            path = Path(reference)
            if not path.exists():
                return self._fail_phase(session, phase, f"File not found: {reference}")

            extension = path.suffix.lower()
            if extension not in SUPPORTED_EXTENSIONS:
                return self._fail_phase(
                    session,
                    phase,
                    f"Unsupported file format: {reference}. "
                    "Only .png and .svg references are supported",
                )
            has_png = has_png or extension == ".png"
            validated.append(reference)

        if has_png and not self.detector.is_available():
            return self._fail_phase(session, phase, self.detector.explain_requirement())

        session.context.validated_files.extend(validated)
        message = f"Validated prompt and {len(validated)} reference file(s)"
        self._complete_phase(session, phase, message, {"validated_files": len(validated)})
        return PhaseResult.ok(phase, message)

    def run_analysis(self, session: GenerationSession) -> PhaseResult:
        phase = GenerationPhase.ANALYSIS
        blocked = self._start_phase(session, phase)
        if blocked:
            return blocked

        request = session.request
        preview = request.prompt.strip()
        if len(preview) > 50:
            preview = preview[:50] + "..."
        style_known = self.compositor.style_registry.style_exists(request.style)
        if request.style and not style_known:
            # Unknown styles fall back to unconditioned prompts
            self.logger.warning(
                "Unknown style requested", session_id=session.session_id, style=request.style
            )
        parts = [f'Analyzing request: "{preview}"']
        file_count = len(session.context.validated_files)
        if file_count:
            parts.append(f"with {file_count} reference file(s)")
        if request.style:
            parts.append(f"in style '{request.style}'")
        message = " ".join(parts)

        self._complete_phase(session, phase, message, {"style_known": style_known})
        return PhaseResult.ok(phase, message)

    def run_context_building(self, session: GenerationSession) -> PhaseResult:
        phase = GenerationPhase.GENERATION
        blocked = self._start_phase(session, phase)
        if blocked:
            return blocked

        context = session.context
        try:
            # PNG references are consumed by the multimodal LLM directly
            for reference in context.validated_files:
                if Path(reference).suffix.lower() == ".svg":
                    context.text_references.append(Path(reference).read_text(encoding="utf-8"))

            context.expert_prompt = self.compositor.compose(
                session.request.prompt,
                context.text_references,
                session.request.style,
            )
            context.suggested_filename = derive_filename(session.request.prompt)
        except Exception as e:
            self.logger.error(
                "Context building failed",
                session_id=session.session_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return self._fail_phase(session, phase, f"Failed to build generation context: {e}")

        message = (
            f"Built expert prompt with {len(context.text_references)} SVG reference(s)"
        )
        self._complete_phase(
            session,
            phase,
            message,
            {
                "text_references": len(context.text_references),
                "suggested_filename": context.suggested_filename,
            },
        )
        return PhaseResult.ok(phase, message)

    # ------------------------------------------------------------------
    # Phase bookkeeping
    # ------------------------------------------------------------------

    def _start_phase(self, session: GenerationSession, phase: GenerationPhase) -> Optional[PhaseResult]:
        """Mark ``phase`` in progress, or return a failure if it may not run."""
        code = _PHASE_ERROR_CODES[phase]
        if session.failed:
            return PhaseResult.fail(
                phase,
                code,
                f"Session {session.session_id} already failed: {session.context.errors[0]}",
            )

        index = ACTIVE_PHASES.index(phase)
        for earlier in ACTIVE_PHASES[:index]:
            if session.record(earlier).status is not PhaseStatus.COMPLETED:
                return PhaseResult.fail(
                    phase, code, f"Phase '{earlier.value}' must complete before '{phase.value}'"
                )

        record = session.record(phase)
        if record.status is not PhaseStatus.PENDING:
            return PhaseResult.fail(
                phase, code, f"Phase '{phase.value}' already {record.status.value}"
            )

        self._transition(session, record, PhaseStatus.IN_PROGRESS, f"Running {phase.value}")
        session.current_phase = phase
        self.logger.debug("Phase started", session_id=session.session_id, phase=phase.value)
        return None

    def _complete_phase(
        self,
        session: GenerationSession,
        phase: GenerationPhase,
        message: str,
        details: Optional[dict] = None,
    ) -> None:
        record = session.record(phase)
        self._transition(session, record, PhaseStatus.COMPLETED, message)
        record.details = details
        self.logger.info(
            "Phase completed",
            session_id=session.session_id,
            phase=phase.value,
            detail=message,
        )

    def _fail_phase(
        self, session: GenerationSession, phase: GenerationPhase, error: str
    ) -> PhaseResult:
        record = session.record(phase)
        self._transition(session, record, PhaseStatus.FAILED, error)
        session.context.errors.append(f"{phase.value}: {error}")
        self.logger.warning(
            "Phase failed",
            session_id=session.session_id,
            phase=phase.value,
            error=error,
        )
        return PhaseResult.fail(phase, _PHASE_ERROR_CODES[phase], error)

    @staticmethod
    def _transition(
        session: GenerationSession, record: PhaseRecord, status: PhaseStatus, message: str
    ) -> None:
        # Timestamps never move backwards, even if the wall clock does
        latest: datetime = max(r.timestamp for r in session.phase_records)
        record.status = status
        record.message = message
        record.timestamp = max(utc_now(), latest)
