"""Tool facade for the two-step icon workflow.

``create_icon_prompt`` turns a request into an expert prompt for an LLM the
caller controls; ``save_generated_icon`` persists the SVG that LLM produced.
Both return plain dicts and never raise: every failure is normalised into the
``validation_failed`` payload.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from pydantic import ValidationError as PydanticValidationError

from icongen.errors import failure_payload, map_error_for_mcp
from icongen.exceptions import (
    ContextBuildError,
    IconGenError,
    PhaseValidationError,
    ShapeValidationError,
)
from icongen.logger import Logger
from icongen.sessions import PhaseResult, SessionManager
from icongen.storage import IconFileWriter
from icongen.validation import CreateIconPromptInput, SaveGeneratedIconInput, format_validation_error

CREATE_ICON_PROMPT = "create_icon_prompt"
SAVE_GENERATED_ICON = "save_generated_icon"
TOOL_NAMES = (CREATE_ICON_PROMPT, SAVE_GENERATED_ICON)

EXAMPLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<circle cx="12" cy="12" r="10"/></svg>'
)

TOOL_DEFINITIONS: List[Dict[str, Any]] = [
    {
        "name": CREATE_ICON_PROMPT,
        "description": (
            "Creates an expert prompt for AI icon generation. Call this first. "
            "WORKFLOW: Step 1 of 2. Pass a text description and, optionally, reference "
            "files (.svg, or .png when your model accepts images) and a style name such as "
            "'black-white-flat' or 'material-design'. "
            "Returns: expert_prompt (feed it to your LLM), suggested_filename, and next_action "
            "describing the save_generated_icon call that completes the workflow."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "prompt": {
                    "type": "string",
                    "description": "Text description of the desired icon. Must be non-empty.",
                },
                "reference_paths": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": (
                        "Optional reference files. Only .svg and .png are accepted; "
                        ".png requires a multimodal LLM."
                    ),
                },
                "style": {
                    "type": "string",
                    "description": "Optional few-shot style name. Unknown names are ignored.",
                },
            },
            "required": ["prompt"],
        },
    },
    {
        "name": SAVE_GENERATED_ICON,
        "description": (
            "Saves a generated SVG icon to file. Call this after generating the SVG with the "
            "expert prompt from create_icon_prompt. "
            "WORKFLOW: Step 2 of 2. Dangerous constructs (script, foreignObject, event handlers, "
            "javascript: URLs) are stripped before writing. Existing files are never overwritten: "
            "a numeric suffix (-2, -3, ...) is appended instead. "
            "Returns: output_path of the written file."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "svg": {"type": "string", "description": "Complete SVG markup."},
                "filename": {
                    "type": "string",
                    "description": "Filename without extension, usually suggested_filename.",
                },
                "output_name": {
                    "type": "string",
                    "description": "Optional name overriding filename.",
                },
                "output_path": {
                    "type": "string",
                    "description": "Optional target directory. Defaults to the server's output directory.",
                },
            },
            "required": ["svg", "filename"],
        },
    },
]


def unknown_tool_payload(name: str) -> Dict[str, Any]:
    return failure_payload(
        "UNKNOWN_TOOL",
        f"Unknown tool: {name}. Available tools: {', '.join(TOOL_NAMES)}",
    )


class IconToolFacade:
    """Boundary between callers and the session pipeline / file writer."""

    def __init__(
        self,
        session_manager: SessionManager,
        file_writer: IconFileWriter,
        logger: Logger,
        retain_sessions: bool = False,
    ) -> None:
        self.session_manager = session_manager
        self.file_writer = file_writer
        self.logger = logger
        self.retain_sessions = retain_sessions

    @staticmethod
    def list_tools() -> List[Dict[str, Any]]:
        return [dict(tool) for tool in TOOL_DEFINITIONS]

    def handle_tool_call(self, name: str, raw: Any) -> Dict[str, Any]:
        if name == CREATE_ICON_PROMPT:
            return self.create_prompt(raw)
        if name == SAVE_GENERATED_ICON:
            return self.save_icon(raw)
        self.logger.warning("Unknown tool requested", tool=name, available_tools=list(TOOL_NAMES))
        return unknown_tool_payload(name)

    def create_prompt(self, raw: Any) -> Dict[str, Any]:
        try:
            payload = self._parse(CreateIconPromptInput, raw)
            session = self.session_manager.create_session(payload.to_request())
            try:
                result = self.session_manager.run_pipeline(session)
                if not result.succeeded:
                    summary = self.session_manager.require_session(session.session_id).to_summary()
                    self.logger.warning("Prompt pipeline failed", **summary)
                    raise self._phase_error(result, session.session_id)

                context = session.context
                self.logger.info(
                    "Expert prompt created",
                    session_id=session.session_id,
                    suggested_filename=context.suggested_filename,
                    processing_time_ms=self.session_manager.get_processing_time_ms(session),
                )
                return {
                    "type": "prompt_created",
                    "expert_prompt": context.expert_prompt,
                    "suggested_filename": context.suggested_filename,
                    "next_action": {
                        "description": f"Generate SVG with this prompt, then call {SAVE_GENERATED_ICON}",
                        "tool_name": SAVE_GENERATED_ICON,
                        "required_params": ["svg", "filename"],
                        "workflow_step": "2 of 2",
                        "example_usage": {
                            "svg": EXAMPLE_SVG,
                            "filename": context.suggested_filename,
                        },
                    },
                }
            finally:
                if not self.retain_sessions:
                    self.session_manager.cleanup_session(session.session_id)
        except IconGenError as exc:
            return map_error_for_mcp(exc)
        except Exception as exc:
            self.logger.error(
                "Unexpected failure creating prompt",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return failure_payload("UNEXPECTED_ERROR", f"Unexpected error: {exc}", "Icon prompt creation failed")

    def save_icon(self, raw: Any) -> Dict[str, Any]:
        try:
            payload = self._parse(SaveGeneratedIconInput, raw)
            output_path = self.file_writer.save(payload.target_name, payload.output_path, payload.svg)
            return {
                "type": "icon_saved",
                "success": True,
                "output_path": str(output_path),
                "message": f"Icon saved successfully to {output_path}",
            }
        except IconGenError as exc:
            self.logger.warning("Icon save failed", error_code=exc.code, error=str(exc))
            return map_error_for_mcp(exc)
        except Exception as exc:
            self.logger.error(
                "Unexpected failure saving icon",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return failure_payload("SAVE_FAILED", f"Failed to save icon: {exc}")

    def _parse(self, model: Any, raw: Any) -> Any:
        if not isinstance(raw, Mapping):
            raise ShapeValidationError(
                f"Request must be an object, got {type(raw).__name__}",
            )
        try:
            return model.model_validate(dict(raw))
        except PydanticValidationError as exc:
            self.logger.warning(
                "Request shape validation failed",
                model=model.__name__,
                error_count=len(exc.errors()),
            )
            raise ShapeValidationError(
                format_validation_error(exc),
                details={"fields": [".".join(str(p) for p in e["loc"]) for e in exc.errors() if e["loc"]]},
            ) from exc

    @staticmethod
    def _phase_error(result: PhaseResult, session_id: str) -> IconGenError:
        details = {"phase": result.phase.value, "session_id": session_id}
        if result.error_code == "CONTEXT_BUILD_FAILED":
            return ContextBuildError(result.message, details=details)
        return PhaseValidationError(result.message, details=details)
