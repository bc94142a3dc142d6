"""Input models for MCP server tools."""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from icongen.sessions import PROMPT_REQUIRED_MESSAGE, GenerationRequest


def _require_text(data: Any, field: str) -> Any:
    if isinstance(data, dict):
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{field} is required and must be a non-empty string")
    return data


class CreateIconPromptInput(BaseModel):
    """Input for create_icon_prompt.

    Args:
        prompt: Description of the icon to generate
        reference_paths: Optional PNG/SVG files to use as visual references
        style: Optional few-shot style name (e.g. 'black-white-flat')
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    prompt: str
    reference_paths: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("reference_paths", "referencePaths"),
    )
    style: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _prompt_present(cls, data: Any) -> Any:
        if isinstance(data, dict):
            prompt = data.get("prompt")
            if not isinstance(prompt, str) or not prompt.strip():
                raise ValueError(PROMPT_REQUIRED_MESSAGE)
        return data

    @field_validator("reference_paths", mode="before")
    @classmethod
    def _none_means_no_references(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("style")
    @classmethod
    def _blank_style_means_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(
            prompt=self.prompt,
            reference_paths=tuple(self.reference_paths),
            style=self.style,
        )


class SaveGeneratedIconInput(BaseModel):
    """Input for save_generated_icon.

    Args:
        svg: Complete SVG markup produced by the LLM
        filename: Suggested filename, without extension
        output_name: Optional name overriding ``filename``
        output_path: Optional target directory
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    svg: str
    filename: str
    output_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("output_name", "outputName")
    )
    output_path: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("output_path", "outputPath")
    )

    @model_validator(mode="before")
    @classmethod
    def _svg_and_filename_present(cls, data: Any) -> Any:
        _require_text(data, "svg")
        return _require_text(data, "filename")

    @property
    def target_name(self) -> str:
        if self.output_name and self.output_name.strip():
            return self.output_name
        return self.filename


def format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into one caller-facing sentence."""
    messages = []
    for error in exc.errors():
        message = error["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


__all__ = [
    "CreateIconPromptInput",
    "SaveGeneratedIconInput",
    "format_validation_error",
]
