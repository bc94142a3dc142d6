"""Pydantic input models for the icon tools."""
from icongen.validation.models import CreateIconPromptInput, SaveGeneratedIconInput, format_validation_error

__all__ = ["CreateIconPromptInput", "SaveGeneratedIconInput", "format_validation_error"]
