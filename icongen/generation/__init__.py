"""Handling of icon markup produced by the external LLM."""
from icongen.generation.response_parser import (
    SVG_NOT_FOUND_MESSAGE,
    ParsedIcon,
    parse_llm_response,
    sanitize_svg,
)

__all__ = ["ParsedIcon", "parse_llm_response", "sanitize_svg", "SVG_NOT_FOUND_MESSAGE"]
