"""Parsing of LLM responses that follow the FILENAME/SVG output contract."""

import re
from dataclasses import dataclass

from icongen.exceptions import ResponseParseError
from icongen.prompts import FALLBACK_FILENAME

SVG_NOT_FOUND_MESSAGE = "Invalid response format from LLM - SVG content not found"

_FILENAME_LINE = re.compile(r"FILENAME:\s*(.+?)(?:\n|$)", re.IGNORECASE)
_SVG_BLOCK = re.compile(r"SVG:\s*(.*?)(?:\n\nFILENAME:|\Z)", re.IGNORECASE | re.DOTALL)

_FENCE_OPEN = re.compile(r"^```\w*\n?", re.MULTILINE)
_FENCE_CLOSE = re.compile(r"\n?```$", re.MULTILINE)
_SELF_CLOSING = re.compile(r"<(?:script|foreignObject)\b[^>]*/\s*>", re.IGNORECASE)
_SCRIPT = re.compile(r"<script\b[^>]*>.*?</script\s*>", re.IGNORECASE | re.DOTALL)
_FOREIGN_OBJECT = re.compile(r"<foreignObject\b[^>]*>.*?</foreignObject\s*>", re.IGNORECASE | re.DOTALL)
# Unbalanced opening or closing tags left after the element passes
_STRAY_TAG = re.compile(r"</?(?:script|foreignObject)\b[^>]*>", re.IGNORECASE)
_EVENT_HANDLER = re.compile(
    r"""\s+on\w+\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>"']+?(?=\s|/?>))""", re.IGNORECASE
)
_JAVASCRIPT_URL = re.compile(r"""javascript:[^"'\s>]*""", re.IGNORECASE)

_SVG_SUFFIX = re.compile(r"\.svg$", re.IGNORECASE)
_FILENAME_INVALID = re.compile(r"[^a-zA-Z0-9\-_.]")


@dataclass(frozen=True)
class ParsedIcon:
    svg: str
    filename: str


def sanitize_svg(svg: str) -> str:
    """Strip markdown fences and known-dangerous constructs from SVG markup.

    Removes ``<script>`` and ``<foreignObject>`` elements with their content
    (self-closing forms included), ``on*=`` event handler attributes whether
    quoted or not, and ``javascript:`` URLs. This is not a general SVG
    validator.
    """
    svg = _FENCE_OPEN.sub("", svg, count=1)
    svg = _FENCE_CLOSE.sub("", svg, count=1)
    svg = _SELF_CLOSING.sub("", svg)
    svg = _SCRIPT.sub("", svg)
    svg = _FOREIGN_OBJECT.sub("", svg)
    svg = _STRAY_TAG.sub("", svg)
    svg = _EVENT_HANDLER.sub("", svg)
    svg = _JAVASCRIPT_URL.sub("", svg)
    return svg


def parse_llm_response(text: str) -> ParsedIcon:
    """Extract the SVG markup and suggested filename from an LLM response.

    Raises:
        ResponseParseError: If the response has no ``SVG:`` block
    """
    svg_match = _SVG_BLOCK.search(text)
    if not svg_match or not svg_match.group(1).strip():
        raise ResponseParseError(SVG_NOT_FOUND_MESSAGE, details={"response_length": len(text)})

    svg = sanitize_svg(svg_match.group(1).strip())

    filename_match = _FILENAME_LINE.search(text)
    filename = filename_match.group(1).strip() if filename_match else FALLBACK_FILENAME
    filename = _SVG_SUFFIX.sub("", filename)
    filename = _FILENAME_INVALID.sub("-", filename) or FALLBACK_FILENAME

    return ParsedIcon(svg=svg, filename=filename)
