"""Tests for parsing LLM responses into icons."""

import pytest

from icongen.exceptions import ResponseParseError
from icongen.generation import parse_llm_response, sanitize_svg


def test_parses_filename_and_svg() -> None:
    response = (
        "FILENAME: cat-pillow\n"
        'SVG: <svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><circle r="4"/></svg>'
    )

    parsed = parse_llm_response(response)

    assert parsed.filename == "cat-pillow"
    assert parsed.svg.startswith("<svg")
    assert parsed.svg.endswith("</svg>")


def test_markers_are_case_insensitive_and_fences_removed() -> None:
    response = "filename: Rocket Ship.svg\nsvg:\n```xml\n<svg viewBox=\"0 0 24 24\"></svg>\n```"

    parsed = parse_llm_response(response)

    assert parsed.filename == "Rocket-Ship"
    assert parsed.svg == '<svg viewBox="0 0 24 24"></svg>'


def test_missing_filename_uses_fallback() -> None:
    assert parse_llm_response("SVG: <svg/>").filename == "generated-icon"


@pytest.mark.parametrize("response", ["FILENAME: only-a-name", "", "SVG:   "])
def test_missing_svg_is_a_parse_error(response: str) -> None:
    with pytest.raises(ResponseParseError) as exc_info:
        parse_llm_response(response)

    assert "SVG content not found" in str(exc_info.value)
    assert exc_info.value.code == "RESPONSE_PARSE_FAILED"


def test_sanitize_strips_dangerous_constructs() -> None:
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg">'
        "<script type=\"text/javascript\">alert('x')</script>"
        "<foreignObject width=\"10\"><div>html</div></foreignObject>"
        '<rect onclick="steal()" width="4"/>'
        '<a href="javascript:alert(1)"><circle r="2"/></a>'
        "</svg>"
    )

    cleaned = sanitize_svg(svg)

    assert "script" not in cleaned
    assert "foreignObject" not in cleaned
    assert "onclick" not in cleaned
    assert "javascript:" not in cleaned
    assert '<rect width="4"/>' in cleaned
    assert '<circle r="2"/>' in cleaned


@pytest.mark.parametrize(
    "svg,expected",
    [
        (
            '<svg><script href="https://evil.example/x.js"/><rect/></svg>',
            "<svg><rect/></svg>",
        ),
        ("<svg><SCRIPT src='x.js' /><rect/></svg>", "<svg><rect/></svg>"),
        ('<svg><foreignObject width="4"/><rect/></svg>', "<svg><rect/></svg>"),
        ("<svg onload=alert(1)><rect/></svg>", "<svg><rect/></svg>"),
        ('<svg><rect onclick=alert(1) width="4"/></svg>', '<svg><rect width="4"/></svg>'),
        ("<svg><rect onclick=alert(1)/></svg>", "<svg><rect/></svg>"),
        ("<svg><rect onclick=\"alert('x')\"/></svg>", "<svg><rect/></svg>"),
        ("<svg><script>alert(1)<rect/></svg>", "<svg>alert(1)<rect/></svg>"),
    ],
)
def test_sanitize_strips_self_closing_and_unquoted_forms(svg: str, expected: str) -> None:
    assert sanitize_svg(svg) == expected


def test_sanitize_leaves_clean_svg_untouched() -> None:
    svg = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M1 1"/></svg>'

    assert sanitize_svg(svg) == svg
