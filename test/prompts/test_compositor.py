"""Tests for expert prompt composition."""

from icongen.prompts import PromptCompositor, render_expert_prompt
from icongen.prompts.compositor import ROLE_FRAMING


def test_composition_is_deterministic(compositor: PromptCompositor) -> None:
    args = ("a rocket", ["<svg id='a'/>"], "black-white-flat")

    assert compositor.compose(*args) == compositor.compose(*args)


def test_block_order_without_optional_blocks(compositor: PromptCompositor) -> None:
    prompt = compositor.compose("Create a simple star icon")

    assert prompt.startswith(ROLE_FRAMING)
    assert "STYLE:" not in prompt
    assert "Reference SVG icons:" not in prompt
    assert "CRITICALLY IMPORTANT" not in prompt
    request_at = prompt.index("User request: Create a simple star icon")
    assert request_at < prompt.index("FILENAME: [suggested-filename]")
    assert prompt.index("FILENAME: [suggested-filename]") < prompt.index("SVG: [complete SVG code]")


def test_output_contract_requirements_present(compositor: PromptCompositor) -> None:
    prompt = compositor.compose("x")

    assert 'xmlns="http://www.w3.org/2000/svg"' in prompt
    assert "viewBox" in prompt
    assert "No script tags" in prompt
    assert "kebab-case" in prompt


def test_unknown_style_renders_like_no_style(compositor: PromptCompositor) -> None:
    with_unknown = compositor.compose("x", [], "nonexistent-style")

    assert "STYLE:" not in with_unknown
    assert with_unknown == compositor.compose("x", [], None)


def test_references_keep_input_order(compositor: PromptCompositor) -> None:
    prompt = compositor.compose("x", ["<a/>", "<b/>"])

    assert "Reference SVG icons:" in prompt
    assert prompt.index("Reference 1:") < prompt.index("Reference 2:")
    assert prompt.index("<a/>") < prompt.index("<b/>")
    assert prompt.index("Reference 2:") < prompt.index("User request: x")


def test_style_block_includes_name_and_examples(compositor: PromptCompositor) -> None:
    prompt = compositor.compose("Create a database icon", [], "black-white-flat")

    assert "STYLE: Black & White Flat" in prompt
    assert "Example 1:" in prompt
    assert "Example 3:" in prompt
    assert "Example 4:" not in prompt
    assert 'Prompt: "Create a code review icon' in prompt
    assert "Follow the exact same style" in prompt
    assert prompt.rstrip().endswith(
        "- CRITICALLY IMPORTANT: Follow the exact style, stroke-width, color scheme, "
        "and visual approach from the provided examples"
    )
    assert prompt.index("STYLE:") < prompt.index("User request:")


def test_style_synonym_applies_style(compositor: PromptCompositor) -> None:
    prompt = compositor.compose("a heart", [], "material")

    assert "STYLE: Material Design" in prompt


def test_user_text_is_not_treated_as_template() -> None:
    user_prompt = "icon with {{ braces }} and {% raw %} & <tags>"

    prompt = render_expert_prompt(user_prompt)

    assert f"User request: {user_prompt}" in prompt
