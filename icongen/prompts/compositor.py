"""Expert prompt composition.

The expert prompt is the instruction document handed to an external LLM.
Its block order is fixed: role framing, optional few-shot style, optional
reference SVGs, the user request verbatim, then the output contract the
response parser relies on (``FILENAME:`` line followed by ``SVG:`` block).

User text and reference SVGs are passed to the template as data, never
compiled as template source, so braces in a prompt render literally.
"""

from typing import Optional, Sequence

from jinja2 import Environment, StrictUndefined

from icongen.styles import StyleConfig, StyleRegistry

ROLE_FRAMING = (
    "You are an expert SVG icon designer. Given SVG references and a user request, "
    "generate a clean, optimized SVG icon."
)

EXPERT_PROMPT_TEMPLATE = """\
{{ role_framing }}
{% if style %}

STYLE: {{ style.name }}
{{ style.description }}

Here are examples of this style:
{% for example in style.examples %}

Example {{ loop.index }}:
Prompt: "{{ example.prompt }}"
Description: {{ example.description }}
SVG:
{{ example.svg }}
{% endfor %}

Follow the exact same style, structure, and visual approach as these examples.
{% endif %}
{% if references %}

Reference SVG icons:
{% for svg in references %}

Reference {{ loop.index }}:
{{ svg }}
{% endfor %}
{% endif %}

User request: {{ user_prompt }}

Please generate:
1. A clean SVG icon that fulfills the request
2. A descriptive filename (no extension)

Format your response exactly as:
FILENAME: [suggested-filename]
SVG: [complete SVG code]

Requirements:
- Use proper SVG namespace: xmlns="http://www.w3.org/2000/svg"
- Include viewBox attribute for scalability
- Use clean, optimized SVG code
- No script tags or dangerous elements
- Filename should be descriptive and kebab-case
{%- if style %}

- CRITICALLY IMPORTANT: Follow the exact style, stroke-width, color scheme, and visual approach from the provided examples
{%- endif %}"""

_environment = Environment(
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=False,
    undefined=StrictUndefined,
)
_template = _environment.from_string(EXPERT_PROMPT_TEMPLATE)


def render_expert_prompt(
    user_prompt: str,
    svg_references: Sequence[str] = (),
    style: Optional[StyleConfig] = None,
) -> str:
    """Render the expert prompt for an already-resolved style."""
    return _template.render(
        role_framing=ROLE_FRAMING,
        style=style,
        references=list(svg_references),
        user_prompt=user_prompt,
    )


class PromptCompositor:
    """Composes expert prompts, resolving style names through the catalog."""

    def __init__(self, style_registry: StyleRegistry):
        self.style_registry = style_registry

    def compose(
        self,
        user_prompt: str,
        svg_references: Sequence[str] = (),
        style_name: Optional[str] = None,
    ) -> str:
        # An unknown style name means no few-shot conditioning, not an error
        style = self.style_registry.get_style(style_name)
        return render_expert_prompt(user_prompt, svg_references, style)
