"""icongen: expert prompts and safe saving for AI-generated SVG icons."""

__version__ = "0.1.0"
