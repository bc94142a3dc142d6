"""Expert prompt and filename generation."""
from icongen.prompts.compositor import PromptCompositor, render_expert_prompt
from icongen.prompts.filenames import FALLBACK_FILENAME, derive_filename

__all__ = ["PromptCompositor", "render_expert_prompt", "derive_filename", "FALLBACK_FILENAME"]
