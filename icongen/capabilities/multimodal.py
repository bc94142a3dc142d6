"""Detection of multimodal (image input) capability of the calling LLM.

PNG references can only be honoured when the model consuming the expert
prompt accepts images. There is no protocol-level capability negotiation to
rely on, so the default strategy sniffs environment signals. Strategies are
pluggable so an explicit answer (configuration, tests, a future protocol
field) can replace the heuristic without touching the session manager.
"""

import os
import sys
from typing import Callable, List, Mapping, Optional, Protocol, Sequence

from icongen.logger import Logger

MODEL_ENV_VARS: Sequence[str] = (
    "ANTHROPIC_MODEL",
    "CLAUDE_MODEL",
    "OPENAI_MODEL",
    "GOOGLE_MODEL",
    "GEMINI_MODEL",
    "LLM_MODEL",
    "MCP_CLIENT",
    "AI_MODEL",
    "MODEL_NAME",
)

MULTIMODAL_KEYWORDS: Sequence[str] = (
    "vision",
    "multimodal",
    "image",
    "visual",
    "claude-3",
    "claude-sonnet",
    "claude-opus",
    "gpt-4v",
    "gpt-4-vision",
    "gpt-4-turbo",
    "gemini-pro-vision",
    "gemini-1.5",
)

MULTIMODAL_REQUIRED_MESSAGE = "\n".join(
    [
        "PNG references require a multimodal LLM for visual processing.",
        "",
        "Compatible LLMs:",
        "  - Claude (claude-3-sonnet, claude-3-opus, claude-sonnet, claude-opus)",
        "  - Gemini Pro Vision (gemini-1.5-pro)",
        "  - GPT-4 Vision (gpt-4v, gpt-4-turbo)",
        "  - Other vision-capable models",
        "",
        "You can still use this tool by:",
        "1. Using SVG reference files instead of PNG",
        "2. Using prompt-only generation (no reference files)",
        "3. Converting PNG to SVG with a vector tracing tool first",
        "4. Switching to a multimodal LLM for the best experience",
    ]
)


class CapabilityStrategy(Protocol):
    """Answers whether the calling LLM accepts image input."""

    def is_multimodal(self) -> bool:
        ...


class StaticCapabilityStrategy:
    """Fixed answer, for explicit configuration and tests."""

    def __init__(self, available: bool) -> None:
        self.available = available

    def is_multimodal(self) -> bool:
        return self.available


class EnvironmentCapabilityStrategy:
    """Keyword match over model-name environment variables and process info."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        argv_provider: Optional[Callable[[], Sequence[str]]] = None,
        keywords: Sequence[str] = MULTIMODAL_KEYWORDS,
    ) -> None:
        self._environ = environ
        self._argv_provider = argv_provider
        self.keywords = tuple(k.lower() for k in keywords)

    def indicators(self) -> List[str]:
        environ = self._environ if self._environ is not None else os.environ
        found = [environ[name] for name in MODEL_ENV_VARS if environ.get(name)]

        if self._argv_provider is not None:
            found.extend(self._argv_provider())
        else:
            found.extend(sys.argv)
            if sys.executable:
                found.append(sys.executable)

        return [item for item in found if item]

    def is_multimodal(self) -> bool:
        lowered = [indicator.lower() for indicator in self.indicators()]
        return any(keyword in indicator for keyword in self.keywords for indicator in lowered)


class MultimodalDetector:
    """Fail-closed wrapper around a capability strategy."""

    def __init__(self, strategy: Optional[CapabilityStrategy] = None, logger: Optional[Logger] = None):
        self.strategy = strategy or EnvironmentCapabilityStrategy()
        self.logger = logger

    def is_available(self) -> bool:
        try:
            return bool(self.strategy.is_multimodal())
        except Exception as exc:
            # Assume no image support when detection itself breaks
            if self.logger:
                self.logger.warning(
                    "Multimodal detection failed, assuming text-only LLM",
                    strategy=type(self.strategy).__name__,
                    error=str(exc),
                )
            return False

    def explain_requirement(self) -> str:
        return MULTIMODAL_REQUIRED_MESSAGE

    def detect_llm_family(self) -> Optional[str]:
        """Best-effort guess of the calling model family for diagnostics."""
        if not isinstance(self.strategy, EnvironmentCapabilityStrategy):
            return None
        try:
            combined = " ".join(self.strategy.indicators()).lower()
        except Exception:
            return None
        if "claude" in combined:
            return "claude"
        if "gemini" in combined:
            return "gemini"
        if "gpt" in combined or "openai" in combined:
            return "openai"
        return None


def build_detector(override: Optional[bool], logger: Optional[Logger] = None) -> MultimodalDetector:
    """Create a detector honouring an explicit configuration override."""
    if override is None:
        return MultimodalDetector(EnvironmentCapabilityStrategy(), logger=logger)
    return MultimodalDetector(StaticCapabilityStrategy(override), logger=logger)
