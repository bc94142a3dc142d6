"""LLM capability detection."""
from icongen.capabilities.multimodal import (
    CapabilityStrategy,
    EnvironmentCapabilityStrategy,
    MultimodalDetector,
    StaticCapabilityStrategy,
    build_detector,
)

__all__ = [
    "CapabilityStrategy",
    "EnvironmentCapabilityStrategy",
    "MultimodalDetector",
    "StaticCapabilityStrategy",
    "build_detector",
]
