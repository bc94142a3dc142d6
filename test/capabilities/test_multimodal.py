"""Tests for multimodal capability detection."""

import pytest

from icongen.capabilities import (
    EnvironmentCapabilityStrategy,
    MultimodalDetector,
    StaticCapabilityStrategy,
    build_detector,
)
from icongen.logger import DefaultLogger


def _env_strategy(environ=None, argv=()):
    return EnvironmentCapabilityStrategy(environ=environ or {}, argv_provider=lambda: list(argv))


class _BrokenStrategy:
    def is_multimodal(self) -> bool:
        raise OSError("environment unavailable")


@pytest.mark.parametrize(
    "variable,value",
    [
        ("ANTHROPIC_MODEL", "claude-3-5-sonnet"),
        ("CLAUDE_MODEL", "Claude-Opus-4"),
        ("OPENAI_MODEL", "gpt-4-turbo"),
        ("GEMINI_MODEL", "gemini-1.5-pro"),
        ("MODEL_NAME", "some-VISION-model"),
    ],
)
def test_model_variables_with_vision_keywords_are_detected(variable: str, value: str) -> None:
    strategy = _env_strategy(environ={variable: value})

    assert MultimodalDetector(strategy).is_available() is True


def test_unrelated_environment_is_text_only() -> None:
    strategy = _env_strategy(environ={"OPENAI_MODEL": "gpt-3.5-turbo", "HOME": "/root"})

    assert MultimodalDetector(strategy).is_available() is False


def test_variables_outside_the_known_list_are_ignored() -> None:
    strategy = _env_strategy(environ={"SOME_OTHER_VAR": "claude-3-opus"})

    assert MultimodalDetector(strategy).is_available() is False


def test_process_arguments_are_indicators() -> None:
    strategy = _env_strategy(argv=["mcp-host", "--model", "gemini-pro-vision"])

    assert strategy.is_multimodal() is True
    assert "gemini-pro-vision" in strategy.indicators()


def test_detector_fails_closed() -> None:
    detector = MultimodalDetector(_BrokenStrategy(), logger=DefaultLogger(name="icongen-test"))

    assert detector.is_available() is False


def test_static_strategy_answers_as_configured() -> None:
    assert MultimodalDetector(StaticCapabilityStrategy(True)).is_available() is True
    assert MultimodalDetector(StaticCapabilityStrategy(False)).is_available() is False


def test_explain_requirement_lists_remediations() -> None:
    text = MultimodalDetector(StaticCapabilityStrategy(False)).explain_requirement()

    assert "multimodal" in text
    assert "SVG reference files instead of PNG" in text
    assert "prompt-only generation" in text
    assert "Converting PNG to SVG" in text


def test_build_detector_honours_override() -> None:
    assert isinstance(build_detector(True).strategy, StaticCapabilityStrategy)
    assert build_detector(False).is_available() is False
    assert isinstance(build_detector(None).strategy, EnvironmentCapabilityStrategy)


@pytest.mark.parametrize(
    "environ,family",
    [
        ({"ANTHROPIC_MODEL": "claude-3-opus"}, "claude"),
        ({"GEMINI_MODEL": "gemini-1.5-flash"}, "gemini"),
        ({"OPENAI_MODEL": "gpt-4o"}, "openai"),
        ({}, None),
    ],
)
def test_detect_llm_family(environ, family) -> None:
    detector = MultimodalDetector(_env_strategy(environ=environ))

    assert detector.detect_llm_family() == family


def test_llm_family_unknown_for_static_strategy() -> None:
    assert MultimodalDetector(StaticCapabilityStrategy(True)).detect_llm_family() is None
