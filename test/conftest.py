"""Pytest configuration and fixtures

Provides shared fixtures for all tests: loggers, the bundled style catalog,
reference files in temporary directories and factories for fully wired
session managers and tool facades.

Multimodal capability is always injected explicitly. The environment
strategy inspects process arguments, and a pytest command line can contain
words such as "multimodal" that would skew detection.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from icongen.capabilities import MultimodalDetector, StaticCapabilityStrategy  # noqa: E402
from icongen.config import Config  # noqa: E402
from icongen.logger import DefaultLogger  # noqa: E402
from icongen.mcp_server.facade import IconToolFacade  # noqa: E402
from icongen.prompts import PromptCompositor  # noqa: E402
from icongen.sessions import SessionManager, SessionStore  # noqa: E402
from icongen.storage import IconFileWriter  # noqa: E402
from icongen.styles import StyleRegistry  # noqa: E402

SAMPLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<circle cx="12" cy="12" r="10"/></svg>'
)

# Validation only inspects the extension
PNG_BYTES = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def logger() -> DefaultLogger:
    return DefaultLogger(name="icongen-test")


@pytest.fixture
def styles_dir() -> Path:
    """Bundled style catalog shipped with the package."""
    return Config.get_package_dir() / "content" / "styles"


@pytest.fixture
def style_registry(styles_dir: Path, logger: DefaultLogger) -> StyleRegistry:
    return StyleRegistry(str(styles_dir), logger)


@pytest.fixture
def compositor(style_registry: StyleRegistry) -> PromptCompositor:
    return PromptCompositor(style_registry)


@pytest.fixture
def svg_reference(tmp_path: Path) -> Path:
    path = tmp_path / "reference.svg"
    path.write_text(SAMPLE_SVG, encoding="utf-8")
    return path


@pytest.fixture
def png_reference(tmp_path: Path) -> Path:
    path = tmp_path / "reference.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def make_manager(compositor: PromptCompositor, logger: DefaultLogger):
    """Factory building a SessionManager with a fixed multimodal answer."""

    def _make(multimodal: bool = False, store: SessionStore = None) -> SessionManager:
        return SessionManager(
            session_store=store if store is not None else SessionStore(logger=logger),
            compositor=compositor,
            detector=MultimodalDetector(StaticCapabilityStrategy(multimodal), logger=logger),
            logger=logger,
        )

    return _make


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "icons"
    path.mkdir()
    return path


@pytest.fixture
def make_facade(make_manager, output_dir: Path, logger: DefaultLogger):
    """Factory building an IconToolFacade writing into a temp directory."""

    def _make(multimodal: bool = False, retain_sessions: bool = False) -> IconToolFacade:
        return IconToolFacade(
            session_manager=make_manager(multimodal=multimodal),
            file_writer=IconFileWriter(default_dir=output_dir, logger=logger),
            logger=logger,
            retain_sessions=retain_sessions,
        )

    return _make
