"""Component initialization for the MCP server.

Builds the registries, managers and writers used by tool handlers. Each call
returns a fresh, independent set, so tests can run isolated servers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from icongen.capabilities import MultimodalDetector, build_detector
from icongen.config import Config
from icongen.exceptions import ConfigurationError
from icongen.logger import Logger
from icongen.mcp_server.facade import IconToolFacade
from icongen.prompts import PromptCompositor
from icongen.sessions import SessionManager, SessionStore
from icongen.storage import IconFileWriter
from icongen.styles import StyleRegistry


@dataclass
class ServerComponents:
    style_registry: StyleRegistry
    detector: MultimodalDetector
    session_store: SessionStore
    session_manager: SessionManager
    file_writer: IconFileWriter
    facade: IconToolFacade


def initialize_components(
    *,
    styles_dir_override: Optional[str] = None,
    output_dir_override: Optional[str] = None,
    multimodal_override: Optional[bool] = None,
    retain_sessions: Optional[bool] = None,
    logger: Logger,
) -> ServerComponents:
    """Initialize all server components.

    Args:
            styles_dir_override: Optional styles directory (CLI flag or tests)
            output_dir_override: Optional default output directory for saved icons
            multimodal_override: Force multimodal capability on/off; None reads config
            retain_sessions: Keep finished sessions in the store; None reads config
            logger: Logger
    """
    styles_dir = styles_dir_override or str(Config.get_styles_dir())
    if styles_dir_override and not Path(styles_dir_override).is_dir():
        raise ConfigurationError(
            f"Styles directory does not exist: {styles_dir_override}",
            details={"styles_dir": styles_dir_override},
        )
    if multimodal_override is None:
        multimodal_override = Config.get_multimodal_override()
    if retain_sessions is None:
        retain_sessions = Config.retain_sessions()

    style_registry = StyleRegistry(styles_dir=styles_dir, logger=logger)
    detector = build_detector(multimodal_override, logger=logger)
    session_store = SessionStore(logger=logger)
    session_manager = SessionManager(
        session_store=session_store,
        compositor=PromptCompositor(style_registry),
        detector=detector,
        logger=logger,
    )
    file_writer = IconFileWriter(default_dir=output_dir_override, logger=logger)
    facade = IconToolFacade(
        session_manager=session_manager,
        file_writer=file_writer,
        logger=logger,
        retain_sessions=retain_sessions,
    )

    logger.info(
        "Server components initialized",
        styles_dir=styles_dir,
        styles=style_registry.get_style_ids(),
        multimodal_strategy=type(detector.strategy).__name__,
        llm_family=detector.detect_llm_family(),
        retain_sessions=retain_sessions,
    )

    return ServerComponents(
        style_registry=style_registry,
        detector=detector,
        session_store=session_store,
        session_manager=session_manager,
        file_writer=file_writer,
        facade=facade,
    )
