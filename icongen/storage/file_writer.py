"""Icon file writer

Persists generated SVG markup to disk with sanitized, conflict-free names.
"""

import os
import re
from pathlib import Path
from typing import Optional, Union

from icongen.config import Config
from icongen.exceptions import SaveError
from icongen.generation import sanitize_svg
from icongen.logger import Logger, session_logger
from icongen.prompts import FALLBACK_FILENAME

SVG_EXTENSION = ".svg"

_INVALID_CHARS = re.compile(r"[<>:\"|*?/\\']")
_WHITESPACE = re.compile(r"\s+")
_DASH_RUNS = re.compile(r"-+")
_SVG_SUFFIX = re.compile(r"\.svg$", re.IGNORECASE)


class IconFileWriter:
    """Writes icons into a target directory, never overwriting existing files."""

    def __init__(self, default_dir: Optional[Union[str, Path]] = None, logger: Optional[Logger] = None):
        """
        Initialize the writer

        Args:
            default_dir: Directory used when a save names none. If None, uses
                the configured output directory at save time
            logger: Logger instance, defaults to the shared session logger
        """
        self.default_dir = Path(default_dir) if default_dir is not None else None
        self.logger: Logger = logger or session_logger

    def sanitize_filename(self, filename: str) -> str:
        """Return a safe ``<name>.svg`` basename for ``filename``."""
        name = _INVALID_CHARS.sub("-", filename.strip())
        name = _WHITESPACE.sub("-", name)
        name = _SVG_SUFFIX.sub("", name)
        name = _DASH_RUNS.sub("-", name).strip("-")
        return f"{name or FALLBACK_FILENAME}{SVG_EXTENSION}"

    def resolve_name_conflicts(self, path: Path) -> Path:
        """Return ``path`` or the first free ``<stem>-N<suffix>`` sibling, N >= 2."""
        if not path.exists():
            return path
        counter = 2
        while True:
            candidate = path.with_name(f"{path.stem}-{counter}{path.suffix}")
            if not candidate.exists():
                return candidate
            counter += 1

    def resolve_directory(self, directory: Optional[Union[str, Path]] = None) -> Path:
        if directory:
            return Path(directory).expanduser()
        if self.default_dir is not None:
            return self.default_dir
        return Config.get_output_dir()

    def save(self, filename: str, directory: Optional[Union[str, Path]], content: str) -> Path:
        """
        Sanitize and write SVG content

        Args:
            filename: Requested name, with or without ``.svg``
            directory: Target directory; falls back to the default output directory
            content: SVG markup, sanitized before writing

        Returns:
            Path of the written file

        Raises:
            SaveError: If the directory cannot be created or written to
        """
        target_dir = self.resolve_directory(directory)

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.logger.error("Failed to create output directory", directory=str(target_dir), error=str(e))
            raise SaveError(
                f"Cannot write to directory: {target_dir}",
                details={"directory": str(target_dir), "reason": str(e)},
            ) from e

        if not target_dir.is_dir() or not os.access(target_dir, os.W_OK):
            raise SaveError(
                f"Cannot write to directory: {target_dir}",
                details={"directory": str(target_dir)},
            )

        output_path = self.resolve_name_conflicts(target_dir / self.sanitize_filename(filename))

        try:
            output_path.write_text(sanitize_svg(content), encoding="utf-8")
        except OSError as e:
            self.logger.error("Failed to write icon", path=str(output_path), error=str(e))
            raise SaveError(
                f"Failed to write SVG file: {e}",
                details={"path": str(output_path)},
            ) from e

        self.logger.info("Icon saved", path=str(output_path), size=len(content))
        return output_path
