"""Style registry for few-shot icon styles."""

from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from icongen.logger import Logger
from icongen.styles.models import StyleConfig, StyleListItem


class StyleRegistry:
    """Loads and looks up few-shot styles.

    Each style lives in its own directory under ``styles_dir`` and is
    described by a ``style.yaml`` file. The catalog is read once at
    construction and is immutable afterwards.
    """

    METADATA_FILE = "style.yaml"

    def __init__(self, styles_dir: str, logger: Logger):
        """
        Initialize the style registry.

        Args:
            styles_dir: Path to directory containing style definitions
            logger: Logger instance
        """
        self.styles_dir = Path(styles_dir)
        self.logger = logger
        self._styles: Dict[str, StyleConfig] = {}
        self._synonyms: Dict[str, str] = {}
        self._load_items()

    def _load_items(self) -> None:
        if not self.styles_dir.exists():
            self.logger.warning("Styles directory does not exist", path=str(self.styles_dir))
            return

        for style_dir in sorted(self.styles_dir.iterdir()):
            if not style_dir.is_dir() or style_dir.name.startswith("_"):
                continue

            metadata_file = style_dir / self.METADATA_FILE
            if not metadata_file.exists():
                self.logger.warning(f"Skipping {style_dir.name}: missing {self.METADATA_FILE}")
                continue

            try:
                with open(metadata_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                data.setdefault("style_id", style_dir.name)
                style = StyleConfig(**data)
            except (yaml.YAMLError, PydanticValidationError, TypeError) as e:
                self.logger.error(f"Failed to load style from {style_dir.name}: {e}")
                continue

            self._styles[style.style_id] = style
            for synonym in style.synonyms:
                self._synonyms.setdefault(synonym.strip().lower(), style.style_id)
            self.logger.info(
                f"Loaded style: {style.style_id} ({style.name})",
                examples=len(style.examples),
            )

    def get_style(self, name: Optional[str]) -> Optional[StyleConfig]:
        """Resolve a style by id or synonym; None when unknown."""
        if not name:
            return None
        style = self._styles.get(name)
        if style is not None:
            return style
        style_id = self._synonyms.get(name.strip().lower())
        return self._styles.get(style_id) if style_id else None

    def style_exists(self, name: Optional[str]) -> bool:
        return self.get_style(name) is not None

    def list_styles(self) -> List[StyleListItem]:
        """Get available styles ordered by priority, then id."""
        ordered = sorted(self._styles.values(), key=lambda s: (s.priority, s.style_id))
        return [
            StyleListItem(
                style_id=style.style_id,
                name=style.name,
                description=style.description,
                status=style.status,
                example_count=len(style.examples),
            )
            for style in ordered
        ]

    def get_style_ids(self) -> List[str]:
        return [item.style_id for item in self.list_styles()]
