"""Style registry package."""
from icongen.styles.models import FewShotExample, StyleConfig, StyleListItem, StyleStatus
from icongen.styles.registry import StyleRegistry

__all__ = ["StyleRegistry", "StyleConfig", "FewShotExample", "StyleListItem", "StyleStatus"]
