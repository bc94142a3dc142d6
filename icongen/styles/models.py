"""Few-shot style models loaded from style.yaml."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class StyleStatus(str, Enum):
    """Lifecycle status of a style in the catalog."""

    SUPPORTED = "supported"
    EXPERIMENTAL = "experimental"
    DEPRECATED = "deprecated"


class FewShotExample(BaseModel):
    """A worked prompt/SVG pair that conditions generation toward a style."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    prompt: str
    svg: str
    description: str


class StyleConfig(BaseModel):
    """A named bundle of few-shot exemplars."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    style_id: str
    name: str
    description: str
    examples: List[FewShotExample] = Field(default_factory=list)
    synonyms: List[str] = Field(default_factory=list)
    status: StyleStatus = StyleStatus.SUPPORTED
    priority: int = 100


class StyleListItem(BaseModel):
    """A summary item for listing available styles."""

    style_id: str
    name: str
    description: str
    status: StyleStatus
    example_count: int
