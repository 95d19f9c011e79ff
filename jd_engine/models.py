"""Data models for the extraction engine.

Three small schemas:
- `ExtractorConfig`: the selector catalog and heading keywords, validated once.
- `Attempt`: the outcome of one selector or one heading candidate.
- `ExtractionResponse`: the `{success, text?, error?}` shape returned to callers.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .catalog import KEYWORDS, SELECTOR_CATALOG, flatten_selectors
from .utils import uniq_preserve_order


Outcome = Literal["match", "absent", "fault"]


class ExtractorConfig(BaseModel):
    """Static extraction data: ordered selector catalog plus heading keywords.

    Dicts keep insertion order, so the catalog's category order survives
    validation unchanged.
    """

    model_config = ConfigDict(frozen=True)

    catalog: Dict[str, List[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in SELECTOR_CATALOG.items()},
        description="Site category -> selectors, in precedence order.",
    )
    keywords: List[str] = Field(
        default_factory=lambda: list(KEYWORDS),
        description="Lowercase phrases marking a description heading.",
    )

    @field_validator("catalog")
    @classmethod
    def _check_catalog(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        out: Dict[str, List[str]] = {}
        for category, selectors in v.items():
            cleaned = [s.strip() for s in selectors]
            if not cleaned:
                raise ValueError(f"catalog category {category!r} has no selectors")
            if any(not s for s in cleaned):
                raise ValueError(f"catalog category {category!r} contains a blank selector")
            out[category] = cleaned
        return out

    @field_validator("keywords")
    @classmethod
    def _check_keywords(cls, v: List[str]) -> List[str]:
        lowered = [k.strip().lower() for k in v]
        return uniq_preserve_order(lowered)

    @property
    def selectors(self) -> List[str]:
        """All selectors, category-then-entry order."""
        return flatten_selectors(self.catalog)


class Attempt(BaseModel):
    """Result of trying one selector or one heading candidate."""

    source: str = Field(..., description="Selector string or heading text that was tried.")
    outcome: Outcome
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome == "match"


class ExtractionResponse(BaseModel):
    """Reply sent back to a message caller: `{success, text?, error?, site?}`."""

    success: bool
    text: Optional[str] = None
    error: Optional[str] = None
    site: Optional[str] = Field(default=None, description="Catalog category of the requested URL, when recognized.")

    def to_message(self) -> Dict[str, Any]:
        """Serialize to the wire shape, omitting absent fields."""
        return self.model_dump(exclude_none=True)
