"""Result models for keybinding search."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class SearchField(str, Enum):
    """Record fields a query is matched against."""

    KEYS = "keys"
    DESCRIPTION = "description"
    CATEGORY = "category"


class MatchTier(int, Enum):
    """How a query matched a field, strongest last."""

    SUBSEQUENCE = 1
    SUBSTRING = 2
    PREFIX = 3
    EXACT = 4


class MatchSpan(BaseModel):
    """A run of matched characters inside one field."""

    model_config = ConfigDict(frozen=True)

    field: SearchField
    start: int = Field(..., ge=0)
    length: int = Field(..., ge=1)

    @property
    def end(self) -> int:
        return self.start + self.length


class SearchMatch(BaseModel):
    """A record that matched the current query."""

    model_config = ConfigDict(frozen=True)

    record_index: int = Field(..., ge=0, description="Index into the record store")
    score: float = Field(default=0.0, description="Higher is more relevant")
    match_spans: Tuple[MatchSpan, ...] = Field(default_factory=tuple)
    tier: MatchTier | None = Field(default=None, description="Tier of the winning field")

    def spans_for(self, field: SearchField) -> Tuple[MatchSpan, ...]:
        """Spans that fall inside ``field``."""
        return tuple(span for span in self.match_spans if span.field == field)
