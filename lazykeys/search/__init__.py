"""Fuzzy keybinding search."""

from lazykeys.search.models import MatchSpan, MatchTier, SearchField, SearchMatch
from lazykeys.search.search_engine import (
    SearchEngine,
    best_subsequence,
    fold_case,
    is_word_boundary,
)

__all__ = [
    "MatchSpan",
    "MatchTier",
    "SearchEngine",
    "SearchField",
    "SearchMatch",
    "best_subsequence",
    "fold_case",
    "is_word_boundary",
]
