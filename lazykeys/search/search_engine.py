"""Fuzzy search and ranking over keybinding records."""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Tuple

from loguru import logger
from rapidfuzz import fuzz

from lazykeys.commands.models import KeybindingRecord
from lazykeys.search.models import MatchSpan, MatchTier, SearchField, SearchMatch
from lazykeys.utils.config import SearchConfig

# Each tier owns a disjoint band of this width; in-band adjustments stay below it.
TIER_BAND = 1000.0
SIMILARITY_WEIGHT = 3.0  # scorer returns 0-100
BOUNDARY_BONUS = 100.0
GAP_PENALTY = 10.0
MAX_GAP_CREDIT = 400.0


class FieldMatch:
    """Score and matched positions of a query against one field."""

    __slots__ = ("field", "tier", "score", "positions")

    def __init__(
        self, field: SearchField, tier: MatchTier, score: float, positions: Sequence[int]
    ) -> None:
        self.field = field
        self.tier = tier
        self.score = score
        self.positions = list(positions)

    def spans(self) -> Tuple[MatchSpan, ...]:
        """Collapse matched positions into contiguous spans."""
        spans: List[MatchSpan] = []
        if not self.positions:
            return ()
        run_start = prev = self.positions[0]
        for pos in self.positions[1:]:
            if pos == prev + 1:
                prev = pos
                continue
            spans.append(MatchSpan(field=self.field, start=run_start, length=prev - run_start + 1))
            run_start = prev = pos
        spans.append(MatchSpan(field=self.field, start=run_start, length=prev - run_start + 1))
        return tuple(spans)


def fold_case(text: str) -> str:
    """Lower-case ``text`` without changing its length.

    Characters whose lower-case form is longer (``İ``) are kept as they are so
    match positions stay valid indices into the original field.
    """
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


def is_word_boundary(text: str, index: int) -> bool:
    """Whether ``index`` starts a word in ``text`` (start, after a separator, or camelCase)."""
    if index <= 0:
        return True
    prev = text[index - 1]
    if not prev.isalnum():
        return True
    return prev.islower() and text[index].isupper()


def best_subsequence(query: str, text: str) -> List[int] | None:
    """Most compact in-order placement of ``query`` characters in ``text``.

    Both arguments are expected to be lower-cased already. Among placements with
    the same total gap, one starting on a word boundary wins, then the earliest.
    """
    if not query or len(query) > len(text):
        return None

    best: List[int] | None = None
    best_key: Tuple[int, int] | None = None
    start = text.find(query[0])
    while start != -1:
        positions = [start]
        cursor = start + 1
        for char in query[1:]:
            found = text.find(char, cursor)
            if found == -1:
                # Later starts only leave fewer characters to match
                return best
            positions.append(found)
            cursor = found + 1

        gap = positions[-1] - positions[0] + 1 - len(query)
        key = (gap, 0 if is_word_boundary(text, start) else 1)
        if best_key is None or key < best_key:
            best, best_key = positions, key
        start = text.find(query[0], start + 1)

    return best


class SearchEngine:
    """Ranks keybinding records against a plain-text query.

    Tiers, strongest first: exact field match, prefix, contiguous substring,
    gapped subsequence. Tiers occupy disjoint score bands; within a band the
    RapidFuzz similarity, word-boundary starts and a small per-field bonus
    order candidates. A record scores the best of its fields.
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        scorer: Callable[[str, str], float] | None = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.scorer: Callable[[str, str], float] = scorer or fuzz.ratio

    def search(
        self,
        records: Iterable[KeybindingRecord],
        query: str,
        limit: int | None = None,
    ) -> List[SearchMatch]:
        """Filter and rank records.

        Args:
            records: Records in store order (indices are positions in this iterable)
            query: Plain-text query, matched case-insensitively; blank means "everything"
            limit: Optional cap on the number of results

        Returns:
            Matches, best first; equal scores keep store order
        """
        needle = fold_case(query.strip())
        if not needle:
            everything = [SearchMatch(record_index=index) for index, _ in enumerate(records)]
            return everything[:limit] if limit is not None else everything

        results: List[SearchMatch] = []
        total = 0
        for index, record in enumerate(records):
            total += 1
            best = self.match_record(record, needle)
            if best is None:
                continue
            results.append(
                SearchMatch(
                    record_index=index,
                    score=best.score,
                    match_spans=best.spans(),
                    tier=best.tier,
                )
            )

        # list.sort is stable, so ties keep store order
        results.sort(key=lambda match: match.score, reverse=True)
        logger.debug("Query {!r} matched {} of {} records", query, len(results), total)
        return results[:limit] if limit is not None else results

    def match_record(self, record: KeybindingRecord, needle: str) -> FieldMatch | None:
        """Best field match of a lower-cased query against a record, if any."""
        candidates = (
            (SearchField.KEYS, record.keys),
            (SearchField.DESCRIPTION, record.description),
            (SearchField.CATEGORY, record.category_label),
        )
        best: FieldMatch | None = None
        for field, value in candidates:
            match = self.match_field(field, value, needle)
            if match is not None and (best is None or match.score > best.score):
                best = match
        return best

    def match_field(self, field: SearchField, value: str, needle: str) -> FieldMatch | None:
        """Score a lower-cased query against one field value."""
        haystack = fold_case(value)
        if not needle or not haystack:
            return None

        bonus = self.config.field_bonus.get(field.value, 0.0)
        similarity = self.scorer(needle, haystack) * SIMILARITY_WEIGHT

        if haystack == needle:
            positions = range(len(needle))
            return FieldMatch(field, MatchTier.EXACT, self._band(MatchTier.EXACT) + bonus, positions)

        if haystack.startswith(needle):
            score = self._band(MatchTier.PREFIX) + similarity + bonus
            return FieldMatch(field, MatchTier.PREFIX, score, range(len(needle)))

        found = haystack.find(needle)
        if found != -1:
            boundary = BOUNDARY_BONUS if is_word_boundary(value, found) else 0.0
            score = self._band(MatchTier.SUBSTRING) + boundary + similarity + bonus
            return FieldMatch(field, MatchTier.SUBSTRING, score, range(found, found + len(needle)))

        positions = best_subsequence(needle, haystack)
        if positions is None:
            return None
        gap = positions[-1] - positions[0] + 1 - len(needle)
        gap_credit = max(0.0, MAX_GAP_CREDIT - GAP_PENALTY * gap)
        boundary = BOUNDARY_BONUS if is_word_boundary(value, positions[0]) else 0.0
        score = self._band(MatchTier.SUBSEQUENCE) + gap_credit + boundary + similarity + bonus
        return FieldMatch(field, MatchTier.SUBSEQUENCE, score, positions)

    @staticmethod
    def _band(tier: MatchTier) -> float:
        return tier.value * TIER_BAND
