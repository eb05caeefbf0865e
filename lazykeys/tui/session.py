"""Query/selection/playback state behind the interactive cheatsheet."""

from __future__ import annotations

from typing import List, Optional

from loguru import logger

from lazykeys.commands.models import KeybindingRecord
from lazykeys.commands.record_store import RecordStore
from lazykeys.keyboard.keyframes import Keyframe, KeyframeGenerator, KeyframeSequence
from lazykeys.keyboard.layout import KeyLookup, default_layout
from lazykeys.keyboard.view_mode import ViewMode, ViewModeState
from lazykeys.search.models import SearchMatch
from lazykeys.search.search_engine import SearchEngine


class CheatsheetSession:
    """Everything the UI needs between keystrokes, without any UI.

    Each query change recomputes the match list and resets the selection; each
    selection change regenerates the keyframe sequence. Animation ticks only
    advance ``step``.
    """

    def __init__(
        self,
        store: RecordStore,
        search_engine: Optional[SearchEngine] = None,
        layout: Optional[KeyLookup] = None,
        view_mode: ViewMode = ViewMode.ANIMATION,
        loop: bool = True,
        max_results: Optional[int] = None,
    ) -> None:
        self.store = store
        self.search_engine = search_engine or SearchEngine()
        self.generator = KeyframeGenerator(layout or default_layout())
        self.view = ViewModeState(view_mode)
        self.loop = loop
        self.max_results = max_results

        self.query = ""
        self.matches: List[SearchMatch] = []
        self.match_count = 0
        self.selected_index = 0
        self.step = 0
        self.sequence = KeyframeSequence([], loop=loop)
        self.should_quit = False

        self.update_search()

    # Query editing

    def set_query(self, query: str) -> None:
        if query == self.query:
            return
        self.query = query
        self.update_search()

    def append_char(self, char: str) -> None:
        self.set_query(self.query + char)

    def backspace(self) -> None:
        if self.query:
            self.set_query(self.query[:-1])

    def escape(self) -> bool:
        """Clear a non-empty query, or request quit; returns True when quitting."""
        if self.query:
            self.set_query("")
            return False
        self.should_quit = True
        return True

    def update_search(self) -> None:
        matches = self.search_engine.search(self.store, self.query)
        self.match_count = len(matches)
        # Only the displayed window is selectable
        self.matches = matches[: self.max_results] if self.max_results else matches
        logger.debug("Query {!r}: {} matches", self.query, self.match_count)
        self.select(0)

    # Selection

    @property
    def selected_match(self) -> Optional[SearchMatch]:
        if 0 <= self.selected_index < len(self.matches):
            return self.matches[self.selected_index]
        return None

    @property
    def selected_record(self) -> Optional[KeybindingRecord]:
        match = self.selected_match
        return self.store[match.record_index] if match is not None else None

    def select(self, index: int) -> None:
        """Select a match by position and rebuild the keyframe sequence."""
        if self.matches:
            index = max(0, min(index, len(self.matches) - 1))
        else:
            index = 0
        self.selected_index = index
        self._rebuild_sequence()

    def select_next(self) -> None:
        if self.matches:
            self.select((self.selected_index + 1) % len(self.matches))

    def select_previous(self) -> None:
        if self.matches:
            self.select((self.selected_index - 1) % len(self.matches))

    def _rebuild_sequence(self) -> None:
        record = self.selected_record
        frames = self.generator.generate(record.chords) if record is not None else []
        self.sequence = KeyframeSequence(frames, loop=self.loop)
        self.step = 0

    # Playback

    def tick(self) -> Optional[Keyframe]:
        """Advance animation by one step (no-op in legend mode)."""
        if not self.view.is_legend and len(self.sequence) > 0:
            self.step += 1
        return self.current_frame

    @property
    def current_frame(self) -> Optional[Keyframe]:
        return self.sequence.frame_at(self.step)

    # View mode

    @property
    def view_mode(self) -> ViewMode:
        return self.view.mode

    def toggle_view_mode(self) -> ViewMode:
        mode = self.view.toggle()
        self.step = 0
        logger.debug("View mode -> {}", mode.value)
        return mode
