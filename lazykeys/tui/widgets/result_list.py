"""Scrollable list of keybindings matching the current query."""

from typing import List, Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static

from lazykeys.commands.models import KeybindingRecord
from lazykeys.search.models import SearchField, SearchMatch

KEYS_COLUMN_WIDTH = 16
MATCH_STYLE = "bold underline"


def highlight_field(value: str, match: SearchMatch, field: SearchField, style: str = "") -> Text:
    """Text for one field with the query's matched characters emphasized."""
    text = Text(value, style=style)
    for span in match.spans_for(field):
        text.stylize(MATCH_STYLE, span.start, min(span.end, len(value)))
    return text


class ResultRow(Static):
    """A single keybinding row: keys, description and category."""

    def __init__(
        self,
        record: KeybindingRecord,
        match: SearchMatch,
        index: int,
        is_selected: bool = False,
    ) -> None:
        """Initialize result row.

        Args:
            record: The keybinding record to display
            match: Search match carrying highlight spans
            index: Row index in the list
            is_selected: Whether this row is currently selected
        """
        super().__init__()
        self.record = record
        self.match = match
        self.index = index
        self.is_selected = is_selected
        self.update_content()

    def update_content(self) -> None:
        """Update the row's display content."""
        text = Text()

        if self.is_selected:
            text.append("► ", style="bold cyan")
        else:
            text.append("  ")

        keys = highlight_field(self.record.keys, self.match, SearchField.KEYS, style="cyan")
        keys.truncate(KEYS_COLUMN_WIDTH, overflow="ellipsis", pad=True)
        text.append_text(keys)
        text.append(" │ ", style="dim")
        text.append_text(
            highlight_field(
                self.record.description,
                self.match,
                SearchField.DESCRIPTION,
                style="bold" if self.is_selected else "",
            )
        )
        text.append(" │ ", style="dim")
        text.append("[")
        text.append_text(
            highlight_field(
                self.record.category_label, self.match, SearchField.CATEGORY, style="yellow"
            )
        )
        text.append("]")
        if self.record.mode_group != "normal":
            text.append(f" {self.record.mode_label}", style="magenta")

        self.update(text)

    def set_selected(self, selected: bool) -> None:
        """Update selection state and refresh display."""
        self.is_selected = selected
        self.set_class(selected, "selected")
        self.update_content()


class ResultList(Widget):
    """List of search matches; the app owns the selection and pushes it here."""

    matches: reactive[List[SearchMatch]] = reactive([], recompose=True)
    current_index: reactive[int] = reactive(0)

    def __init__(self, records: Sequence[KeybindingRecord]) -> None:
        super().__init__()
        self.records = records

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        with VerticalScroll():
            if not self.matches:
                yield Static("No matching keybindings", classes="empty-state")
            else:
                for idx, match in enumerate(self.matches):
                    yield ResultRow(
                        record=self.records[match.record_index],
                        match=match,
                        index=idx,
                        is_selected=(idx == self.current_index),
                    )

    def watch_current_index(self, old_index: int, new_index: int) -> None:
        """Move the selection marker and keep the selected row visible."""
        rows = sorted(self.query(ResultRow), key=lambda r: r.index)
        if 0 <= old_index < len(rows):
            rows[old_index].set_selected(False)
        if 0 <= new_index < len(rows):
            rows[new_index].set_selected(True)
            rows[new_index].scroll_visible()

    def show(self, matches: List[SearchMatch], current_index: int) -> None:
        """Replace the displayed matches and selection."""
        if matches == self.matches:
            self.current_index = current_index
            return
        # Recompose picks up the new index; no per-row update needed
        self.set_reactive(ResultList.current_index, current_index)
        self.matches = matches
