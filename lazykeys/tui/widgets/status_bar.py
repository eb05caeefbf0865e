"""Status bar widget for the current view mode and result counts."""

from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static

from lazykeys.keyboard.view_mode import ViewMode, get_mode_config


class StatusBar(Widget):
    """Status bar displaying view mode, match counts and the mode hint."""

    view_mode: reactive[ViewMode] = reactive(ViewMode.ANIMATION)
    shown_count: reactive[int] = reactive(0)
    match_count: reactive[int] = reactive(0)
    total_records: reactive[int] = reactive(0)

    def compose(self) -> ComposeResult:
        """Create status bar widgets."""
        yield Static(id="status-content")

    def watch_view_mode(self) -> None:
        self._update_display()

    def watch_shown_count(self) -> None:
        self._update_display()

    def watch_match_count(self) -> None:
        self._update_display()

    def watch_total_records(self) -> None:
        self._update_display()

    def _update_display(self) -> None:
        """Update the status bar display with current state."""
        try:
            content = self.query_one("#status-content", Static)
        except NoMatches:
            # Not composed yet
            return

        mode = get_mode_config(self.view_mode)
        shown = (
            f"{self.match_count}"
            if self.shown_count >= self.match_count
            else f"{self.shown_count} of {self.match_count}"
        )
        content.update(
            f"{mode.icon} {mode.display_name}  |  "
            f"{shown} matches / {self.total_records} keybindings  |  "
            f"{mode.keybindings_hint}"
        )


# CSS for StatusBar
STATUS_BAR_CSS = """
StatusBar {
    dock: bottom;
    height: 1;
    background: $panel;
    color: $text;
    padding: 0 1;
}

StatusBar #status-content {
    width: 100%;
    content-align: left middle;
}
"""
