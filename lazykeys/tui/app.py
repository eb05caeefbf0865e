"""Main Textual application for the interactive keybinding cheatsheet."""

from typing import Optional

from loguru import logger
from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.css.query import NoMatches
from textual.widgets import Footer, Header, Input

from lazykeys.commands.record_store import RecordStore
from lazykeys.keyboard.layout import KeyboardLayout, default_layout
from lazykeys.keyboard.render import KeyboardRenderer, frame_caption, legend_caption
from lazykeys.keyboard.view_mode import ViewMode, get_mode_config
from lazykeys.search.search_engine import SearchEngine
from lazykeys.tui.keybindings import ALL_BINDINGS
from lazykeys.tui.session import CheatsheetSession
from lazykeys.tui.widgets import (
    KEYBOARD_PANEL_CSS,
    STATUS_BAR_CSS,
    KeyboardPanel,
    ResultList,
    StatusBar,
)
from lazykeys.utils.config import Config

PAGE_SIZE = 10


class CheatsheetApp(App):
    """Interactive TUI for searching keybindings and seeing them on a keyboard."""

    CSS = (
        """
    Screen {
        background: $surface;
    }

    #search-input {
        margin: 0 0 1 0;
    }

    ResultList {
        height: 1fr;
        min-height: 8;
        border: solid $primary;
    }

    ResultRow.selected {
        background: $boost;
    }

    .empty-state {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
    }
    """
        + KEYBOARD_PANEL_CSS
        + STATUS_BAR_CSS
    )

    BINDINGS = ALL_BINDINGS

    def __init__(
        self,
        store: RecordStore,
        config: Optional[Config] = None,
        layout: Optional[KeyboardLayout] = None,
    ) -> None:
        """Initialize the cheatsheet application.

        Args:
            store: Validated keybinding records
            config: Application configuration (defaults when omitted)
            layout: Keyboard layout to draw (the bundled ANSI layout when omitted)
        """
        super().__init__()
        self.config = config or Config()
        self.store = store
        self.keyboard_layout = layout or default_layout()
        self.renderer = KeyboardRenderer(self.keyboard_layout)
        self.session = CheatsheetSession(
            store,
            search_engine=SearchEngine(config=self.config.search),
            layout=self.keyboard_layout,
            view_mode=ViewMode(self.config.view.default_mode),
            loop=self.config.animation.loop,
            max_results=self.config.search.max_results,
        )

    def compose(self) -> ComposeResult:
        """Create application layout."""
        yield Header()
        yield Input(placeholder="Search keys, descriptions or categories", id="search-input")
        yield ResultList(self.store.records)
        yield KeyboardPanel()
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        """Handle app mount event."""
        self.title = "LazyVim Keybindings"
        self.sub_title = f"{len(self.store)} keybindings"
        self.set_interval(self.config.animation.frame_interval, self._advance_frame)
        self._refresh_results()
        self._refresh_keyboard()
        self._refresh_status_bar()
        self.query_one("#search-input", Input).focus()

    @on(Input.Changed, "#search-input")
    def on_query_changed(self, event: Input.Changed) -> None:
        """Re-run the search whenever the query text changes."""
        self.session.set_query(event.value)
        self._refresh_all()

    # Actions

    def action_select_next(self) -> None:
        self.session.select_next()
        self._refresh_selection()

    def action_select_previous(self) -> None:
        self.session.select_previous()
        self._refresh_selection()

    def action_page_down(self) -> None:
        self.session.select(self.session.selected_index + PAGE_SIZE)
        self._refresh_selection()

    def action_page_up(self) -> None:
        self.session.select(self.session.selected_index - PAGE_SIZE)
        self._refresh_selection()

    def action_toggle_view(self) -> None:
        """Switch between animated playback and the legend composite."""
        mode = self.session.toggle_view_mode()
        self._refresh_keyboard()
        self._refresh_status_bar()
        self.notify(f"{get_mode_config(mode).display_name} view", timeout=2)

    def action_clear_or_quit(self) -> None:
        """Escape: clear the query, or quit when it is already empty."""
        if self.session.escape():
            self.exit()
            return
        try:
            # Triggers Input.Changed, which refreshes the widgets
            self.query_one("#search-input", Input).value = ""
        except NoMatches:
            self._refresh_all()

    # Refresh helpers

    def _advance_frame(self) -> None:
        """Animation timer callback: show the next frame of the live sequence."""
        if self.session.view_mode == ViewMode.ANIMATION and len(self.session.sequence) > 1:
            self.session.tick()
            self._refresh_keyboard()

    def _refresh_all(self) -> None:
        self._refresh_results()
        self._refresh_keyboard()
        self._refresh_status_bar()

    def _refresh_selection(self) -> None:
        try:
            self.query_one(ResultList).current_index = self.session.selected_index
        except NoMatches:
            pass
        self._refresh_keyboard()

    def _refresh_results(self) -> None:
        try:
            result_list = self.query_one(ResultList)
        except NoMatches:
            return
        result_list.show(list(self.session.matches), self.session.selected_index)

    def _refresh_keyboard(self) -> None:
        try:
            panel = self.query_one(KeyboardPanel)
        except NoMatches:
            return
        panel.show(*self.keyboard_view())

    def _refresh_status_bar(self) -> None:
        try:
            status_bar = self.query_one(StatusBar)
        except NoMatches:
            return
        status_bar.view_mode = self.session.view_mode
        status_bar.shown_count = len(self.session.matches)
        status_bar.match_count = self.session.match_count
        status_bar.total_records = len(self.store)

    def keyboard_view(self) -> tuple[Text, Text, str]:
        """Diagram, caption and panel title for the current selection and mode."""
        record = self.session.selected_record
        title = f"Keyboard  {record.keys}" if record is not None else "Keyboard"
        sequence = self.session.sequence

        if self.session.view_mode == ViewMode.LEGEND:
            legend = sequence.legend
            caption = (
                legend_caption(legend)
                if self.config.view.show_legend_steps
                else Text(record.description if record else "")
            )
            return self.renderer.render_legend(legend), caption, title

        frame = self.session.current_frame
        return self.renderer.render_frame(frame), frame_caption(frame, len(sequence)), title


def run(store: RecordStore, config: Optional[Config] = None) -> None:
    """Run the cheatsheet app until the user quits."""
    app = CheatsheetApp(store, config=config)
    logger.info("Starting cheatsheet with {} records", len(store))
    app.run()
