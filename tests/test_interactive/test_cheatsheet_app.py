"""Tests for the cheatsheet Textual app (no terminal required)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from rich.text import Text
from textual.css.query import NoMatches

from lazykeys.commands.record_store import RecordStore
from lazykeys.keyboard.view_mode import ViewMode
from lazykeys.tui.app import CheatsheetApp
from lazykeys.utils.config import Config, ViewConfig


def _store() -> RecordStore:
    return RecordStore.from_data(
        [
            {"keys": "<leader>ff", "description": "Find files", "category": "search"},
            {"keys": "gd", "description": "Goto definition", "category": "lsp"},
            {"keys": "<C-w>v", "description": "Split window right", "category": "window"},
        ]
    )


def _make_app(config: Config | None = None) -> CheatsheetApp:
    app = CheatsheetApp(_store(), config=config or Config())
    # Not mounted: widget lookups fail the way they do before compose
    app.query_one = MagicMock(side_effect=NoMatches())
    app.notify = MagicMock()
    app.exit = MagicMock()
    return app


def test_app_initialization() -> None:
    app = _make_app()

    assert app.session.selected_record.keys == "<leader>ff"
    assert app.session.view_mode == ViewMode.ANIMATION

    bindings = {binding.key: binding.action for binding in app.BINDINGS}
    assert bindings["ctrl+t"] == "toggle_view"
    assert bindings["escape"] == "clear_or_quit"
    assert bindings["down"] == "select_next"


def test_default_view_mode_from_config() -> None:
    app = _make_app(Config(view=ViewConfig(default_mode="legend")))

    assert app.session.view_mode == ViewMode.LEGEND


def test_toggle_view_notifies() -> None:
    app = _make_app()

    app.action_toggle_view()

    assert app.session.view_mode == ViewMode.LEGEND
    app.notify.assert_called_once()
    assert "Legend" in app.notify.call_args.args[0]


def test_selection_actions_move_session() -> None:
    app = _make_app()

    app.action_select_next()
    assert app.session.selected_index == 1

    app.action_select_previous()
    app.action_select_previous()
    assert app.session.selected_index == 2

    app.action_page_up()
    assert app.session.selected_index == 0

    app.action_page_down()
    assert app.session.selected_index == 2


def test_escape_clears_query_before_quitting() -> None:
    app = _make_app()
    app.session.set_query("gd")

    app.action_clear_or_quit()

    assert app.session.query == ""
    app.exit.assert_not_called()

    app.action_clear_or_quit()

    app.exit.assert_called_once()


def test_advance_frame_only_animates_multi_step_sequences() -> None:
    app = _make_app()

    app._advance_frame()
    assert app.session.step == 1

    app.session.set_query("gd")
    app.action_toggle_view()
    app._advance_frame()
    assert app.session.step == 0


def test_keyboard_view_in_both_modes() -> None:
    app = _make_app()

    diagram, caption, title = app.keyboard_view()
    assert isinstance(diagram, Text)
    assert caption.plain == "step 1/3  Space"
    assert title == "Keyboard  <leader>ff"

    app.action_toggle_view()
    _, legend, _ = app.keyboard_view()
    assert "Space" in legend.plain
    assert " 3  f" in legend.plain


def test_run_starts_app() -> None:
    with patch("lazykeys.tui.app.CheatsheetApp") as mock_app_cls:
        from lazykeys.tui.app import run

        run(_store())

    mock_app_cls.return_value.run.assert_called_once()
