"""Keyboard diagram panel showing the selected keybinding."""

from rich.text import Text
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static


class KeyboardPanel(Widget):
    """Keyboard diagram plus a one-line caption (current step or legend)."""

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Static(id="keyboard-diagram")
        yield Static(id="keyboard-caption")

    def show(self, diagram: Text, caption: Text, title: str) -> None:
        """Replace the diagram, caption and border title."""
        self.border_title = title
        self.query_one("#keyboard-diagram", Static).update(diagram)
        self.query_one("#keyboard-caption", Static).update(caption)


# CSS for KeyboardPanel
KEYBOARD_PANEL_CSS = """
KeyboardPanel {
    height: auto;
    border: solid $secondary;
    padding: 0 1;
}

KeyboardPanel #keyboard-diagram {
    width: auto;
    height: auto;
}

KeyboardPanel #keyboard-caption {
    height: 1;
    margin-top: 1;
}
"""
