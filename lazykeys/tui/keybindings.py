"""Keyboard shortcut definitions for the cheatsheet interface."""

from textual.binding import Binding

# Selection bindings; priority so the search input doesn't swallow them
NAVIGATION_BINDINGS = [
    Binding("down", "select_next", "Next", show=False, priority=True),
    Binding("up", "select_previous", "Previous", show=False, priority=True),
    Binding("tab", "select_next", "Next", show=False, priority=True),
    Binding("shift+tab", "select_previous", "Previous", show=False, priority=True),
    Binding("pagedown", "page_down", "Page Down", show=False, priority=True),
    Binding("pageup", "page_up", "Page Up", show=False, priority=True),
]

# View bindings
VIEW_BINDINGS = [
    Binding("ctrl+t", "toggle_view", "Legend/Animate", show=True, priority=True),
]

# System bindings
SYSTEM_BINDINGS = [
    Binding("escape", "clear_or_quit", "Clear/Quit", show=True, priority=True),
    Binding("ctrl+c", "quit", "Quit", show=True, priority=True),
    Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
]

# All bindings combined
ALL_BINDINGS = NAVIGATION_BINDINGS + VIEW_BINDINGS + SYSTEM_BINDINGS
