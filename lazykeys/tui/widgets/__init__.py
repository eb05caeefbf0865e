"""Textual widgets for the cheatsheet interface."""

from .keyboard_panel import KEYBOARD_PANEL_CSS, KeyboardPanel
from .result_list import ResultList, ResultRow, highlight_field
from .status_bar import STATUS_BAR_CSS, StatusBar

__all__ = [
    "KEYBOARD_PANEL_CSS",
    "KeyboardPanel",
    "ResultList",
    "ResultRow",
    "STATUS_BAR_CSS",
    "StatusBar",
    "highlight_field",
]
