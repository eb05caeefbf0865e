"""Pydantic models for keybinding records and parsed key chords."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """Known keybinding categories (used for grouping and coloring)."""

    GENERAL = "general"
    NAVIGATION = "navigation"
    SEARCH = "search"
    LSP = "lsp"
    GIT = "git"
    BUFFER = "buffer"
    WINDOW = "window"
    TAB = "tab"
    CODE = "code"
    DEBUG = "debug"
    TERMINAL = "terminal"
    UI = "ui"
    PLUGIN = "plugin"


class Mode(str, Enum):
    """Known editor modes a keybinding applies to."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    COMMAND = "command"


class Modifier(str, Enum):
    """Modifier keys that can be held while a chord's base key is pressed."""

    CTRL = "ctrl"
    ALT = "alt"
    SHIFT = "shift"
    SUPER = "super"


OTHER_GROUP = "other"

_CATEGORY_LABELS: Dict[Category, str] = {
    Category.GENERAL: "General",
    Category.NAVIGATION: "Navigation",
    Category.SEARCH: "Search",
    Category.LSP: "LSP",
    Category.GIT: "Git",
    Category.BUFFER: "Buffer",
    Category.WINDOW: "Window",
    Category.TAB: "Tab",
    Category.CODE: "Code",
    Category.DEBUG: "Debug",
    Category.TERMINAL: "Terminal",
    Category.UI: "UI",
    Category.PLUGIN: "Plugin",
}

_MODIFIER_LABELS: Dict[Modifier, str] = {
    Modifier.CTRL: "Ctrl",
    Modifier.ALT: "Alt",
    Modifier.SHIFT: "Shift",
    Modifier.SUPER: "Super",
}

# Display order for modifiers in chord labels (Ctrl+Alt+Shift+x).
MODIFIER_ORDER: List[Modifier] = [Modifier.CTRL, Modifier.ALT, Modifier.SHIFT, Modifier.SUPER]


def category_label(value: str) -> str:
    """Display label for a category tag; unknown tags are title-cased."""
    try:
        return _CATEGORY_LABELS[Category(value.lower())]
    except ValueError:
        return value.strip().title()


def category_group(value: str) -> str:
    """Group a category tag falls into, or ``"other"`` for unknown tags."""
    try:
        return Category(value.lower()).value
    except ValueError:
        return OTHER_GROUP


def mode_group(value: str) -> str:
    """Group a mode tag falls into, or ``"other"`` for unknown tags."""
    try:
        return Mode(value.lower()).value
    except ValueError:
        return OTHER_GROUP


def modifier_label(modifier: Modifier) -> str:
    return _MODIFIER_LABELS[modifier]


class KeyChord(BaseModel):
    """One discrete key press, optionally combined with held modifiers."""

    model_config = ConfigDict(frozen=True)

    base: str = Field(..., min_length=1, description="Literal key symbol or bracket name")
    modifiers: FrozenSet[Modifier] = Field(
        default_factory=frozenset, description="Modifiers held while the base is pressed"
    )

    @property
    def is_leader(self) -> bool:
        """Whether this chord is the leader prefix key."""
        return self.base.lower() == "leader"

    @property
    def label(self) -> str:
        """Human-readable chord label, e.g. ``Ctrl+v`` or ``Space``."""
        base = "Space" if self.is_leader else self.base
        parts = [modifier_label(m) for m in MODIFIER_ORDER if m in self.modifiers]
        parts.append(base)
        return "+".join(parts)


class KeybindingRecord(BaseModel):
    """A single cheatsheet entry loaded from the bundled data set."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    keys: str = Field(..., description="Raw chord notation, e.g. <leader>ff")
    description: str = Field(..., description="What the keybinding does")
    category: str = Field(..., description="Category tag (open set)")
    mode: str = Field(default=Mode.NORMAL.value, description="Mode tag (open set)")

    @field_validator("keys", "description", "category", "mode")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only values."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("category", "mode")
    @classmethod
    def normalize_tag(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def category_label(self) -> str:
        return category_label(self.category)

    @property
    def category_group(self) -> str:
        return category_group(self.category)

    @property
    def mode_label(self) -> str:
        return self.mode.title()

    @property
    def mode_group(self) -> str:
        return mode_group(self.mode)

    @property
    def chords(self) -> List[KeyChord]:
        """Parsed chord sequence for ``keys``."""
        from lazykeys.commands.chord_parser import parse_keys

        return parse_keys(self.keys)
