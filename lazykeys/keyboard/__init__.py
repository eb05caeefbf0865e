"""Keyboard layout, keyframe generation, view mode and rendering."""

from lazykeys.keyboard.keyframes import (
    ActiveKey,
    Keyframe,
    KeyframeGenerator,
    KeyframeSequence,
    KeyRole,
    LegendMark,
    LegendView,
    flatten,
)
from lazykeys.keyboard.layout import (
    ANSI_LAYOUT,
    KeyboardLayout,
    KeyLookup,
    KeySpec,
    StaticKeyLookup,
    default_layout,
)
from lazykeys.keyboard.render import (
    FRAME_COLORS,
    KeyboardRenderer,
    frame_caption,
    legend_caption,
)
from lazykeys.keyboard.view_mode import ModeConfig, ViewMode, ViewModeState, get_mode_config

__all__ = [
    "ANSI_LAYOUT",
    "ActiveKey",
    "FRAME_COLORS",
    "KeyLookup",
    "KeyRole",
    "KeySpec",
    "KeyboardLayout",
    "KeyboardRenderer",
    "Keyframe",
    "KeyframeGenerator",
    "KeyframeSequence",
    "LegendMark",
    "LegendView",
    "ModeConfig",
    "StaticKeyLookup",
    "ViewMode",
    "ViewModeState",
    "default_layout",
    "flatten",
    "frame_caption",
    "get_mode_config",
    "legend_caption",
]
