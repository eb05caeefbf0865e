"""View mode definitions for the keyboard panel (animated vs. legend)."""

from enum import Enum
from typing import Dict

from pydantic import BaseModel


class ViewMode(str, Enum):
    """How the selected key sequence is drawn."""

    ANIMATION = "animation"
    LEGEND = "legend"


class ModeConfig(BaseModel):
    """Configuration for a view mode."""

    display_name: str
    icon: str
    keybindings_hint: str


# Mode configuration mapping
_MODE_CONFIGS: Dict[ViewMode, ModeConfig] = {
    ViewMode.ANIMATION: ModeConfig(
        display_name="Animation",
        icon="▶",
        keybindings_hint="ctrl+t: legend view",
    ),
    ViewMode.LEGEND: ModeConfig(
        display_name="Legend",
        icon="▦",
        keybindings_hint="ctrl+t: animation view",
    ),
}


def get_mode_config(mode: ViewMode) -> ModeConfig:
    """Get configuration for a view mode.

    Args:
        mode: View mode

    Returns:
        Configuration for the mode
    """
    return _MODE_CONFIGS[mode]


class ViewModeState:
    """Process-wide Animation/Legend flag with a single transition."""

    def __init__(self, mode: ViewMode = ViewMode.ANIMATION) -> None:
        self._mode = ViewMode(mode)

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def is_legend(self) -> bool:
        return self._mode == ViewMode.LEGEND

    def toggle(self) -> ViewMode:
        """Flip between Animation and Legend; returns the new mode."""
        self._mode = ViewMode.LEGEND if self._mode == ViewMode.ANIMATION else ViewMode.ANIMATION
        return self._mode
