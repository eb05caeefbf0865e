"""Text rendering of the keyboard diagram with highlighted keys."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from rich.text import Text

from lazykeys.keyboard.keyframes import Keyframe, KeyRole, LegendView
from lazykeys.keyboard.layout import KeyboardLayout, KeySpec

# Colors for each step of a sequence in legend view
FRAME_COLORS: List[str] = [
    "yellow",
    "green",
    "cyan",
    "magenta",
    "red",
    "blue",
    "bright_yellow",
    "bright_green",
]

NORMAL_STYLE = "grey62"
BORDER_STYLE = "grey42"
PRESSED_STYLE = "black on yellow"
LEADER_STYLE = "black on cyan"
MODIFIER_STYLE = "black on magenta"

SHIFT_KEYS = frozenset({"lshift", "rshift"})


def frame_color(ordinal: int) -> str:
    return FRAME_COLORS[ordinal % len(FRAME_COLORS)]


def _separators(row: Sequence[KeySpec]) -> set[int]:
    positions = {0}
    x = 0
    for spec in row:
        x += spec.width + 1
        positions.add(x)
    return positions


def _border(above: set[int] | None, below: set[int] | None, width: int) -> str:
    chars: List[str] = []
    for x in range(width + 1):
        up = above is not None and x in above
        down = below is not None and x in below
        if x == 0:
            chars.append("┌" if above is None else "└" if below is None else "├")
        elif x == width:
            chars.append("┐" if above is None else "┘" if below is None else "┤")
        elif up and down:
            chars.append("┼")
        elif up:
            chars.append("┴")
        elif down:
            chars.append("┬")
        else:
            chars.append("─")
    return "".join(chars)


class KeyboardRenderer:
    """Draws a :class:`KeyboardLayout` as box-drawing text with per-key styles."""

    def __init__(self, layout: KeyboardLayout) -> None:
        self.layout = layout

    def render(self, styles: Mapping[str, str] | None = None, shifted: bool = False) -> Text:
        """Render the diagram; ``styles`` maps key ids to rich styles."""
        styles = styles or {}
        rows = self.layout.rows
        if not rows:
            return Text()

        separators = [_separators(row) for row in rows]
        width = max(max(seps) for seps in separators)

        text = Text(no_wrap=True)
        text.append(_border(None, separators[0], width), style=BORDER_STYLE)
        for index, row in enumerate(rows):
            text.append("\n")
            text.append("│", style=BORDER_STYLE)
            for spec in row:
                label = spec.display(shifted)
                cell = label.center(spec.width) if spec.width > 8 else label.ljust(spec.width)
                text.append(cell[: spec.width], style=styles.get(spec.key_id, NORMAL_STYLE))
                text.append("│", style=BORDER_STYLE)
            below = separators[index + 1] if index + 1 < len(rows) else None
            text.append("\n")
            text.append(_border(separators[index], below, width), style=BORDER_STYLE)
        return text

    def _is_shifted(self, base: str) -> bool:
        return bool(base) and self.layout.is_shifted_symbol(base)

    def render_frame(self, frame: Keyframe | None) -> Text:
        """Render one animation frame (or the bare keyboard for None)."""
        if frame is None:
            return self.render()

        leader = frame.chord is not None and frame.chord.is_leader
        styles: Dict[str, str] = {}
        for active in frame.active_keys:
            if active.role == KeyRole.HELD_MODIFIER:
                styles[active.key_id] = MODIFIER_STYLE
            else:
                styles[active.key_id] = LEADER_STYLE if leader else PRESSED_STYLE

        shifted = bool(frame.held_modifiers & SHIFT_KEYS) or (
            frame.chord is not None and self._is_shifted(frame.chord.base)
        )
        return self.render(styles, shifted=shifted)

    def render_legend(self, legend: LegendView) -> Text:
        """Render every step at once, each key colored by its first step."""
        styles: Dict[str, str] = {}
        for key_id in legend.marks:
            ordinal = legend.first_ordinal(key_id)
            if ordinal is not None:
                styles[key_id] = f"black on {frame_color(ordinal)}"
        shifted = any(key_id in SHIFT_KEYS for key_id in legend.marks) or any(
            self._is_shifted(base) for base in legend.bases
        )
        return self.render(styles, shifted=shifted)


def legend_caption(legend: LegendView) -> Text:
    """Step list for legend view, e.g. `` 1  Space  2  f  3  f``."""
    text = Text()
    for ordinal, caption in zip(legend.ordinals, legend.captions, strict=False):
        text.append(f" {ordinal + 1} ", style=f"bold black on {frame_color(ordinal)}")
        text.append(f" {caption}  ")
    return text


def frame_caption(frame: Keyframe | None, total: int) -> Text:
    """Step indicator for animation view, e.g. ``step 2/3  f``."""
    if frame is None or total == 0:
        return Text("(no keys)", style="dim")
    text = Text()
    text.append(f"step {frame.ordinal + 1}/{total}  ", style="dim")
    label = frame.chord.label if frame.chord else "?"
    text.append(label, style="bold")
    return text
