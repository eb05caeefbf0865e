"""Keyframe generation: parsed chords to a timeline of keyboard highlights."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, List, Sequence, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from lazykeys.commands.models import MODIFIER_ORDER, KeyChord
from lazykeys.keyboard.layout import KeyLookup


class KeyRole(str, Enum):
    """Why a physical key is highlighted in a frame."""

    HELD_MODIFIER = "held-modifier"
    PRESSED_KEY = "pressed-key"


class ActiveKey(BaseModel):
    """A highlighted physical key and its role."""

    model_config = ConfigDict(frozen=True)

    key_id: str
    role: KeyRole


class Keyframe(BaseModel):
    """One step of a key sequence as a keyboard state."""

    model_config = ConfigDict(frozen=True)

    ordinal: int = Field(..., ge=0)
    active_keys: FrozenSet[ActiveKey] = Field(default_factory=frozenset)
    chord: KeyChord | None = Field(default=None, description="Chord this frame depicts")

    def keys_with_role(self, role: KeyRole) -> FrozenSet[str]:
        return frozenset(active.key_id for active in self.active_keys if active.role == role)

    @property
    def pressed_keys(self) -> FrozenSet[str]:
        return self.keys_with_role(KeyRole.PRESSED_KEY)

    @property
    def held_modifiers(self) -> FrozenSet[str]:
        return self.keys_with_role(KeyRole.HELD_MODIFIER)


class LegendMark(BaseModel):
    """A step (ordinal) and role a key played in a flattened sequence."""

    model_config = ConfigDict(frozen=True)

    ordinal: int
    role: KeyRole


class LegendView(BaseModel):
    """All frames of a sequence composited into one keyboard state."""

    model_config = ConfigDict(frozen=True)

    marks: Dict[str, Tuple[LegendMark, ...]] = Field(default_factory=dict)
    ordinals: Tuple[int, ...] = ()
    captions: Tuple[str, ...] = ()
    bases: Tuple[str, ...] = Field(default=(), description="Chord base of each step")

    def marks_for(self, key_id: str) -> Tuple[LegendMark, ...]:
        return self.marks.get(key_id, ())

    def first_ordinal(self, key_id: str) -> int | None:
        marks = self.marks.get(key_id)
        return marks[0].ordinal if marks else None


class KeyframeGenerator:
    """Turns chords into keyframes using an injected key lookup.

    Names the lookup doesn't know are left out of their frame; the frame itself
    is still emitted so ordinals always line up with the chord sequence.
    """

    def __init__(self, layout: KeyLookup) -> None:
        self.layout = layout

    def generate(self, chords: Sequence[KeyChord]) -> List[Keyframe]:
        frames: List[Keyframe] = []
        for ordinal, chord in enumerate(chords):
            active: set[ActiveKey] = set()
            for modifier in MODIFIER_ORDER:
                if modifier not in chord.modifiers:
                    continue
                key_id = self.layout.lookup(modifier.value)
                if key_id is None:
                    logger.debug("No key for modifier {} on layout; dropped", modifier.value)
                    continue
                active.add(ActiveKey(key_id=key_id, role=KeyRole.HELD_MODIFIER))

            key_id = self.layout.lookup(chord.base)
            if key_id is None:
                logger.debug("No key for {!r} on layout; dropped from frame {}", chord.base, ordinal)
            else:
                active.add(ActiveKey(key_id=key_id, role=KeyRole.PRESSED_KEY))

            frames.append(Keyframe(ordinal=ordinal, active_keys=frozenset(active), chord=chord))
        return frames


def flatten(frames: Sequence[Keyframe]) -> LegendView:
    """Composite every frame into one view, tagging keys with their steps."""
    ordered = sorted(frames, key=lambda f: f.ordinal)
    marks: Dict[str, List[LegendMark]] = {}
    for frame in ordered:
        # Held modifiers before the pressed key within a frame
        for active in sorted(
            frame.active_keys, key=lambda a: (a.role != KeyRole.HELD_MODIFIER, a.key_id)
        ):
            marks.setdefault(active.key_id, []).append(
                LegendMark(ordinal=frame.ordinal, role=active.role)
            )

    return LegendView(
        marks={key_id: tuple(items) for key_id, items in marks.items()},
        ordinals=tuple(frame.ordinal for frame in ordered),
        captions=tuple(frame.chord.label if frame.chord else "?" for frame in ordered),
        bases=tuple(frame.chord.base if frame.chord else "" for frame in ordered),
    )


class KeyframeSequence:
    """The live keyframe sequence for the selected record.

    Playback reads frames by step; nothing is recomputed per tick.
    """

    def __init__(self, frames: Sequence[Keyframe], loop: bool = True) -> None:
        self.frames: Tuple[Keyframe, ...] = tuple(frames)
        self.loop = loop
        self._legend: LegendView | None = None

    def __len__(self) -> int:
        return len(self.frames)

    def frame_at(self, step: int) -> Keyframe | None:
        """Frame shown at playback ``step``; loops, or holds the last frame."""
        if not self.frames:
            return None
        if self.loop:
            return self.frames[step % len(self.frames)]
        return self.frames[min(max(step, 0), len(self.frames) - 1)]

    @property
    def legend(self) -> LegendView:
        if self._legend is None:
            self._legend = flatten(self.frames)
        return self._legend
