"""Parser for Vim-style key notation (``<leader>ff``, ``<C-w>v``, ``gd``)."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from lazykeys.commands.models import KeyChord, Modifier


class ParseErrorKind(str, Enum):
    """Reasons a key notation string cannot be parsed."""

    EMPTY = "empty"
    UNTERMINATED_BRACKET = "unterminated_bracket"
    EMPTY_BRACKET = "empty_bracket"


class ChordParseError(ValueError):
    """Raised when a raw key string is not valid chord notation."""

    def __init__(self, kind: ParseErrorKind, raw: str, position: int | None = None) -> None:
        self.kind = kind
        self.raw = raw
        self.position = position
        if kind == ParseErrorKind.EMPTY:
            message = "Empty key sequence"
        elif kind == ParseErrorKind.UNTERMINATED_BRACKET:
            message = f"Unterminated '<' at position {position} in {raw!r}"
        else:
            message = f"Empty '<>' at position {position} in {raw!r}"
        super().__init__(message)


class ChordParser:
    """Converts raw key notation into an ordered list of :class:`KeyChord`.

    Every literal character is its own chord. A bracketed token is one chord:
    ``<C-v>`` carries the Ctrl modifier over ``v``, while ``<leader>`` or
    ``<Esc>`` use the bracket name as the base. A literal following a bracketed
    token never merges into it, so ``<leader>ff`` is three chords.
    """

    MODIFIER_ALIASES: Dict[str, Modifier] = {
        "c": Modifier.CTRL,
        "ctrl": Modifier.CTRL,
        "control": Modifier.CTRL,
        "a": Modifier.ALT,
        "alt": Modifier.ALT,
        "m": Modifier.ALT,
        "meta": Modifier.ALT,
        "s": Modifier.SHIFT,
        "shift": Modifier.SHIFT,
        "d": Modifier.SUPER,
        "cmd": Modifier.SUPER,
        "super": Modifier.SUPER,
    }

    def parse(self, raw: str) -> List[KeyChord]:
        """Parse a key notation string.

        Args:
            raw: Key notation such as ``<leader>ff`` or ``<C-w>v``

        Returns:
            Non-empty list of chords in press order

        Raises:
            ChordParseError: If the string is empty or a bracket is malformed

        Examples:
            >>> [c.label for c in ChordParser().parse("<leader>ff")]
            ['Space', 'f', 'f']
            >>> [c.label for c in ChordParser().parse("<C-w>v")]
            ['Ctrl+w', 'v']
        """
        text = raw.strip()
        if not text:
            raise ChordParseError(ParseErrorKind.EMPTY, raw)

        chords: List[KeyChord] = []
        pos = 0
        while pos < len(text):
            char = text[pos]
            if char.isspace():
                pos += 1
                continue

            if char == "<":
                close = text.find(">", pos + 1)
                if close == -1:
                    raise ChordParseError(ParseErrorKind.UNTERMINATED_BRACKET, raw, pos)
                name = text[pos + 1 : close]
                if not name:
                    raise ChordParseError(ParseErrorKind.EMPTY_BRACKET, raw, pos)
                chords.append(self._parse_bracket(name))
                pos = close + 1
                continue

            chords.append(KeyChord(base=char))
            pos += 1

        return chords

    def _parse_bracket(self, name: str) -> KeyChord:
        """Split ``C-S-v`` style names into modifiers and a base key."""
        parts = name.split("-")
        # A trailing empty part means the base key itself is "-" (e.g. <C-->)
        if len(parts) > 2 and parts[-1] == "" and parts[-2] == "":
            parts = parts[:-2] + ["-"]

        if len(parts) < 2 or not parts[-1]:
            return KeyChord(base=name)

        modifiers = set()
        for part in parts[:-1]:
            modifier = self.MODIFIER_ALIASES.get(part.lower())
            if modifier is None:
                # Not modifier notation (e.g. <my-custom-key>); keep as opaque name
                return KeyChord(base=name)
            modifiers.add(modifier)

        return KeyChord(base=parts[-1], modifiers=frozenset(modifiers))


_default_parser = ChordParser()


def parse_keys(raw: str) -> List[KeyChord]:
    """Parse ``raw`` with a shared :class:`ChordParser`."""
    return _default_parser.parse(raw)
