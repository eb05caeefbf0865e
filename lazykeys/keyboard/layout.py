"""Static keyboard geometry and the key-name lookup used by keyframe generation."""

from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Protocol, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field


class KeyLookup(Protocol):
    """Read-only mapping from a key name to a physical key id."""

    def lookup(self, name: str) -> str | None: ...


class StaticKeyLookup:
    """Case-insensitive lookup backed by a plain mapping (no geometry)."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping: Dict[str, str] = {name.lower(): key_id for name, key_id in mapping.items()}

    def lookup(self, name: str) -> str | None:
        return self._mapping.get(name.lower())


class KeySpec(BaseModel):
    """One physical key on the diagram."""

    model_config = ConfigDict(frozen=True)

    key_id: str
    label: str
    shifted_label: str | None = None
    width: int = Field(default=2, ge=1, description="Inner cell width in characters")
    aliases: Tuple[str, ...] = ()

    def display(self, shifted: bool = False) -> str:
        if shifted and self.shifted_label:
            return self.shifted_label
        return self.label


class KeyboardLayout:
    """Rows of keys plus a case-insensitive name → key id index.

    Names resolve through the key id, its label, its shifted label and any
    aliases; the first key registered for a name wins (left Shift over right).
    """

    def __init__(self, rows: Sequence[Sequence[KeySpec]], name: str = "custom") -> None:
        self.name = name
        self._rows: Tuple[Tuple[KeySpec, ...], ...] = tuple(tuple(row) for row in rows)
        self._keys: Dict[str, KeySpec] = {}
        self._index: Dict[str, str] = {}

        for row in self._rows:
            for spec in row:
                if spec.key_id in self._keys:
                    raise ValueError(f"Duplicate key id in layout: {spec.key_id}")
                self._keys[spec.key_id] = spec

        for spec in self._keys.values():
            names = [spec.key_id, spec.label, *spec.aliases]
            if spec.shifted_label:
                names.append(spec.shifted_label)
            for key_name in names:
                self._index.setdefault(key_name.lower(), spec.key_id)

    @property
    def rows(self) -> Tuple[Tuple[KeySpec, ...], ...]:
        return self._rows

    def __iter__(self) -> Iterator[KeySpec]:
        return iter(self._keys.values())

    def __contains__(self, key_id: object) -> bool:
        return key_id in self._keys

    def key(self, key_id: str) -> KeySpec:
        return self._keys[key_id]

    def lookup(self, name: str) -> str | None:
        """Physical key id for ``name`` (case-insensitive), or None if absent."""
        return self._index.get(name.lower())

    def is_shifted_symbol(self, name: str) -> bool:
        """Whether ``name`` is only typed with Shift held on this layout."""
        key_id = self.lookup(name)
        if key_id is None:
            return False
        spec = self._keys[key_id]
        if len(name) == 1 and name.isalpha():
            return name.isupper()
        return spec.shifted_label is not None and name == spec.shifted_label != spec.label


def _row(*specs: Tuple[str, str, str | None, int, Tuple[str, ...]]) -> List[KeySpec]:
    return [
        KeySpec(key_id=key_id, label=label, shifted_label=shifted, width=width, aliases=aliases)
        for key_id, label, shifted, width, aliases in specs
    ]


def _chars(pairs: str, shifted: str) -> List[Tuple[str, str, str | None, int, Tuple[str, ...]]]:
    return [(char, char, shift, 2, ()) for char, shift in zip(pairs, shifted, strict=True)]


_SYMBOL_IDS = {
    "`": "grave",
    "-": "minus",
    "=": "equal",
    "[": "lbracket",
    "]": "rbracket",
    "\\": "backslash",
    ";": "semicolon",
    "'": "quote",
    ",": "comma",
    ".": "period",
    "/": "slash",
}

_SYMBOL_ALIASES: Dict[str, Tuple[str, ...]] = {
    "\\": ("bslash", "bar"),
    ",": ("lt",),
    ".": ("gt",),
}


def _symbol(char: str, shifted: str, width: int = 2) -> Tuple[str, str, str | None, int, Tuple[str, ...]]:
    return (_SYMBOL_IDS[char], char, shifted, width, _SYMBOL_ALIASES.get(char, ()))


def _build_ansi_layout() -> KeyboardLayout:
    function_row = _row(
        ("esc", "Esc", None, 3, ("escape",)),
        *[(f"f{n}", f"F{n}", None, 2, ()) for n in range(1, 10)],
        ("f10", "F10", None, 4, ()),
        ("f11", "F11", None, 3, ()),
        ("f12", "F12", None, 4, ()),
    )
    number_row = _row(
        _symbol("`", "~", width=4),
        *_chars("1234567890", "!@#$%^&*()"),
        _symbol("-", "_"),
        _symbol("=", "+"),
        ("backspace", "Bsp", None, 3, ("bs", "backsp", "backspace")),
    )
    top_row = _row(
        ("tab", "Tab", None, 5, ()),
        *_chars("qwertyuiop", "QWERTYUIOP"),
        _symbol("[", "{"),
        _symbol("]", "}"),
        _symbol("\\", "|"),
    )
    home_row = _row(
        ("caps", "Caps", None, 6, ("capslock",)),
        *_chars("asdfghjkl", "ASDFGHJKL"),
        _symbol(";", ":"),
        _symbol("'", '"'),
        ("enter", "Ent", None, 4, ("enter", "cr", "return")),
    )
    bottom_row = _row(
        ("lshift", "Shift", None, 7, ("shift",)),
        *_chars("zxcvbnm", "ZXCVBNM"),
        _symbol(",", "<"),
        _symbol(".", ">"),
        _symbol("/", "?"),
        ("rshift", "Shift", None, 6, ()),
    )
    space_row = _row(
        ("lctrl", "Ctrl", None, 4, ("ctrl", "control")),
        ("lsuper", "Sup", None, 3, ("super", "cmd")),
        ("lalt", "Alt", None, 3, ("alt", "meta")),
        ("space", "Space", None, 16, ("leader", "spc")),
        ("ralt", "Alt", None, 3, ()),
        ("fn", "Fn", None, 3, ()),
        ("menu", "Mnu", None, 3, ("menu",)),
        ("rctrl", "Ct", None, 2, ()),
    )
    return KeyboardLayout(
        [function_row, number_row, top_row, home_row, bottom_row, space_row], name="ansi"
    )


ANSI_LAYOUT = _build_ansi_layout()


def default_layout() -> KeyboardLayout:
    """The bundled ANSI layout."""
    return ANSI_LAYOUT
