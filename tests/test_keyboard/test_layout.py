"""Tests for keyboard geometry and key-name lookup."""

from __future__ import annotations

import pytest

from lazykeys.keyboard.layout import (
    ANSI_LAYOUT,
    KeyboardLayout,
    KeySpec,
    StaticKeyLookup,
    default_layout,
)


def test_default_layout_is_ansi() -> None:
    layout = default_layout()

    assert layout is ANSI_LAYOUT
    assert layout.name == "ansi"
    assert len(layout.rows) == 6


@pytest.mark.parametrize(
    ("name", "key_id"),
    [
        ("leader", "space"),
        ("Leader", "space"),
        ("space", "space"),
        ("ESC", "esc"),
        ("cr", "enter"),
        ("BS", "backspace"),
        ("tab", "tab"),
        ("f", "f"),
        ("F", "f"),
        ("F5", "f5"),
        ("ctrl", "lctrl"),
        ("shift", "lshift"),
        ("alt", "lalt"),
        ("super", "lsuper"),
        ("|", "backslash"),
        ("$", "4"),
        ("lt", "comma"),
        ("-", "minus"),
        ("/", "slash"),
    ],
)
def test_lookup_resolves_names(name: str, key_id: str) -> None:
    assert ANSI_LAYOUT.lookup(name) == key_id


def test_lookup_unknown_name_returns_none() -> None:
    assert ANSI_LAYOUT.lookup("Up") is None
    assert ANSI_LAYOUT.lookup("my-custom-key") is None


def test_layout_contains_key_ids() -> None:
    assert "space" in ANSI_LAYOUT
    assert "leader" not in ANSI_LAYOUT
    assert ANSI_LAYOUT.key("enter").label == "Ent"


def test_shifted_symbols() -> None:
    assert ANSI_LAYOUT.is_shifted_symbol("G") is True
    assert ANSI_LAYOUT.is_shifted_symbol("g") is False
    assert ANSI_LAYOUT.is_shifted_symbol("|") is True
    assert ANSI_LAYOUT.is_shifted_symbol("\\") is False
    assert ANSI_LAYOUT.is_shifted_symbol("Esc") is False
    assert ANSI_LAYOUT.is_shifted_symbol("nope") is False


def test_key_display_uses_shifted_label() -> None:
    spec = ANSI_LAYOUT.key("4")

    assert spec.display() == "4"
    assert spec.display(shifted=True) == "$"
    assert ANSI_LAYOUT.key("esc").display(shifted=True) == "Esc"


def test_duplicate_key_ids_are_rejected() -> None:
    row = [KeySpec(key_id="a", label="a"), KeySpec(key_id="a", label="A")]

    with pytest.raises(ValueError, match="Duplicate key id"):
        KeyboardLayout([row])


def test_first_registered_name_wins() -> None:
    layout = KeyboardLayout(
        [[KeySpec(key_id="lshift", label="Shift"), KeySpec(key_id="rshift", label="Shift")]]
    )

    assert layout.lookup("shift") == "lshift"


def test_static_lookup_is_case_insensitive() -> None:
    lookup = StaticKeyLookup({"Leader": "SPC", "f": "F"})

    assert lookup.lookup("leader") == "SPC"
    assert lookup.lookup("F") == "F"
    assert lookup.lookup("g") is None
