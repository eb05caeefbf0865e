"""Tests for Vim key notation parsing."""

from __future__ import annotations

import pytest

from lazykeys.commands.chord_parser import (
    ChordParseError,
    ChordParser,
    ParseErrorKind,
    parse_keys,
)
from lazykeys.commands.models import KeyChord, Modifier


def test_leader_sequence_is_three_chords() -> None:
    chords = parse_keys("<leader>ff")

    assert [c.base for c in chords] == ["leader", "f", "f"]
    assert chords[0].is_leader is True
    assert all(not c.modifiers for c in chords)


def test_ctrl_chord_followed_by_literal() -> None:
    chords = parse_keys("<C-w>v")

    assert chords == [
        KeyChord(base="w", modifiers=frozenset({Modifier.CTRL})),
        KeyChord(base="v"),
    ]


def test_each_literal_character_is_its_own_chord() -> None:
    assert [c.base for c in parse_keys("gd")] == ["g", "d"]
    assert [c.base for c in parse_keys("gcO")] == ["g", "c", "O"]


def test_multiple_modifiers() -> None:
    (chord,) = parse_keys("<C-S-v>")

    assert chord.base == "v"
    assert chord.modifiers == frozenset({Modifier.CTRL, Modifier.SHIFT})
    assert chord.label == "Ctrl+Shift+v"


@pytest.mark.parametrize(
    ("raw", "modifier"),
    [
        ("<A-j>", Modifier.ALT),
        ("<M-j>", Modifier.ALT),
        ("<S-j>", Modifier.SHIFT),
        ("<D-j>", Modifier.SUPER),
        ("<c-j>", Modifier.CTRL),
    ],
)
def test_modifier_aliases(raw: str, modifier: Modifier) -> None:
    (chord,) = parse_keys(raw)

    assert chord.base == "j"
    assert chord.modifiers == frozenset({modifier})


def test_ctrl_minus_keeps_minus_as_base() -> None:
    (chord,) = parse_keys("<C-->")

    assert chord.base == "-"
    assert chord.modifiers == frozenset({Modifier.CTRL})


def test_named_keys_keep_bracket_name() -> None:
    chords = parse_keys("<Esc><Esc>")

    assert [c.base for c in chords] == ["Esc", "Esc"]
    assert parse_keys("<lt>")[0].base == "lt"


def test_non_modifier_dash_name_is_opaque() -> None:
    (chord,) = parse_keys("<my-custom-key>")

    assert chord.base == "my-custom-key"
    assert chord.modifiers == frozenset()


def test_whitespace_between_tokens_is_ignored() -> None:
    assert parse_keys("  g d ") == parse_keys("gd")


def test_literal_after_bracket_never_merges() -> None:
    chords = parse_keys("<leader><tab>d")

    assert [c.base for c in chords] == ["leader", "tab", "d"]


@pytest.mark.parametrize("raw", ["", "   "])
def test_empty_input_is_rejected(raw: str) -> None:
    with pytest.raises(ChordParseError) as exc_info:
        parse_keys(raw)

    assert exc_info.value.kind == ParseErrorKind.EMPTY


def test_unterminated_bracket_reports_position() -> None:
    with pytest.raises(ChordParseError) as exc_info:
        parse_keys("ab<C-w")

    assert exc_info.value.kind == ParseErrorKind.UNTERMINATED_BRACKET
    assert exc_info.value.position == 2
    assert exc_info.value.raw == "ab<C-w"


def test_empty_bracket_is_rejected() -> None:
    with pytest.raises(ChordParseError, match="Empty '<>'") as exc_info:
        parse_keys("<>")

    assert exc_info.value.kind == ParseErrorKind.EMPTY_BRACKET


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        ChordParser().parse("<leader")


def test_labels() -> None:
    labels = [c.label for c in parse_keys("<leader><C-v>x")]

    assert labels == ["Space", "Ctrl+v", "x"]
