"""Keybinding records, the record store and the chord parser."""

from lazykeys.commands.chord_parser import (
    ChordParseError,
    ChordParser,
    ParseErrorKind,
    parse_keys,
)
from lazykeys.commands.models import (
    Category,
    KeybindingRecord,
    KeyChord,
    Mode,
    Modifier,
    category_group,
    category_label,
    mode_group,
)
from lazykeys.commands.record_store import (
    DEFAULT_DATA_PATH,
    RecordLoadError,
    RecordStore,
    load_records,
)

__all__ = [
    "Category",
    "ChordParseError",
    "ChordParser",
    "DEFAULT_DATA_PATH",
    "KeyChord",
    "KeybindingRecord",
    "Mode",
    "Modifier",
    "ParseErrorKind",
    "RecordLoadError",
    "RecordStore",
    "category_group",
    "category_label",
    "load_records",
    "mode_group",
    "parse_keys",
]
