"""Loading and validation of the keybinding record set."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator, List, Sequence, overload

from loguru import logger
from pydantic import ValidationError

from lazykeys.commands.chord_parser import ChordParseError, parse_keys
from lazykeys.commands.models import KeybindingRecord

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "commands.json"


class RecordLoadError(ValueError):
    """Raised when the record set is malformed; the whole set is rejected."""

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"Record {index}: {message}"
        super().__init__(message)


class RecordStore:
    """Immutable, index-stable collection of keybinding records."""

    def __init__(self, records: Sequence[KeybindingRecord]) -> None:
        self._records: tuple[KeybindingRecord, ...] = tuple(records)

    def __iter__(self) -> Iterator[KeybindingRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @overload
    def __getitem__(self, index: int) -> KeybindingRecord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[KeybindingRecord, ...]: ...

    def __getitem__(self, index: int | slice) -> KeybindingRecord | tuple[KeybindingRecord, ...]:
        return self._records[index]

    @property
    def records(self) -> tuple[KeybindingRecord, ...]:
        return self._records

    @classmethod
    def from_data(cls, data: Any) -> "RecordStore":
        """Validate decoded JSON data and build a store.

        Args:
            data: Decoded JSON; must be a list of record objects

        Returns:
            RecordStore containing every record, in source order

        Raises:
            RecordLoadError: If any record is missing fields or has unparseable keys
        """
        if not isinstance(data, list):
            raise RecordLoadError("Record data root must be a JSON array")

        records: List[KeybindingRecord] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise RecordLoadError("expected a JSON object", index=index)
            try:
                record = KeybindingRecord.model_validate(item)
            except ValidationError as e:
                fields = ", ".join(
                    ".".join(str(loc) for loc in err["loc"]) or "<root>" for err in e.errors()
                )
                raise RecordLoadError(f"invalid fields: {fields}", index=index) from e

            try:
                parse_keys(record.keys)
            except ChordParseError as e:
                raise RecordLoadError(f"unparseable keys {record.keys!r}: {e}", index=index) from e

            records.append(record)

        return cls(records)

    @classmethod
    def from_json(cls, text: str) -> "RecordStore":
        """Build a store from a JSON document string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RecordLoadError(f"Invalid JSON: {e}") from e
        return cls.from_data(data)

    @classmethod
    def from_path(cls, path: str | Path) -> "RecordStore":
        """Load a store from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            RecordLoadError: If the content is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Keybinding data file not found: {path}")

        store = cls.from_json(path.read_text(encoding="utf-8"))
        logger.info("Loaded {} keybinding records from {}", len(store), path)
        return store


def load_records(path: str | Path | None = None) -> RecordStore:
    """Load the bundled record set, or the file at ``path`` when given."""
    return RecordStore.from_path(path or DEFAULT_DATA_PATH)
