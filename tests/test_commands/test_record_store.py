"""Tests for loading and validating the keybinding record set."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lazykeys.commands.record_store import (
    DEFAULT_DATA_PATH,
    RecordLoadError,
    RecordStore,
    load_records,
)


def _records() -> list[dict]:
    return [
        {"keys": "<leader>ff", "description": "Find files", "category": "search"},
        {"keys": "gd", "description": "Goto definition", "category": "lsp"},
        {"keys": "<C-w>v", "description": "Split window right", "category": "window"},
    ]


def test_bundled_data_loads_and_parses() -> None:
    store = load_records()

    assert len(store) > 50
    assert DEFAULT_DATA_PATH.exists()
    for record in store:
        assert record.chords


def test_bundled_data_covers_common_bindings() -> None:
    keys = {record.keys for record in load_records()}

    assert {"<leader>ff", "<leader>fg", "gd", "<leader>gg", "<C-w>v"} <= keys


def test_from_data_keeps_source_order() -> None:
    store = RecordStore.from_data(_records())

    assert [r.keys for r in store] == ["<leader>ff", "gd", "<C-w>v"]
    assert store[1].description == "Goto definition"
    assert store.records[2].category == "window"


def test_unknown_fields_are_ignored() -> None:
    data = _records()
    data[0]["source"] = "lazyvim.org"

    store = RecordStore.from_data(data)

    assert len(store) == 3


def test_root_must_be_a_list() -> None:
    with pytest.raises(RecordLoadError, match="JSON array"):
        RecordStore.from_data({"keys": "gd"})


def test_missing_field_rejects_whole_set() -> None:
    data = _records()
    del data[1]["description"]

    with pytest.raises(RecordLoadError, match="Record 1: invalid fields: description") as exc_info:
        RecordStore.from_data(data)

    assert exc_info.value.index == 1


def test_non_object_entry_is_rejected() -> None:
    data = _records() + ["gd"]

    with pytest.raises(RecordLoadError, match="Record 3: expected a JSON object"):
        RecordStore.from_data(data)


def test_unparseable_keys_are_rejected() -> None:
    data = _records()
    data[2]["keys"] = "<C-w"

    with pytest.raises(RecordLoadError, match="unparseable keys") as exc_info:
        RecordStore.from_data(data)

    assert exc_info.value.index == 2


def test_invalid_json_is_rejected() -> None:
    with pytest.raises(RecordLoadError, match="Invalid JSON"):
        RecordStore.from_json("[{")


def test_from_path_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "bindings.json"
    path.write_text(json.dumps(_records()), encoding="utf-8")

    store = load_records(path)

    assert len(store) == 3
    assert store[0].keys == "<leader>ff"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        RecordStore.from_path(tmp_path / "missing.json")


def test_load_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        RecordStore.from_data("nope")
