from __future__ import annotations

import json
from pathlib import Path

import pytest

from teamsync.core.contracts.exceptions import StateError
from teamsync.core.contracts.organization import Organization
from teamsync.core.state import load_state, store_state


def test_store_then_load_preserves_organization(tmp_path: Path, local_org: Organization) -> None:
    path = tmp_path / "nested" / "state.json"

    store_state(path, local_org)

    assert load_state(path) == local_org


def test_store_writes_indented_json_with_trailing_newline(tmp_path: Path, local_org: Organization) -> None:
    path = tmp_path / "state.json"

    store_state(path, local_org)

    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert '\n  "organization": "acme"' in text
    assert json.loads(text)["teams"]["ops"]["members"] == ["a", "b"]


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(StateError, match="failed reading"):
        load_state(tmp_path / "missing.json")


def test_load_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(StateError, match="invalid JSON"):
        load_state(path)


def test_load_invalid_shape_raises(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"teams": {}}), encoding="utf-8")

    with pytest.raises(StateError, match="invalid state file"):
        load_state(path)
