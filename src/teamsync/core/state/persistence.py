"""Local organization state persistence."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from teamsync.core.contracts.exceptions import StateError
from teamsync.core.contracts.organization import Organization


def load_state(path: str | Path) -> Organization:
    state_path = Path(path)
    try:
        payload: Any = json.loads(state_path.read_text(encoding="utf-8"))
        return Organization.model_validate(payload)
    except OSError as exc:
        raise StateError(f"failed reading state file: {state_path}") from exc
    except json.JSONDecodeError as exc:
        raise StateError(f"invalid JSON in state file: {state_path}") from exc
    except ValidationError as exc:
        raise StateError(f"invalid state file {state_path}: {exc}") from exc


def store_state(path: str | Path, organization: Organization) -> None:
    state_path = Path(path)
    try:
        state_path.parent.mkdir(parents=True, exist_ok=True)
        state_path.write_text(organization.model_dump_json(indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise StateError(f"failed to persist state: {state_path}") from exc
