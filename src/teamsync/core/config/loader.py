"""Config loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from pydantic import ValidationError

from teamsync.core.contracts.config import TeamSyncConfig
from teamsync.core.contracts.exceptions import ConfigError


def _read_payload(config_path: Path) -> Any:
    try:
        return json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc


def _check_api_url(api_url: str) -> None:
    parsed = urlparse(api_url)
    if parsed.scheme not in {"http", "https"} or not parsed.hostname:
        raise ConfigError(f"api_url must be an http(s) URL, got {api_url!r}")


def load_config(path: str | Path) -> TeamSyncConfig:
    """Load config from JSON.

    A relative ``state_path`` resolves against the directory holding the
    config file.
    """
    config_path = Path(path).expanduser().resolve()

    try:
        config = TeamSyncConfig.model_validate(_read_payload(config_path))
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
    _check_api_url(config.api_url)

    state_path = config.state_path.expanduser()
    if not state_path.is_absolute():
        state_path = (config_path.parent / state_path).resolve()
    if state_path.is_dir():
        raise ConfigError(f"state_path points at a directory: {state_path}")
    return config.model_copy(update={"state_path": state_path})
