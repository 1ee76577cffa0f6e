"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, model_validator


class TeamSyncConfig(BaseModel):
    organization: str
    state_path: Path = Path("team-assignments.json")
    auth: str = "gh-cli"
    token: str | None = None
    api_url: str = "https://api.github.com"

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_organization(self) -> TeamSyncConfig:
        if not self.organization.strip():
            raise ValueError("organization must be a non-empty string")
        return self

    @model_validator(mode="after")
    def validate_auth_token(self) -> TeamSyncConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in {"gh-cli", "env", "token"}:
            raise ValueError("auth must be one of: gh-cli, env, token")
        return self
