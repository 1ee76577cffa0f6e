"""Token resolver selection from config."""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import urlparse

from teamsync.core.auth.base import TokenResolver
from teamsync.core.auth.resolvers import EnvTokenResolver, GhCliTokenResolver, StaticTokenResolver
from teamsync.core.contracts.config import TeamSyncConfig
from teamsync.core.contracts.exceptions import ConfigError


def gh_hostname(api_url: str) -> str:
    """Host ``gh`` stores credentials under for an API base URL.

    github.com's API lives on its own ``api.`` host; Enterprise Server serves
    the API from the instance host itself.
    """
    hostname = urlparse(api_url.strip()).hostname or ""
    if hostname in {"", "api.github.com"}:
        return "github.com"
    return hostname


def create_token_resolver(config: TeamSyncConfig) -> TokenResolver:
    builders: dict[str, Callable[[], TokenResolver]] = {
        "gh-cli": lambda: GhCliTokenResolver(hostname=gh_hostname(config.api_url)),
        "env": EnvTokenResolver,
        "token": lambda: StaticTokenResolver(token=config.token or ""),
    }
    builder = builders.get(config.auth)
    if builder is None:
        raise ConfigError(f"unknown auth mode {config.auth!r}; expected one of: {', '.join(builders)}")
    return builder()
