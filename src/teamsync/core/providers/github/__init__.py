"""GitHub provider."""

from teamsync.core.providers.github.mapper import slugify
from teamsync.core.providers.github.provider import GitHubProvider

__all__ = ["GitHubProvider", "slugify"]
