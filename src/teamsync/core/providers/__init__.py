"""Core providers-domain exports."""

from teamsync.core.providers.github import GitHubProvider, slugify

__all__ = ["GitHubProvider", "slugify"]
