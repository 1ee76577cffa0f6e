"""Concrete token resolvers."""

from teamsync.core.auth.resolvers.env import EnvTokenResolver
from teamsync.core.auth.resolvers.gh_cli import GhCliTokenResolver
from teamsync.core.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "GhCliTokenResolver", "StaticTokenResolver"]
