"""Core auth exports."""

from teamsync.core.auth.base import TokenResolver
from teamsync.core.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
