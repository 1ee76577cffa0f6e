"""Token lookup in the process environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from teamsync.core.auth.base import TokenResolver
from teamsync.core.contracts.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvTokenResolver(TokenResolver):
    """Reads the first non-empty variable of ``variables``, in order."""

    variables: tuple[str, ...] = ("GITHUB_TOKEN", "GH_TOKEN")

    async def resolve(self) -> str:
        for name in self.variables:
            token = (os.environ.get(name) or "").strip()
            if token:
                _LOG.debug("Using GitHub token from $%s", name)
                return token
        raise AuthenticationError(f"none of {', '.join(self.variables)} is set to a non-empty token")
