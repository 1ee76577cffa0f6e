"""Token taken verbatim from the config file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from teamsync.core.auth.base import TokenResolver
from teamsync.core.contracts.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str = field(repr=False)

    async def resolve(self) -> str:
        token = self.token.strip()
        if not token:
            raise AuthenticationError("config 'token' is empty")
        _LOG.debug("Using GitHub token from config")
        return token
