"""Token lookup through the GitHub CLI's stored credentials."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from teamsync.core.auth.base import TokenResolver
from teamsync.core.contracts.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class GhCliTokenResolver(TokenResolver):
    """Runs ``gh auth token`` for ``hostname``.

    Team administration needs the ``admin:org`` scope, which ``gh`` only
    grants after ``gh auth refresh --scopes admin:org``.
    """

    hostname: str = "github.com"
    executable: str = "gh"

    async def resolve(self) -> str:
        returncode, stdout, stderr = await self._run("auth", "token", "--hostname", self.hostname)
        if returncode != 0:
            reason = stderr or f"exit status {returncode}"
            raise AuthenticationError(f"gh auth token failed for host {self.hostname}: {reason}")
        if not stdout:
            raise AuthenticationError(f"gh auth token returned an empty token for host {self.hostname}")

        _LOG.debug("Using GitHub token from gh CLI for host %s", self.hostname)
        return stdout

    async def _run(self, *args: str) -> tuple[int | None, str, str]:
        try:
            process = await asyncio.create_subprocess_exec(
                self.executable,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise AuthenticationError(f"cannot run {self.executable!r}: {exc}") from exc

        stdout, stderr = await process.communicate()
        return (
            process.returncode,
            stdout.decode(errors="replace").strip(),
            stderr.decode(errors="replace").strip(),
        )
