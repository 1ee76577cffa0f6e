"""Auth resolver interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenResolver(ABC):
    """Source of the GitHub token used by the provider."""

    @abstractmethod
    async def resolve(self) -> str:
        """Return a non-empty token.

        Raises:
            AuthenticationError: If the source has no usable token.
        """
