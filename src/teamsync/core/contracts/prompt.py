"""Confirmation contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Confirmer(ABC):
    """Asks the operator a yes/no question."""

    @abstractmethod
    async def confirm(self, message: str) -> bool:
        """Return the operator's answer to *message*.

        Raises:
            ConfirmationError: If no answer could be obtained.
        """
        ...  # pragma: no cover


class AlwaysConfirm(Confirmer):
    """Answers yes without asking; used for forced runs."""

    async def confirm(self, message: str) -> bool:
        return True
