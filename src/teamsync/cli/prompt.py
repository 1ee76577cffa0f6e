"""Interactive confirmation backed by questionary."""

from __future__ import annotations

import questionary

from teamsync.core.contracts.exceptions import ConfirmationError
from teamsync.core.contracts.prompt import Confirmer


class QuestionaryConfirmer(Confirmer):
    def __init__(self, *, default: bool = False) -> None:
        self._default = default

    async def confirm(self, message: str) -> bool:
        answer = await questionary.confirm(message, default=self._default).ask_async()
        if answer is None:
            raise ConfirmationError(f"no answer to prompt: {message}")
        return bool(answer)
