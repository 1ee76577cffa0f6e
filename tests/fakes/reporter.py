"""Recording reporter and scripted confirmer fakes."""

from __future__ import annotations

from collections.abc import Mapping

from teamsync.core.contracts.exceptions import ConfirmationError
from teamsync.core.contracts.prompt import Confirmer
from teamsync.core.contracts.sync import PendingChange, ReviewAssignmentUpdate, TeamDiff
from teamsync.core.engine.reporter import ReconcileReporter


class RecordingReporter(ReconcileReporter):
    def __init__(self) -> None:
        self.events: list[tuple] = []

    def team_out_of_sync(self, diff: TeamDiff) -> None:
        self.events.append(("out_of_sync", diff.team_name))

    def changes_proposed(self, changes: Mapping[str, PendingChange]) -> None:
        self.events.append(("proposed", sorted(changes)))

    def member_change(self, team_name: str, login: str, *, action: str, dry_run: bool) -> None:
        self.events.append(("member", team_name, login, action, dry_run))

    def policy_update(self, team_name: str, update: ReviewAssignmentUpdate, *, dry_run: bool) -> None:
        self.events.append(("policy", team_name, dry_run))

    def exclusion_unresolved(self, team_name: str, login: str) -> None:
        self.events.append(("unresolved", team_name, login))

    def team_failed(self, team_name: str, phase: str, error: BaseException) -> None:
        self.events.append(("failed", team_name, phase))

    def of_kind(self, kind: str) -> list[tuple]:
        return [event for event in self.events if event[0] == kind]


class ScriptedConfirmer(Confirmer):
    """Answers prompts from a fixed list; ``None`` simulates an aborted prompt."""

    def __init__(self, *answers: bool | None) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    async def confirm(self, message: str) -> bool:
        self.prompts.append(message)
        if not self._answers:
            raise AssertionError(f"unexpected prompt: {message}")
        answer = self._answers.pop(0)
        if answer is None:
            raise ConfirmationError("prompt aborted")
        return answer
