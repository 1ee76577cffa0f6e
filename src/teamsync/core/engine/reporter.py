"""Reporting protocol for the reconciliation pipeline.

This is engine-level instrumentation, not a provider contract. The engine
emits operator-facing events; consumers (e.g. the CLI's Rich console)
implement ``ReconcileReporter`` to render them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from teamsync.core.contracts.sync import PendingChange, ReviewAssignmentUpdate, TeamDiff


class ReconcileReporter(ABC):
    """Observer interface for reconciliation events."""

    @abstractmethod
    def team_out_of_sync(self, diff: TeamDiff) -> None:
        """The local definition of ``diff.team_name`` differs from the remote one."""
        ...  # pragma: no cover

    @abstractmethod
    def changes_proposed(self, changes: Mapping[str, PendingChange]) -> None:
        """The membership change set is about to be confirmed."""
        ...  # pragma: no cover

    @abstractmethod
    def member_change(self, team_name: str, login: str, *, action: str, dry_run: bool) -> None:
        """A member is being added to (``action="add"``) or removed from (``"remove"``) a team."""
        ...  # pragma: no cover

    @abstractmethod
    def policy_update(self, team_name: str, update: ReviewAssignmentUpdate, *, dry_run: bool) -> None:
        """A review assignment policy is being submitted."""
        ...  # pragma: no cover

    @abstractmethod
    def exclusion_unresolved(self, team_name: str, login: str) -> None:
        """An excluded login of *team_name* is missing from the member directory."""
        ...  # pragma: no cover

    @abstractmethod
    def team_failed(self, team_name: str, phase: str, error: BaseException) -> None:
        """Applying *phase* to *team_name* failed; the run continues with other teams."""
        ...  # pragma: no cover


class NullReconcileReporter(ReconcileReporter):
    """No-op implementation used when no reporting is requested."""

    def team_out_of_sync(self, diff: TeamDiff) -> None:
        pass

    def changes_proposed(self, changes: Mapping[str, PendingChange]) -> None:
        pass

    def member_change(self, team_name: str, login: str, *, action: str, dry_run: bool) -> None:
        pass

    def policy_update(self, team_name: str, update: ReviewAssignmentUpdate, *, dry_run: bool) -> None:
        pass

    def exclusion_unresolved(self, team_name: str, login: str) -> None:
        pass

    def team_failed(self, team_name: str, phase: str, error: BaseException) -> None:
        pass
