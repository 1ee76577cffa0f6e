"""Rich-based reconciliation reporter."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.console import Console
from rich.markup import escape

from teamsync.cli.common import format_comma_or_none
from teamsync.core.contracts.sync import PendingChange, ReviewAssignmentUpdate, TeamDiff
from teamsync.core.engine.reporter import ReconcileReporter


def _render_value(value: Any) -> str:
    if isinstance(value, list):
        return format_comma_or_none([str(item) for item in value])
    if value is None:
        return "unset"
    return str(value)


class RichReconcileReporter(ReconcileReporter):
    """Prints reconciliation events to the terminal.

    Progress lines go to stdout; per-team failures go to stderr.
    """

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self._console = console or Console()
        self._error_console = error_console or Console(stderr=True)

    def team_out_of_sync(self, diff: TeamDiff) -> None:
        self._console.print(f"[yellow]Local config out of sync with upstream:[/] {escape(diff.team_name)}")
        for difference in diff.differences:
            self._console.print(
                f"  {escape(difference.path)}: "
                f"local={escape(_render_value(difference.local))} "
                f"remote={escape(_render_value(difference.remote))}"
            )

    def changes_proposed(self, changes: Mapping[str, PendingChange]) -> None:
        self._console.print("Going to submit the following changes:")
        for team_name in sorted(changes):
            change = changes[team_name]
            self._console.print(f" Team: [bold]{escape(team_name)}[/]")
            self._console.print(f"    Adding members: {escape(format_comma_or_none(change.to_add))}")
            self._console.print(f"  Removing members: {escape(format_comma_or_none(change.to_remove))}")

    def member_change(self, team_name: str, login: str, *, action: str, dry_run: bool) -> None:
        prefix = "[dim]\\[dry-run][/] " if dry_run else ""
        if action == "add":
            self._console.print(f"{prefix}Adding member {escape(login)} to team {escape(team_name)}")
        else:
            self._console.print(f"{prefix}Removing member {escape(login)} from team {escape(team_name)}")

    def policy_update(self, team_name: str, update: ReviewAssignmentUpdate, *, dry_run: bool) -> None:
        prefix = "[dim]\\[dry-run][/] " if dry_run else ""
        excluded = len(update.excluded_team_member_ids)
        self._console.print(
            f"{prefix}Updating review assignment of team {escape(team_name)} ({excluded} excluded members)"
        )

    def exclusion_unresolved(self, team_name: str, login: str) -> None:
        self._error_console.print(
            f"[red]\\[ERROR][/] user {escape(login)!r} from team {escape(team_name)}, "
            "not found in the list of organization members"
        )

    def team_failed(self, team_name: str, phase: str, error: BaseException) -> None:
        self._error_console.print(
            f"[red]\\[ERROR][/] Unable to sync {escape(phase)} of team {escape(team_name)}: {escape(str(error))}"
        )
