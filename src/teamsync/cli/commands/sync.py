"""Sync command."""

from __future__ import annotations

import argparse
from pathlib import Path

from teamsync.cli.common import format_comma_or_none, format_team_count
from teamsync.cli.prompt import QuestionaryConfirmer
from teamsync.cli.reporting import RichReconcileReporter
from teamsync.core.config import load_config
from teamsync.core.contracts.sync import ReconcileResult
from teamsync.sdk import TeamSync


def format_sync_summary(result: ReconcileResult, state_path: Path) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    lines = [
        "",
        f"teamsync - sync complete ({mode})",
        "",
        f"  Organization: {result.organization.organization}",
        f"  Teams:        {format_team_count(len(result.organization.teams))}",
    ]
    if result.changes:
        lines.append(f"  Membership:   {format_team_count(len(result.applied_teams))} updated")
    else:
        lines.append("  Membership:   all teams up to date")
    if result.failed_teams:
        lines.append(f"  Failed:       {format_comma_or_none(result.failed_teams)}")
    if result.policy_updated_teams or result.policy_failed_teams:
        lines.append(f"  Policies:     {format_team_count(len(result.policy_updated_teams))} updated")
    if result.policy_failed_teams:
        lines.append(f"  Failed:       {format_comma_or_none(result.policy_failed_teams)}")
    for team_name, logins in sorted(result.unresolved_exclusions.items()):
        lines.append(f"  Unresolved:   {team_name}: {format_comma_or_none(logins)}")

    lines.append("")
    lines.append(f"  State:        {state_path}")
    if result.dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")
    lines.append("")
    return "\n".join(lines)


async def run_sync(args: argparse.Namespace) -> ReconcileResult:
    config = load_config(args.config)
    ts = await TeamSync.from_config(config, reporter=RichReconcileReporter())

    result = await ts.sync(force=args.force, dry_run=args.dry_run, confirmer=QuestionaryConfirmer())
    state_path = ts.store_state(result.organization, dry_run=args.dry_run)

    print(format_sync_summary(result, state_path))
    return result


__all__ = ["format_sync_summary", "run_sync"]
