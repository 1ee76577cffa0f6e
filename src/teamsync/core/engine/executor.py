"""Confirm-and-apply passes for membership and review policy changes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from teamsync.core.contracts.exceptions import MemberLookupError, ProviderError
from teamsync.core.contracts.organization import Organization
from teamsync.core.contracts.prompt import Confirmer
from teamsync.core.contracts.provider import TeamProvider
from teamsync.core.contracts.sync import PendingChange, ReviewAssignmentUpdate
from teamsync.core.engine.diff import apply_change
from teamsync.core.engine.exclusions import resolve_excluded_members
from teamsync.core.engine.reporter import NullReconcileReporter, ReconcileReporter

_LOG = logging.getLogger(__name__)

MEMBERSHIP_PROMPT = "Continue?"
POLICY_PROMPT = "Do you want to update review assignment policies?"


@dataclass
class PassOutcome:
    organization: Organization
    confirmed: bool = False
    succeeded: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    unresolved: dict[str, list[str]] = field(default_factory=dict)


class ChangeExecutor:
    """Applies a reconciliation in two independently confirmed passes.

    Remote calls are issued one at a time. A failure on one team is reported
    and that team is skipped; the remaining teams are still processed. The
    in-memory organization is updated in place the same way whether or not
    ``dry_run`` is set.
    """

    def __init__(
        self,
        provider: TeamProvider,
        *,
        confirmer: Confirmer,
        reporter: ReconcileReporter | None = None,
        force: bool = False,
        dry_run: bool = False,
    ) -> None:
        self._provider = provider
        self._confirmer = confirmer
        self._reporter: ReconcileReporter = reporter or NullReconcileReporter()
        self._force = force
        self._dry_run = dry_run

    async def apply_memberships(
        self,
        organization: Organization,
        changes: Mapping[str, PendingChange],
    ) -> PassOutcome:
        outcome = PassOutcome(organization=organization)
        if not changes:
            return outcome

        self._reporter.changes_proposed(changes)
        if not await self._confirm(MEMBERSHIP_PROMPT):
            _LOG.info("Membership changes declined")
            return outcome
        outcome.confirmed = True

        for team_name in sorted(changes):
            change = changes[team_name]
            team = organization.teams.get(team_name)
            if team is None:
                error = MemberLookupError(f"unknown team {team_name!r}", missing=(team_name,))
                self._report_failure(outcome, team_name, "members", error)
                continue

            try:
                await self._sync_team_members(team_name, change)
            except ProviderError as exc:
                self._report_failure(outcome, team_name, "members", exc)
                continue

            team.members = apply_change(team.members, change.to_add, change.to_remove)
            outcome.succeeded.append(team_name)

        return outcome

    async def apply_policies(self, organization: Organization) -> PassOutcome:
        outcome = PassOutcome(organization=organization)
        if not await self._confirm(POLICY_PROMPT):
            _LOG.info("Review assignment policy updates declined")
            return outcome
        outcome.confirmed = True

        for team_name in sorted(organization.teams):
            team = organization.teams[team_name]
            if not team.id:
                error = ProviderError(f"team {team_name!r} has no remote id")
                self._report_failure(outcome, team_name, "review-assignment", error)
                continue
            policy = team.review_assignment
            resolution = resolve_excluded_members(
                team_name,
                organization.members,
                policy.excluded_members,
                organization.exclude_review_from_all_teams,
                team_members=team.members,
            )
            if resolution.unresolved:
                outcome.unresolved[team_name] = list(resolution.unresolved)
                for login in resolution.unresolved:
                    self._reporter.exclusion_unresolved(team_name, login)

            update = ReviewAssignmentUpdate(
                team_id=team.id,
                enabled=policy.enabled,
                algorithm=policy.algorithm,
                notify_team=policy.notify_team,
                team_member_count=policy.team_member_count,
                excluded_team_member_ids=list(resolution.member_ids),
            )
            self._reporter.policy_update(team_name, update, dry_run=self._dry_run)
            if not self._dry_run:
                try:
                    await self._provider.update_review_assignment(update)
                except ProviderError as exc:
                    self._report_failure(outcome, team_name, "review-assignment", exc)
                    continue
            outcome.succeeded.append(team_name)

        return outcome

    async def _sync_team_members(self, team_name: str, change: PendingChange) -> None:
        for login in change.to_add:
            self._reporter.member_change(team_name, login, action="add", dry_run=self._dry_run)
            if not self._dry_run:
                await self._provider.add_team_member(team_name, login)
        for login in change.to_remove:
            self._reporter.member_change(team_name, login, action="remove", dry_run=self._dry_run)
            if not self._dry_run:
                await self._provider.remove_team_member(team_name, login)

    async def _confirm(self, message: str) -> bool:
        if self._force:
            return True
        return await self._confirmer.confirm(message)

    def _report_failure(self, outcome: PassOutcome, team_name: str, phase: str, error: Exception) -> None:
        _LOG.error("Unable to sync %s of team %s: %s", phase, team_name, error)
        self._reporter.team_failed(team_name, phase, error)
        outcome.failed.append(team_name)
