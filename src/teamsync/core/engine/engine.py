"""Reconciliation pipeline: fetch, project, diff, apply."""

from __future__ import annotations

import logging

from teamsync.core.contracts.exceptions import SyncError
from teamsync.core.contracts.organization import Organization
from teamsync.core.contracts.prompt import AlwaysConfirm, Confirmer
from teamsync.core.contracts.provider import TeamProvider
from teamsync.core.contracts.sync import ReconcileResult
from teamsync.core.engine.diff import DEFAULT_MASK, ComparisonMask, compute_changes, pending_changes
from teamsync.core.engine.executor import ChangeExecutor
from teamsync.core.engine.fetcher import DEFAULT_MAX_QUERIES, PaginatedFetcher
from teamsync.core.engine.projector import project_organization
from teamsync.core.engine.reporter import NullReconcileReporter, ReconcileReporter

_LOG = logging.getLogger(__name__)


class ReconcileEngine:
    def __init__(
        self,
        provider: TeamProvider,
        *,
        confirmer: Confirmer | None = None,
        reporter: ReconcileReporter | None = None,
        force: bool = False,
        dry_run: bool = False,
        mask: ComparisonMask = DEFAULT_MASK,
        max_queries: int = DEFAULT_MAX_QUERIES,
    ) -> None:
        self._provider = provider
        self._confirmer = confirmer
        self._reporter: ReconcileReporter = reporter or NullReconcileReporter()
        self._force = force
        self._dry_run = dry_run
        self._mask = mask
        self._max_queries = max_queries

    async def fetch_remote(self, organization: str) -> Organization:
        """Fetch the full remote snapshot; any query failure aborts the fetch."""
        fetched = await PaginatedFetcher(self._provider, max_queries=self._max_queries).fetch()
        return project_organization(organization, fetched)

    async def reconcile(self, local: Organization) -> ReconcileResult:
        confirmer = self._confirmer
        if confirmer is None:
            if not self._force:
                raise SyncError("a confirmer is required unless force is set")
            confirmer = AlwaysConfirm()

        remote = await self.fetch_remote(local.organization)

        diffs = compute_changes(local, remote, mask=self._mask)
        for diff in diffs.values():
            if diff.in_sync:
                continue
            _LOG.info("Local config out of sync with upstream for team %s", diff.team_name)
            self._reporter.team_out_of_sync(diff)
        changes = pending_changes(diffs)

        executor = ChangeExecutor(
            self._provider,
            confirmer=confirmer,
            reporter=self._reporter,
            force=self._force,
            dry_run=self._dry_run,
        )
        memberships = await executor.apply_memberships(local, changes)
        policies = await executor.apply_policies(local)

        return ReconcileResult(
            organization=local,
            changes=changes,
            applied_teams=memberships.succeeded,
            failed_teams=memberships.failed,
            policy_updated_teams=policies.succeeded,
            policy_failed_teams=policies.failed,
            unresolved_exclusions=policies.unresolved,
            dry_run=self._dry_run,
        )
