"""SDK composition root for teamsync."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from teamsync.core.auth import create_token_resolver
from teamsync.core.contracts.config import TeamSyncConfig
from teamsync.core.contracts.exceptions import ConfigError, SyncError
from teamsync.core.contracts.organization import Organization, Team
from teamsync.core.contracts.prompt import Confirmer
from teamsync.core.contracts.provider import TeamProvider
from teamsync.core.contracts.sync import ReconcileResult
from teamsync.core.engine import ReconcileEngine
from teamsync.core.engine.reporter import ReconcileReporter
from teamsync.core.providers.github import GitHubProvider
from teamsync.core.state import load_state, store_state

_LOG = logging.getLogger(__name__)


def output_state_path(*, config: TeamSyncConfig, dry_run: bool) -> Path:
    if not dry_run:
        return config.state_path
    return Path(f"{config.state_path}.dry-run")


class TeamSync:
    """teamsync SDK public API."""

    def __init__(
        self,
        *,
        config: TeamSyncConfig,
        provider: TeamProvider | None = None,
        reporter: ReconcileReporter | None = None,
    ) -> None:
        self._config = config
        self._provider = provider
        self._reporter = reporter

    @classmethod
    async def from_config(
        cls,
        config: TeamSyncConfig,
        *,
        reporter: ReconcileReporter | None = None,
    ) -> TeamSync:
        return cls(config=config, reporter=reporter)

    @property
    def config(self) -> TeamSyncConfig:
        return self._config

    def load_state(self) -> Organization:
        organization = load_state(self._config.state_path)
        if organization.organization != self._config.organization:
            raise ConfigError(
                f"state file {self._config.state_path} describes organization {organization.organization!r}, "
                f"config expects {self._config.organization!r}"
            )
        return organization

    def store_state(self, organization: Organization, *, dry_run: bool = False) -> Path:
        path = output_state_path(config=self._config, dry_run=dry_run)
        store_state(path, organization)
        return path

    async def sync(
        self,
        organization: Organization | None = None,
        *,
        force: bool = False,
        dry_run: bool = False,
        confirmer: Confirmer | None = None,
    ) -> ReconcileResult:
        """Reconcile the remote organization with *organization* (or the stored state)."""
        local = organization if organization is not None else self.load_state()
        if confirmer is None and not force:
            raise SyncError("a confirmer is required unless force is set")

        provider = await self._resolve_provider()
        async with provider:
            engine = ReconcileEngine(
                provider,
                confirmer=confirmer,
                reporter=self._reporter,
                force=force,
                dry_run=dry_run,
            )
            return await engine.reconcile(local)

    async def pull(self) -> Organization:
        """Fetch the remote organization as a fresh local model, without excluded members."""
        provider = await self._resolve_provider()
        async with provider:
            return await ReconcileEngine(provider).fetch_remote(self._config.organization)

    async def add_teams(self, organization: Organization, slugs: Iterable[str]) -> Organization:
        """Add teams, looked up by slug, to the local model with their remote IDs."""
        provider = await self._resolve_provider()
        async with provider:
            for slug in slugs:
                ref = await provider.get_team_by_slug(slug)
                if ref.name in organization.teams:
                    raise SyncError(f"team {ref.name!r} already exists")
                _LOG.info("Adding team %s (%s) to local config", ref.name, ref.id)
                organization.teams[ref.name] = Team(id=ref.id)
        return organization

    async def _resolve_provider(self) -> TeamProvider:
        if self._provider is not None:
            return self._provider
        token = await create_token_resolver(self._config).resolve()
        return GitHubProvider(organization=self._config.organization, token=token, api_url=self._config.api_url)
