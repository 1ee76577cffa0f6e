"""Shared test fixtures for teamsync tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from teamsync.core.contracts.config import TeamSyncConfig
from teamsync.core.contracts.organization import (
    ExcludedMember,
    Member,
    Organization,
    ReviewAssignmentAlgorithm,
    ReviewAssignmentPolicy,
    Team,
)
from tests.fakes.provider import FakeTeam, FakeTeamProvider


@pytest.fixture
def directory() -> dict[str, Member]:
    """Member directory with four users."""
    return {
        "a": Member(id="MDQ6VXNlcjE=", name="Ada"),
        "b": Member(id="MDQ6VXNlcjI=", name="Bob"),
        "c": Member(id="MDQ6VXNlcjM=", name="Cy"),
        "d": Member(id="MDQ6VXNlcjQ=", name="Dee"),
    }


@pytest.fixture
def local_org(directory: dict[str, Member]) -> Organization:
    """Local model: ``ops`` wants a and b, ``dev`` matches remote."""
    return Organization(
        organization="acme",
        teams={
            "ops": Team(
                id="T_ops",
                members=["b", "a"],
                review_assignment=ReviewAssignmentPolicy(
                    enabled=True,
                    algorithm=ReviewAssignmentAlgorithm.LOAD_BALANCE,
                    notify_team=True,
                    team_member_count=1,
                    excluded_members=[ExcludedMember(login="b", reason="on leave")],
                ),
            ),
            "dev": Team(id="T_dev", members=["c", "d"]),
        },
        members=dict(directory),
    )


@pytest.fixture
def remote_provider() -> FakeTeamProvider:
    """Remote state: ``ops`` has b and c, ``dev`` has c and d."""
    return FakeTeamProvider(
        [
            FakeTeam(
                id="T_dev",
                name="dev",
                members=[("c", "MDQ6VXNlcjM="), ("d", "MDQ6VXNlcjQ=")],
            ),
            FakeTeam(
                id="T_ops",
                name="ops",
                members=[("b", "MDQ6VXNlcjI="), ("c", "MDQ6VXNlcjM=")],
                review_enabled=True,
                review_algorithm="LOAD_BALANCE",
                review_member_count=1,
                review_notify=True,
            ),
        ]
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "teamsync.json"
    path.write_text(json.dumps({"organization": "acme", "auth": "env"}), encoding="utf-8")
    return path


@pytest.fixture
def sample_config(tmp_path: Path) -> TeamSyncConfig:
    return TeamSyncConfig(organization="acme", auth="env", state_path=tmp_path / "team-assignments.json")
