"""Projection of fetched remote records onto the local organization model."""

from __future__ import annotations

from collections.abc import Iterable

from teamsync.core.contracts.exceptions import ProviderError
from teamsync.core.contracts.organization import (
    Member,
    Organization,
    ReviewAssignmentAlgorithm,
    ReviewAssignmentPolicy,
    Team,
)
from teamsync.core.contracts.remote import TeamRecord
from teamsync.core.engine.fetcher import FetchedTeam


def project_policy(record: TeamRecord) -> ReviewAssignmentPolicy:
    """Build the review policy the remote reports; excluded members are never reported."""
    if not record.review_request_delegation_enabled:
        return ReviewAssignmentPolicy()

    algorithm: ReviewAssignmentAlgorithm | None = None
    if record.review_request_delegation_algorithm:
        try:
            algorithm = ReviewAssignmentAlgorithm(record.review_request_delegation_algorithm)
        except ValueError as exc:
            raise ProviderError(
                f"Unknown review assignment algorithm {record.review_request_delegation_algorithm!r} "
                f"for team {record.name!r}"
            ) from exc

    return ReviewAssignmentPolicy(
        enabled=True,
        algorithm=algorithm,
        notify_team=record.review_request_delegation_notify_team,
        team_member_count=record.review_request_delegation_member_count or 0,
    )


def project_organization(organization: str, fetched: Iterable[FetchedTeam]) -> Organization:
    projected = Organization(organization=organization)
    for entry in fetched:
        logins: list[str] = []
        for member in entry.members:
            logins.append(member.login)
            projected.members[member.login] = Member(id=member.id, name=member.name or "")
        projected.teams[entry.record.name] = Team(
            id=entry.record.id,
            members=logins,
            review_assignment=project_policy(entry.record),
        )
    return projected
