"""Resolution of review-assignment exclusions to member IDs."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass

from teamsync.core.contracts.organization import ExcludedMember, Member

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExclusionResolution:
    member_ids: tuple[str, ...] = ()
    unresolved: tuple[str, ...] = ()


def resolve_excluded_members(
    team_name: str,
    directory: Mapping[str, Member],
    per_team: Iterable[ExcludedMember],
    org_wide: Iterable[str],
    *,
    team_members: Collection[str] | None = None,
) -> ExclusionResolution:
    """Return the member IDs to exclude from review assignment for *team_name*.

    Per-team exclusions must resolve through *directory*; misses are logged
    and returned in ``unresolved``. Organization-wide exclusions only apply
    where they can: logins missing from the directory, or not in
    *team_members* when given, are skipped silently. Passing *team_members*
    therefore narrows an organization-wide exclusion to the teams the login
    actually belongs to; without it every team gets the exclusion.
    """
    member_ids: set[str] = set()
    unresolved: list[str] = []

    for excluded in per_team:
        member = directory.get(excluded.login)
        if member is None:
            _LOG.error(
                "user %r from team %s not found in the list of organization members",
                excluded.login,
                team_name,
            )
            unresolved.append(excluded.login)
            continue
        member_ids.add(member.id)

    for login in org_wide:
        if team_members is not None and login not in team_members:
            continue
        member = directory.get(login)
        if member is None:
            continue
        member_ids.add(member.id)

    return ExclusionResolution(member_ids=tuple(sorted(member_ids)), unresolved=tuple(unresolved))
