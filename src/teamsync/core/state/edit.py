"""Edits of the local organization model."""

from __future__ import annotations

from collections.abc import Iterable

from teamsync.core.contracts.exceptions import MemberLookupError
from teamsync.core.contracts.organization import Organization, Team


def find_members(organization: Organization, users: Iterable[str]) -> list[str]:
    """Resolve each user, given by login or display name, to a directory login.

    Logins match exactly first, then case-insensitively; display names match
    case-insensitively and must be unambiguous.
    """
    by_lower_login = {login.lower(): login for login in organization.members}
    by_name: dict[str, list[str]] = {}
    for login, member in organization.members.items():
        if member.name:
            by_name.setdefault(member.name.lower(), []).append(login)

    found: list[str] = []
    missing: list[str] = []
    for user in users:
        if user in organization.members:
            found.append(user)
        elif user.lower() in by_lower_login:
            found.append(by_lower_login[user.lower()])
        elif len(by_name.get(user.lower(), [])) == 1:
            found.append(by_name[user.lower()][0])
        else:
            missing.append(user)

    if missing:
        raise MemberLookupError(
            f"users not found in the organization members: {', '.join(missing)}",
            missing=tuple(missing),
        )
    return found


def _require_team(organization: Organization, team_name: str) -> Team:
    team = organization.teams.get(team_name)
    if team is None:
        raise MemberLookupError(f"unknown team {team_name!r}", missing=(team_name,))
    return team


def set_team_members(organization: Organization, team_name: str, users: Iterable[str]) -> Team:
    members = find_members(organization, users)
    team = _require_team(organization, team_name)
    team.members = members
    return team


def add_team_members(organization: Organization, team_name: str, users: Iterable[str]) -> Team:
    team = _require_team(organization, team_name)
    return set_team_members(organization, team_name, [*team.members, *users])
