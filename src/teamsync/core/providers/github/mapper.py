"""Mapping helpers between GitHub addressing and domain values."""

from __future__ import annotations

import re

from teamsync.core.contracts.sync import ReviewAssignmentUpdate

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Return the slug GitHub derives from a team name.

    This is a simplified version of GitHub's own transformation, which also
    folds accented characters (``ä`` becomes ``a``).
    """
    return _NON_SLUG_RE.sub("-", name.lower()).strip("-")


def graphql_url(api_url: str) -> str:
    """GraphQL endpoint for a REST API base URL (github.com or Enterprise Server)."""
    base = api_url.rstrip("/")
    if base.endswith("/api/v3"):
        return base[: -len("/v3")] + "/graphql"
    return f"{base}/graphql"


def review_assignment_input(update: ReviewAssignmentUpdate) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": update.team_id,
        "enabled": update.enabled,
        "notifyTeam": update.notify_team,
        "teamMemberCount": update.team_member_count,
        "excludedTeamMemberIds": list(update.excluded_team_member_ids),
    }
    if update.algorithm is not None:
        payload["algorithm"] = update.algorithm.value
    return payload
