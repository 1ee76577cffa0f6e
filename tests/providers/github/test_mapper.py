from __future__ import annotations

import pytest

from teamsync.core.contracts.sync import ReviewAssignmentUpdate
from teamsync.core.providers.github.mapper import graphql_url, review_assignment_input, slugify


@pytest.mark.parametrize(
    ("name", "slug"),
    [
        ("ops", "ops"),
        ("Platform Ops", "platform-ops"),
        ("  Front/End Team!! ", "front-end-team"),
        ("core_infra", "core-infra"),
        ("Team 42", "team-42"),
    ],
)
def test_slugify(name: str, slug: str) -> None:
    assert slugify(name) == slug


@pytest.mark.parametrize(
    ("api_url", "expected"),
    [
        ("https://api.github.com", "https://api.github.com/graphql"),
        ("https://api.github.com/", "https://api.github.com/graphql"),
        ("https://ghe.example.com/api/v3", "https://ghe.example.com/api/graphql"),
    ],
)
def test_graphql_url(api_url: str, expected: str) -> None:
    assert graphql_url(api_url) == expected


def test_review_assignment_input_omits_unset_algorithm() -> None:
    payload = review_assignment_input(ReviewAssignmentUpdate(team_id="T1", enabled=False))

    assert payload == {
        "id": "T1",
        "enabled": False,
        "notifyTeam": False,
        "teamMemberCount": 0,
        "excludedTeamMemberIds": [],
    }
