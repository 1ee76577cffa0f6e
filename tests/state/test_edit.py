from __future__ import annotations

import pytest

from teamsync.core.contracts.exceptions import MemberLookupError
from teamsync.core.contracts.organization import Member, Organization, Team
from teamsync.core.state import add_team_members, find_members, set_team_members


@pytest.fixture
def organization() -> Organization:
    return Organization(
        organization="acme",
        teams={"ops": Team(id="T1", members=["amy"])},
        members={
            "amy": Member(id="U1", name="Amy Pond"),
            "Rory": Member(id="U2", name="Rory Williams"),
            "river": Member(id="U3", name="Song"),
            "oswin": Member(id="U4", name="Song"),
        },
    )


def test_find_members_by_login_case_and_name(organization: Organization) -> None:
    assert find_members(organization, ["amy", "rory", "amy pond"]) == ["amy", "Rory", "amy"]


def test_find_members_rejects_ambiguous_display_name(organization: Organization) -> None:
    with pytest.raises(MemberLookupError) as exc_info:
        find_members(organization, ["Doctor", "amy", "Song"])

    assert exc_info.value.missing == ("Doctor", "Song")


def test_login_match_is_case_insensitive(organization: Organization) -> None:
    assert find_members(organization, ["AMY", "RIVER"]) == ["amy", "river"]


def test_set_team_members_replaces_membership(organization: Organization) -> None:
    team = set_team_members(organization, "ops", ["Rory Williams", "river"])

    assert team.members == ["Rory", "river"]
    assert organization.teams["ops"] is team


def test_set_team_members_unknown_user_leaves_team_untouched(organization: Organization) -> None:
    with pytest.raises(MemberLookupError):
        set_team_members(organization, "ops", ["ghost"])

    assert organization.teams["ops"].members == ["amy"]


def test_add_team_members_merges(organization: Organization) -> None:
    team = add_team_members(organization, "ops", ["rory", "amy"])

    assert team.members == ["Rory", "amy"]


def test_unknown_team_raises(organization: Organization) -> None:
    with pytest.raises(MemberLookupError, match="unknown team") as exc_info:
        add_team_members(organization, "dev", ["amy"])

    assert exc_info.value.missing == ("dev",)
