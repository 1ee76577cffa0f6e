"""Remote query contracts: page records and pagination cursors.

Nested pagination keeps one cursor per collection. The members cursor scopes
the team currently being expanded, so it has to go back to the start every
time the teams cursor moves.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from teamsync.core.contracts.exceptions import ProviderError


@dataclass(frozen=True)
class TeamsCursor:
    after: str | None = None

    @classmethod
    def start(cls) -> TeamsCursor:
        return cls()

    def advance(self, end_cursor: str | None) -> TeamsCursor:
        return TeamsCursor(after=end_cursor)


@dataclass(frozen=True)
class MembersCursor:
    after: str | None = None

    @classmethod
    def start(cls) -> MembersCursor:
        return cls()

    def advance(self, end_cursor: str | None) -> MembersCursor:
        return MembersCursor(after=end_cursor)


class _RemoteModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class PageInfo(_RemoteModel):
    end_cursor: str | None = Field(default=None, alias="endCursor")
    has_next_page: bool = Field(default=False, alias="hasNextPage")


class MemberRecord(_RemoteModel):
    id: str
    login: str
    name: str | None = None


class MembersPage(_RemoteModel):
    nodes: list[MemberRecord] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")


class TeamRecord(_RemoteModel):
    id: str
    name: str
    members: MembersPage = Field(default_factory=MembersPage)
    review_request_delegation_enabled: bool = Field(default=False, alias="reviewRequestDelegationEnabled")
    review_request_delegation_algorithm: str | None = Field(default=None, alias="reviewRequestDelegationAlgorithm")
    review_request_delegation_member_count: int | None = Field(
        default=None, alias="reviewRequestDelegationMemberCount"
    )
    review_request_delegation_notify_team: bool = Field(default=False, alias="reviewRequestDelegationNotifyTeam")


class TeamsPage(_RemoteModel):
    nodes: list[TeamRecord] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")

    def with_id(self, team_id: str) -> TeamRecord:
        for node in self.nodes:
            if node.id == team_id:
                return node
        raise ProviderError(f"team with id {team_id!r} not found")


class TeamRef(_RemoteModel):
    """A team resolved by slug."""

    id: str = Field(alias="node_id")
    name: str
    slug: str
