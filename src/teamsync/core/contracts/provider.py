"""Provider adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from teamsync.core.contracts.remote import MembersCursor, TeamRef, TeamsCursor, TeamsPage
from teamsync.core.contracts.sync import ReviewAssignmentUpdate


class TeamProvider(ABC):
    @abstractmethod
    async def __aenter__(self) -> TeamProvider: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def query_teams(self, teams: TeamsCursor, members: MembersCursor) -> TeamsPage: ...  # pragma: no cover

    @abstractmethod
    async def get_team_by_slug(self, slug: str) -> TeamRef: ...  # pragma: no cover

    @abstractmethod
    async def add_team_member(self, team_name: str, login: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def remove_team_member(self, team_name: str, login: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def update_review_assignment(self, update: ReviewAssignmentUpdate) -> None: ...  # pragma: no cover
