"""Paginated retrieval of the remote team snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from teamsync.core.contracts.exceptions import ProviderError
from teamsync.core.contracts.provider import TeamProvider
from teamsync.core.contracts.remote import MemberRecord, MembersCursor, TeamRecord, TeamsCursor, TeamsPage

_LOG = logging.getLogger(__name__)

DEFAULT_MAX_QUERIES = 1000


@dataclass
class FetchedTeam:
    record: TeamRecord
    members: list[MemberRecord] = field(default_factory=list)


class PaginatedFetcher:
    """Walks the teams collection and, within each team, its members collection.

    The first member page of a team arrives embedded in the teams page. Any
    further member page is requested by re-issuing the query at the same teams
    cursor with an advanced members cursor, then locating the team by ID in
    the new response.
    """

    def __init__(self, provider: TeamProvider, *, max_queries: int = DEFAULT_MAX_QUERIES) -> None:
        self._provider = provider
        self._max_queries = max_queries
        self._queries = 0

    async def fetch(self) -> list[FetchedTeam]:
        self._queries = 0
        fetched: list[FetchedTeam] = []

        teams_cursor = TeamsCursor.start()
        page = await self._query(teams_cursor, MembersCursor.start())
        while True:
            for team in page.nodes:
                fetched.append(await self._expand_team(team, teams_cursor))

            if not page.page_info.has_next_page:
                break
            teams_cursor = teams_cursor.advance(page.page_info.end_cursor)
            page = await self._query(teams_cursor, MembersCursor.start())

        _LOG.debug("Fetched %d teams in %d queries", len(fetched), self._queries)
        return fetched

    async def _expand_team(self, team: TeamRecord, teams_cursor: TeamsCursor) -> FetchedTeam:
        entry = FetchedTeam(record=team)
        members_cursor = MembersCursor.start()
        members_page = team.members
        while True:
            entry.members.extend(members_page.nodes)
            if not members_page.page_info.has_next_page:
                return entry
            members_cursor = members_cursor.advance(members_page.page_info.end_cursor)
            requeried = await self._query(teams_cursor, members_cursor)
            members_page = requeried.with_id(team.id).members

    async def _query(self, teams: TeamsCursor, members: MembersCursor) -> TeamsPage:
        self._queries += 1
        if self._queries > self._max_queries:
            raise ProviderError("Team pagination exceeded safety budget.")
        _LOG.debug("Querying teams after=%r members after=%r", teams.after, members.after)
        return await self._provider.query_teams(teams, members)
