"""GitHub provider adapter."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError

from teamsync.core.contracts.exceptions import AuthenticationError, ProviderError
from teamsync.core.contracts.provider import TeamProvider
from teamsync.core.contracts.remote import MembersCursor, TeamRef, TeamsCursor, TeamsPage
from teamsync.core.contracts.sync import ReviewAssignmentUpdate
from teamsync.core.providers.github import queries
from teamsync.core.providers.github.mapper import graphql_url, review_assignment_input, slugify

_LOG = logging.getLogger(__name__)


class GitHubProvider(TeamProvider):
    """Team queries over GraphQL, membership mutations over REST.

    Calls are never retried here: a failed call surfaces as ``ProviderError``
    and the caller decides what to abandon.
    """

    def __init__(
        self,
        *,
        organization: str,
        token: str,
        api_url: str = "https://api.github.com",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._organization = organization
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._graphql_url = graphql_url(self._api_url)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GitHubProvider:
        await self._open_transport()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def query_teams(self, teams: TeamsCursor, members: MembersCursor) -> TeamsPage:
        data = await self._graphql(
            queries.QUERY_TEAMS,
            {
                "organization": self._organization,
                "teamsCursor": teams.after,
                "membersCursor": members.after,
            },
        )
        organization = self._require_dict(data, "organization")
        teams_payload = self._require_dict(organization, "teams")
        try:
            return TeamsPage.model_validate(teams_payload)
        except ValidationError as exc:
            raise ProviderError(f"Invalid teams page shape: {exc}") from exc

    async def get_team_by_slug(self, slug: str) -> TeamRef:
        response = await self._request("GET", f"/orgs/{self._organization}/teams/{slug}")
        try:
            return TeamRef.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ProviderError(f"Invalid team payload for slug {slug!r}") from exc

    async def add_team_member(self, team_name: str, login: str) -> None:
        _LOG.debug("Adding member %s to team %s", login, team_name)
        await self._request(
            "PUT",
            f"/orgs/{self._organization}/teams/{slugify(team_name)}/memberships/{login}",
            json={"role": "member"},
        )

    async def remove_team_member(self, team_name: str, login: str) -> None:
        _LOG.debug("Removing member %s from team %s", login, team_name)
        await self._request("DELETE", f"/orgs/{self._organization}/teams/{slugify(team_name)}/memberships/{login}")

    async def update_review_assignment(self, update: ReviewAssignmentUpdate) -> None:
        if not update.team_id:
            raise ProviderError("Cannot update review assignment of a team without a remote id")
        data = await self._graphql(
            queries.UPDATE_TEAM_REVIEW_ASSIGNMENT,
            {"input": review_assignment_input(update)},
        )
        self._require_dict(data, "updateTeamReviewAssignment")

    async def _open_transport(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self._api_url,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Accept": "application/vnd.github+json",
                "User-Agent": "teamsync",
            },
            timeout=httpx.Timeout(30.0),
            transport=self._transport,
        )

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise ProviderError("Provider is not initialized. Use 'async with'.")
        return self._client

    async def _request(self, method: str, url: str, *, json: Any = None) -> httpx.Response:
        client = self._require_client()
        try:
            response = await client.request(method, url, json=json)
        except httpx.TransportError as exc:
            raise ProviderError(f"GitHub request failed: {method} {url}: {exc}") from exc

        if response.status_code == 401:
            raise AuthenticationError(f"GitHub rejected the token for {method} {url}")
        if response.is_error:
            raise ProviderError(f"GitHub returned HTTP {response.status_code} for {method} {url}: {response.text}")
        return response

    async def _graphql(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        response = await self._request("POST", self._graphql_url, json={"query": query, "variables": variables})
        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("GraphQL response is not valid JSON") from exc

        errors = payload.get("errors", []) if isinstance(payload, dict) else []
        if errors:
            raise ProviderError(f"GraphQL returned errors: {errors}")

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise ProviderError("GraphQL response missing data payload")
        return data

    @staticmethod
    def _require_dict(data: dict[str, Any], key: str) -> dict[str, Any]:
        value = data.get(key)
        if not isinstance(value, dict):
            raise ProviderError(f"Missing/invalid object at key '{key}'")
        return value
