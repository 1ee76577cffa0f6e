"""Organization model contracts.

The same shapes describe both the local declarative state and the projection
of the remote state, so the two can be compared structurally.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class ReviewAssignmentAlgorithm(StrEnum):
    ROUND_ROBIN = "ROUND_ROBIN"
    LOAD_BALANCE = "LOAD_BALANCE"


class ExcludedMember(BaseModel):
    login: str
    reason: str | None = None


class ReviewAssignmentPolicy(BaseModel):
    """Automatic reviewer delegation settings for a team.

    ``excluded_members`` has no read API on the remote side; it only ever
    comes from the local model.
    """

    enabled: bool = False
    algorithm: ReviewAssignmentAlgorithm | None = None
    notify_team: bool = False
    team_member_count: int = 0
    excluded_members: list[ExcludedMember] = Field(default_factory=list)


class Team(BaseModel):
    id: str = ""
    members: list[str] = Field(default_factory=list)
    review_assignment: ReviewAssignmentPolicy = Field(default_factory=ReviewAssignmentPolicy)

    model_config = {"validate_assignment": True}

    @field_validator("members")
    @classmethod
    def normalize_members(cls, value: list[str]) -> list[str]:
        return sorted(set(value))


class Member(BaseModel):
    id: str
    name: str = ""


class Organization(BaseModel):
    organization: str
    teams: dict[str, Team] = Field(default_factory=dict)
    members: dict[str, Member] = Field(default_factory=dict)
    exclude_review_from_all_teams: list[str] = Field(default_factory=list)
