"""Reconciliation contracts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from teamsync.core.contracts.organization import Organization, ReviewAssignmentAlgorithm


class PendingChange(BaseModel):
    to_add: list[str] = Field(default_factory=list)
    to_remove: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_disjoint(self) -> PendingChange:
        overlap = set(self.to_add).intersection(self.to_remove)
        if overlap:
            raise ValueError(f"logins cannot be both added and removed: {sorted(overlap)}")
        return self

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


class FieldDifference(BaseModel):
    path: str
    local: Any = None
    remote: Any = None


class TeamDiff(BaseModel):
    team_name: str
    differences: list[FieldDifference] = Field(default_factory=list)
    change: PendingChange | None = None

    @property
    def in_sync(self) -> bool:
        return not self.differences


class ReviewAssignmentUpdate(BaseModel):
    """Payload of one ``updateTeamReviewAssignment`` mutation."""

    team_id: str
    enabled: bool
    algorithm: ReviewAssignmentAlgorithm | None = None
    notify_team: bool = False
    team_member_count: int = 0
    excluded_team_member_ids: list[str] = Field(default_factory=list)


class ReconcileResult(BaseModel):
    organization: Organization
    changes: dict[str, PendingChange] = Field(default_factory=dict)
    applied_teams: list[str] = Field(default_factory=list)
    failed_teams: list[str] = Field(default_factory=list)
    policy_updated_teams: list[str] = Field(default_factory=list)
    policy_failed_teams: list[str] = Field(default_factory=list)
    unresolved_exclusions: dict[str, list[str]] = Field(default_factory=dict)
    dry_run: bool = False
