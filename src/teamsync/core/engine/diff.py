"""Structural diff between local and remote team definitions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from teamsync.core.contracts.organization import Organization, Team
from teamsync.core.contracts.sync import FieldDifference, PendingChange, TeamDiff


@dataclass(frozen=True)
class ComparisonMask:
    """Dotted field paths that a team comparison ignores."""

    paths: frozenset[str] = frozenset()

    @classmethod
    def of(cls, *paths: str) -> ComparisonMask:
        return cls(paths=frozenset(paths))

    def exclude_mapping(self) -> dict[str, Any]:
        """Translate the paths into a nested pydantic ``exclude`` mapping."""
        mapping: dict[str, Any] = {}
        for path in sorted(self.paths):
            node = mapping
            parts = path.split(".")
            for part in parts[:-1]:
                child = node.setdefault(part, {})
                if child is True:
                    break
                node = child
            else:
                node[parts[-1]] = True
        return mapping

    def apply(self, team: Team) -> dict[str, Any]:
        return team.model_dump(mode="json", exclude=self.exclude_mapping())


# The remote assigns the team ID and cannot report excluded members.
DEFAULT_MASK = ComparisonMask.of("id", "review_assignment.excluded_members")


def _field_differences(local: Mapping[str, Any], remote: Mapping[str, Any], prefix: str = "") -> list[FieldDifference]:
    differences: list[FieldDifference] = []
    for key in sorted(set(local).union(remote)):
        path = f"{prefix}.{key}" if prefix else key
        local_value = local.get(key)
        remote_value = remote.get(key)
        if isinstance(local_value, dict) and isinstance(remote_value, dict):
            differences.extend(_field_differences(local_value, remote_value, path))
        elif local_value != remote_value:
            differences.append(FieldDifference(path=path, local=local_value, remote=remote_value))
    return differences


def diff_team(team_name: str, local: Team, remote: Team | None, *, mask: ComparisonMask = DEFAULT_MASK) -> TeamDiff:
    """Compare one team; a missing remote team counts as the zero-value team."""
    upstream = remote if remote is not None else Team()
    differences = _field_differences(mask.apply(local), mask.apply(upstream))
    if not differences:
        return TeamDiff(team_name=team_name)

    local_members = set(local.members)
    remote_members = set(upstream.members)
    to_add = sorted(local_members - remote_members)
    to_remove = sorted(remote_members - local_members)
    change = PendingChange(to_add=to_add, to_remove=to_remove) if to_add or to_remove else None
    return TeamDiff(team_name=team_name, differences=differences, change=change)


def compute_changes(
    local: Organization,
    remote: Organization,
    *,
    mask: ComparisonMask = DEFAULT_MASK,
) -> dict[str, TeamDiff]:
    return {
        team_name: diff_team(team_name, local.teams[team_name], remote.teams.get(team_name), mask=mask)
        for team_name in sorted(local.teams)
    }


def pending_changes(diffs: Mapping[str, TeamDiff]) -> dict[str, PendingChange]:
    return {team_name: diff.change for team_name, diff in diffs.items() if diff.change is not None}


def apply_change(original: Iterable[str], to_add: Iterable[str], to_remove: Iterable[str]) -> list[str]:
    """Member list after a change, independent of whether the change reached the remote."""
    return sorted(set(original).union(to_add).difference(to_remove))


def format_change_summary(changes: Mapping[str, PendingChange]) -> str:
    lines = ["Going to submit the following changes:"]
    for team_name in sorted(changes):
        change = changes[team_name]
        lines.append(f" Team: {team_name}")
        lines.append(f"    Adding members: {', '.join(change.to_add) or 'none'}")
        lines.append(f"  Removing members: {', '.join(change.to_remove) or 'none'}")
    return "\n".join(lines)
