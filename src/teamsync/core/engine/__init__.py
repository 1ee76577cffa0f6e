"""Core engine-domain exports."""

from .diff import DEFAULT_MASK, ComparisonMask, apply_change, compute_changes, diff_team, pending_changes
from .engine import ReconcileEngine
from .exclusions import ExclusionResolution, resolve_excluded_members
from .executor import ChangeExecutor, PassOutcome
from .fetcher import FetchedTeam, PaginatedFetcher
from .projector import project_organization
from .reporter import NullReconcileReporter, ReconcileReporter

__all__ = [
    "DEFAULT_MASK",
    "ChangeExecutor",
    "ComparisonMask",
    "ExclusionResolution",
    "FetchedTeam",
    "NullReconcileReporter",
    "PaginatedFetcher",
    "PassOutcome",
    "ReconcileEngine",
    "ReconcileReporter",
    "apply_change",
    "compute_changes",
    "diff_team",
    "pending_changes",
    "project_organization",
    "resolve_excluded_members",
]
