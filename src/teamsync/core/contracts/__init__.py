"""Core contracts-domain exports."""

from teamsync.core.contracts.config import TeamSyncConfig
from teamsync.core.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    ConfirmationError,
    MemberLookupError,
    ProviderError,
    StateError,
    SyncError,
    TeamSyncError,
)
from teamsync.core.contracts.organization import (
    ExcludedMember,
    Member,
    Organization,
    ReviewAssignmentAlgorithm,
    ReviewAssignmentPolicy,
    Team,
)
from teamsync.core.contracts.prompt import AlwaysConfirm, Confirmer
from teamsync.core.contracts.provider import TeamProvider
from teamsync.core.contracts.remote import (
    MemberRecord,
    MembersCursor,
    MembersPage,
    PageInfo,
    TeamRecord,
    TeamRef,
    TeamsCursor,
    TeamsPage,
)
from teamsync.core.contracts.sync import (
    FieldDifference,
    PendingChange,
    ReconcileResult,
    ReviewAssignmentUpdate,
    TeamDiff,
)

__all__ = [
    "AlwaysConfirm",
    "AuthenticationError",
    "ConfigError",
    "ConfirmationError",
    "Confirmer",
    "ExcludedMember",
    "FieldDifference",
    "Member",
    "MemberLookupError",
    "MemberRecord",
    "MembersCursor",
    "MembersPage",
    "Organization",
    "PageInfo",
    "PendingChange",
    "ProviderError",
    "ReconcileResult",
    "ReviewAssignmentAlgorithm",
    "ReviewAssignmentPolicy",
    "ReviewAssignmentUpdate",
    "StateError",
    "SyncError",
    "Team",
    "TeamDiff",
    "TeamProvider",
    "TeamRecord",
    "TeamRef",
    "TeamSyncConfig",
    "TeamSyncError",
    "TeamsCursor",
    "TeamsPage",
]
