"""Public API surface for teamsync."""

__version__ = "0.1.0"

from teamsync.core.auth import create_token_resolver
from teamsync.core.config import load_config
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
from teamsync.core.contracts.sync import PendingChange, ReconcileResult, ReviewAssignmentUpdate, TeamDiff
from teamsync.core.engine import ReconcileEngine, ReconcileReporter
from teamsync.core.state import add_team_members, load_state, set_team_members, store_state
from teamsync.sdk import TeamSync

__all__ = [
    "AlwaysConfirm",
    "AuthenticationError",
    "ConfigError",
    "ConfirmationError",
    "Confirmer",
    "ExcludedMember",
    "Member",
    "MemberLookupError",
    "Organization",
    "PendingChange",
    "ProviderError",
    "ReconcileEngine",
    "ReconcileReporter",
    "ReconcileResult",
    "ReviewAssignmentAlgorithm",
    "ReviewAssignmentPolicy",
    "ReviewAssignmentUpdate",
    "StateError",
    "SyncError",
    "Team",
    "TeamDiff",
    "TeamProvider",
    "TeamSync",
    "TeamSyncConfig",
    "TeamSyncError",
    "__version__",
    "add_team_members",
    "create_token_resolver",
    "load_config",
    "load_state",
    "set_team_members",
    "store_state",
]
