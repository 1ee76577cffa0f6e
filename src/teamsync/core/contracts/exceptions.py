"""Exception hierarchy for teamsync."""

from __future__ import annotations


class TeamSyncError(Exception):
    """Base exception for all teamsync errors."""


class ConfigError(TeamSyncError):
    """Configuration loading or validation failure."""


class StateError(TeamSyncError):
    """Local organization state could not be read or written."""


class MemberLookupError(TeamSyncError):
    """A team or member could not be resolved in the local model."""

    def __init__(self, message: str, *, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing = missing


class ConfirmationError(TeamSyncError):
    """The confirmation prompt could not produce an answer."""


class ProviderError(TeamSyncError):
    """Base provider operation failure."""


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class SyncError(TeamSyncError):
    """Engine-level synchronization failure."""
