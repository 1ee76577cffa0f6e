"""Local state persistence and editing exports."""

from teamsync.core.state.edit import add_team_members, find_members, set_team_members
from teamsync.core.state.persistence import load_state, store_state

__all__ = ["add_team_members", "find_members", "load_state", "set_team_members", "store_state"]
