"""Core reconciliation domain for teamsync."""
