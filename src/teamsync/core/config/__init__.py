"""Core configuration loading exports."""

from teamsync.core.config.loader import load_config

__all__ = ["load_config"]
