"""Command-line interface for teamsync."""

from teamsync.cli.app import main
from teamsync.cli.parser import build_parser

__all__ = ["build_parser", "main"]
