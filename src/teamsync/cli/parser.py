"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("teamsync")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default="./teamsync.json", help="Path to teamsync.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="teamsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser("sync", help="Push local team assignments to GitHub")
    _add_common(sync_parser)
    sync_parser.add_argument("--force", action="store_true", help="Do not ask for confirmation")
    sync_parser.add_argument("--dry-run", action="store_true", help="Report changes without applying them")

    init_parser = subparsers.add_parser("init", help="Write the current GitHub team state as local state")
    _add_common(init_parser)
    init_parser.add_argument("--overwrite", action="store_true", help="Replace an existing state file")

    add_team_parser = subparsers.add_parser("add-team", help="Add teams to local state by their slug name")
    _add_common(add_team_parser)
    add_team_parser.add_argument("teams", nargs="+", metavar="TEAM")

    set_team_parser = subparsers.add_parser("set-team", help="Set members of a team in local state")
    _add_common(set_team_parser)
    set_team_parser.add_argument("team", metavar="TEAM")
    set_team_parser.add_argument("users", nargs="+", metavar="USER")

    add_members_parser = subparsers.add_parser("add-members", help="Add members to a team in local state")
    _add_common(add_members_parser)
    add_members_parser.add_argument("team", metavar="TEAM")
    add_members_parser.add_argument("users", nargs="+", metavar="USER")

    return parser


__all__ = ["build_parser"]
