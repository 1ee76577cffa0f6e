"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from teamsync.cli.commands import init as init_command
from teamsync.cli.commands import sync as sync_command
from teamsync.cli.commands import teams as teams_command
from teamsync.cli.parser import build_parser
from teamsync.core.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    ConfirmationError,
    MemberLookupError,
    ProviderError,
    StateError,
    SyncError,
)


def _dispatch(args: argparse.Namespace) -> None:
    if args.command == "sync":
        asyncio.run(sync_command.run_sync(args))
    elif args.command == "init":
        asyncio.run(init_command.run_init(args))
    elif args.command == "add-team":
        asyncio.run(teams_command.run_add_team(args))
    elif args.command == "set-team":
        teams_command.run_set_team(args)
    elif args.command == "add-members":
        teams_command.run_add_members(args)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        _dispatch(args)
        return 0
    except (ConfigError, StateError, MemberLookupError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (SyncError, ConfirmationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - unexpected failure
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
