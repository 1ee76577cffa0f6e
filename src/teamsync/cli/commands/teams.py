"""Local team editing commands."""

from __future__ import annotations

import argparse

from teamsync.cli.common import format_comma_or_none
from teamsync.core.config import load_config
from teamsync.core.contracts.organization import Organization
from teamsync.core.state import add_team_members, set_team_members
from teamsync.sdk import TeamSync


async def run_add_team(args: argparse.Namespace) -> Organization:
    config = load_config(args.config)
    ts = await TeamSync.from_config(config)
    organization = ts.load_state()

    await ts.add_teams(organization, args.teams)
    ts.store_state(organization)
    return organization


def run_set_team(args: argparse.Namespace) -> Organization:
    config = load_config(args.config)
    ts = TeamSync(config=config)
    organization = ts.load_state()

    team = set_team_members(organization, args.team, args.users)
    ts.store_state(organization)
    print(f"Team {args.team}: {format_comma_or_none(team.members)}")
    return organization


def run_add_members(args: argparse.Namespace) -> Organization:
    config = load_config(args.config)
    ts = TeamSync(config=config)
    organization = ts.load_state()

    team = add_team_members(organization, args.team, args.users)
    ts.store_state(organization)
    print(f"Team {args.team}: {format_comma_or_none(team.members)}")
    return organization


__all__ = ["run_add_members", "run_add_team", "run_set_team"]
