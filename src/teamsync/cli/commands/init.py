"""Init command: seed local state from GitHub."""

from __future__ import annotations

import argparse

from teamsync.core.config import load_config
from teamsync.core.contracts.exceptions import StateError
from teamsync.core.contracts.organization import Organization
from teamsync.sdk import TeamSync


async def run_init(args: argparse.Namespace) -> Organization:
    config = load_config(args.config)
    if config.state_path.exists() and not args.overwrite:
        raise StateError(f"{config.state_path} already exists (use --overwrite to replace it)")

    ts = await TeamSync.from_config(config)
    organization = await ts.pull()
    path = ts.store_state(organization)

    print(f"Wrote {len(organization.teams)} teams and {len(organization.members)} members to {path}")
    return organization


__all__ = ["run_init"]
