from __future__ import annotations

import argparse
import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from teamsync import (
    AuthenticationError,
    ConfigError,
    ConfirmationError,
    MemberLookupError,
    Organization,
    PendingChange,
    ProviderError,
    ReconcileResult,
    StateError,
    SyncError,
    TeamSync,
)
from teamsync.cli import build_parser, main
from teamsync.cli import app as app_module
from teamsync.cli.commands import init as init_command
from teamsync.cli.commands import sync as sync_command
from teamsync.cli.commands import teams as teams_command
from teamsync.cli.commands.sync import format_sync_summary
from teamsync.cli.prompt import QuestionaryConfirmer
from teamsync.cli.reporting import RichReconcileReporter
from teamsync.core.contracts.sync import FieldDifference, TeamDiff
from teamsync.core.state import load_state, store_state
from tests.fakes.provider import FakeTeamProvider
from tests.fakes.reporter import ScriptedConfirmer


def _patch_provider(monkeypatch: pytest.MonkeyPatch, module: object, provider: FakeTeamProvider) -> None:
    async def _from_config(config, *, reporter=None):  # type: ignore[no-untyped-def]
        return TeamSync(config=config, provider=provider, reporter=reporter)

    monkeypatch.setattr(module.TeamSync, "from_config", _from_config)  # type: ignore[attr-defined]


def test_build_parser_requires_subcommand() -> None:
    parser = build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args([])


def test_build_parser_sync_flags() -> None:
    args = build_parser().parse_args(["sync", "--dry-run", "--config", "x.json"])

    assert args.command == "sync"
    assert args.dry_run is True
    assert args.force is False
    assert args.config == "x.json"
    assert args.verbose is False


def test_build_parser_team_commands() -> None:
    parser = build_parser()

    assert parser.parse_args(["add-team", "ops", "dev"]).teams == ["ops", "dev"]
    set_args = parser.parse_args(["set-team", "ops", "amy", "rory"])
    assert (set_args.team, set_args.users) == ("ops", ["amy", "rory"])
    assert parser.parse_args(["init"]).config == "./teamsync.json"


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ConfigError("bad config"), 3),
        (MemberLookupError("missing user"), 3),
        (AuthenticationError("no token"), 4),
        (ProviderError("api down"), 4),
        (SyncError("sync failed"), 5),
        (ConfirmationError("aborted"), 5),
    ],
)
def test_main_maps_errors_to_exit_codes(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], error: Exception, code: int
) -> None:
    def _raise(args: argparse.Namespace) -> None:
        raise error

    monkeypatch.setattr(app_module, "_dispatch", _raise)

    assert main(["sync"]) == code
    assert f"error: {error}" in capsys.readouterr().err


def test_format_sync_summary_apply() -> None:
    result = ReconcileResult(
        organization=Organization(organization="acme"),
        changes={"ops": PendingChange(to_add=["a"])},
        applied_teams=["ops"],
        failed_teams=["dev"],
        policy_updated_teams=["ops"],
        policy_failed_teams=["dev"],
        unresolved_exclusions={"ops": ["ghost"]},
    )

    summary = format_sync_summary(result, Path("/tmp/state.json"))

    assert "teamsync - sync complete (apply)" in summary
    assert "  Organization: acme" in summary
    assert "  Membership:   1 team updated" in summary
    assert "  Failed:       dev" in summary
    assert "  Policies:     1 team updated" in summary
    assert "  Unresolved:   ops: ghost" in summary
    assert "  State:        /tmp/state.json" in summary
    assert "[dry-run]" not in summary


def test_format_sync_summary_dry_run_without_changes() -> None:
    result = ReconcileResult(organization=Organization(organization="acme"), dry_run=True)

    summary = format_sync_summary(result, Path("state.json.dry-run"))

    assert "(dry-run)" in summary
    assert "all teams up to date" in summary
    assert "[dry-run] No changes were made" in summary


def test_main_sync_dry_run_writes_shadow_state(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    config_file: Path,
    local_org: Organization,
    remote_provider: FakeTeamProvider,
) -> None:
    state_path = config_file.parent / "team-assignments.json"
    store_state(state_path, local_org)
    _patch_provider(monkeypatch, sync_command, remote_provider)

    code = main(["sync", "--config", str(config_file), "--dry-run", "--force"])

    assert code == 0
    assert remote_provider.calls == []
    assert load_state(state_path) == local_org
    shadow = load_state(Path(f"{state_path}.dry-run"))
    assert shadow.teams["ops"].members == ["a", "b"]
    assert "sync complete (dry-run)" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_run_sync_asks_through_questionary_confirmer(
    monkeypatch: pytest.MonkeyPatch, config_file: Path, local_org: Organization, remote_provider: FakeTeamProvider
) -> None:
    store_state(config_file.parent / "team-assignments.json", local_org)
    _patch_provider(monkeypatch, sync_command, remote_provider)
    confirmer = ScriptedConfirmer(True, False)
    monkeypatch.setattr(sync_command, "QuestionaryConfirmer", lambda: confirmer)
    args = argparse.Namespace(config=str(config_file), force=False, dry_run=False)

    result = await sync_command.run_sync(args)

    assert len(confirmer.prompts) == 2
    assert result.applied_teams == ["ops"]
    assert result.policy_updated_teams == []
    assert remote_provider.policy_calls == []


@pytest.mark.asyncio
async def test_run_init_refuses_to_overwrite(config_file: Path, local_org: Organization) -> None:
    store_state(config_file.parent / "team-assignments.json", local_org)
    args = argparse.Namespace(config=str(config_file), overwrite=False)

    with pytest.raises(StateError, match="already exists"):
        await init_command.run_init(args)


@pytest.mark.asyncio
async def test_run_init_writes_remote_state(
    monkeypatch: pytest.MonkeyPatch, config_file: Path, remote_provider: FakeTeamProvider
) -> None:
    _patch_provider(monkeypatch, init_command, remote_provider)
    args = argparse.Namespace(config=str(config_file), overwrite=False)

    await init_command.run_init(args)

    stored = load_state(config_file.parent / "team-assignments.json")
    assert set(stored.teams) == {"dev", "ops"}


@pytest.mark.asyncio
async def test_run_add_team_stores_new_team(
    monkeypatch: pytest.MonkeyPatch, config_file: Path, remote_provider: FakeTeamProvider
) -> None:
    state_path = config_file.parent / "team-assignments.json"
    store_state(state_path, Organization(organization="acme"))
    _patch_provider(monkeypatch, teams_command, remote_provider)
    args = argparse.Namespace(config=str(config_file), teams=["ops"])

    await teams_command.run_add_team(args)

    assert load_state(state_path).teams["ops"].id == "T_ops"


def test_main_set_team_and_add_members(
    capsys: pytest.CaptureFixture[str], config_file: Path, local_org: Organization
) -> None:
    state_path = config_file.parent / "team-assignments.json"
    store_state(state_path, local_org)

    assert main(["set-team", "--config", str(config_file), "dev", "Cy"]) == 0
    assert load_state(state_path).teams["dev"].members == ["c"]

    assert main(["add-members", "--config", str(config_file), "dev", "A"]) == 0
    assert load_state(state_path).teams["dev"].members == ["a", "c"]
    assert "Team dev: a, c" in capsys.readouterr().out


def test_main_set_team_unknown_user_exits_with_config_code(
    capsys: pytest.CaptureFixture[str], config_file: Path, local_org: Organization
) -> None:
    store_state(config_file.parent / "team-assignments.json", local_org)

    assert main(["set-team", "--config", str(config_file), "dev", "ghost"]) == 3
    assert "ghost" in capsys.readouterr().err


def test_main_missing_config_exits_with_config_code(tmp_path: Path) -> None:
    assert main(["sync", "--config", str(tmp_path / "missing.json")]) == 3


@pytest.mark.asyncio
async def test_questionary_confirmer_returns_answer(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, bool]] = []

    class _Question:
        def __init__(self, answer: bool | None) -> None:
            self._answer = answer

        async def ask_async(self) -> bool | None:
            return self._answer

    def _confirm(message: str, default: bool = False) -> _Question:
        calls.append((message, default))
        return _Question(True)

    monkeypatch.setattr("questionary.confirm", _confirm)

    assert await QuestionaryConfirmer().confirm("Continue?") is True
    assert calls == [("Continue?", False)]


@pytest.mark.asyncio
async def test_questionary_confirmer_raises_on_abort(monkeypatch: pytest.MonkeyPatch) -> None:
    class _Question:
        async def ask_async(self) -> None:
            return None

    monkeypatch.setattr("questionary.confirm", lambda message, default=False: _Question())

    with pytest.raises(ConfirmationError):
        await QuestionaryConfirmer().confirm("Continue?")


def test_rich_reporter_renders_events() -> None:
    out = io.StringIO()
    err = io.StringIO()
    reporter = RichReconcileReporter(
        console=Console(file=out, width=200, no_color=True),
        error_console=Console(file=err, width=200, no_color=True),
    )

    reporter.team_out_of_sync(
        TeamDiff(team_name="ops", differences=[FieldDifference(path="members", local=["a"], remote=[])])
    )
    reporter.changes_proposed({"ops": PendingChange(to_add=["a"])})
    reporter.member_change("ops", "a", action="add", dry_run=True)
    reporter.exclusion_unresolved("ops", "ghost")
    reporter.team_failed("ops", "members", ProviderError("boom"))

    stdout = out.getvalue()
    assert "Local config out of sync with upstream: ops" in stdout
    assert "members: local=a remote=none" in stdout
    assert "    Adding members: a" in stdout
    assert "  Removing members: none" in stdout
    assert "[dry-run] Adding member a to team ops" in stdout
    stderr = err.getvalue()
    assert "ghost" in stderr
    assert "Unable to sync members of team ops: boom" in stderr


def test_verbose_flag_is_parsed_for_every_command() -> None:
    parser = build_parser()

    for argv in (["sync", "-v"], ["init", "-v"], ["add-team", "-v", "ops"]):
        assert parser.parse_args(argv).verbose is True


def test_config_file_fixture_is_loadable(config_file: Path) -> None:
    assert json.loads(config_file.read_text(encoding="utf-8"))["organization"] == "acme"
