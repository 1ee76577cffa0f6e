from __future__ import annotations

import ast
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src" / "teamsync"


def _collect_python_files(directory: Path) -> list[Path]:
    return sorted(path for path in directory.rglob("*.py") if path.is_file())


def _find_forbidden_imports(files: list[Path], forbidden_prefixes: tuple[str, ...]) -> list[str]:
    violations: list[str] = []
    for path in files:
        module = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(module):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name.startswith(forbidden_prefixes):
                        violations.append(f"{path}: import {alias.name}")
            elif isinstance(node, ast.ImportFrom):
                if node.module is None:
                    continue
                if node.module.startswith(forbidden_prefixes):
                    violations.append(f"{path}: from {node.module} import ...")
    return violations


def test_core_does_not_import_cli_or_sdk() -> None:
    violations = _find_forbidden_imports(_collect_python_files(SRC / "core"), ("teamsync.cli", "teamsync.sdk"))
    assert not violations, f"core imports outer layers: {violations}"


def test_engine_does_not_import_provider_implementations() -> None:
    violations = _find_forbidden_imports(_collect_python_files(SRC / "core" / "engine"), ("teamsync.core.providers",))
    assert not violations, f"engine imports provider implementations: {violations}"


def test_contracts_depend_on_nothing_but_contracts() -> None:
    files = _collect_python_files(SRC / "core" / "contracts")
    violations = _find_forbidden_imports(
        files,
        ("teamsync.core.engine", "teamsync.core.providers", "teamsync.core.state", "teamsync.core.auth"),
    )
    assert not violations, f"contracts import implementation modules: {violations}"


def test_sdk_does_not_import_cli_layer() -> None:
    violations = _find_forbidden_imports([SRC / "sdk.py"], ("teamsync.cli",))
    assert not violations, f"sdk imports forbidden cli layer modules: {violations}"
