"""Module entry stories ensuring ``python -m example_app`` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable

import lib_cli_exit_tools
import pytest

from example_app import __init__conf__, entry
from example_app.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["example-app"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("example_app.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_runs_arithmetic(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["example-app", "multiply", "-2", "5"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("example_app.__main__", run_name="__main__")

    assert exc.value.code == 0
    assert "-2 * 5 = -10" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_module_entry_formats_exceptions_via_exit_helpers(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["example-app", "fail"], raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("example_app.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code != 0
    assert "RuntimeError" in plain_err or "I should fail" in plain_err


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    expected_commands = {
        "cli_add",
        "cli_config",
        "cli_demo",
        "cli_fail",
        "cli_hello",
        "cli_info",
        "cli_logdemo",
        "cli_multiply",
        "cli_process",
    }
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands == exported


@pytest.mark.os_agnostic
def test_console_script_entry_returns_exit_code(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["example-app", "add", "5", "3"], raising=False)

    assert entry.main() == 0
    assert "5 + 3 = 8" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """Run ``python -m example_app --help`` the way end users do."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "example_app", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "example_app", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout
