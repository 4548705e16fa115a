"""Shared pytest fixtures for CLI, configuration, and module-entry tests.

Fixtures read as plain English and are discovered implicitly by pytest;
tests never import them.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from example_app.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Same values as the bundled defaultconfig.toml, minus the logging section.
DEFAULT_APP_CONFIG: dict[str, Any] = {
    "demo": {"message": "  maven tutorial  ", "left": 5, "right": 3},
    "arithmetic": {"overflow": "unbounded"},
}


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when exact command output matters so log records
    written to stderr cannot interfere.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide ``build_production`` for CLI invocations without custom injection."""
    from example_app.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that removes ANSI escape sequences from Rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from disabled traceback flags and restore the previous flags afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the cached configuration before and after the test.

    Clears the underlying reader since a test may monkeypatch ``get_config`` away.
    """
    from example_app.adapters.config import loader as config_mod

    config_mod._read_cached.cache_clear()  # pyright: ignore[reportPrivateUsage]
    yield
    config_mod._read_cached.cache_clear()  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real ``lib_layered_config.Config`` objects without provenance or file I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Only ``get_config`` is replaced; display and logging stay on the
    production adapters so the CLI path is exercised for real.

    Example:
        def test_demo(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"demo": {"left": 1, "right": 2}})
            result = cli_runner.invoke(cli, ["demo"], obj=factory)
            assert "1 + 2 = 3" in result.stdout
    """
    from example_app.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def default_app_factory(
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> Callable[[], AppServices]:
    """Services factory whose config equals the bundled defaults, independent of user files."""
    return config_cli_context(DEFAULT_APP_CONFIG)


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a function building a services factory that records requested profiles."""
    from example_app.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject
