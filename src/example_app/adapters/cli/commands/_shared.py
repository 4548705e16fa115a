"""Helpers shared by the demo and arithmetic commands."""

from __future__ import annotations

import logging

import rich_click as click

from example_app.adapters.config.settings import (
    DemoSettings,
    load_arithmetic_settings,
    load_demo_settings,
)
from example_app.domain.arithmetic import MathUtils
from example_app.domain.enums import OverflowMode
from example_app.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

#: ``--overflow`` option reused by every command that does arithmetic.
overflow_option = click.option(
    "--overflow",
    type=click.Choice([mode.value for mode in OverflowMode], case_sensitive=False),
    default=None,
    help="Overflow mode; defaults to [arithmetic].overflow from configuration",
)


def _config_failure(exc: ConfigurationError) -> SystemExit:
    logger.error("Configuration rejected", extra={"error": str(exc)})
    click.echo(f"Error: {exc}", err=True)
    return SystemExit(ExitCode.CONFIG_ERROR)


def resolve_math_utils(cli_ctx: CLIContext, overflow: str | None) -> MathUtils:
    """Build the arithmetic helper from ``--overflow`` or the ``[arithmetic]`` section.

    Raises:
        SystemExit: With ``CONFIG_ERROR`` when the configured mode is invalid.
    """
    if overflow is not None:
        return MathUtils(OverflowMode(overflow.lower()))
    try:
        settings = load_arithmetic_settings(cli_ctx.config)
    except ConfigurationError as exc:
        raise _config_failure(exc) from exc
    return MathUtils(settings.overflow)


def resolve_demo_settings(cli_ctx: CLIContext) -> DemoSettings:
    """Parse ``[demo]`` or exit with ``CONFIG_ERROR``."""
    try:
        return load_demo_settings(cli_ctx.config)
    except ConfigurationError as exc:
        raise _config_failure(exc) from exc


__all__ = [
    "overflow_option",
    "resolve_demo_settings",
    "resolve_math_utils",
]
