"""Arithmetic CLI commands.

Contents:
    * :func:`cli_add` - Print ``A + B = <sum>``.
    * :func:`cli_multiply` - Print ``A * B = <product>``.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from example_app.domain.behaviors import format_operation

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import overflow_option, resolve_math_utils

logger = logging.getLogger(__name__)

# Unknown "options" such as -2 are negative operands, not flags.
_OPERAND_CONTEXT_SETTINGS = {**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True}


@click.command("add", context_settings=_OPERAND_CONTEXT_SETTINGS)
@click.argument("left", type=int)
@click.argument("right", type=int)
@overflow_option
@click.pass_context
def cli_add(ctx: click.Context, left: int, right: int, overflow: str | None) -> None:
    """Add two integers, e.g. ``add 5 3`` prints ``5 + 3 = 8``."""
    math_utils = resolve_math_utils(get_cli_context(ctx), overflow)
    extra = {"command": "add", "overflow": math_utils.overflow.value}
    with lib_log_rich.runtime.bind(job_id="cli-add", extra=extra):
        result = math_utils.add(left, right)
        logger.info("Computed sum", extra={"left": left, "right": right, "result": result})
        click.echo(format_operation(left, "+", right, result))


@click.command("multiply", context_settings=_OPERAND_CONTEXT_SETTINGS)
@click.argument("left", type=int)
@click.argument("right", type=int)
@overflow_option
@click.pass_context
def cli_multiply(ctx: click.Context, left: int, right: int, overflow: str | None) -> None:
    """Multiply two integers, e.g. ``multiply -2 5`` prints ``-2 * 5 = -10``."""
    math_utils = resolve_math_utils(get_cli_context(ctx), overflow)
    extra = {"command": "multiply", "overflow": math_utils.overflow.value}
    with lib_log_rich.runtime.bind(job_id="cli-multiply", extra=extra):
        result = math_utils.multiply(left, right)
        logger.info("Computed product", extra={"left": left, "right": right, "result": result})
        click.echo(format_operation(left, "*", right, result))


__all__ = ["cli_add", "cli_multiply"]
