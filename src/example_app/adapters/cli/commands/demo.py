"""Demonstration CLI commands.

Contents:
    * :func:`cli_demo` - Greeting, message cleaning, and one addition.
    * :func:`cli_process` - Trim and capitalize a single message.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from example_app.application.demo import run_demo
from example_app.domain.behaviors import clean_message

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import overflow_option, resolve_demo_settings, resolve_math_utils

logger = logging.getLogger(__name__)


@click.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--message", type=str, default=None, help="Message to clean; defaults to [demo].message")
@click.option("--left", type=int, default=None, help="Left operand; defaults to [demo].left")
@click.option("--right", type=int, default=None, help="Right operand; defaults to [demo].right")
@overflow_option
@click.pass_context
def cli_demo(
    ctx: click.Context,
    message: str | None,
    left: int | None,
    right: int | None,
    overflow: str | None,
) -> None:
    """Greet, clean a message, and add two numbers.

    With the bundled defaults the output is::

        Hello Maven World!
        Original: '  maven tutorial  '
        Processed: 'Maven tutorial'
        5 + 3 = 8
    """
    cli_ctx = get_cli_context(ctx)
    settings = resolve_demo_settings(cli_ctx)
    math_utils = resolve_math_utils(cli_ctx, overflow)

    extra = {"command": "demo", "overflow": math_utils.overflow.value, "profile": cli_ctx.profile}
    with lib_log_rich.runtime.bind(job_id="cli-demo", extra=extra):
        report = run_demo(
            settings.message if message is None else message,
            settings.left if left is None else left,
            settings.right if right is None else right,
            math_utils=math_utils,
        )
        logger.info("Demo finished", extra={"total": report.total})
        for line in report.lines():
            click.echo(line)


@click.command("process", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
def cli_process(text: str) -> None:
    """Trim TEXT and capitalize its first letter."""
    with lib_log_rich.runtime.bind(job_id="cli-process", extra={"command": "process"}):
        logger.debug("Cleaning message", extra={"length": len(text)})
        click.echo(clean_message(text))


__all__ = ["cli_demo", "cli_process"]
