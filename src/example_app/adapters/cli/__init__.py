"""Command-line interface package.

Re-exports the root group, the entry point, every command, and the traceback
helpers so callers never import from internal modules.
"""

from __future__ import annotations

from .commands import (
    cli_add,
    cli_config,
    cli_demo,
    cli_fail,
    cli_hello,
    cli_info,
    cli_logdemo,
    cli_multiply,
    cli_process,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "ExitCode",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Context helpers
    "store_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_add",
    "cli_config",
    "cli_demo",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_logdemo",
    "cli_multiply",
    "cli_process",
]
