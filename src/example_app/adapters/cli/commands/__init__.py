"""CLI command implementations.

Collects every subcommand for registration with the root group.

Contents:
    * Info commands from :mod:`.info`
    * Demo commands from :mod:`.demo`
    * Arithmetic commands from :mod:`.arithmetic`
    * Config command from :mod:`.config`
    * Logging command from :mod:`.logging`
"""

from __future__ import annotations

from .arithmetic import cli_add, cli_multiply
from .config import cli_config
from .demo import cli_demo, cli_process
from .info import cli_fail, cli_hello, cli_info
from .logging import cli_logdemo

__all__ = [
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
