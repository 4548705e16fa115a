"""Application layer - use cases and port definitions.

Contains the demo use case that orchestrates domain logic and the port
protocols adapters implement.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.demo` - The greeting/message/arithmetic demonstration run
"""

from __future__ import annotations

from .demo import DemoReport, run_demo
from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
)

__all__ = [
    "DemoReport",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "run_demo",
]
