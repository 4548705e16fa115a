"""In-memory adapter implementations for testing.

Lightweight implementations of every application port that run entirely in
memory: no filesystem and no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    IN_MEMORY_DEFAULTS,
    display_config_in_memory,
    get_config_in_memory,
)
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from example_app.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "IN_MEMORY_DEFAULTS",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
