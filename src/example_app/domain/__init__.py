"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the arithmetic utility and the text behaviors that form the core
of the application.

Contents:
    * :mod:`.arithmetic` - Integer add/multiply with overflow modes
    * :mod:`.behaviors` - Greeting and message cleaning
    * :mod:`.enums` - Domain enumerations (OutputFormat, OverflowMode)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .arithmetic import MathUtils, add, multiply, wrap_integer
from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    capitalize,
    clean_message,
    format_operation,
    trim,
)
from .enums import OutputFormat, OverflowMode
from .errors import ConfigurationError

__all__ = [
    # Arithmetic
    "MathUtils",
    "add",
    "multiply",
    "wrap_integer",
    # Behaviors
    "CANONICAL_GREETING",
    "build_greeting",
    "capitalize",
    "clean_message",
    "format_operation",
    "trim",
    # Enums
    "OutputFormat",
    "OverflowMode",
    # Errors
    "ConfigurationError",
]
