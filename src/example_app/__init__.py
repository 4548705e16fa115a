"""Public package surface exposing arithmetic, greeting, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Core logic (arithmetic, greeting, message cleaning)
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.arithmetic import MathUtils, add, multiply
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    clean_message,
)
from .domain.enums import OverflowMode

__all__ = [
    "CANONICAL_GREETING",
    "MathUtils",
    "OverflowMode",
    "add",
    "build_greeting",
    "clean_message",
    "get_config",
    "multiply",
    "print_info",
]
