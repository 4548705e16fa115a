"""Type-safe domain enums for output formats and arithmetic overflow modes."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class OverflowMode(str, Enum):
    """How arithmetic results are reduced when they exceed a fixed width.

    Attributes:
        UNBOUNDED: Exact Python integers, no reduction.
        WRAP32: Two's-complement wrap into a signed 32-bit range.
        WRAP64: Two's-complement wrap into a signed 64-bit range.

    Example:
        >>> OverflowMode.WRAP32.bits
        32
        >>> OverflowMode.UNBOUNDED.bits is None
        True
        >>> OverflowMode("wrap64") is OverflowMode.WRAP64
        True
    """

    UNBOUNDED = "unbounded"
    WRAP32 = "wrap32"
    WRAP64 = "wrap64"

    @property
    def bits(self) -> int | None:
        """Integer width for wrapping modes, ``None`` when unbounded."""
        return _OVERFLOW_BITS[self]


_OVERFLOW_BITS: dict[OverflowMode, int | None] = {
    OverflowMode.UNBOUNDED: None,
    OverflowMode.WRAP32: 32,
    OverflowMode.WRAP64: 64,
}


__all__ = [
    "OutputFormat",
    "OverflowMode",
]
