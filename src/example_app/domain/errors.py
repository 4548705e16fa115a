"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section is malformed or logically
    inconsistent. Caught at CLI boundaries to provide user-friendly
    error messages and the ``CONFIG_ERROR`` exit code.

    Example:
        >>> from example_app.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Unknown overflow mode: 'wrap16'")
        >>> str(err)
        "Unknown overflow mode: 'wrap16'"
    """


__all__ = [
    "ConfigurationError",
]
