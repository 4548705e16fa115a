"""In-memory configuration adapters for testing.

They satisfy the same Protocols as the production adapters without touching
the filesystem: the returned Config holds the bundled defaults inline.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat

#: Mirrors ``adapters/config/defaultconfig.toml`` for the sections the CLI reads.
IN_MEMORY_DEFAULTS: dict[str, dict[str, object]] = {
    "demo": {"message": "  maven tutorial  ", "left": 5, "right": 3},
    "arithmetic": {"overflow": "unbounded"},
}


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config built from :data:`IN_MEMORY_DEFAULTS`."""
    return Config({section: dict(values) for section, values in IN_MEMORY_DEFAULTS.items()}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display; satisfies the DisplayConfig protocol."""


__all__ = [
    "IN_MEMORY_DEFAULTS",
    "display_config_in_memory",
    "get_config_in_memory",
]
