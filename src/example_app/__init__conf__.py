"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` so the CLI can print them
without importing ``importlib.metadata`` at runtime.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name as published on the package index.
name = "example_app"
#: One-line summary used as the CLI help title.
title = "Build-tool demonstration: greeting, message cleaning, and integer arithmetic"
version = "1.0.0"
homepage = "https://example.com/example-app"
author = "Example App Developers"
author_email = "dev@example.com"
#: Console script name.
shell_command = "example-app"

#: Vendor, application, and slug identifiers for layered configuration paths.
LAYEREDCONF_VENDOR: str = "Example"
LAYEREDCONF_APP: str = "Example App"
LAYEREDCONF_SLUG: str = "example-app"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for example_app:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
