"""Adapters layer - infrastructure and framework integrations.

Connects the domain to the libraries that handle the outside world.

Contents:
    * :mod:`.config` - Layered configuration via lib_layered_config
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - rich-click command-line interface
    * :mod:`.memory` - In-memory doubles for tests
"""

from __future__ import annotations

__all__: list[str] = []
