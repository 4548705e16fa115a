"""Console-script entry point (``example-app``) with production wiring.

Lives at package level so the composition root can be handed to the CLI
adapter without the adapters layer importing composition itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI against the lib_layered_config and lib_log_rich adapters.

    Returns:
        Process exit code.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
