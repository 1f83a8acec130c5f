"""Console script entry point with production wiring.

Lives at package level, outside the adapters, so that it may name the
composition root before handing control to the CLI.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``greeter`` command with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(argv, services_factory=build_production)


__all__ = ["main"]
