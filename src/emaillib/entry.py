"""Console script entry point with production wiring.

Sits at package level, outside the adapters, so the CLI receives the
composition root without importing it itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``emaillib`` console script with production services wired."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
