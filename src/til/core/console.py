"""Rich console output and logging setup for til."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def setup_logging(level: str = "INFO", verbose: bool = False) -> logging.Logger:
    """Send log records to stderr through Rich and return the ``til`` logger.

    ``--verbose`` forces DEBUG; unknown level names fall back to INFO.
    """
    numeric_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    return logging.getLogger("til")
