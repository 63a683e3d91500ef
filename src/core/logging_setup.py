"""Logging configuration (Rich)."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

console = Console(stderr=True)


class _ManagedRichHandler(RichHandler):
    """Marker subclass so repeated configuration does not stack handlers."""


def configure_logging(level: str = "INFO") -> None:
    """Install a single Rich handler on the root logger."""

    root_logger = logging.getLogger()
    if not any(isinstance(h, _ManagedRichHandler) for h in root_logger.handlers):
        root_logger.handlers.clear()
        handler = _ManagedRichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.captureWarnings(True)
