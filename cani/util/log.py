"""Debug logging helpers."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOGGER = logging.getLogger("cani")


def debug_enabled() -> bool:
    """Check debug mode env flag."""
    return os.environ.get("CANI_DEBUG", "").strip() == "1"


def configure_logging() -> None:
    """Send debug records to stderr through rich when debug mode is on."""
    if not debug_enabled() or LOGGER.handlers:
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    LOGGER.addHandler(handler)
    LOGGER.setLevel(logging.DEBUG)


def debug_log(message: str, *args: object) -> None:
    """Emit debug logs to stderr in debug mode only."""
    if debug_enabled():
        LOGGER.debug(message, *args)
