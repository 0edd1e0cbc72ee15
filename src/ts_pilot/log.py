"""Logging setup. Everything goes to stderr so stdout stays reserved for protocol responses."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_configured = False


def configure_logging(level: str = "WARNING") -> None:
    global _configured  # noqa: PLW0603
    root = logging.getLogger("ts_pilot")
    root.setLevel(level)
    if _configured:
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    _configured = True
