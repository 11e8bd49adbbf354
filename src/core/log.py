"""Logging setup for the CLI.

Library modules only create `logging.getLogger(__name__)` loggers; handlers are
installed once here by the entry-point.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Attach a stderr `RichHandler` to the root logger (idempotent)."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)
    if not any(getattr(h, "_retail_admin", False) for h in root.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler._retail_admin = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    # httpx loguea cada request a INFO; solo interesa en DEBUG.
    logging.getLogger("httpx").setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
