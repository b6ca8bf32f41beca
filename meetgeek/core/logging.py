from __future__ import annotations

import logging

from rich.logging import RichHandler

from meetgeek.ui.console import err_console


def configure_logging(level: str) -> None:
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root = logging.getLogger()
    root.setLevel(numeric_level)

    handler = RichHandler(
        console=err_console,
        level=numeric_level,
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter(fmt="%(name)s - %(message)s"))

    # Avoid duplicate handlers when called twice
    root.handlers.clear()
    root.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(numeric_level, logging.WARNING))
