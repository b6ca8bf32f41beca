"""Spinner indicators shown while waiting on the API."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from meetgeek.ui.console import err_console

SPINNER_STYLES = {
    "default": "dots",
    "loading": "dots12",
    "search": "arc",
    "auth": "bouncingBar",
}


@contextmanager
def create_spinner(message: str, style: str = "default") -> Generator[None, None, None]:
    """Context manager for showing a spinner during an operation.

    The spinner draws on stderr so piped stdout stays clean; on a non-terminal
    it renders nothing.
    """
    spinner_type = SPINNER_STYLES.get(style, "dots")
    with err_console.status(
        f"[primary]{message}[/primary]",
        spinner=spinner_type,
        spinner_style="primary",
    ):
        yield
