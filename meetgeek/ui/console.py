"""Rich console instances and helper functions."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from meetgeek.ui.theme import get_theme


# Results go to stdout, errors and logs to stderr
console = Console(theme=get_theme().to_rich_theme(), highlight=False)
err_console = Console(theme=get_theme().to_rich_theme(), stderr=True, highlight=False)


def print_error(message: str) -> None:
    """Print a single red ``Error: <message>`` line to stderr."""
    content = Text()
    content.append(f"Error: {message}", style="#FF5252")
    err_console.print(content, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(Text(f"✔ {message}", style="#00E676"), soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning line."""
    console.print(Text(message, style="#FFB347"), soft_wrap=True)


def print_heading(message: str) -> None:
    """Print a section heading with a blank line before it."""
    console.print()
    console.print(Text(message, style="#00CED1 bold"))
    console.print()
