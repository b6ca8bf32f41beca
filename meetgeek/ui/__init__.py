"""UI components for the MeetGeek CLI."""

from meetgeek.ui.console import (
    console,
    err_console,
    print_error,
    print_heading,
    print_success,
    print_warning,
)
from meetgeek.ui.spinners import create_spinner
from meetgeek.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "err_console",
    "print_error",
    "print_heading",
    "print_success",
    "print_warning",
    # Spinners
    "create_spinner",
]
