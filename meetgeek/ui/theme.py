"""Theme and color definitions for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class Theme:
    """Color theme for the CLI - Cyan & Amber palette."""

    # Primary colors
    primary: str = "#00CED1"      # Cyan - main accent
    secondary: str = "#FFB347"    # Amber - secondary accent
    tertiary: str = "#B388FF"     # Light purple - tertiary accent

    # Status colors
    success: str = "#00E676"      # Bright green
    error: str = "#FF5252"        # Red
    warning: str = "#FFB347"      # Orange-yellow
    info: str = "#B388FF"         # Light purple

    # Text colors
    text: str = "#E8E8E8"         # Light gray
    muted: str = "#888888"        # Muted gray
    highlight: str = "#FFFFFF"    # White
    dim: str = "#555555"          # Dim gray

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich theme."""
        return RichTheme({
            # Core styles
            "primary": Style(color=self.primary),
            "secondary": Style(color=self.secondary),
            "tertiary": Style(color=self.tertiary),
            "primary.bold": Style(color=self.primary, bold=True),

            # Status styles
            "success": Style(color=self.success, bold=True),
            "error": Style(color=self.error, bold=True),
            "warning": Style(color=self.warning),
            "info": Style(color=self.info),

            # Text styles
            "text": Style(color=self.text),
            "muted": Style(color=self.muted),
            "dim": Style(color=self.dim),
            "highlight": Style(color=self.highlight, bold=True),

            # Semantic styles
            "command": Style(color=self.primary, bold=True),
            "path": Style(color=self.secondary),
            "number": Style(color=self.warning),
            "url": Style(color=self.primary, underline=True),
            "speaker": Style(color=self.tertiary, bold=True),
            "timestamp": Style(color=self.secondary),
            "meeting.id": Style(color=self.highlight, bold=True),
            "match": Style(color="#000000", bgcolor=self.secondary),
        })


# Default theme instance
_theme = Theme()


def get_theme() -> Theme:
    """Get the current theme."""
    return _theme
