"""Help command - display CLI help."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from meetgeek import __app_name__, __version__
from meetgeek.commands.base import BaseCommand
from meetgeek.core.errors import ValidationError
from meetgeek.ui.console import console


class HelpCommand(BaseCommand):
    """Display help information."""

    name = "help"
    description = "Show this help message"
    usage = "meetgeek help [command]"
    aliases = ["h"]

    # Filled in by the CLI with the registered commands, in display order
    registry: list[BaseCommand] = []

    def execute(self, args: list[str]) -> bool:
        """Display help."""
        _, remaining = self.parse_flags(args)

        if remaining:
            return self._show_command_help(remaining[0].lower())
        return self._show_general_help()

    def _show_general_help(self) -> bool:
        """Show general help with all commands."""
        console.print()
        console.print(f"[primary.bold]{__app_name__} CLI[/primary.bold] [muted]v{__version__}[/muted]")
        console.print()

        table = Table(
            show_header=True,
            header_style="primary",
            border_style="muted",
            padding=(0, 2),
        )
        table.add_column("Command", style="command", no_wrap=True)
        table.add_column("Description", style="text")

        for cmd in self.registry:
            table.add_row(cmd.name, cmd.description)

        console.print(Panel(
            table,
            title="[primary]Available Commands[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        console.print()
        tips = Text()
        tips.append("Tips:\n", style="primary")
        tips.append("  • ", style="muted")
        tips.append("Use ", style="text")
        tips.append("meetgeek help <command>", style="command")
        tips.append(" for detailed command help\n", style="text")
        tips.append("  • ", style="muted")
        tips.append("Set ", style="text")
        tips.append("MEETGEEK_API_KEY", style="warning")
        tips.append(" to override the stored API key", style="text")
        console.print(tips)

        return True

    def _show_command_help(self, cmd_name: str) -> bool:
        """Show detailed help for a specific command."""
        cmd = next(
            (c for c in self.registry if cmd_name == c.name or cmd_name in c.aliases),
            None,
        )
        if cmd is None:
            raise ValidationError(f"Unknown command: {cmd_name}")

        console.print()

        text = Text()
        text.append(f"{cmd.name}\n\n", style="primary.bold")
        text.append(f"{cmd.description}\n\n", style="text")
        text.append("Usage:\n", style="muted")
        text.append(f"  {cmd.usage}", style="command")
        if cmd.details:
            text.append(f"\n\n{cmd.details}", style="muted")
        if cmd.aliases:
            text.append("\n\nAliases:\n", style="muted")
            text.append(f"  {', '.join(cmd.aliases)}", style="tertiary")

        console.print(Panel(
            text,
            title=f"[primary]📖 {cmd.name}[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        return True
