"""Main CLI entry point for the MeetGeek client."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

import httpx

from meetgeek import __version__
from meetgeek.commands.ask import AskCommand
from meetgeek.commands.auth import AuthCommand
from meetgeek.commands.base import BaseCommand
from meetgeek.commands.help import HelpCommand
from meetgeek.commands.meetings import ListCommand, ShowCommand
from meetgeek.commands.summary import HighlightsCommand, SummaryCommand
from meetgeek.commands.transcript import TranscriptCommand
from meetgeek.core.config import CLIConfig
from meetgeek.core.logging import configure_logging
from meetgeek.core.settings import get_settings
from meetgeek.ui.console import print_error


class MeetGeekCLI:
    """Command registry and dispatch. One command per process run."""

    def __init__(
        self,
        config: Optional[CLIConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or CLIConfig.from_env()

        help_command = HelpCommand(self.config, transport)
        ordered: list[BaseCommand] = [
            AuthCommand(self.config, transport),
            ListCommand(self.config, transport),
            ShowCommand(self.config, transport),
            SummaryCommand(self.config, transport),
            TranscriptCommand(self.config, transport),
            HighlightsCommand(self.config, transport),
            AskCommand(self.config, transport),
            help_command,
        ]
        help_command.registry = ordered

        # Command registry
        self.commands: dict[str, BaseCommand] = {}
        for command in ordered:
            self.commands[command.name] = command
            for alias in command.aliases:
                self.commands[alias] = command

    def run(self, argv: list[str]) -> int:
        """Dispatch ``argv`` (command name first) and return the exit status."""
        if not argv:
            return self.commands["help"].run([])

        cmd_name = argv[0].lower()
        command = self.commands.get(cmd_name)
        if command is None:
            print_error(f"Unknown command: {argv[0]}. Run 'meetgeek help' for a list of commands.")
            return 1
        return command.run(argv[1:])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meetgeek",
        description="MeetGeek CLI - meetings, transcripts, summaries and highlights from your terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"meetgeek {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="Command to execute (auth, list, show, summary, transcript, highlights, ask, help)",
    )
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Command arguments and flags",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    config = CLIConfig(base_url=settings.base_url, verbose=args.verbose)
    cli = MeetGeekCLI(config)

    argv_rest = [args.command, *args.args] if args.command else []
    sys.exit(cli.run(argv_rest))


if __name__ == "__main__":
    main()
