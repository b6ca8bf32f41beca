"""CLI Commands for MeetGeek."""

from meetgeek.commands.ask import AskCommand
from meetgeek.commands.auth import AuthCommand
from meetgeek.commands.help import HelpCommand
from meetgeek.commands.meetings import ListCommand, ShowCommand
from meetgeek.commands.summary import HighlightsCommand, SummaryCommand
from meetgeek.commands.transcript import TranscriptCommand

__all__ = [
    "AuthCommand",
    "ListCommand",
    "ShowCommand",
    "SummaryCommand",
    "TranscriptCommand",
    "HighlightsCommand",
    "AskCommand",
    "HelpCommand",
]
