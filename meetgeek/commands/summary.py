"""Summary and highlights commands."""

from __future__ import annotations

import json

from rich.text import Text

from meetgeek.commands.base import BaseCommand
from meetgeek.core.models import Summary, format_time_of_day, parse_highlights
from meetgeek.ui.console import console, print_heading, print_warning
from meetgeek.ui.spinners import create_spinner


class SummaryCommand(BaseCommand):
    """Print the AI-generated summary and action items of a meeting."""

    name = "summary"
    description = "Get the AI-generated meeting summary"
    usage = "meetgeek summary <meetingId> [--json]"
    switches = frozenset({"json"})

    def execute(self, args: list[str]) -> bool:
        flags, remaining = self.parse_flags(args)
        meeting_id = self.require_meeting_id(remaining)

        with self.client() as api:
            with create_spinner("Fetching summary...", style="loading"):
                data = api.get_summary(meeting_id)

        if flags.get("json"):
            console.print_json(json.dumps(data))
            return True

        summary = Summary.from_payload(data)

        print_heading("📝 Meeting Summary")
        if summary.text:
            console.print(Text(summary.text, style="text"), soft_wrap=True)
        elif summary.sections:
            for section in summary.sections:
                if section.title:
                    console.print(Text(section.title, style="secondary"), soft_wrap=True)
                console.print(Text(section.content, style="text"), soft_wrap=True)
                console.print()
        else:
            print_warning("No summary available.")

        if summary.action_items:
            print_heading("✅ Action Items")
            for item in summary.action_items:
                console.print(Text(f"  • {item}", style="text"), soft_wrap=True)

        console.print()
        return True


class HighlightsCommand(BaseCommand):
    """Print the highlights of a meeting."""

    name = "highlights"
    description = "Get meeting highlights"
    usage = "meetgeek highlights <meetingId>"

    def execute(self, args: list[str]) -> bool:
        _, remaining = self.parse_flags(args)
        meeting_id = self.require_meeting_id(remaining)

        with self.client() as api:
            with create_spinner("Fetching highlights...", style="loading"):
                data = api.get_highlights(meeting_id)

        print_heading("⭐ Highlights")

        highlights = parse_highlights(data)
        if highlights is None:
            # Unknown shape: show what came back
            console.print_json(json.dumps(data))
            return True

        if not highlights:
            print_warning("No highlights available.")
            return True

        for highlight in highlights:
            time = format_time_of_day(highlight.timestamp)
            if time:
                console.print(Text(f"  [{time}]", style="timestamp"), soft_wrap=True)
            console.print(Text(f"  {highlight.text}", style="text"), soft_wrap=True)
            console.print()

        return True
