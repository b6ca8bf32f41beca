"""Meeting commands - list recent meetings and show one meeting."""

from __future__ import annotations

import json

from meetgeek.commands.base import BaseCommand
from meetgeek.core.models import Meeting, MeetingPage
from meetgeek.ui.console import console, print_heading, print_warning
from meetgeek.ui.panels import create_meeting_panel, create_meetings_table
from meetgeek.ui.spinners import create_spinner


class ListCommand(BaseCommand):
    """List recent meetings."""

    name = "list"
    description = "List recent meetings"
    usage = "meetgeek list [--limit N] [--cursor CURSOR] [--json]"
    aliases = ["ls"]
    switches = frozenset({"json"})

    def execute(self, args: list[str]) -> bool:
        flags, _ = self.parse_flags(args)
        limit = self.int_flag(flags, "limit", "l", default=self.config.list_limit, minimum=1)
        cursor = flags.get("cursor") or None

        with self.client() as api:
            with create_spinner("Fetching meetings...", style="loading"):
                data = api.list_meetings(limit=limit, cursor=cursor)

        if flags.get("json"):
            console.print_json(json.dumps(data))
            return True

        page = MeetingPage.from_payload(data)

        print_heading("📋 Recent Meetings")
        if not page.meetings:
            print_warning("No meetings found.")
            return True

        console.print(create_meetings_table(page.meetings))

        if page.next_cursor:
            console.print()
            console.print(
                f"[muted]More meetings available: --cursor {page.next_cursor}[/muted]",
                soft_wrap=True,
            )
        return True


class ShowCommand(BaseCommand):
    """Show the details of one meeting."""

    name = "show"
    description = "Show meeting details"
    usage = "meetgeek show <meetingId> [--json]"
    switches = frozenset({"json"})

    def execute(self, args: list[str]) -> bool:
        flags, remaining = self.parse_flags(args)
        meeting_id = self.require_meeting_id(remaining)

        with self.client() as api:
            with create_spinner(f"Fetching meeting {meeting_id}...", style="loading"):
                data = api.get_meeting_details(meeting_id)

        if flags.get("json"):
            console.print_json(json.dumps(data))
            return True

        meeting = Meeting.from_payload(data)
        if not meeting.id:
            meeting.id = meeting_id

        console.print()
        console.print(create_meeting_panel(meeting))
        return True
