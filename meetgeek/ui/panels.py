"""Table and panel components for displaying meetings."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from meetgeek.core.models import Meeting, format_date, format_datetime


def create_meetings_table(meetings: list[Meeting]) -> Table:
    """Create the table shown by `list`."""
    table = Table(show_header=True, header_style="primary", box=None, padding=(0, 2))
    table.add_column("ID", style="meeting.id", no_wrap=True, min_width=8)
    table.add_column("Title", style="text", overflow="fold")
    table.add_column("Date", style="muted", no_wrap=True)
    table.add_column("Duration", style="number", justify="right", no_wrap=True)

    for meeting in meetings:
        table.add_row(
            meeting.short_id,
            meeting.display_title,
            format_date(meeting.start),
            f"{meeting.duration} min",
        )

    return table


def create_meeting_panel(meeting: Meeting) -> Panel:
    """Create the details panel shown by `show`."""
    text = Text()
    text.append("ID:            ", style="muted")
    text.append(meeting.id, style="meeting.id")
    text.append("\n")
    text.append("Start:         ", style="muted")
    text.append(format_datetime(meeting.start), style="text")
    text.append("\n")
    text.append("End:           ", style="muted")
    text.append(format_datetime(meeting.end), style="text")
    text.append("\n")
    text.append("Duration:      ", style="muted")
    text.append(f"{meeting.duration} minutes", style="number")
    text.append("\n")
    text.append("Participants:  ", style="muted")
    names = ", ".join(p.label for p in meeting.participants)
    text.append(names or "None", style="text")

    if meeting.recording_url:
        text.append("\n")
        text.append("Recording:     ", style="muted")
        text.append(meeting.recording_url, style="url")

    return Panel(
        text,
        title=f"[primary]📋 {meeting.display_title}[/primary]",
        border_style="primary",
        padding=(1, 2),
    )
