"""Transcript command - print or export a meeting transcript."""

from __future__ import annotations

from pathlib import Path

from rich.text import Text

from meetgeek.commands.base import BaseCommand
from meetgeek.core.errors import ValidationError
from meetgeek.core.models import Transcript, Utterance
from meetgeek.ui.console import console, print_heading, print_success, print_warning
from meetgeek.ui.spinners import create_spinner


def render_utterance(utterance: Utterance) -> Text:
    """Styled version of ``Utterance.format_line``."""
    line = Text()
    time = utterance.time_of_day
    if time:
        line.append(f"[{time}] ", style="timestamp")
    line.append(utterance.speaker, style="speaker")
    line.append(": ", style="muted")
    line.append(utterance.text, style="text")
    return line


class TranscriptCommand(BaseCommand):
    """Print a meeting transcript, optionally saving it to a file."""

    name = "transcript"
    description = "Get the meeting transcript"
    usage = "meetgeek transcript <meetingId> [--output FILE]"

    def execute(self, args: list[str]) -> bool:
        flags, remaining = self.parse_flags(args)
        meeting_id = self.require_meeting_id(remaining)
        output = flags.get("output", flags.get("o"))
        if output is True:
            raise ValidationError("--output expects a file path")

        with self.client() as api:
            with create_spinner("Fetching transcript...", style="loading"):
                data = api.get_transcript(meeting_id)

        transcript = Transcript.from_payload(data)

        print_heading("📜 Transcript")
        if not transcript.utterances:
            print_warning("No transcript available.")

        lines = []
        for utterance in transcript.utterances:
            console.print(render_utterance(utterance), soft_wrap=True)
            lines.append(utterance.format_line())

        if output:
            path = Path(output).expanduser()
            path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
            console.print()
            print_success(f"Saved to {path}")

        console.print()
        return True
