"""Ask command - search transcript text across meetings."""

from __future__ import annotations

import logging

from rich.text import Text

from meetgeek.commands.base import BaseCommand
from meetgeek.core.api_client import APIClient
from meetgeek.core.errors import ValidationError
from meetgeek.core.models import MeetingPage, Transcript, Utterance
from meetgeek.ui.console import console, print_heading, print_warning
from meetgeek.ui.spinners import create_spinner

logger = logging.getLogger(__name__)


def truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


class AskCommand(BaseCommand):
    """Case-insensitive substring search over meeting transcripts.

    With ``--meeting`` a single transcript is searched and every match is
    printed. Otherwise the most recent meetings are scanned one after another;
    a meeting whose transcript cannot be fetched is skipped.
    """

    name = "ask"
    description = "Search transcripts for a phrase"
    usage = "meetgeek ask <query...> [--meeting ID]"
    aliases = ["search"]

    def execute(self, args: list[str]) -> bool:
        flags, remaining = self.parse_flags(args)
        query = " ".join(remaining).strip()
        if not query:
            raise ValidationError(f"Missing search query. Usage: {self.usage}")

        meeting_id = flags.get("meeting", flags.get("m"))
        if meeting_id is True:
            raise ValidationError("--meeting expects a meeting ID")

        console.print()
        console.print(Text(f'🔍 Searching for: "{query}"', style="primary.bold"), soft_wrap=True)

        with self.client() as api:
            if meeting_id:
                return self._search_meeting(api, meeting_id, query)
            return self._search_recent(api, query)

    def _search_meeting(self, api: APIClient, meeting_id: str, query: str) -> bool:
        with create_spinner("Searching transcript...", style="search"):
            transcript = Transcript.from_payload(api.get_transcript(meeting_id))

        matches = transcript.search(query)
        if not matches:
            console.print()
            print_warning("No matches found.")
            return True

        print_heading(f"Found {len(matches)} match(es) in {meeting_id}")
        for utterance in matches:
            console.print(self._render_match(utterance, query), soft_wrap=True)
        console.print()
        return True

    def _search_recent(self, api: APIClient, query: str) -> bool:
        limit = self.config.ask_meeting_limit
        per_meeting = self.config.ask_matches_per_meeting
        total = 0

        with create_spinner("Fetching recent meetings...", style="loading"):
            page = MeetingPage.from_payload(api.list_meetings(limit=limit))

        console.print()
        for meeting in page.meetings:
            if not meeting.id:
                continue
            try:
                with create_spinner(f"Searching {meeting.display_title}...", style="search"):
                    transcript = Transcript.from_payload(api.get_transcript(meeting.id))
            except Exception as e:
                # Transcripts may not exist yet; keep going
                logger.debug("Skipping meeting %s: %s", meeting.id, e)
                continue

            matches = transcript.search(query)
            if not matches:
                continue
            total += len(matches)

            header = Text()
            header.append(meeting.short_id, style="meeting.id")
            header.append(f"  {meeting.display_title}", style="text")
            header.append(f"  ({len(matches)} match{'es' if len(matches) != 1 else ''})", style="muted")
            console.print(header, soft_wrap=True)

            for utterance in matches[:per_meeting]:
                console.print(self._render_match(utterance, query, preview=True), soft_wrap=True)
            console.print()

        if total == 0:
            print_warning(f"No matches found in the last {len(page.meetings)} meetings.")
        else:
            console.print(f"[muted]{total} match(es) in total.[/muted]")
        console.print()
        return True

    def _render_match(self, utterance: Utterance, query: str, preview: bool = False) -> Text:
        text = utterance.text
        if preview:
            text = truncate(text, self.config.ask_preview_chars)

        line = Text("  ")
        time = utterance.time_of_day
        if time:
            line.append(f"[{time}] ", style="timestamp")
        line.append(utterance.speaker, style="speaker")
        line.append(": ", style="muted")
        body = Text(text, style="text")
        body.highlight_words([query], style="match", case_sensitive=False)
        line.append_text(body)
        return line
