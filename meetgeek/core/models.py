"""Value shapes for MeetGeek API payloads.

The API has renamed fields over time, so every logical field is read through
an ordered list of candidate keys; the first key present with a non-null value
wins. The tables below are the supported contract for every command.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Optional, Sequence, Union

from pydantic import BaseModel

# Container keys
MEETINGS_KEYS = ("meetings", "data", "items")
TRANSCRIPT_KEYS = ("sentences", "transcript", "segments", "utterances")
HIGHLIGHTS_KEYS = ("highlights", "data")

# Meeting fields
MEETING_ID_KEYS = ("meeting_id", "id")
MEETING_TITLE_KEYS = ("title", "name", "event_name")
MEETING_START_KEYS = ("timestamp_start_utc", "start_time", "started_at", "created_at")
MEETING_END_KEYS = ("timestamp_end_utc", "end_time", "ended_at")
PARTICIPANTS_KEYS = ("participants", "attendees")
RECORDING_URL_KEYS = ("recording_url", "recordingUrl")

# Transcript fields
SPEAKER_KEYS = ("speaker", "speaker_name", "participant_name")
TEXT_KEYS = ("text", "content", "transcript")
TIME_KEYS = ("timestamp", "start_time", "start")

# Highlight fields
HIGHLIGHT_TEXT_KEYS = ("highlightText", "text", "content")
HIGHLIGHT_TIME_KEYS = ("timestamp", "time", "start_time")

# Summary fields
SUMMARY_TEXT_KEYS = ("summary", "text", "content")
SECTION_TITLE_KEYS = ("title", "heading")
SECTION_BODY_KEYS = ("content", "text")
ACTION_ITEMS_KEYS = ("action_items", "actionItems")
ACTION_ITEM_TEXT_KEYS = ("text", "description")

UNKNOWN_SPEAKER = "Unknown"

# Numbers at or above this are epoch times (2001-09-09), not recording offsets
EPOCH_THRESHOLD = 1e9

Timestamp = Union[str, int, float, None]


def pick(data: Any, keys: Sequence[str], default: Any = None) -> Any:
    """Return the value of the first key in ``keys`` present and not None."""
    if not isinstance(data, dict):
        return default
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def pick_list(payload: Any, keys: Sequence[str]) -> Optional[list]:
    """Find the list inside a payload, or treat the payload itself as the list."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in keys:
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _opt_text(value: Any) -> Optional[str]:
    return None if value is None else _as_text(value)


def _as_timestamp(value: Any) -> Timestamp:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return value
    return None


class Participant(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None

    @property
    def label(self) -> str:
        return self.name or self.email or "?"

    @classmethod
    def from_payload(cls, data: Any) -> "Participant":
        if isinstance(data, str):
            return cls(email=data) if "@" in data else cls(name=data)
        return cls(
            name=_opt_text(pick(data, ("name", "display_name"))),
            email=_opt_text(pick(data, ("email",))),
        )


class Meeting(BaseModel):
    id: str = ""
    title: Optional[str] = None
    start: Timestamp = None
    end: Timestamp = None
    participants: list[Participant] = []
    recording_url: Optional[str] = None

    @property
    def short_id(self) -> str:
        return self.id[:8]

    @property
    def display_title(self) -> str:
        return self.title or "Untitled"

    @property
    def duration(self) -> str:
        return duration_minutes(self.start, self.end)

    @classmethod
    def from_payload(cls, data: Any) -> "Meeting":
        raw_participants = pick(data, PARTICIPANTS_KEYS, [])
        if not isinstance(raw_participants, list):
            raw_participants = []
        return cls(
            id=_as_text(pick(data, MEETING_ID_KEYS, "")),
            title=_opt_text(pick(data, MEETING_TITLE_KEYS)),
            start=_as_timestamp(pick(data, MEETING_START_KEYS)),
            end=_as_timestamp(pick(data, MEETING_END_KEYS)),
            participants=[Participant.from_payload(p) for p in raw_participants],
            recording_url=_opt_text(pick(data, RECORDING_URL_KEYS)),
        )


class MeetingPage(BaseModel):
    meetings: list[Meeting] = []
    next_cursor: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "MeetingPage":
        items = pick_list(payload, MEETINGS_KEYS) or []
        pagination = pick(payload, ("pagination",), {})
        cursor = pick(pagination, ("next_cursor", "cursor")) or pick(payload, ("next_cursor",))
        return cls(
            meetings=[Meeting.from_payload(m) for m in items if isinstance(m, dict)],
            next_cursor=_as_text(cursor) if cursor else None,
        )


class Utterance(BaseModel):
    speaker: str = UNKNOWN_SPEAKER
    text: str = ""
    timestamp: Timestamp = None

    @property
    def time_of_day(self) -> str:
        return format_time_of_day(self.timestamp)

    def matches(self, query: str) -> bool:
        return query.lower() in self.text.lower()

    def format_line(self) -> str:
        """Plain ``[time] speaker: text`` line."""
        time = self.time_of_day
        prefix = f"[{time}] " if time else ""
        return f"{prefix}{self.speaker}: {self.text}"

    @classmethod
    def from_payload(cls, data: Any) -> "Utterance":
        return cls(
            speaker=_as_text(pick(data, SPEAKER_KEYS)) or UNKNOWN_SPEAKER,
            text=_as_text(pick(data, TEXT_KEYS, "")),
            timestamp=_as_timestamp(pick(data, TIME_KEYS)),
        )


class Transcript(BaseModel):
    utterances: list[Utterance] = []

    def search(self, query: str) -> list[Utterance]:
        """Case-insensitive substring match on utterance text."""
        return [u for u in self.utterances if u.matches(query)]

    @classmethod
    def from_payload(cls, payload: Any) -> "Transcript":
        entries = pick_list(payload, TRANSCRIPT_KEYS) or []
        return cls(utterances=[Utterance.from_payload(e) for e in entries])


class Highlight(BaseModel):
    text: str = ""
    timestamp: Timestamp = None

    @classmethod
    def from_payload(cls, data: Any) -> "Highlight":
        if isinstance(data, str):
            return cls(text=data)
        return cls(
            text=_as_text(pick(data, HIGHLIGHT_TEXT_KEYS, "")),
            timestamp=_as_timestamp(pick(data, HIGHLIGHT_TIME_KEYS)),
        )


def parse_highlights(payload: Any) -> Optional[list[Highlight]]:
    """Parse highlights, or None when the payload holds no list at all."""
    entries = pick_list(payload, HIGHLIGHTS_KEYS)
    if entries is None:
        return None
    return [Highlight.from_payload(e) for e in entries]


class SummarySection(BaseModel):
    title: str = ""
    content: str = ""


class Summary(BaseModel):
    text: Optional[str] = None
    sections: list[SummarySection] = []
    action_items: list[str] = []

    @property
    def is_empty(self) -> bool:
        return not self.text and not self.sections

    @classmethod
    def from_payload(cls, payload: Any) -> "Summary":
        text = pick(payload, SUMMARY_TEXT_KEYS)
        if text is not None and not isinstance(text, str):
            text = None

        sections = []
        for raw in pick_list(pick(payload, ("sections",)), ()) or []:
            if isinstance(raw, dict):
                sections.append(SummarySection(
                    title=_as_text(pick(raw, SECTION_TITLE_KEYS, "")),
                    content=_as_text(pick(raw, SECTION_BODY_KEYS, "")),
                ))

        items = []
        for raw in pick_list(pick(payload, ACTION_ITEMS_KEYS), ()) or []:
            item = normalize_action_item(raw)
            if item:
                items.append(item)

        return cls(text=text or None, sections=sections, action_items=items)


def normalize_action_item(item: Any) -> str:
    """An action item is either a bare string or an object with text/description."""
    if isinstance(item, str):
        return item
    return _as_text(pick(item, ACTION_ITEM_TEXT_KEYS, ""))


# Time helpers

def parse_timestamp(value: Timestamp) -> Optional[datetime]:
    """Parse an ISO 8601 string or epoch number into an aware datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # Epoch milliseconds are larger than any plausible epoch seconds
        seconds = value / 1000 if value > 1e11 else value
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def duration_minutes(start: Timestamp, end: Timestamp) -> str:
    """Whole minutes between two timestamps, halves rounded up; "?" if unknown."""
    start_dt = parse_timestamp(start)
    end_dt = parse_timestamp(end)
    if start_dt is None or end_dt is None:
        return "?"
    minutes = (end_dt - start_dt).total_seconds() / 60
    return str(int(math.floor(minutes + 0.5)))


def format_date(value: Timestamp) -> str:
    parsed = parse_timestamp(value)
    return parsed.astimezone().strftime("%Y-%m-%d") if parsed else "?"


def format_datetime(value: Timestamp) -> str:
    parsed = parse_timestamp(value)
    return parsed.astimezone().strftime("%Y-%m-%d %H:%M") if parsed else "?"


def format_time_of_day(value: Timestamp) -> str:
    """Render an utterance time.

    ISO strings and epoch numbers (seconds or milliseconds) become local
    ``HH:MM:SS``. Smaller numbers are offsets in seconds from the start of the
    recording and render as ``H:MM:SS``. Anything else is shown as-is.
    """
    if value is None or value == "" or isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return str(value)
        if value >= EPOCH_THRESHOLD:
            parsed = parse_timestamp(value)
            return parsed.astimezone().strftime("%H:%M:%S") if parsed else str(value)
        total = int(value)
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value)
    return parsed.astimezone().strftime("%H:%M:%S")


def mask_credential(value: str) -> str:
    """Show the first 8 and last 4 characters of a secret."""
    if len(value) <= 12:
        return value[:2] + "..." + value[-2:] if len(value) > 4 else "***"
    return f"{value[:8]}...{value[-4:]}"
