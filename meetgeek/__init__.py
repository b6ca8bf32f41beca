"""
MeetGeek CLI - a terminal client for the MeetGeek meeting-intelligence API.

This CLI provides a terminal-first experience for:
- Storing and verifying your API key
- Listing meetings and inspecting their details
- Reading summaries, highlights and transcripts
- Searching transcript text across recent meetings
"""

__version__ = "0.1.0"
__app_name__ = "MeetGeek"
