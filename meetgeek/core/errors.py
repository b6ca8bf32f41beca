"""Exceptions raised by the MeetGeek client and commands."""

from __future__ import annotations


class MeetGeekError(Exception):
    """Base class for all MeetGeek CLI errors."""


class AuthenticationError(MeetGeekError):
    """No API key could be resolved."""

    def __init__(self, message: str = "No API key found. Run 'meetgeek auth' to set up your API key."):
        super().__init__(message)


class APIError(MeetGeekError):
    """The API answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"MeetGeek API error ({status_code}): {body}")


class APIConnectionError(MeetGeekError):
    """The request never got a response (connection refused, timeout...)."""


class ValidationError(MeetGeekError):
    """User input was rejected before reaching the API."""


class VerificationError(MeetGeekError):
    """A candidate API key was rejected by the API."""
