"""API Client for the MeetGeek REST API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from meetgeek.core.config import ClientConfig
from meetgeek.core.errors import APIConnectionError, APIError, AuthenticationError

logger = logging.getLogger(__name__)


class APIClient:
    """HTTP client for the MeetGeek API.

    Every resource method performs exactly one round trip. There is no retry,
    no pagination loop and no caching.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if config is None:
            config = ClientConfig.resolve()
        if not config.credential:
            raise AuthenticationError()

        self.credential = config.credential
        self.base_url = config.base_url.rstrip("/")
        self.timeout = config.timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def request(
        self,
        path: str,
        method: str = "GET",
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Make an HTTP request to the API and return the decoded JSON body.

        Args:
            path: Endpoint path including the leading slash
            method: HTTP method
            params: Query parameters
            headers: Extra headers; Authorization and Content-Type always win

        Raises:
            APIError: on any non-2xx status, carrying the status and raw body
            APIConnectionError: when no response was received
            ValueError: when a successful response is not valid JSON
        """
        url = f"{self.base_url}{path}"
        request_headers = {
            **(headers or {}),
            "Authorization": f"Bearer {self.credential}",
            "Content-Type": "application/json",
        }

        logger.debug("%s %s params=%s", method, url, params)
        try:
            response = self.client.request(method, url, params=params, headers=request_headers)
        except httpx.ConnectError as e:
            raise APIConnectionError(f"Connection failed: could not reach {self.base_url} ({e})") from e
        except httpx.TimeoutException as e:
            raise APIConnectionError(f"Request timed out after {int(self.timeout)}s: {url}") from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        if not response.is_success:
            raise APIError(response.status_code, response.text)

        return response.json()

    # Meetings
    def list_meetings(self, limit: Optional[int] = None, cursor: Optional[str] = None) -> Any:
        """List meetings, one page only."""
        params: dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit
        if cursor:
            params["cursor"] = cursor
        return self.request("/meetings", params=params or None)

    def get_meeting_details(self, meeting_id: str) -> Any:
        return self.request(f"/meetings/{meeting_id}")

    # Meeting content
    def get_transcript(self, meeting_id: str) -> Any:
        return self.request(f"/meetings/{meeting_id}/transcript")

    def get_highlights(self, meeting_id: str) -> Any:
        return self.request(f"/meetings/{meeting_id}/highlights")

    def get_summary(self, meeting_id: str) -> Any:
        return self.request(f"/meetings/{meeting_id}/summary")
