"""CLI and client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from meetgeek.core.config_store import ConfigStore
from meetgeek.core.settings import get_settings


@dataclass
class ClientConfig:
    """Explicit options for the API client."""

    credential: Optional[str] = None
    base_url: str = ""
    timeout: float = 30.0

    @classmethod
    def resolve(
        cls,
        credential: Optional[str] = None,
        base_url: Optional[str] = None,
        store: Optional[ConfigStore] = None,
    ) -> "ClientConfig":
        """Fill in whatever was not given from the environment and config file."""
        settings = get_settings()
        if not credential:
            credential = (store or ConfigStore()).get_credential()
        return cls(
            credential=credential,
            base_url=base_url or settings.base_url,
            timeout=settings.timeout,
        )


@dataclass
class CLIConfig:
    """Configuration for the MeetGeek CLI."""

    base_url: str = ""
    config_path: Optional[Path] = None
    verbose: bool = False

    # List defaults
    list_limit: int = 10
    ask_meeting_limit: int = 10
    ask_matches_per_meeting: int = 3
    ask_preview_chars: int = 100

    # Minimum accepted API key length for `auth`
    min_key_length: int = 10

    store: ConfigStore = field(init=False)

    def __post_init__(self):
        if not self.base_url:
            self.base_url = get_settings().base_url
        self.store = ConfigStore(self.config_path)

    @classmethod
    def from_env(cls) -> "CLIConfig":
        """Create config from environment variables."""
        return cls(base_url=get_settings().base_url)

    def client_config(self, credential: Optional[str] = None) -> ClientConfig:
        return ClientConfig.resolve(
            credential=credential,
            base_url=self.base_url,
            store=self.store,
        )
