"""Core CLI components - configuration, credential store, API client and models."""

from meetgeek.core.api_client import APIClient
from meetgeek.core.config import CLIConfig, ClientConfig
from meetgeek.core.config_store import ConfigStore, resolved_config_path
from meetgeek.core.errors import APIError, AuthenticationError, MeetGeekError

__all__ = [
    "APIClient",
    "APIError",
    "AuthenticationError",
    "CLIConfig",
    "ClientConfig",
    "ConfigStore",
    "MeetGeekError",
    "resolved_config_path",
]
