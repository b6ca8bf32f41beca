"""Local credential store.

The API key lives in a single JSON file under the user's config directory
(``~/.config/meetgeek/config.json`` unless ``XDG_CONFIG_HOME`` says otherwise).
The ``MEETGEEK_API_KEY`` environment variable always takes precedence over the
file.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from meetgeek.core.settings import get_settings

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "meetgeek"
CONFIG_FILE_NAME = "config.json"
CREDENTIAL_KEY = "apiKey"


def resolved_config_path() -> Path:
    """Return the absolute path of the config file. Does no I/O."""
    xdg = os.environ.get("XDG_CONFIG_HOME", "").strip()
    base = Path(xdg) if xdg else Path.home() / ".config"
    return (base / CONFIG_DIR_NAME / CONFIG_FILE_NAME).absolute()


class ConfigStore:
    """Reads and writes the JSON config file."""

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else resolved_config_path()

    def load(self) -> dict[str, Any]:
        """Load the config, or an empty mapping if it is missing or corrupt."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            logger.debug("Could not read %s: %s", self.path, e)
            return {}

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.debug("Ignoring malformed config %s: %s", self.path, e)
            return {}

        return data if isinstance(data, dict) else {}

    def save(self, config: dict[str, Any]) -> None:
        """Overwrite the config file with pretty-printed JSON."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(config, indent=2), encoding="utf-8")

    def get_credential(self) -> Optional[str]:
        """Resolve the API key: environment first, then the config file."""
        env_key = get_settings().api_key
        if env_key:
            return env_key

        value = self.load().get(CREDENTIAL_KEY)
        if isinstance(value, str) and value:
            return value
        return None

    def credential_source(self) -> Optional[str]:
        """Where the active credential comes from: "env", "file" or None."""
        if get_settings().api_key:
            return "env"
        value = self.load().get(CREDENTIAL_KEY)
        if isinstance(value, str) and value:
            return "file"
        return None

    def set_credential(self, value: str) -> None:
        config = self.load()
        config[CREDENTIAL_KEY] = value
        self.save(config)

    def clear_credential(self) -> None:
        config = self.load()
        config.pop(CREDENTIAL_KEY, None)
        self.save(config)


def _default_store() -> ConfigStore:
    return ConfigStore()


def load() -> dict[str, Any]:
    return _default_store().load()


def save(config: dict[str, Any]) -> None:
    _default_store().save(config)


def get_credential() -> Optional[str]:
    return _default_store().get_credential()


def set_credential(value: str) -> None:
    _default_store().set_credential(value)


def clear_credential() -> None:
    _default_store().clear_credential()
