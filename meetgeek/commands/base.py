"""Base command class for CLI commands."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from meetgeek.core.api_client import APIClient
from meetgeek.core.config import CLIConfig
from meetgeek.core.errors import ValidationError
from meetgeek.ui.console import print_error, print_warning

logger = logging.getLogger(__name__)


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    name: str = "base"
    description: str = "Base command"
    usage: str = ""
    details: str = ""
    aliases: list[str] = []
    # Flags that never take a value
    switches: frozenset[str] = frozenset()

    def __init__(self, config: CLIConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self.transport = transport

    def client(self, credential: Optional[str] = None) -> APIClient:
        """Build an API client; raises AuthenticationError without a key."""
        return APIClient(self.config.client_config(credential), transport=self.transport)

    @abstractmethod
    def execute(self, args: list[str]) -> bool:
        """
        Execute the command.

        Args:
            args: Command arguments

        Returns:
            True if successful, False otherwise
        """
        pass

    def run(self, args: list[str]) -> int:
        """Execute the command and map the outcome to an exit status."""
        try:
            return 0 if self.execute(args) else 1
        except KeyboardInterrupt:
            print_warning("\nInterrupted")
            return 1
        except Exception as e:
            logger.debug("%s failed", self.name, exc_info=True)
            print_error(str(e) or type(e).__name__)
            return 1

    def parse_flags(self, args: list[str]) -> tuple[dict[str, Any], list[str]]:
        """Parse command-line flags from arguments."""
        flags = {}
        remaining = []

        i = 0
        while i < len(args):
            arg = args[i]
            if arg.startswith("--"):
                key = arg[2:]
                if "=" in key:
                    key, value = key.split("=", 1)
                    flags[key] = value
                elif key not in self.switches and i + 1 < len(args) and not args[i + 1].startswith("-"):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            elif arg.startswith("-") and len(arg) == 2:
                key = arg[1]
                if key not in self.switches and i + 1 < len(args) and not args[i + 1].startswith("-"):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            else:
                remaining.append(arg)
            i += 1

        return flags, remaining

    def require_meeting_id(self, remaining: list[str]) -> str:
        if not remaining:
            raise ValidationError(f"Missing meeting ID. Usage: {self.usage}")
        return remaining[0]

    def int_flag(
        self, flags: dict[str, Any], *names: str, default: int, minimum: Optional[int] = None
    ) -> int:
        for name in names:
            value = flags.get(name)
            if value is None:
                continue
            try:
                if isinstance(value, bool):
                    raise ValueError(value)
                number = int(value)
            except (TypeError, ValueError):
                raise ValidationError(f"--{names[0]} expects a number, got {value!r}") from None
            if minimum is not None and number < minimum:
                raise ValidationError(f"--{names[0]} must be at least {minimum}, got {number}")
            return number
        return default
