"""Auth command - store, show or clear the API key."""

from __future__ import annotations

from rich.prompt import Prompt
from rich.text import Text

from meetgeek.commands.base import BaseCommand
from meetgeek.core.errors import ValidationError, VerificationError
from meetgeek.core.models import mask_credential
from meetgeek.ui.console import console, print_success, print_warning
from meetgeek.ui.spinners import create_spinner


class AuthCommand(BaseCommand):
    """Manage the stored MeetGeek API key."""

    name = "auth"
    description = "Set up, show or clear your API key"
    usage = "meetgeek auth [--clear] [--show]"
    details = (
        "--show prints the first 8 and last 4 characters of the key. "
        "Keys of 12 characters or fewer show only the first and last 2."
    )
    switches = frozenset({"clear", "show"})

    def execute(self, args: list[str]) -> bool:
        flags, _ = self.parse_flags(args)

        if flags.get("clear"):
            return self._clear()
        if flags.get("show"):
            return self._show()
        return self._setup()

    def _clear(self) -> bool:
        self.config.store.clear_credential()
        print_success("API key removed.")
        return True

    def _show(self) -> bool:
        store = self.config.store
        key = store.get_credential()

        console.print()
        if key:
            source = store.credential_source()
            origin = "MEETGEEK_API_KEY" if source == "env" else "config file"
            line = Text()
            line.append("  API key:  ", style="muted")
            line.append(mask_credential(key), style="highlight")
            line.append(f"  (from {origin})", style="muted")
            console.print(line, soft_wrap=True)
        else:
            print_warning("  No API key configured. Run 'meetgeek auth' to set one up.")

        path = Text()
        path.append("  Config:   ", style="muted")
        path.append(str(store.path), style="path")
        console.print(path, soft_wrap=True)
        console.print()
        return True

    def _setup(self) -> bool:
        key = self._prompt_key()

        if len(key) < self.config.min_key_length:
            raise ValidationError(
                f"Invalid API key (must be at least {self.config.min_key_length} characters)."
            )

        # Verify the candidate before it touches the config file
        api = self.client(credential=key)
        try:
            with create_spinner("Verifying API key...", style="auth"):
                api.list_meetings(limit=1)
        except Exception as e:
            raise VerificationError(f"API key verification failed: {e}") from e
        finally:
            api.close()

        self.config.store.set_credential(key)
        print_success(f"API key saved to {self.config.store.path}")
        return True

    def _prompt_key(self) -> str:
        """Prompt for the API key without echoing it."""
        console.print()
        console.print("[muted]Find your API key in MeetGeek under Integrations → Public API.[/muted]")
        return Prompt.ask(
            "[primary]❯[/primary] [text]Enter your MeetGeek API key[/text]",
            console=console,
            password=True,
        ).strip()
