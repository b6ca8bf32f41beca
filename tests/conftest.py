"""Pytest configuration and shared fixtures."""

import json
import shutil
import tempfile
from pathlib import Path

import pytest

from meetgeek.core.config import CLIConfig
from tests.util_fake_api import BASE_URL, FakeAPI


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for tests that need filesystem access.
    Automatically cleaned up after test completes.
    """
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, temp_directory):
    """Keep tests away from the real environment and home directory."""
    for name in ("MEETGEEK_API_KEY", "MEETGEEK_BASE_URL", "MEETGEEK_LOG_LEVEL", "MEETGEEK_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_directory / "xdg"))
    monkeypatch.setenv("HOME", str(temp_directory / "home"))
    monkeypatch.chdir(temp_directory)


@pytest.fixture
def config_path(temp_directory):
    """Config file location inside the temporary directory (not created)."""
    return temp_directory / "config" / "meetgeek" / "config.json"


@pytest.fixture
def cli_config(config_path):
    """CLI configuration pointing at the test API and temporary config file."""
    return CLIConfig(base_url=BASE_URL, config_path=config_path)


@pytest.fixture
def fake_api():
    return FakeAPI()


@pytest.fixture
def write_config(config_path):
    """Write raw text or a JSON-serializable object to the config file."""
    def _write(content):
        config_path.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(content, str):
            content = json.dumps(content)
        config_path.write_text(content, encoding="utf-8")
        return config_path
    return _write


@pytest.fixture
def sample_meetings():
    """Two meetings in the current API shape."""
    return {
        "meetings": [
            {
                "meeting_id": "abcdef1234567890",
                "title": "Quarterly planning",
                "timestamp_start_utc": "2024-01-15T10:00:00Z",
                "timestamp_end_utc": "2024-01-15T10:45:00Z",
            },
            {
                "meeting_id": "12345678zzzzzzzz",
                "timestamp_start_utc": "2024-01-16T09:00:00Z",
            },
        ],
        "pagination": {"next_cursor": None},
    }


@pytest.fixture
def sample_transcript():
    """Transcript mixing the historical field names."""
    return {
        "sentences": [
            {"speaker": "Alice", "text": "Let's review the budget first.", "timestamp": 5},
            {"speaker_name": "Bob", "content": "The budget looks fine to me.", "timestamp": 65},
            {"participant_name": "Carol", "transcript": "Next item is hiring."},
            {},
        ]
    }
