"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from meetgeek.core.logging import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    def test_installs_single_rich_handler(self, restore_root_logger):
        configure_logging("debug")
        configure_logging("debug")

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)

    def test_unknown_level_falls_back_to_warning(self, restore_root_logger):
        configure_logging("chatty")
        assert restore_root_logger.level == logging.WARNING

    def test_httpx_stays_quiet_at_debug(self, restore_root_logger):
        configure_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
