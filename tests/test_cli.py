"""Tests for the command line entry point and logging setup."""

import io
import json
import logging

import pytest

from chat_tools import __main__ as cli
from chat_tools.log_config import setup_logging


@pytest.fixture
def no_logging_setup(monkeypatch):
    """Keep CLI runs from reconfiguring logging for the rest of the session."""
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda level: calls.append(level))
    return calls


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("chat_tools")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestMain:
    """Tests for python -m chat_tools."""

    def test_formats_message(self, capsys, no_logging_setup):
        """Test the formatted message is printed."""
        assert cli.main(["What is [calc: 2**8]?"]) == 0
        assert capsys.readouterr().out == "What is [calc: 2**8] → 256?\n"

    def test_json_output(self, capsys, no_logging_setup):
        """Test --json prints the processed message."""
        cli.main(["--json", "[search: latest news]"])
        data = json.loads(capsys.readouterr().out)
        assert data["content"] == "[search: latest news]"
        assert data["tools"][0]["tool"] == "search"
        assert data["tools"][0]["result"].startswith("Top headlines")

    def test_reads_stdin(self, capsys, monkeypatch, no_logging_setup):
        """Test the message is read from stdin when omitted."""
        monkeypatch.setattr("sys.stdin", io.StringIO("[calc: 6*7]\n"))
        cli.main([])
        assert capsys.readouterr().out == "[calc: 6*7] → 42\n"

    def test_log_level_flag(self, capsys, no_logging_setup):
        """Test --log-level is passed to logging setup."""
        cli.main(["--log-level", "DEBUG", "plain"])
        assert no_logging_setup == ["DEBUG"]


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_string_level(self, restore_logger):
        """Test level names are accepted."""
        setup_logging("debug")
        assert restore_logger.level == logging.DEBUG
        assert restore_logger.handlers

    def test_int_level(self, restore_logger):
        """Test numeric levels are accepted."""
        setup_logging(logging.WARNING)
        assert restore_logger.level == logging.WARNING
