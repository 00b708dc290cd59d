"""Tests for the structlog setup."""

from __future__ import annotations

import pytest
import structlog

from devdb_cli.logging_config import setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    def test_default_hides_debug(self, capsys):
        setup_logging()
        structlog.get_logger("t").debug("api_request", path="/projects")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_default_shows_warnings_on_stderr(self, capsys):
        setup_logging()
        structlog.get_logger("t").warning("config_unreadable")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "config_unreadable" in captured.err

    def test_verbose_shows_debug_on_stderr(self, capsys):
        setup_logging(verbose=True)
        structlog.get_logger("t").debug("api_request", path="/projects")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "api_request" in captured.err
        assert "path=/projects" in captured.err
        assert "[debug" in captured.err
