"""Tests for structured JSON logging."""

import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from telerest.shared.logging import StructuredFormatter, get_logger, setup_logging


class TestStructuredFormatter:
    def test_formats_extra_fields_as_json(self) -> None:
        record = logging.LogRecord("telerest.test", logging.INFO, __file__, 1, "API request", (), None)
        record.method = "GET"
        record.url = "https://api.twilio.com/2010-04-01/Accounts.json"

        data = json.loads(StructuredFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "telerest.test"
        assert data["message"] == "API request"
        assert data["method"] == "GET"
        assert data["url"].endswith("Accounts.json")
        assert "timestamp" in data

    def test_includes_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("t", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        data = json.loads(StructuredFormatter().format(record))

        assert "ValueError: boom" in data["exception"]


class TestGetLogger:
    def test_library_logger_only_gets_a_null_handler(self) -> None:
        first = get_logger("telerest.test.handlers")
        second = get_logger("telerest.test.handlers")

        assert first is second
        assert len(second.handlers) == 1
        assert isinstance(second.handlers[0], logging.NullHandler)
        assert not any(isinstance(h, logging.StreamHandler) for h in second.handlers)

    def test_silent_without_setup(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_logger("telerest.test.silent").warning("nobody configured logging")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self) -> Iterator[None]:
        root = logging.getLogger()
        previous_handlers, previous_level = root.handlers[:], root.level
        yield
        root.handlers = previous_handlers
        root.setLevel(previous_level)

    def test_quiets_http_libraries(self) -> None:
        setup_logging()

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
        assert isinstance(logging.getLogger().handlers[0].formatter, StructuredFormatter)

    def test_each_record_is_written_once(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging()

        get_logger("telerest.test.once").info("REST client configured", extra={"host": "api.twilio.com"})

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["host"] == "api.twilio.com"

    def test_level_comes_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWILIO_LOG_LEVEL", "debug")

        setup_logging()

        assert logging.getLogger().level == logging.DEBUG

    def test_level_is_read_from_dotenv(self, tmp_path: Path) -> None:
        # conftest chdirs into tmp_path
        (tmp_path / ".env").write_text("TWILIO_LOG_LEVEL=ERROR\n")

        setup_logging()

        assert logging.getLogger().level == logging.ERROR
