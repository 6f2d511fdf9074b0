"""
Tests for logging setup.
"""

import logging

import pytest
from rich.logging import RichHandler

from sftpsync.utils.logging import FileFormatter, _parse_level, get_logger, setup_logging


class TestParseLevel:
    @pytest.mark.parametrize(
        "value,expected",
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR), ("bogus", logging.INFO)],
    )
    def test_parse(self, value, expected):
        assert _parse_level(value) == expected


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler_appends(self, tmp_path):
        log_file = tmp_path / "logs" / "sync.log"
        log_file.parent.mkdir()
        log_file.write_text("earlier\n")

        setup_logging(level="INFO", log_file=log_file, console_enabled=False)
        get_logger("sftpsync.test").info("hello")

        content = log_file.read_text()
        assert content.startswith("earlier\n")
        assert "sftpsync.test: hello" in content

    def test_creates_log_directory(self, tmp_path):
        log_file = tmp_path / "a" / "b" / "sync.log"
        setup_logging(log_file=log_file, console_enabled=False)
        assert log_file.parent.is_dir()

    def test_repeated_setup_does_not_stack_handlers(self, tmp_path):
        log_file = tmp_path / "sync.log"
        setup_logging(log_file=log_file, use_rich=False)
        logger = setup_logging(log_file=log_file, use_rich=False)

        assert len(logger.handlers) == 2

    def test_level_applied(self):
        logger = setup_logging(level="DEBUG", console_enabled=False)
        assert logger.level == logging.DEBUG

    def test_plain_console_handler(self):
        logger = setup_logging(use_rich=False)
        assert any(type(h) is logging.StreamHandler for h in logger.handlers)

    def test_rich_console_handler_by_default(self):
        logger = setup_logging()
        assert [type(h) for h in logger.handlers] == [RichHandler]

    def test_file_formatter_format(self):
        record = logging.LogRecord("sftpsync.x", logging.WARNING, __file__, 1, "careful", None, None)
        line = FileFormatter().format(record)
        assert "[WARNING ] sftpsync.x: careful" in line
