"""
Module: test_logging.py

Author: Michael Economou
Date: 2026-01-05

Tests the logging system setup:
- helpers (safe_text, strip_ansi, colorize, DevOnlyFilter)
- cached loggers from LoggerFactory
- rotating file handlers write plain text
- ConfigureLogger splits session and debug logs
"""

import logging
import os

import pytest
from colorama import Style

from casefix.utils.logging.logger_factory import LoggerFactory, get_cached_logger
from casefix.utils.logging.logger_file_helper import add_file_handler
from casefix.utils.logging.logger_helper import (
    DevOnlyFilter,
    colorize,
    safe_log,
    safe_text,
    strip_ansi,
)
from casefix.utils.logging.logger_setup import ColorFormatter, ConfigureLogger


@pytest.fixture
def isolated_logger():
    """A non-propagating logger, detached from pytest's root handlers."""
    logger = logging.getLogger("casefix.tests.isolated")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    yield logger
    logger.setLevel(logging.NOTSET)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def _read(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


def _record(msg, level=logging.INFO, **extra):
    record = logging.LogRecord("casefix", level, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


class TestHelpers:
    def test_safe_text(self):
        assert safe_text("a \u2192 b \u2014 c \u2013 d\u2026") == "a -> b -- c - d..."

    def test_colorize_and_strip(self):
        colored = colorize("name.txt", "green")
        assert colored != "name.txt"
        assert colored.endswith(Style.RESET_ALL)
        assert strip_ansi(colored) == "name.txt"

    def test_safe_log_falls_back_to_ascii(self):
        received = []

        def picky(message, *args, **kwargs):
            if not message.isascii():
                raise UnicodeEncodeError("ascii", message, 0, 1, "no")
            received.append(message)

        safe_log(picky, "a \u2192 b")
        assert received == ["a -> b"]

    def test_dev_only_filter(self):
        dev_filter = DevOnlyFilter()
        assert dev_filter.filter(_record("normal")) is True
        assert dev_filter.filter(_record("internal", dev_only=True)) is False


class TestLoggerFactory:
    def test_cached_instance(self):
        assert get_cached_logger("casefix.tests.same") is get_cached_logger("casefix.tests.same")

    def test_set_global_level(self, restore_logger_levels):
        logger = get_cached_logger("casefix.tests.level")
        LoggerFactory.set_global_level(logging.WARNING)
        assert logger.level == logging.WARNING
        assert get_cached_logger("casefix.tests.level_new").level == logging.WARNING


class TestFileHandlers:
    def test_file_output_is_plain(self, isolated_logger, temp_dir):
        path = os.path.join(temp_dir, "nested", "rename.log")
        add_file_handler(isolated_logger, path, level=logging.INFO)

        isolated_logger.info("Renamed: %s", colorize("new.txt", "green"))

        content = _read(path)
        assert "Renamed: new.txt" in content
        assert "\x1b[" not in content

    def test_level_and_name_filter(self, isolated_logger, temp_dir):
        path = os.path.join(temp_dir, "only-errors.log")
        add_file_handler(
            isolated_logger, path, level=logging.ERROR, filter_by_name="casefix.tests.isolated"
        )
        child = logging.getLogger("casefix.tests.isolated.child")

        isolated_logger.warning("too quiet")
        isolated_logger.error("loud enough")
        child.error("wrong logger")

        content = _read(path)
        assert "loud enough" in content
        assert "too quiet" not in content
        assert "wrong logger" not in content

    def test_file_is_created_on_first_record(self, isolated_logger, temp_dir):
        path = os.path.join(temp_dir, "lazy.log")
        add_file_handler(isolated_logger, path, level=logging.ERROR)

        isolated_logger.info("below the file level")
        assert not os.path.exists(path)

        isolated_logger.error("first error")
        assert "first error" in _read(path)


class TestConfigureLogger:
    def test_session_and_debug_files(self, isolated_logger, temp_dir):
        config = ConfigureLogger(
            log_name="casefix", log_dir=temp_dir, debug_enabled=True, logger=isolated_logger
        )

        isolated_logger.debug("debug detail")
        isolated_logger.error("rename failed")

        assert os.path.basename(config.log_file_path).startswith("casefix_")
        session = _read(config.log_file_path)
        debug = _read(config.debug_file_path)
        assert "rename failed" in session and "debug detail" not in session
        assert "rename failed" in debug and "debug detail" in debug

    def test_file_logging_disabled(self, isolated_logger, temp_dir):
        log_dir = os.path.join(temp_dir, "never")
        config = ConfigureLogger(log_dir=log_dir, file_enabled=False, logger=isolated_logger)

        assert config.log_file_path is None
        assert not os.path.exists(log_dir)
        assert len(isolated_logger.handlers) == 1

    def test_configures_only_once(self, isolated_logger, temp_dir):
        ConfigureLogger(log_dir=temp_dir, file_enabled=False, logger=isolated_logger)
        ConfigureLogger(log_dir=temp_dir, file_enabled=False, logger=isolated_logger)

        assert len(isolated_logger.handlers) == 1

    def test_color_formatter(self):
        output = ColorFormatter("%(message)s").format(_record("hello", logging.WARNING))
        assert strip_ansi(output) == "[WARNING] hello"
