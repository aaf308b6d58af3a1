"""Module: logger_setup.py

Author: Michael Economou
Date: 2026-01-02

logger_setup.py
This module provides the ConfigureLogger class for setting up logging in the application.
The logger is configured to log INFO and higher levels to the console (colored level
tags), ERROR and higher to a session log file, and DEBUG+ to a debug file (optional).
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from colorama import Fore, Style, just_fix_windows_console

from casefix.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from casefix.utils.logging.logger_file_helper import add_file_handler
from casefix.utils.logging.logger_helper import DevOnlyFilter

LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.INFO: Fore.BLUE,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.MAGENTA,
}


class ColorFormatter(logging.Formatter):
    """Console formatter that colors the level tag."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno, "")
        tag = f"{color}[{record.levelname}]{Style.RESET_ALL}"
        return f"{tag} {super().format(record)}"


class ConfigureLogger:
    """
    Configures application-wide logging.
    Logs INFO and higher to the console, ERROR and higher to <log_name>_<timestamp>.log,
    and DEBUG and higher to <log_name>_debug_<timestamp>.log when enabled.
    """

    def __init__(
        self,
        log_name: str = "casefix",
        log_dir: str = "logs",
        console_level: int | None = None,
        file_level: int | None = None,
        file_enabled: bool = LOG_TO_FILE,
        debug_enabled: bool = LOG_DEBUG_FILE_ENABLED,
        max_bytes: int = LOG_FILE_MAX_BYTES,
        backup_count: int = LOG_FILE_BACKUP_COUNT,
        logger: logging.Logger | None = None,
    ):
        """
        Initializes and configures the logger.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files.
            console_level (int): Logging level for the console (config default if None).
            file_level (int): Logging level for the log file (config default if None).
            file_enabled (bool): Write the session log file.
            debug_enabled (bool): Also write the debug log file.
            max_bytes (int): Max size in bytes for rotating file.
            backup_count (int): Number of backup log files to keep.
            logger (logging.Logger): Logger to configure (defaults to the root logger).
        """
        if console_level is None:
            console_level = getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO)
        if file_level is None:
            file_level = getattr(logging, LOG_FILE_LEVEL, logging.ERROR)

        self.logger = logger or logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self.log_file_path: str | None = None
        self.debug_file_path: str | None = None

        # Already configured (second call, or a host such as pytest owns the root)
        if self.logger.hasHandlers():
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if LOG_TO_CONSOLE:
            self._setup_console_handler(console_level)

        if not file_enabled:
            return

        os.makedirs(log_dir, exist_ok=True)
        self.log_file_path = os.path.join(log_dir, f"{log_name}_{timestamp}.log")
        add_file_handler(
            logger=self.logger,
            log_path=self.log_file_path,
            level=file_level,
            max_bytes=max_bytes,
            backup_count=backup_count,
        )

        if debug_enabled:
            self.debug_file_path = os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log")
            add_file_handler(
                logger=self.logger,
                log_path=self.debug_file_path,
                level=logging.DEBUG,
                max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int):
        """Sets up console handler with UTF-8-safe output, colors and DevOnlyFilter."""
        just_fix_windows_console()
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(ColorFormatter("%(message)s"))
        self.logger.addHandler(console_handler)
