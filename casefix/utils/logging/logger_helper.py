"""Module: logger_helper.py

Author: Michael Economou
Date: 2026-01-02

logger_helper.py
Helpers for working with loggers in a safe and consistent way.
Functions:
get_logger(name): Returns a propagating logger with UTF-8-safe logging methods.
safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
safe_log(logger_func, message): Logs a message, falling back to ASCII if needed.
colorize(text, color): Wraps text in a colorama color and reset code.
strip_ansi(text): Removes ANSI escape sequences (for file output).
DevOnlyFilter:
A logging filter that hides dev-only debug messages from the console,
while still allowing them to be stored in file logs.
"""

import logging
import re
from functools import partial

from colorama import Fore, Style

from casefix.config import SHOW_DEV_ONLY_IN_CONSOLE

_ASCII_REPLACEMENTS = {
    "\u2192": "->",  # right arrow
    "\u2014": "--",  # em dash
    "\u2013": "-",  # en dash
    "\u2026": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _ASCII_REPLACEMENTS)))
_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

COLORS = {
    "red": Fore.RED,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "blue": Fore.BLUE,
    "magenta": Fore.MAGENTA,
    "cyan": Fore.CYAN,
    "white": Fore.WHITE,
}


def safe_text(text: str) -> str:
    """
    Replaces unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text (str): The original text containing Unicode symbols.

    Returns:
        str: A version of the text with replacements for problematic characters.
    """
    return _REPLACEMENT_PATTERN.sub(lambda m: _ASCII_REPLACEMENTS[m.group(0)], text)


def strip_ansi(text: str) -> str:
    """Remove ANSI color sequences from text."""
    return _ANSI_PATTERN.sub("", text)


def colorize(text: str, color: str) -> str:
    """
    Wrap text in the given color for console output.

    Args:
        text (str): Text to color.
        color (str): One of the keys of COLORS.

    Returns:
        str: Colored text, terminated by a style reset.
    """
    return f"{COLORS[color]}{text}{Style.RESET_ALL}"


def safe_log(logger_func, message: str, *args, **kwargs):
    """
    Logs a message using the given logger function (e.g. logger.info),
    falling back to ASCII-safe output if UnicodeEncodeError occurs.
    """
    if not isinstance(message, str):
        message = repr(message)
    try:
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(message), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger):
    """Replaces logger's logging methods with safe_log-wrapped versions."""
    for method_name in ["debug", "info", "warning", "error", "critical"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Returns a logger with the given name, delegating to the root logger for output.

    Args:
        name (str): Optional name for the logger (defaults to this module)

    Returns:
        logging.Logger: Patched logger instance
    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)

    # The root logger handles all output (console + files)
    logger.propagate = True

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
