"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-01-02

logger_factory.py
Logger factory with caching. Every module obtains its logger through
get_cached_logger(__name__) so levels can be adjusted in one place.
"""

import logging
import threading

from casefix.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """
    Thread-safe logger factory with caching.

    Maintains a single logger instance per module name.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """
        Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance
        """
        name = name or "casefix"

        with cls._lock:
            if name not in cls._loggers:
                logger = get_logger(name)
                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)
                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers (and future ones)."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_logger_count(cls) -> int:
        return len(cls._loggers)

    @classmethod
    def clear_cache(cls) -> None:
        """Forget all cached loggers and the global level."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None


def get_cached_logger(name: str | None = None) -> logging.Logger:
    return LoggerFactory.get_logger(name)
