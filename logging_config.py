"""
Logging configuration for hexl.

stderr belongs to curses while the editor is running, so records only ever go
to a log file, and only when asked for.
"""

import logging
from typing import Optional

ROOT_LOGGER = "hexl"


class LoggingManager:
    """Manager for logging configuration."""

    FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    @classmethod
    def setup(cls, level: str = "NONE", log_path: Optional[str] = None):
        """
        Setup logging configuration.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL, NONE)
            log_path: File to append records to; logging stays off without one
        """
        root_logger = logging.getLogger(ROOT_LOGGER)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.propagate = False

        if level.upper() == "NONE" or not log_path:
            root_logger.addHandler(logging.NullHandler())
            root_logger.setLevel(logging.CRITICAL + 1)
            return

        log_level = getattr(logging, level.upper(), logging.WARNING)

        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(cls.FORMAT))

        root_logger.setLevel(log_level)
        root_logger.addHandler(handler)

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Get logger for a module, e.g. 'hex_editor' -> 'hexl.hex_editor'."""
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(level: str = "NONE", log_path: Optional[str] = None):
    LoggingManager.setup(level, log_path)


def get_logger(name: str) -> logging.Logger:
    return LoggingManager.get_logger(name)
