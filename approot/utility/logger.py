"""Shared logging configuration with colored console output and file support.

File handlers are placed inside the application's logs directory as
resolved by the Paths registry.
"""

import logging
import re
import sys
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Optional


# ANSI color codes for terminal
LEVEL_COLORS = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
}
RESET_COLOR = "\033[0m"

FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(filename)s:%(lineno)d | %(message)s"
)
CONSOLE_FORMAT = "%(colored_levelname)s %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_WINDOWS_ABSOLUTE = re.compile(r"^[A-Za-z]:\\")


def resolve_log_path(paths: Any, path: str) -> str:
    """Return the absolute location of a log file.

    Absolute paths are kept as given. ``logs/<file>`` and bare relative
    names are placed in the registry's logs directory.
    """
    if path.startswith("/") or _WINDOWS_ABSOLUTE.match(path):
        return path

    if path.startswith("logs/"):
        return paths.get_logs_path() + "/" + path[len("logs/"):]

    return paths.get_logs_path() + "/" + path


class ColorFormatter(logging.Formatter):
    """
    Custom formatter that adds colors based on log level.
    Only affects console output (handlers using this formatter).
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with a colorized level name for console output."""
        # Build a padded level name so spacing stays consistent
        padded_level = f"{record.levelname + ':':<9}"
        color = LEVEL_COLORS.get(record.levelname, "")
        record.colored_levelname = (
            f"{color}{padded_level}{RESET_COLOR}" if color else padded_level
        )

        return super().format(record)


class AppLogger:
    """
    Central logging helper.

    Usage:
        from approot.utility.logger import AppLogger

        # In the app factory (once)
        AppLogger.init(level=logging.INFO, log_to_file=True, paths=paths)

        # In any module
        logger = AppLogger.get_logger(__name__)
        logger.info("Hello")
    """

    _configured: bool = False

    @classmethod
    def init(
        cls,
        level: int = logging.INFO,
        log_to_file: bool = False,
        filename: str = "app.log",
        paths: Any = None,
        rotating: bool = False,
        max_files: int = 7,
    ) -> None:
        """
        Initialize root logger with colored console handler and optional file handler.
        Safe to call multiple times – only configures once.
        """
        if cls._configured:
            return

        if log_to_file and paths is None:
            raise ValueError("A Paths registry is required when log_to_file is set.")

        cls._configured = True
        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Remove any existing handlers (e.g., uvicorn/basicConfig)
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(ColorFormatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

        # Optional file handler (no colors)
        if log_to_file:
            file_handler = cls._file_handler(
                resolve_log_path(paths, filename), rotating, max_files
            )
            file_handler.setLevel(logging.WARNING)
            root_logger.addHandler(file_handler)

    @classmethod
    def reset(cls) -> None:
        """Forget the previous init() so the next call configures again."""
        cls._configured = False

    @staticmethod
    def _file_handler(
        file_path: str, rotating: bool, max_files: int
    ) -> logging.Handler:
        """Build a plain or daily rotating file handler, creating its directory."""
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)

        if rotating:
            handler: logging.Handler = TimedRotatingFileHandler(
                file_path,
                when="midnight",
                backupCount=max_files,
                encoding="utf-8",
            )
        else:
            handler = logging.FileHandler(file_path, encoding="utf-8")

        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        return handler

    @staticmethod
    def _dedicated(name: str, level: int, handler: logging.Handler) -> Logger:
        """Attach a single handler to a named, non-propagating logger."""
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for old in logger.handlers[:]:
            logger.removeHandler(old)
            old.close()
        handler.setLevel(level)
        logger.addHandler(handler)
        logger.propagate = False
        return logger

    @classmethod
    def create_file_logger(
        cls, name: str, path: str, paths: Any, level: int = logging.DEBUG
    ) -> Logger:
        """Logger writing to ``path`` (relative to the logs directory)."""
        handler = cls._file_handler(
            resolve_log_path(paths, path), rotating=False, max_files=0
        )
        return cls._dedicated(name, level, handler)

    @classmethod
    def create_rotating_logger(
        cls,
        name: str,
        path: str,
        paths: Any,
        max_files: int = 7,
        level: int = logging.DEBUG,
    ) -> Logger:
        """Logger rotating ``path`` daily and keeping ``max_files`` backups."""
        handler = cls._file_handler(
            resolve_log_path(paths, path), rotating=True, max_files=max_files
        )
        return cls._dedicated(name, level, handler)

    @classmethod
    def create_console_logger(
        cls, name: str = "console", level: int = logging.DEBUG
    ) -> Logger:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColorFormatter(CONSOLE_FORMAT))
        return cls._dedicated(name, level, handler)

    @staticmethod
    def get_logger(name: Optional[str] = None) -> Logger:
        """
        Get a named logger. Call this in any module instead of logging.getLogger().
        """
        return logging.getLogger(name if name is not None else __name__)
