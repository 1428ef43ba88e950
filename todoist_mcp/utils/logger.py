"""
Logger Utility
==============

Levelled, context-prefixed records for the server, always on stderr. The
MCP stdio transport owns stdout; a stray print there breaks the protocol
stream.

The minimum level is resolved on every record, not when a Logger is built.
Module-level loggers therefore pick up a LOG_LEVEL that python-dotenv loads
later, and `set_log_level()` lets startup pin the configured level.

Usage:
    from todoist_mcp.utils.logger import Logger

    views_logger = Logger("Planning")
    views_logger.debug("Rendering view", {"uri": "todoist://planning/daily"})
"""

import json
import os
import sys
from datetime import datetime
from enum import IntEnum
from typing import Any


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40


class Colors:
    """ANSI codes, used only when stderr is a terminal."""
    RESET = "\033[0m"
    DEBUG = "\033[36m"    # Cyan
    INFO = "\033[32m"     # Green
    WARNING = "\033[33m"  # Yellow
    ERROR = "\033[31m"    # Red
    DIM = "\033[2m"


_LEVEL_NAMES = {
    "DEBUG": LogLevel.DEBUG,
    "INFO": LogLevel.INFO,
    "WARNING": LogLevel.WARNING,
    "WARN": LogLevel.WARNING,
    "ERROR": LogLevel.ERROR,
}

# Set by set_log_level(); None means follow LOG_LEVEL
_level_override: LogLevel | None = None


def parse_level(name: str | None) -> LogLevel:
    """Map a level name such as "warn" or "DEBUG" to a LogLevel, INFO if unrecognised."""
    return _LEVEL_NAMES.get((name or "INFO").upper(), LogLevel.INFO)


def set_log_level(name: str | None) -> None:
    """
    Pin the minimum level for every logger in the process.

    Passing None drops the pin, and loggers go back to reading LOG_LEVEL.
    """
    global _level_override
    _level_override = parse_level(name) if name else None


def current_level() -> LogLevel:
    if _level_override is not None:
        return _level_override
    return parse_level(os.getenv("LOG_LEVEL"))


class Logger:
    """
    Writes records prefixed with a context such as [Dispatcher:close_task].

    Example:
        logger = Logger("Dispatcher")
        logger.info("Dispatching tool")

        child = logger.child("get_tasks_by_filter")
        child.debug("Remote call", {"filter": "today"})
    """

    def __init__(self, context: str = ""):
        self.context = context

    def child(self, child_context: str) -> "Logger":
        """Return a logger whose context is this one's plus `child_context`."""
        new_context = f"{self.context}:{child_context}" if self.context else child_context
        return Logger(new_context)

    def _paint(self, text: str, color: str) -> str:
        if not sys.stderr.isatty():
            return text
        return f"{color}{text}{Colors.RESET}"

    def _format_message(self, level: str, message: str, color: str) -> str:
        """
        Build one record line.

        Example: [2024-05-01T09:00:00] [INFO] [Dispatcher] Executing tool
        """
        timestamp = datetime.now().isoformat(timespec="seconds")
        context_str = f"[{self.context}] " if self.context else ""

        return (
            f"{self._paint(f'[{timestamp}]', Colors.DIM)} "
            f"{self._paint(f'[{level}]', color)} "
            f"{context_str}{message}"
        )

    def _log(
        self,
        level: LogLevel,
        level_name: str,
        color: str,
        message: str,
        data: dict[str, Any] | None = None
    ) -> None:
        if level < current_level():
            return

        print(self._format_message(level_name, message, color), file=sys.stderr)

        if data:
            data_str = json.dumps(data, indent=2, default=str)
            print(self._paint(data_str, Colors.DIM), file=sys.stderr)

    def debug(self, message: str, data: dict[str, Any] | None = None) -> None:
        self._log(LogLevel.DEBUG, "DEBUG", Colors.DEBUG, message, data)

    def info(self, message: str, data: dict[str, Any] | None = None) -> None:
        self._log(LogLevel.INFO, "INFO", Colors.INFO, message, data)

    def warning(self, message: str, data: dict[str, Any] | None = None) -> None:
        self._log(LogLevel.WARNING, "WARN", Colors.WARNING, message, data)

    def error(self, message: str, error: Exception | None = None) -> None:
        """Log at ERROR, attaching the exception's type and message when given."""
        data = None
        if error:
            data = {
                "error_type": type(error).__name__,
                "error_message": str(error),
            }
        self._log(LogLevel.ERROR, "ERROR", Colors.ERROR, message, data)
