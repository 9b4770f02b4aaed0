"""Minimal levelled logger writing timestamped lines to stdout and stderr."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of a log message; NONE disables all logging."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    NONE = 4


_TAGS = {
    LogLevel.DEBUG: "[DEBUG]   ",
    LogLevel.INFO: "[INFO]    ",
    LogLevel.WARNING: "[WARNING] ",
    LogLevel.ERROR: "[ERROR]   ",
}

_lock = threading.Lock()
_min_level = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the minimum level of messages that are written."""
    global _min_level
    with _lock:
        _min_level = LogLevel(level)


def get_log_level() -> LogLevel:
    """Return the current minimum level."""
    return _min_level


def _base_name(file: str) -> str:
    if "/" in file:
        return file.rsplit("/", 1)[1]
    if "\\" in file:
        return file.rsplit("\\", 1)[1]
    return file


def format_log_line(
    level: LogLevel, message: str, file: str, line: int, timestamp: datetime
) -> str:
    """Render one log line (without trailing newline)."""
    stamp = timestamp.strftime("%Y-%m-%d %H:%M:%S")
    millis = timestamp.microsecond // 1000
    tag = _TAGS.get(LogLevel(level), "")
    return f"[{stamp}.{millis:03d}] {tag}[{_base_name(file)}:{line}] {message}"


def log_message(level: LogLevel, message: str, file: str, line: int) -> None:
    """Write ``message`` if ``level`` meets the current minimum level.

    Warnings and errors go to stderr, everything else to stdout.
    """
    level = LogLevel(level)
    with _lock:
        if level < _min_level:
            return
        stream = sys.stderr if level in (LogLevel.ERROR, LogLevel.WARNING) else sys.stdout
        stream.write(format_log_line(level, message, file, line, datetime.now()) + "\n")
        stream.flush()