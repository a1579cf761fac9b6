"""Leveled logger writing to the console and optionally to a file."""

from __future__ import annotations

import inspect
import os
import sys
import time
from enum import IntEnum
from typing import IO, Optional

_MESSAGE_LIMIT = 1023
_LINE_LIMIT = 1199


class LogLevel(IntEnum):
    """Severity levels; a lower number is more severe."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


def _level_name(level: int) -> str:
    try:
        return LogLevel(level).name
    except ValueError:
        return "UNKNOWN"


class Logger:
    """Writes timestamped lines at or above a chosen severity."""

    def __init__(
        self,
        level: LogLevel = LogLevel.DEBUG,
        path: Optional[str | os.PathLike] = None,
        stdout: Optional[IO[str]] = None,
        stderr: Optional[IO[str]] = None,
    ) -> None:
        self.level = level
        self._stdout = stdout
        self._stderr = stderr
        self._file: Optional[IO[str]] = None
        if path is not None:
            try:
                self._file = open(path, "a", encoding="utf-8")
            except OSError:
                print(
                    f"[LOGGER] Failed to open log file: {os.fspath(path)}",
                    file=self._error_stream(),
                )

    def _error_stream(self) -> IO[str]:
        return self._stderr if self._stderr is not None else sys.stderr

    def _output_stream(self) -> IO[str]:
        return self._stdout if self._stdout is not None else sys.stdout

    def set_level(self, level: LogLevel) -> None:
        """Change the least severe level that is still written."""
        self.level = level

    def close(self) -> None:
        """Close the log file, if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def log(self, level: LogLevel, message: str, *args: object) -> Optional[str]:
        """Write a message; return the line written, or None if filtered out.

        The message is %-formatted with args when any are given.
        """
        if level > self.level:
            return None

        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is not None:
            source = os.path.basename(caller.f_code.co_filename)
            line_no = caller.f_lineno
        else:
            source, line_no = "?", 0
        del frame, caller

        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        text = (message % args if args else message)[:_MESSAGE_LIMIT]
        line = f"[{timestamp}] [{_level_name(level)}] [{source}:{line_no}] - {text}\n"
        line = line[:_LINE_LIMIT]

        output = self._error_stream() if level <= LogLevel.ERROR else self._output_stream()
        output.write(line)
        output.flush()

        if self._file is not None:
            self._file.write(line)
            self._file.flush()
        return line

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()