"""Small command that exercises the logger, or empties its log file."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from spws.logger import Logger, LogLevel

LOG_PATH = "log.txt"


def clean_log(path: str | os.PathLike) -> bool:
    """Truncate the log file; return whether that succeeded."""
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError:
        print("Failed to clean log file.", file=sys.stderr)
        return False
    print("Log file cleaned.")
    return True


def run_demo(path: str | os.PathLike) -> None:
    """Log a fixed series of messages to the console and to the file."""
    with Logger(LogLevel.INFO, path) as logger:
        logger.log(LogLevel.INFO, "System initialized.")
        logger.log(LogLevel.ERROR, "Failed to open configuration file.")
        logger.log(LogLevel.WARNING, "Low disk space.")
        logger.set_level(LogLevel.DEBUG)
        logger.log(LogLevel.DEBUG, "Debugging enabled.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "clean":
        clean_log(LOG_PATH)
        return 0
    run_demo(LOG_PATH)
    return 0


if __name__ == "__main__":
    sys.exit(main())