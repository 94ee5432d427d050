"""
Logging configuration — one setup call per process.

``profilekit.main`` calls ``setup_logging`` once; every module logs
through ``logging.getLogger(__name__)`` and inherits it.

Level precedence:
    --debug / --verbose / --quiet  >  PK_LOG_LEVEL  >  WARNING

Optional file output via PK_LOG_FILE (level PK_LOG_FILE_LEVEL).
Missing-tool notices are WARNINGs, so they show at the default level.
"""

from __future__ import annotations

import logging
import os
import sys

LEVEL_ENV = "PK_LOG_LEVEL"
FILE_ENV = "PK_LOG_FILE"
FILE_LEVEL_ENV = "PK_LOG_FILE_LEVEL"

# WARNING and above: just the message, the user is at a prompt
_FMT_CONSOLE = "%(message)s"

# INFO: which component said it
_FMT_INFO = "%(asctime)s [%(name)s] %(message)s"

# DEBUG and file output: file:line for diagnostics
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

_DATEFMT_SHORT = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    verbose: bool = False,
    quiet: bool = False,
    debug: bool = False,
) -> str:
    """Pick the console level from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(LEVEL_ENV, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file (default: $PK_LOG_FILE).
        log_file_level: Level for the file (default: $PK_LOG_FILE_LEVEL,
            then ``level``).
    """
    console_level = _parse_level(level)
    log_file = log_file or os.environ.get(FILE_ENV)
    log_file_level = log_file_level or os.environ.get(FILE_LEVEL_ENV)

    if console_level <= logging.DEBUG:
        formatter = logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_SHORT)
    elif console_level <= logging.INFO:
        formatter = logging.Formatter(_FMT_INFO, datefmt=_DATEFMT_SHORT)
    else:
        formatter = logging.Formatter(_FMT_CONSOLE)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    effective = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        effective = min(effective, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective)

    # A broken stderr must not take the prompt down with it
    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
