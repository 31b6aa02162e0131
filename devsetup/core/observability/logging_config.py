"""
Logging setup for the devsetup CLI.

Installer progress (downloads, package-manager runs, profile writes) is
printed with click; logging carries the diagnostic trail underneath it:
the exact commands handed to subprocess, which backend was resolved,
which config file was read.

Level, highest precedence first:
    --debug       DEBUG, with file:line of every subprocess call
    --verbose     INFO, one timestamped line per installer step
    --quiet       ERROR
    DEVSETUP_LOG_LEVEL
    WARNING

DEVSETUP_LOG_FILE adds a file copy of the run at DEVSETUP_LOG_FILE_LEVEL
(default: the console level).
"""

from __future__ import annotations

import logging
import sys

# ── Format strings ──────────────────────────────────────────────

# Default: warnings only, bare text next to the click output
_FMT_MINIMAL = "%(message)s"

# --verbose: step trail with the emitting module
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

# --debug: "Executing: ..." lines from the subprocess runner, with source line
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"

# Log file: full date and level on every line
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Install the stderr handler (and optional file handler) on the root logger.

    Replaces any handlers from an earlier call, so each CLI invocation
    starts clean.  The root level is the lower of the console and file
    levels.

    Args:
        level: Console level name; unknown names fall back to WARNING.
        log_file: Path of the log file, from DEVSETUP_LOG_FILE.
        log_file_level: File level, from DEVSETUP_LOG_FILE_LEVEL.
    """
    numeric_level = _parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT_DEBUG
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_VERBOSE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    effective_level = numeric_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)

    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
