"""Timestamped console logging for snapshot runs."""

import sys
from datetime import datetime

from .env import get_config


def _ts() -> str:
    """Get current timestamp string."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def _emit(msg: str, level: str = "", stream=None) -> None:
    prefix = f"{level}: " if level else ""
    print(f"[{_ts()}] {prefix}{msg}", file=stream or sys.stdout)


def info(msg: str) -> None:
    """Print info message to stdout."""
    _emit(msg)


def debug(msg: str) -> None:
    """Print debug message if SNAP_DEBUG is enabled."""
    if get_config().snap_debug:
        _emit(msg, "DEBUG")


def warn(msg: str) -> None:
    """Print warning message to stderr."""
    _emit(msg, "WARN", sys.stderr)


def error(msg: str) -> None:
    """Print error message to stderr."""
    _emit(msg, "ERROR", sys.stderr)
