"""Environment variable parsing and configuration.

Only the fixture store and logging read this. Policies are always built
explicitly in test code.
"""

import os
from pathlib import Path
from typing import Optional


def get_str(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get string env var."""
    return os.environ.get(key, default)


def get_bool(key: str, default: bool = False) -> bool:
    """Get boolean env var (0/1, true/false, yes/no)."""
    val = os.environ.get(key, "").lower()
    if not val:
        return default
    return val in ("1", "true", "yes", "on")


def get_path(key: str, default: Optional[str] = None) -> Optional[Path]:
    """Get path env var, expanding user and making absolute.

    Returns None when the variable is unset and there is no default.
    """
    val = os.environ.get(key, default)
    if not val:
        return None
    return Path(val).expanduser().resolve()


class Config:
    """Configuration loaded from environment variables."""

    def __init__(self):
        self.snap_debug = get_bool("SNAP_DEBUG", False)

        # Fixture locations
        self.fixture_dir = get_path("SNAP_FIXTURE_DIR")  # None = beside the test file
        self.failure_dir = get_path("SNAP_FAILURE_DIR", "./snapshot_failures")

        # Force record mode for every comparison
        self.update_snapshots = get_bool("UPDATE_SNAPSHOTS", False)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
