"""Path utilities for directory operations."""

from __future__ import annotations

import os
from pathlib import Path


def get_xdg_cache_home() -> Path:
    """Get XDG_CACHE_HOME directory, defaulting to ~/.cache."""
    xdg_cache = os.getenv("XDG_CACHE_HOME")
    if xdg_cache:
        return Path(xdg_cache)
    return Path.home() / ".cache"


def get_cache_dir(app_name: str = "vsxsign") -> Path:
    """Get XDG cache directory for application (not created)."""
    return get_xdg_cache_home() / app_name
