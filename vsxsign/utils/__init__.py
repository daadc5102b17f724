"""Utility modules for common operations."""

from vsxsign.utils.cli_output import json_response
from vsxsign.utils.files import atomic_write_bytes
from vsxsign.utils.hashing import compute_sha256, compute_sha256_text
from vsxsign.utils.paths import get_cache_dir

__all__ = [
    "atomic_write_bytes",
    "compute_sha256",
    "compute_sha256_text",
    "get_cache_dir",
    "json_response",
]
