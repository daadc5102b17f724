"""JSON output for scripted CLI callers."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from vsxsign import __version__


def json_response(
    schema_id: str,
    schema_version: int,
    **data: Any,
) -> str:
    """Serialize ``data`` with schema id, version, producer and timestamp fields."""
    wrapped = {
        "schema_id": schema_id,
        "schema_version": schema_version,
        "producer": f"vsxsign-{__version__}",
        "produced_at": datetime.now(UTC).isoformat(),
        **data,
    }
    return json.dumps(wrapped, indent=2, default=str)
