"""Shared utility functions."""
from datetime import datetime, timezone
from typing import Any, Optional


def clean_text(value: Any) -> Optional[str]:
    """Return the trimmed string, or None when value is not a non-blank string."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a UTC timestamp as ISO-8601 with millisecond precision, e.g. 2024-01-01T10:00:00.000Z."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
