"""Datetime utilities."""

from datetime import datetime, timezone


def parse_datetime(value) -> datetime:
    """Parse datetime from ISO string or return as-is if already datetime.

    Naive values are assumed to be UTC so that every timestamp in the
    pipeline compares as an instant.
    """
    if value is None:
        return datetime.now(timezone.utc)
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
