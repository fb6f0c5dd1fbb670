"""Report the current time."""

from datetime import datetime, timezone


def get_current_time() -> str:
    """Return the current UTC time as an ISO 8601 / RFC 3339 string."""
    return datetime.now(timezone.utc).isoformat()