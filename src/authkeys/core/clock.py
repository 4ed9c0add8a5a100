"""
Clock Utilities

Current-time source and RFC 3339 formatting. Everything in this package works
with timezone-aware UTC datetimes.
"""

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current wall-clock time in UTC."""
    return datetime.now(UTC)


def format_rfc3339(value: datetime) -> str:
    """
    Format an aware datetime as an RFC 3339 string in UTC.

    Args:
        value: Timezone-aware datetime

    Returns:
        String such as ``2025-01-02T15:04:05Z`` (fractional seconds only when non-zero)
    """
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")
