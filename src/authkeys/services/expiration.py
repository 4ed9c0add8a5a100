"""
Expiration Date Parsing

Parses the ``expiresAt`` value of an API key request. Accepted spellings, tried
in order:

1. RFC 3339 date-time with an offset: ``2025-01-02T15:04:05Z``
2. Date and time without offset, ``T`` separated (UTC): ``2025-01-02T15:04:05``
3. Date and time without offset, space separated (UTC): ``2025-01-02 15:04:05``
4. Date only, UTC midnight: ``2025-01-02``

The parsed instant must be strictly in the future.
"""

import logging
import re
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, NamedTuple

from authkeys.core.clock import utc_now
from authkeys.errors import InvalidExpiresAtError

logger = logging.getLogger(__name__)


class ExpirationFormat(NamedTuple):
    """One entry of the expiration fallback chain."""

    name: str
    pattern: re.Pattern[str]
    parse: Callable[[str], datetime]


_LEAP_SECOND = re.compile(r"^(.{14}59:)60(\.\d+)?", re.ASCII)


def _parse_rfc3339(value: str) -> datetime:
    # fromisoformat accepts the upper-case designators only
    value = value.upper()
    # a leap second reads as the last microsecond of its minute
    value = _LEAP_SECOND.sub(r"\g<1>59.999999", value)
    return datetime.fromisoformat(value)


def _parse_naive(fmt: str) -> Callable[[str], datetime]:
    def parse(value: str) -> datetime:
        return datetime.strptime(value, fmt).replace(tzinfo=UTC)

    return parse


_DATE = r"\d{4}-\d{2}-\d{2}"
_TIME = r"\d{2}:\d{2}:\d{2}"

EXPIRATION_FORMATS: tuple[ExpirationFormat, ...] = (
    ExpirationFormat(
        "rfc3339",
        re.compile(rf"{_DATE}[Tt]{_TIME}(\.\d+)?([Zz]|[+-]\d{{2}}:\d{{2}})", re.ASCII),
        _parse_rfc3339,
    ),
    ExpirationFormat(
        "datetime_t",
        re.compile(rf"{_DATE}T{_TIME}", re.ASCII),
        _parse_naive("%Y-%m-%dT%H:%M:%S"),
    ),
    ExpirationFormat(
        "datetime_space",
        re.compile(rf"{_DATE} {_TIME}", re.ASCII),
        _parse_naive("%Y-%m-%d %H:%M:%S"),
    ),
    ExpirationFormat(
        "date",
        re.compile(_DATE, re.ASCII),
        _parse_naive("%Y-%m-%d"),
    ),
)


def _parse_string(value: str) -> datetime | None:
    """Try each accepted format in order and return the first match in UTC."""
    for fmt in EXPIRATION_FORMATS:
        if not fmt.pattern.fullmatch(value):
            continue
        try:
            return fmt.parse(value).astimezone(UTC)
        except ValueError:
            # Right shape but not a real calendar date or time
            continue
    return None


def parse_expiration_date(value: Any, now: datetime | None = None) -> datetime | None:
    """
    Parse and validate an ``expiresAt`` value.

    Args:
        value: Raw value from the request (``None`` or a string)
        now: Reference time for the future check (defaults to the current time)

    Returns:
        The expiration as an aware UTC datetime, or None if the key never expires

    Raises:
        InvalidExpiresAtError: If the value is not null or a string, matches no
            accepted format, or is not strictly in the future
    """
    if value is None:
        return None

    if not isinstance(value, str):
        logger.debug("Rejected expiresAt of type %s", type(value).__name__)
        raise InvalidExpiresAtError(value)

    expires_at = _parse_string(value)
    if expires_at is None:
        logger.debug("Rejected expiresAt %r: no accepted format matched", value)
        raise InvalidExpiresAtError(value)

    if expires_at <= (now or utc_now()):
        logger.debug("Rejected expiresAt %r: not in the future", value)
        raise InvalidExpiresAtError(value)

    return expires_at
