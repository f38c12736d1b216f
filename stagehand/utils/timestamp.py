"""Timestamp parsing utilities."""

from datetime import datetime, timezone
from typing import Any, Optional


def now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_timestamp(raw: Any) -> Optional[datetime]:
    """
    Parse a raw timestamp value into an aware UTC datetime.

    Accepts the forms that show up in stored records:
    - datetime objects (naive values are treated as UTC)
    - epoch milliseconds as int or float
    - ISO 8601 strings, including a trailing "Z"

    Args:
        raw: Raw timestamp value

    Returns:
        Aware datetime, or None if the value is missing or cannot be parsed

    Examples:
        parse_timestamp(1760659200000)
        # datetime(2025, 10, 17, 0, 0, tzinfo=timezone.utc)

        parse_timestamp("2026-10-01T12:00:00Z")
        # datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)

        parse_timestamp("not a date")
        # None
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, datetime):
        dt = raw
    elif isinstance(raw, (int, float)):
        try:
            dt = datetime.fromtimestamp(raw / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        text = str(raw).strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def age_in_days(timestamp: datetime, reference: datetime) -> float:
    """
    Days elapsed from timestamp to reference (negative for future timestamps).

    Naive datetimes on either side are treated as UTC.

    Args:
        timestamp: Datetime being aged
        reference: Datetime treated as "now"

    Returns:
        Fractional number of days
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)
    return (reference - timestamp).total_seconds() / 86400
