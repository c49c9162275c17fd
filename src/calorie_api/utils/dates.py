"""Date and time utility functions."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

UTC_TZ = timezone.utc


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC_TZ)


def epoch_millis(dt: datetime | None = None) -> int:
    """
    Convert datetime to epoch milliseconds.

    Args:
        dt: Datetime to convert (defaults to now, assumed UTC if naive)
    """
    if dt is None:
        dt = utc_now()
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC_TZ)
    return int(dt.timestamp() * 1000)


def local_day(timestamp_ms: int, tz_name: str = "UTC") -> date:
    """Calendar day of an epoch-millisecond timestamp in the given timezone."""
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC_TZ)
    return dt.astimezone(ZoneInfo(tz_name)).date()


def today(tz_name: str = "UTC") -> date:
    """Today's date in the given timezone."""
    return utc_now().astimezone(ZoneInfo(tz_name)).date()
