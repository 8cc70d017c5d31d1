"""UTC timestamp parsing and Julian Date conversion."""

from datetime import datetime, timezone
from typing import Optional

from ..errors import TimeParseError
from ..models.time import JulianDate


def parse_iso_utc(utc_time: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Naive timestamps are taken to be UTC already.

    Args:
        utc_time: ISO-8601 timestamp (e.g., "2026-01-20T12:00:00Z")

    Returns:
        datetime with tzinfo=UTC

    Raises:
        TimeParseError: If utc_time cannot be parsed
    """
    text = utc_time.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        raise TimeParseError(utc_time)

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def julian_date(dt: datetime) -> JulianDate:
    """Convert a datetime to a Julian Date (naive values are treated as UTC)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)

    year = dt.year
    month = dt.month
    day_fraction = (
        dt.hour + (dt.minute + (dt.second + dt.microsecond / 1e6) / 60.0) / 60.0
    ) / 24.0

    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + a // 4

    jd = (
        int(365.25 * (year + 4716))
        + int(30.6001 * (month + 1))
        + dt.day
        + b
        - 1524.5
        + day_fraction
    )
    return JulianDate(float(jd))


def julian_date_now(now: Optional[datetime] = None) -> JulianDate:
    """Julian Date for the current wall-clock time."""
    return julian_date(now if now is not None else datetime.now(timezone.utc))
