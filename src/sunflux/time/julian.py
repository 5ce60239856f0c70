"""UTC normalization and Julian Day arithmetic."""

from __future__ import annotations

from datetime import UTC, datetime
from math import floor

from sunflux.constants import (
    DAYS_PER_CENTURY,
    DAYS_PER_JULIAN_YEAR,
    GREGORIAN_START_YEAR,
    J2000_JULIAN_DAY,
    JULIAN_DAY_OFFSET,
    JULIAN_YEAR_OFFSET,
    MEAN_MONTH_FACTOR,
    MINUTES_PER_DAY,
    SECONDS_PER_MINUTE,
)


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to timezone-aware UTC, assuming UTC for naive values."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def _calendar_correction(year: int) -> int:
    """Gregorian century correction; zero for Julian-calendar years."""
    if year < GREGORIAN_START_YEAR:
        return 0
    century = year // 100
    return 2 - century + century // 4


def julian_day(dt: datetime) -> float:
    """Return the Julian Day for a UTC timestamp.

    January and February count as months 13 and 14 of the previous year. Years before 1582
    use the proleptic Julian calendar (no century correction).

    Args:
        dt: Timestamp. Naive values are taken as UTC.

    Returns:
        Julian Day number including the fractional day.
    """
    dt_utc = to_utc(dt)
    year, month = dt_utc.year, dt_utc.month
    if month <= 2:
        year -= 1
        month += 12

    hour_fraction = (
        dt_utc.hour
        + dt_utc.minute / 60.0
        + dt_utc.second / 3600.0
        + dt_utc.microsecond / 3_600_000_000.0
    )

    return (
        floor(DAYS_PER_JULIAN_YEAR * (year + JULIAN_YEAR_OFFSET))
        + floor(MEAN_MONTH_FACTOR * (month + 1))
        + dt_utc.day
        + _calendar_correction(year)
        - JULIAN_DAY_OFFSET
        + hour_fraction / 24.0
    )


def centuries_since_j2000(jd: float) -> float:
    """Return Julian centuries elapsed since the J2000.0 epoch."""
    return (jd - J2000_JULIAN_DAY) / DAYS_PER_CENTURY


def day_of_year(dt: datetime) -> int:
    """Return the 1-based UTC day of year."""
    return to_utc(dt).timetuple().tm_yday


def minutes_since_midnight(dt: datetime) -> int:
    """Return whole UTC minutes elapsed since midnight, from epoch seconds."""
    epoch_minutes = floor(to_utc(dt).timestamp()) // SECONDS_PER_MINUTE
    return epoch_minutes % MINUTES_PER_DAY
