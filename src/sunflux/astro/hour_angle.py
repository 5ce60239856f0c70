"""Hour angle from UTC clock time and longitude."""

from __future__ import annotations

from datetime import datetime

from sunflux.constants import DEGREES_PER_HOUR, SOLAR_NOON_HOUR
from sunflux.time.julian import minutes_since_midnight


def local_solar_time(dt: datetime, lon_deg: float) -> float:
    """Return local solar time in hours, offset from UTC by longitude/15.

    No equation-of-time correction is applied, and the result is not wrapped to [0, 24).
    """
    hours = minutes_since_midnight(dt) / 60.0
    return hours + lon_deg / DEGREES_PER_HOUR


def hour_angle(dt: datetime, lon_deg: float) -> float:
    """Return the hour angle in degrees; zero at local solar noon, positive afternoons."""
    return DEGREES_PER_HOUR * (local_solar_time(dt, lon_deg) - SOLAR_NOON_HOUR)
