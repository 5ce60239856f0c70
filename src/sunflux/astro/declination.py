"""Solar declination from a low-precision J2000.0 orbital model."""

from __future__ import annotations

from datetime import datetime
from math import asin, degrees, radians, sin

from sunflux.constants import (
    DAYS_PER_CENTURY,
    ECLIPTIC_CORRECTION_1,
    ECLIPTIC_CORRECTION_2,
    FULL_CIRCLE_DEG,
    MEAN_ANOMALY_AT_J2000,
    MEAN_ANOMALY_DAILY_MOTION,
    MEAN_LONGITUDE_AT_J2000,
    MEAN_LONGITUDE_DAILY_MOTION,
    OBLIQUITY_AT_J2000,
    OBLIQUITY_DAILY_DRIFT,
)
from sunflux.time.julian import centuries_since_j2000, julian_day


def _normalize_degrees(angle_deg: float) -> float:
    """Normalize an angle to [0, 360)."""
    return angle_deg % FULL_CIRCLE_DEG


def mean_longitude(centuries: float) -> float:
    """Mean longitude of the Sun in degrees, [0, 360)."""
    days = centuries * DAYS_PER_CENTURY
    return _normalize_degrees(MEAN_LONGITUDE_AT_J2000 + MEAN_LONGITUDE_DAILY_MOTION * days)


def mean_anomaly(centuries: float) -> float:
    """Mean anomaly of the Sun in degrees, [0, 360)."""
    days = centuries * DAYS_PER_CENTURY
    return _normalize_degrees(MEAN_ANOMALY_AT_J2000 + MEAN_ANOMALY_DAILY_MOTION * days)


def ecliptic_longitude(mean_longitude_deg: float, mean_anomaly_deg: float) -> float:
    """Apparent ecliptic longitude in degrees (equation of center, two terms)."""
    g = radians(mean_anomaly_deg)
    return (
        mean_longitude_deg
        + ECLIPTIC_CORRECTION_1 * sin(g)
        + ECLIPTIC_CORRECTION_2 * sin(2.0 * g)
    )


def obliquity(centuries: float) -> float:
    """Obliquity of the ecliptic in degrees."""
    return OBLIQUITY_AT_J2000 - OBLIQUITY_DAILY_DRIFT * centuries * DAYS_PER_CENTURY


def solar_declination(dt: datetime) -> float:
    """Compute solar declination in degrees for a UTC timestamp."""
    t = centuries_since_j2000(julian_day(dt))
    lam = ecliptic_longitude(mean_longitude(t), mean_anomaly(t))
    eps = obliquity(t)
    return degrees(asin(sin(radians(eps)) * sin(radians(lam))))
