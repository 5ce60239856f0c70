"""Earth-Sun distance over the year."""

from __future__ import annotations

from datetime import datetime
from math import cos, radians

from sunflux.constants import (
    ASTRONOMICAL_UNIT_KM,
    DAYS_PER_JULIAN_YEAR,
    FULL_CIRCLE_DEG,
    MEAN_ANOMALY_PERIHELION_DEG,
    MEAN_DISTANCE_FACTOR,
    ORBIT_ECCENTRICITY,
    SECOND_HARMONIC_FACTOR,
)
from sunflux.time.julian import day_of_year


def _mean_anomaly_rad(doy: int) -> float:
    anomaly_deg = MEAN_ANOMALY_PERIHELION_DEG + (FULL_CIRCLE_DEG / DAYS_PER_JULIAN_YEAR) * doy
    return radians(anomaly_deg % FULL_CIRCLE_DEG)


def absolute_earth_sun_distance(dt: datetime) -> float:
    """Return the Earth-Sun distance in kilometers for the UTC day of `dt`."""
    m = _mean_anomaly_rad(day_of_year(dt))
    factor = (
        MEAN_DISTANCE_FACTOR
        - ORBIT_ECCENTRICITY * cos(m)
        - SECOND_HARMONIC_FACTOR * cos(2.0 * m)
    )
    return factor * ASTRONOMICAL_UNIT_KM


def relative_earth_sun_distance(dt: datetime) -> float:
    """Return the Earth-Sun distance in astronomical units."""
    return absolute_earth_sun_distance(dt) / ASTRONOMICAL_UNIT_KM
