"""Relative optical air mass."""

from __future__ import annotations

from datetime import datetime
from math import cos, radians

from sunflux.astro.declination import solar_declination
from sunflux.astro.hour_angle import hour_angle
from sunflux.astro.solar import solar_zenith_angle
from sunflux.constants import (
    KASTEN_YOUNG_A,
    KASTEN_YOUNG_B,
    KASTEN_YOUNG_EXPONENT,
    PLANE_PARALLEL_MAX_ZENITH_DEG,
    ZENITH_HORIZON_DEG,
    ZENITH_MIN_DEG,
)
from sunflux.errors import ValidationError


def air_mass(zenith_deg: float) -> float:
    """Return the air mass for a solar zenith angle in degrees.

    Uses the plane-parallel `1 / cos(z)` model up to and including 60 degrees and the
    Kasten & Young (1989) empirical fit beyond it.

    Raises:
        ValidationError: If `zenith_deg` is outside [0, 90].
    """
    if not ZENITH_MIN_DEG <= zenith_deg <= ZENITH_HORIZON_DEG:
        raise ValidationError(
            f"Zenith angle must be between {ZENITH_MIN_DEG:g} and "
            f"{ZENITH_HORIZON_DEG:g} degrees, got {zenith_deg}."
        )

    theta = radians(zenith_deg)
    if zenith_deg <= PLANE_PARALLEL_MAX_ZENITH_DEG:
        return 1.0 / cos(theta)

    correction = KASTEN_YOUNG_A * (KASTEN_YOUNG_B - zenith_deg) ** KASTEN_YOUNG_EXPONENT
    return 1.0 / (cos(theta) + correction)


def air_mass_at(lat_deg: float, lon_deg: float, dt: datetime) -> float:
    """Return the air mass for an observer location and UTC timestamp."""
    zenith = solar_zenith_angle(lat_deg, solar_declination(dt), hour_angle(dt, lon_deg))
    return air_mass(zenith)
