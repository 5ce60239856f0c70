"""Solar zenith, altitude and azimuth angles.

Inputs and outputs are degrees. The zenith angle is saturated to [0, 90], so downstream air mass
and irradiance formulas never see a sub-horizon Sun.
"""

from __future__ import annotations

from math import acos, atan2, cos, degrees, radians, sin

from sunflux.constants import (
    FULL_CIRCLE_DEG,
    ZENITH_HORIZON_DEG,
    ZENITH_MAX_DEG,
    ZENITH_MIN_DEG,
)
from sunflux.errors import ValidationError

_DEGENERATE_COS = 1e-12


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def solar_zenith_angle(lat_deg: float, decl_deg: float, hour_angle_deg: float) -> float:
    """Compute the solar zenith angle, clamped to [0, 90] degrees.

    Args:
        lat_deg: Observer latitude in degrees.
        decl_deg: Solar declination in degrees.
        hour_angle_deg: Hour angle in degrees.

    Returns:
        Zenith angle in degrees. Sub-horizon positions saturate at 90.
    """
    phi = radians(lat_deg)
    delta = radians(decl_deg)
    h = radians(hour_angle_deg)

    cos_zenith = sin(phi) * sin(delta) + cos(phi) * cos(delta) * cos(h)
    cos_zenith = _clamp(cos_zenith, -1.0, 1.0)

    return _clamp(degrees(acos(cos_zenith)), ZENITH_MIN_DEG, ZENITH_HORIZON_DEG)


def solar_altitude(zenith_deg: float) -> float:
    """Return the solar altitude (elevation) angle, `90 - zenith`.

    Raises:
        ValidationError: If `zenith_deg` is outside [0, 180].
    """
    if not ZENITH_MIN_DEG <= zenith_deg <= ZENITH_MAX_DEG:
        raise ValidationError(
            f"Solar zenith angle must be between {ZENITH_MIN_DEG:.1f} and "
            f"{ZENITH_MAX_DEG:.1f} degrees, got {zenith_deg}."
        )
    return ZENITH_HORIZON_DEG - zenith_deg


def solar_azimuth(
    lat_deg: float,
    altitude_deg: float,
    decl_deg: float,
    hour_angle_deg: float,
) -> float:
    """Compute the solar azimuth, measured from north, normalized to [0, 360).

    With the Sun exactly overhead the bearing is undefined and 0.0 is returned. At the
    geographic poles every bearing towards the Sun is meridional: 180.0 at the North Pole,
    0.0 at the South Pole.
    """
    phi = radians(lat_deg)
    alpha = radians(altitude_deg)
    delta = radians(decl_deg)
    h = radians(hour_angle_deg)

    cos_alpha = cos(alpha)
    if abs(cos_alpha) < _DEGENERATE_COS:
        return 0.0
    cos_phi = cos(phi)
    if abs(cos_phi) < _DEGENERATE_COS:
        return 180.0 if lat_deg > 0.0 else 0.0

    sin_az = cos(delta) * sin(h) / cos_alpha
    cos_az = (sin(alpha) - sin(phi) * sin(delta)) / (cos_phi * cos_alpha)

    azimuth = degrees(atan2(sin_az, cos_az))
    if azimuth < 0.0:
        azimuth += FULL_CIRCLE_DEG
    # tiny negative angles round up to exactly 360.0
    return azimuth % FULL_CIRCLE_DEG
