"""Surface solar irradiance under single-term exponential attenuation."""

from __future__ import annotations

from datetime import datetime
from math import exp, inf

from sunflux.astro.distance import relative_earth_sun_distance
from sunflux.atmosphere.air_mass import air_mass_at
from sunflux.constants import SOLAR_CONSTANT_W_M2
from sunflux.geo.validation import validate_coordinates


def extraterrestrial_radiation(
    dt: datetime, *, solar_constant: float = SOLAR_CONSTANT_W_M2
) -> float:
    """Top-of-atmosphere irradiance in W/m^2, scaled by the relative Earth-Sun distance."""
    return solar_constant * relative_earth_sun_distance(dt)


def attenuate(extraterrestrial_w_m2: float, tau: float, air_mass_value: float) -> float:
    """Apply Beer-Lambert attenuation `I0 * exp(-tau * m)`.

    A negative optical depth amplifies; beyond the float range the result is `inf`.
    """
    try:
        return extraterrestrial_w_m2 * exp(-tau * air_mass_value)
    except OverflowError:
        return inf


def solar_radiation(
    lat_deg: float,
    lon_deg: float,
    dt: datetime,
    tau: float,
    *,
    solar_constant: float = SOLAR_CONSTANT_W_M2,
) -> float:
    """Compute surface solar irradiance in W/m^2.

    Args:
        lat_deg: Latitude in degrees, [-90, 90].
        lon_deg: Longitude in degrees, [-180, 180], east positive.
        dt: UTC timestamp. Naive values are taken as UTC.
        tau: Atmospheric optical depth. Not range-checked; a negative value amplifies.
        solar_constant: Irradiance at 1 AU in W/m^2.

    Raises:
        ValidationError: If latitude or longitude is out of range.
    """
    validate_coordinates(lat_deg, lon_deg)
    mass = air_mass_at(lat_deg, lon_deg, dt)
    return attenuate(extraterrestrial_radiation(dt, solar_constant=solar_constant), tau, mass)
