"""One-call solar position for a UTC timestamp and WGS84 coordinates."""

from __future__ import annotations

from datetime import datetime

from sunflux.astro.declination import solar_declination
from sunflux.astro.hour_angle import hour_angle
from sunflux.astro.solar import solar_altitude, solar_azimuth, solar_zenith_angle
from sunflux.atmosphere.air_mass import air_mass
from sunflux.contracts import SolarPosition
from sunflux.geo.validation import validate_coordinates


def solar_position(dt: datetime, lat_deg: float, lon_deg: float) -> SolarPosition:
    """Compute declination, hour angle, zenith, altitude, azimuth and air mass.

    Args:
        dt: UTC timestamp. Naive values are taken as UTC.
        lat_deg: Latitude in degrees.
        lon_deg: Longitude in degrees (east positive).

    Raises:
        ValidationError: If latitude or longitude is out of range.
    """
    validate_coordinates(lat_deg, lon_deg)

    decl_deg = solar_declination(dt)
    hour_angle_deg = hour_angle(dt, lon_deg)
    zenith_deg = solar_zenith_angle(lat_deg, decl_deg, hour_angle_deg)
    altitude_deg = solar_altitude(zenith_deg)

    return SolarPosition(
        declination_deg=decl_deg,
        hour_angle_deg=hour_angle_deg,
        zenith_deg=zenith_deg,
        altitude_deg=altitude_deg,
        azimuth_deg=solar_azimuth(lat_deg, altitude_deg, decl_deg, hour_angle_deg),
        air_mass=air_mass(zenith_deg),
    )
