"""Geographic coordinate range checks."""

from __future__ import annotations

from sunflux.constants import LATITUDE_MAX, LATITUDE_MIN, LONGITUDE_MAX, LONGITUDE_MIN
from sunflux.errors import ValidationError


def validate_latitude(lat: float) -> float:
    """Return `lat` unchanged if it lies in [-90, 90], else raise ValidationError."""
    if not LATITUDE_MIN <= lat <= LATITUDE_MAX:
        raise ValidationError(
            f"Latitude must be between {LATITUDE_MIN:g} and {LATITUDE_MAX:g} degrees, got {lat}."
        )
    return lat


def validate_longitude(lon: float) -> float:
    """Return `lon` unchanged if it lies in [-180, 180], else raise ValidationError."""
    if not LONGITUDE_MIN <= lon <= LONGITUDE_MAX:
        raise ValidationError(
            f"Longitude must be between {LONGITUDE_MIN:g} and {LONGITUDE_MAX:g} degrees, got {lon}."
        )
    return lon


def validate_coordinates(lat: float, lon: float) -> tuple[float, float]:
    """Validate a latitude/longitude pair."""
    return validate_latitude(lat), validate_longitude(lon)
