"""Value contracts returned by the sunflux pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np

from sunflux.constants import (
    OPTICAL_DEPTH_CLEAR_SKY,
    OPTICAL_DEPTH_THICK_CLOUD,
    OPTICAL_DEPTH_THIN_CLOUD,
)
from sunflux.errors import ValidationError


class OpticalDepthBand(StrEnum):
    """Informal optical depth bands. Reference values only; never enforced."""

    CLEAR_SKY = "clear_sky"
    THIN_CLOUD = "thin_cloud"
    THICK_CLOUD = "thick_cloud"

    @property
    def bounds(self) -> tuple[float, float]:
        """Return the `(min, max)` optical depth of the band."""
        return _BAND_BOUNDS[self]

    @property
    def typical(self) -> float:
        """Return the band midpoint."""
        low, high = self.bounds
        return (low + high) / 2.0


_BAND_BOUNDS: dict[OpticalDepthBand, tuple[float, float]] = {
    OpticalDepthBand.CLEAR_SKY: OPTICAL_DEPTH_CLEAR_SKY,
    OpticalDepthBand.THIN_CLOUD: OPTICAL_DEPTH_THIN_CLOUD,
    OpticalDepthBand.THICK_CLOUD: OPTICAL_DEPTH_THICK_CLOUD,
}


def resolve_optical_depth(value: float | str) -> float:
    """Return a numeric optical depth from a number, numeric string or band name.

    A band name such as `"clear_sky"` resolves to the band's midpoint.

    Raises:
        ValidationError: If `value` is neither numeric nor a known band name.
    """
    if isinstance(value, (int, float)):
        return float(value)
    text = value.strip()
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return OpticalDepthBand(text.lower()).typical
    except ValueError as exc:
        names = ", ".join(band.value for band in OpticalDepthBand)
        raise ValidationError(
            f"optical depth must be a number or one of: {names}; got {value!r}"
        ) from exc


@dataclass(frozen=True, slots=True)
class SolarPosition:
    """Solar geometry for one observer location and instant."""

    declination_deg: float
    hour_angle_deg: float
    zenith_deg: float
    altitude_deg: float
    azimuth_deg: float
    air_mass: float

    def to_dict(self) -> dict[str, float]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "declination_deg": self.declination_deg,
            "hour_angle_deg": self.hour_angle_deg,
            "zenith_deg": self.zenith_deg,
            "altitude_deg": self.altitude_deg,
            "azimuth_deg": self.azimuth_deg,
            "air_mass": self.air_mass,
        }


@dataclass(frozen=True, slots=True)
class RadiationSeries:
    """Surface irradiance of one latitude across the days of a year."""

    latitude: float
    longitude: float
    tau: float
    days_of_year: np.ndarray
    irradiance_w_m2: np.ndarray

    def __post_init__(self) -> None:
        """Check that both arrays describe the same days."""
        if self.days_of_year.shape != self.irradiance_w_m2.shape:
            raise ValueError("days_of_year and irradiance_w_m2 must have the same shape.")

    @property
    def peak_w_m2(self) -> float:
        """Return the largest irradiance in the series."""
        return float(self.irradiance_w_m2.max()) if self.irradiance_w_m2.size else 0.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "tau": self.tau,
            "days_of_year": self.days_of_year.tolist(),
            "irradiance_w_m2": self.irradiance_w_m2.tolist(),
        }
