"""Irradiance series over a latitude x day-of-year grid."""

from __future__ import annotations

import logging
from calendar import isleap
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, UTC, datetime, timedelta
from math import floor

import numpy as np

from sunflux.atmosphere.radiation import solar_radiation
from sunflux.config import RadiationConfig
from sunflux.constants import LATITUDE_MAX
from sunflux.contracts import RadiationSeries
from sunflux.errors import ValidationError
from sunflux.geo.validation import validate_latitude, validate_longitude

logger = logging.getLogger(__name__)


def generate_latitudes(
    lat_min: float, lat_max: float, step_deg: float, max_rows: int | None = None
) -> list[float]:
    """Return latitude rows from `lat_min` to `lat_max` inclusive, `step_deg` apart.

    Rows are computed as `lat_min + i * step_deg` rather than by repeated addition, so the
    last row does not drift past `lat_max`. Each row is rounded to 1e-6 degrees and capped
    at the pole.

    Raises:
        ValidationError: If the step is not positive, the bounds are reversed, a bound
            lies outside [-90, 90], or the grid has more than `max_rows` rows.
    """
    if step_deg <= 0.0:
        raise ValidationError("step_deg must be positive.")
    if lat_min > lat_max:
        raise ValidationError("lat_min must be <= lat_max.")
    validate_latitude(lat_min)
    validate_latitude(lat_max)

    n_rows = floor((lat_max - lat_min) / step_deg + 1e-9) + 1
    if max_rows is not None and n_rows > max_rows:
        raise ValidationError("latitude grid exceeds max_rows safety cap")
    return [min(round(lat_min + i * step_deg, 6), LATITUDE_MAX) for i in range(n_rows)]


def days_of_year(year: int, hour_utc: int = 12) -> list[datetime]:
    """Return one UTC timestamp per calendar day of `year`, at `hour_utc`."""
    start = datetime(year, 1, 1, hour_utc, tzinfo=UTC)
    n_days = 366 if isleap(year) else 365
    return [start + timedelta(days=offset) for offset in range(n_days)]


@dataclass(frozen=True)
class SeriesSpec:
    """Grid specification for yearly irradiance series."""

    year: int
    latitudes: tuple[float, ...]
    longitude: float = 0.0
    tau: float = 1.0
    hour_utc: int = 12

    def __post_init__(self) -> None:
        """Validate grid bounds."""
        if not MINYEAR <= self.year <= MAXYEAR:
            raise ValidationError(f"year must be in [{MINYEAR}, {MAXYEAR}], got {self.year}.")
        if not self.latitudes:
            raise ValidationError("latitudes must not be empty.")
        for lat in self.latitudes:
            validate_latitude(lat)
        validate_longitude(self.longitude)
        if not 0 <= self.hour_utc <= 23:
            raise ValidationError("hour_utc must be in [0, 23].")


def radiation_series(
    spec: SeriesSpec, config: RadiationConfig | None = None
) -> list[RadiationSeries]:
    """Compute one irradiance series per latitude over every day of `spec.year`."""
    cfg = config or RadiationConfig()
    days = days_of_year(spec.year, spec.hour_utc)
    doy = np.arange(1, len(days) + 1, dtype=np.int64)

    out: list[RadiationSeries] = []
    for lat in spec.latitudes:
        values = np.fromiter(
            (
                solar_radiation(lat, spec.longitude, dt, spec.tau, solar_constant=cfg.solar_constant)
                for dt in days
            ),
            dtype=np.float64,
            count=len(days),
        )
        series = RadiationSeries(
            latitude=lat,
            longitude=spec.longitude,
            tau=spec.tau,
            days_of_year=doy,
            irradiance_w_m2=values,
        )
        logger.debug(
            "series lat=%.3f lon=%.3f tau=%.3f peak=%.2f W/m2",
            lat,
            spec.longitude,
            spec.tau,
            series.peak_w_m2,
        )
        out.append(series)
    logger.info("computed %d series for %d days of %d", len(out), len(days), spec.year)
    return out
