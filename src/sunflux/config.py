"""Runtime configuration for radiation series and service surfaces."""

from __future__ import annotations

import os
from dataclasses import dataclass

from sunflux.constants import SOLAR_CONSTANT_W_M2, SOLAR_NOON_HOUR

DEFAULT_TAU = 1.0


@dataclass(frozen=True)
class RadiationConfig:
    """Defaults applied when a caller does not pass explicit values."""

    solar_constant: float = SOLAR_CONSTANT_W_M2
    default_tau: float = DEFAULT_TAU
    series_hour_utc: int = int(SOLAR_NOON_HOUR)

    def __post_init__(self) -> None:
        """Validate configured values."""
        if self.solar_constant <= 0.0:
            raise ValueError("solar_constant must be positive")
        if not 0 <= self.series_hour_utc <= 23:
            raise ValueError("series_hour_utc must be in [0, 23]")


def _env_number(name: str, default: float, cast: type) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def config_from_env() -> RadiationConfig:
    """
    Build RadiationConfig from environment variables.

    Optional:
      - SUNFLUX_SOLAR_CONSTANT (W/m^2)
      - SUNFLUX_DEFAULT_TAU
      - SUNFLUX_SERIES_HOUR_UTC (0-23)
    """
    return RadiationConfig(
        solar_constant=_env_number("SUNFLUX_SOLAR_CONSTANT", SOLAR_CONSTANT_W_M2, float),
        default_tau=_env_number("SUNFLUX_DEFAULT_TAU", DEFAULT_TAU, float),
        series_hour_utc=_env_number("SUNFLUX_SERIES_HOUR_UTC", int(SOLAR_NOON_HOUR), int),
    )
