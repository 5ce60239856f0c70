"""FastAPI app exposing solar position and irradiance endpoints."""

from __future__ import annotations

import logging
import math
from datetime import datetime

import numpy as np
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, model_validator

from sunflux.astro.position import solar_position
from sunflux.atmosphere.air_mass import air_mass_at
from sunflux.atmosphere.radiation import extraterrestrial_radiation, solar_radiation
from sunflux.config import RadiationConfig, config_from_env
from sunflux.contracts import OpticalDepthBand, resolve_optical_depth
from sunflux.errors import ValidationError
from sunflux.orchestrate.series import SeriesSpec, generate_latitudes, radiation_series
from sunflux.time.julian import to_utc

logger = logging.getLogger(__name__)

_MAX_SERIES_LATITUDES = 181


class PositionRequest(BaseModel):
    """Request schema for one solar position."""

    time_utc: datetime
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class PositionResponse(BaseModel):
    """Solar geometry payload aligned with the SolarPosition contract."""

    declination_deg: float
    hour_angle_deg: float
    zenith_deg: float
    altitude_deg: float
    azimuth_deg: float
    air_mass: float


class RadiationRequest(BaseModel):
    """Request schema for surface irradiance at one instant."""

    time_utc: datetime
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    tau: float | OpticalDepthBand | None = None


class RadiationResponse(BaseModel):
    """Surface irradiance payload."""

    irradiance_w_m2: float
    extraterrestrial_w_m2: float
    air_mass: float
    tau: float


class SeriesRequest(BaseModel):
    """Request schema for yearly irradiance series over a latitude range."""

    year: int = Field(ge=1, le=9999)
    lat_min: float = Field(ge=-90.0, le=90.0)
    lat_max: float = Field(ge=-90.0, le=90.0)
    lat_step: float = Field(gt=0.0, le=180.0)
    lon: float = Field(default=0.0, ge=-180.0, le=180.0)
    tau: float | OpticalDepthBand | None = None
    hour_utc: int | None = Field(default=None, ge=0, le=23)

    @model_validator(mode="after")
    def validate_bounds(self) -> "SeriesRequest":
        """Validate latitude ordering."""
        if self.lat_min > self.lat_max:
            raise ValueError("lat_min must be <= lat_max")
        return self


class SeriesItem(BaseModel):
    """One latitude's irradiance series."""

    latitude: float
    longitude: float
    tau: float
    days_of_year: list[int]
    irradiance_w_m2: list[float]


def _normalize_time(dt: datetime) -> datetime:
    """Normalize request datetime to aware UTC, rejecting values that leave the datetime range."""
    try:
        return to_utc(dt)
    except OverflowError as exc:
        raise HTTPException(status_code=422, detail="time_utc is out of range in UTC") from exc


def _resolve_tau(tau: float | OpticalDepthBand | None, cfg: RadiationConfig) -> float:
    """Resolve optional numeric or band optical depth against configured default."""
    if tau is None:
        return cfg.default_tau
    return resolve_optical_depth(tau)


def create_app(config: RadiationConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(title="sunflux API", version="0.1.0")
    cfg = config or config_from_env()
    app.state.config = cfg

    @app.post("/position", response_model=PositionResponse)
    def post_position(payload: PositionRequest) -> PositionResponse:
        """Compute solar angles and air mass for input time/location."""
        try:
            position = solar_position(_normalize_time(payload.time_utc), payload.lat, payload.lon)
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return PositionResponse(**position.to_dict())

    @app.post("/radiation", response_model=RadiationResponse)
    def post_radiation(payload: RadiationRequest) -> RadiationResponse:
        """Compute surface irradiance for input time/location."""
        dt = _normalize_time(payload.time_utc)
        tau = _resolve_tau(payload.tau, cfg)
        try:
            irradiance = solar_radiation(
                payload.lat, payload.lon, dt, tau, solar_constant=cfg.solar_constant
            )
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        if not math.isfinite(irradiance):
            raise HTTPException(status_code=422, detail="irradiance overflows for this optical depth")
        return RadiationResponse(
            irradiance_w_m2=irradiance,
            extraterrestrial_w_m2=extraterrestrial_radiation(dt, solar_constant=cfg.solar_constant),
            air_mass=air_mass_at(payload.lat, payload.lon, dt),
            tau=tau,
        )

    @app.post("/series", response_model=list[SeriesItem])
    def post_series(payload: SeriesRequest) -> list[SeriesItem]:
        """Compute daily irradiance over a year for each latitude in range."""
        try:
            latitudes = generate_latitudes(
                payload.lat_min,
                payload.lat_max,
                payload.lat_step,
                max_rows=_MAX_SERIES_LATITUDES,
            )
            spec = SeriesSpec(
                year=payload.year,
                latitudes=tuple(latitudes),
                longitude=payload.lon,
                tau=_resolve_tau(payload.tau, cfg),
                hour_utc=cfg.series_hour_utc if payload.hour_utc is None else payload.hour_utc,
            )
            series = radiation_series(spec, cfg)
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        if not all(np.isfinite(item.irradiance_w_m2).all() for item in series):
            raise HTTPException(status_code=422, detail="irradiance overflows for this optical depth")
        logger.debug("served %d series for year %d", len(series), payload.year)
        return [SeriesItem(**item.to_dict()) for item in series]

    return app


app = create_app()
