"""API tests for position/radiation/series endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from sunflux.config import RadiationConfig


def _client(config: RadiationConfig | None = None) -> object:
    """Create FastAPI TestClient with optional dependency guards."""
    pytest.importorskip("fastapi")
    testclient_module = pytest.importorskip("fastapi.testclient")
    from sunflux.api.app import create_app

    return testclient_module.TestClient(create_app(config or RadiationConfig()))


def test_position_endpoint_returns_contract_payload() -> None:
    """`POST /position` should return every solar angle."""
    client = _client()

    response = client.post(
        "/position",
        json={
            "time_utc": datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc).isoformat(),
            "lat": 0.0,
            "lon": 0.0,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert {
        "declination_deg",
        "hour_angle_deg",
        "zenith_deg",
        "altitude_deg",
        "azimuth_deg",
        "air_mass",
    } == set(body)
    assert body["zenith_deg"] < 0.5


def test_radiation_endpoint_applies_configured_default_tau() -> None:
    """`POST /radiation` should fall back to the configured optical depth."""
    client = _client(RadiationConfig(default_tau=0.5))

    response = client.post(
        "/radiation",
        json={
            "time_utc": datetime(2024, 6, 21, 12, 0, tzinfo=timezone.utc).isoformat(),
            "lat": 45.0,
            "lon": 0.0,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["tau"] == 0.5
    assert 0.0 < body["irradiance_w_m2"] < body["extraterrestrial_w_m2"]
    assert body["air_mass"] >= 1.0


def test_radiation_endpoint_rejects_out_of_range_latitude() -> None:
    """Out-of-range coordinates should be rejected with 422."""
    client = _client()

    response = client.post(
        "/radiation",
        json={"time_utc": "2024-06-21T12:00:00+00:00", "lat": 95.0, "lon": 0.0, "tau": 0.3},
    )

    assert response.status_code == 422


def test_series_endpoint_returns_one_series_per_latitude() -> None:
    """`POST /series` should return a daily series for each latitude."""
    client = _client()

    response = client.post(
        "/series",
        json={"year": 2024, "lat_min": 0.0, "lat_max": 20.0, "lat_step": 10.0, "tau": 0.3},
    )

    assert response.status_code == 200
    body = response.json()
    assert [item["latitude"] for item in body] == [0.0, 10.0, 20.0]
    assert all(len(item["days_of_year"]) == 366 for item in body)


def test_series_endpoint_rejects_reversed_range() -> None:
    """`lat_min > lat_max` should be rejected."""
    client = _client()

    response = client.post(
        "/series",
        json={"year": 2024, "lat_min": 20.0, "lat_max": 0.0, "lat_step": 10.0},
    )

    assert response.status_code == 422


def test_create_app_exposes_config() -> None:
    """create_app should keep the resolved configuration on app state."""
    pytest.importorskip("fastapi")
    from sunflux.api.app import create_app

    cfg = RadiationConfig(solar_constant=1367.0)
    app = create_app(cfg)

    assert app.state.config is cfg


def test_position_endpoint_rejects_time_out_of_range_in_utc() -> None:
    """Offsets that move `time_utc` before year 1 should be a 422, not a 500."""
    client = _client()

    response = client.post(
        "/position",
        json={"time_utc": "0001-01-01T00:30:00+01:00", "lat": 0.0, "lon": 0.0},
    )

    assert response.status_code == 422


def test_radiation_endpoint_accepts_band_name() -> None:
    """`tau` may be a band name; the band midpoint is applied."""
    client = _client()

    response = client.post(
        "/radiation",
        json={
            "time_utc": datetime(2024, 6, 21, 12, 0, tzinfo=timezone.utc).isoformat(),
            "lat": 45.0,
            "lon": 0.0,
            "tau": "thin_cloud",
        },
    )

    assert response.status_code == 200
    assert response.json()["tau"] == pytest.approx(0.55)


def test_radiation_endpoint_rejects_overflowing_irradiance() -> None:
    """Strong negative optical depth at the horizon cannot be encoded and is a 422."""
    client = _client()

    response = client.post(
        "/radiation",
        json={
            "time_utc": datetime(2024, 3, 20, 0, 0, tzinfo=timezone.utc).isoformat(),
            "lat": 0.0,
            "lon": 0.0,
            "tau": -20.0,
        },
    )

    assert response.status_code == 422


def test_series_endpoint_rejects_overflowing_irradiance() -> None:
    """A series containing `inf` irradiance is a 422."""
    client = _client()

    response = client.post(
        "/series",
        json={"year": 2024, "lat_min": 89.0, "lat_max": 89.0, "lat_step": 1.0, "tau": -20.0},
    )

    assert response.status_code == 422


def test_series_endpoint_rejects_oversized_grid() -> None:
    """Latitude grids above the row cap are rejected."""
    client = _client()

    response = client.post(
        "/series",
        json={"year": 2024, "lat_min": -90.0, "lat_max": 90.0, "lat_step": 0.5},
    )

    assert response.status_code == 422
    assert "max_rows" in response.json()["detail"]
