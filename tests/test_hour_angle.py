"""Tests for hour angle and local solar time."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from sunflux.astro.hour_angle import hour_angle, local_solar_time


def test_hour_angle_zero_at_utc_noon_on_prime_meridian() -> None:
    """Solar noon on the prime meridian gives a zero hour angle."""
    dt = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)
    assert hour_angle(dt, 0.0) == pytest.approx(0.0)


def test_hour_angle_moves_fifteen_degrees_per_hour() -> None:
    """Each hour after noon adds 15 degrees."""
    dt = datetime(2024, 3, 20, 15, 0, tzinfo=timezone.utc)
    assert hour_angle(dt, 0.0) == pytest.approx(45.0)


def test_hour_angle_longitude_offset() -> None:
    """Thirty degrees east shifts local solar time by two hours."""
    dt = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)
    assert local_solar_time(dt, 30.0) == pytest.approx(14.0)
    assert hour_angle(dt, 30.0) == pytest.approx(30.0)


def test_hour_angle_is_not_wrapped() -> None:
    """Midnight at the antimeridian yields -360 degrees, unwrapped."""
    dt = datetime(2024, 3, 20, 0, 0, tzinfo=timezone.utc)
    assert hour_angle(dt, -180.0) == pytest.approx(-360.0)


def test_hour_angle_ignores_seconds() -> None:
    """Sub-minute clock time is truncated."""
    dt = datetime(2024, 3, 20, 12, 0, 59, tzinfo=timezone.utc)
    assert hour_angle(dt, 0.0) == pytest.approx(0.0)
