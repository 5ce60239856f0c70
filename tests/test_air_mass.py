"""Tests for the plane-parallel / Kasten-Young air mass model."""

from __future__ import annotations

from datetime import datetime, timezone
from math import cos, radians

import pytest

from sunflux.atmosphere.air_mass import air_mass, air_mass_at
from sunflux.errors import ValidationError


def test_air_mass_overhead_is_one() -> None:
    """Air mass is normalized to 1 at the zenith."""
    assert air_mass(0.0) == pytest.approx(1.0)


def test_air_mass_boundary_uses_plane_parallel_formula() -> None:
    """Exactly 60 degrees still uses 1 / cos(z)."""
    assert air_mass(60.0) == pytest.approx(1.0 / cos(radians(60.0)))


def test_air_mass_at_horizon_matches_kasten_young() -> None:
    """Kasten-Young gives roughly 37.9 air masses at the horizon."""
    assert air_mass(90.0) == pytest.approx(37.92, abs=0.05)


def test_air_mass_at_least_one_and_increasing_per_branch() -> None:
    """Air mass is >= 1 and grows with zenith inside each model branch."""
    plane = [air_mass(z / 10.0) for z in range(0, 601)]
    kasten = [air_mass(60.0 + z / 10.0) for z in range(1, 301)]

    assert all(value >= 1.0 for value in plane + kasten)
    assert all(b > a for a, b in zip(plane, plane[1:]))
    assert all(b > a for a, b in zip(kasten, kasten[1:]))


def test_air_mass_branch_boundary_step_is_small() -> None:
    """The two models agree to within half a percent at 60 degrees."""
    below = air_mass(60.0)
    above = air_mass(60.0 + 1e-9)
    assert above == pytest.approx(below, rel=5e-3)


@pytest.mark.parametrize("zenith", [-0.1, 90.1])
def test_air_mass_rejects_out_of_range_zenith(zenith: float) -> None:
    """Zenith outside [0, 90] is a validation error."""
    with pytest.raises(ValidationError):
        air_mass(zenith)


def test_air_mass_at_equator_equinox_noon() -> None:
    """Overhead Sun at the equinox gives an air mass close to 1."""
    dt = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)
    assert air_mass_at(0.0, 0.0, dt) == pytest.approx(1.0, abs=1e-3)


def test_air_mass_at_night_saturates_at_horizon_value() -> None:
    """A Sun below the horizon is treated as on the horizon."""
    dt = datetime(2024, 3, 20, 0, 0, tzinfo=timezone.utc)
    assert air_mass_at(0.0, 0.0, dt) == pytest.approx(air_mass(90.0))
