from __future__ import annotations

import pytest
from astropy.time import Time

from celestial_frames.ephemeris.vsop87 import Ephemeris
from celestial_frames.frame_core.model import GeographicalLocation

# ---------- Shared fixtures ----------


@pytest.fixture(scope="session")
def ephemeris() -> Ephemeris:
    """Series store over the packaged files, shared by all tests."""
    return Ephemeris()


@pytest.fixture
def greenwich() -> GeographicalLocation:
    return GeographicalLocation(0.0, 50.0, name="Greenwich")


@pytest.fixture
def usno() -> GeographicalLocation:
    """US Naval Observatory, longitude counted positive west."""
    return GeographicalLocation(77.065555555556, 38.9213888888889, name="USNO")


@pytest.fixture
def north_site() -> GeographicalLocation:
    """A site at 10°E, 60°N."""
    return GeographicalLocation(-10.0, 60.0, name="Test site")


@pytest.fixture
def obs_time() -> Time:
    """A fixed observation instant."""
    return Time("2021-08-07T21:00:00", scale="utc")


@pytest.fixture
def angle_close():
    """Compare two angles in degrees modulo 360."""

    def _close(a: float, b: float, tol: float) -> bool:
        return abs((a - b + 180.0) % 360.0 - 180.0) <= tol

    return _close
