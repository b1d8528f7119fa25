from __future__ import annotations

import numpy as np
from astropy.time import Time
from hypothesis import HealthCheck, given, settings, strategies as st

from celestial_frames.coordinates.coordinates import Coordinates
from celestial_frames.coordinates.system import (
    EQUATORIAL_B1950,
    EQUATORIAL_J2000,
    EQUATORIAL_J2050,
    GALACTIC,
    ICRS,
    CoordinateSystem,
)
from celestial_frames.frame_core.model import GeographicalLocation, PositionType
from celestial_frames.frame_core.timescales import B1950, J2000

# --- Local strategies (avoid function-scoped fixtures in @given tests) ---

_WHEN = Time("2021-08-07T21:00:00", scale="utc")
_SITE = GeographicalLocation(-10.0, 60.0, name="Test site")

_SYSTEMS = [
    ICRS,
    EQUATORIAL_J2000,
    EQUATORIAL_J2050,
    EQUATORIAL_B1950,
    GALACTIC,
    CoordinateSystem.ecliptical(J2000),
    CoordinateSystem.ecliptical(B1950),
    CoordinateSystem.equatorial(2460000.5),
    CoordinateSystem.horizontal(_WHEN, _SITE),
]


def _longitude():
    return st.floats(min_value=0.0, max_value=359.999, allow_nan=False)


def _latitude():
    return st.floats(min_value=-89.9, max_value=89.9, allow_nan=False)


_SYSTEM_STRAT = st.sampled_from(_SYSTEMS)
_POSITION_TYPE_STRAT = st.sampled_from(list(PositionType))

_SETTINGS = settings(
    max_examples=60, suppress_health_check=[HealthCheck.too_slow], deadline=None
)


@_SETTINGS
@given(
    lon=_longitude(),
    lat=_latitude(),
    source=_SYSTEM_STRAT,
    target=_SYSTEM_STRAT,
    position_type=_POSITION_TYPE_STRAT,
)
def test_round_trip_returns_the_same_direction(lon, lat, source, target, position_type):
    c = Coordinates.from_spherical(lon, lat, source)
    there = c.convert(target, position_type)
    assert there.system == target
    assert there.position_type is position_type
    back = there.convert(source, PositionType.MEAN)
    assert np.allclose(back.unit_vector(), c.unit_vector(), atol=1e-9)


@_SETTINGS
@given(lon=_longitude(), lat=_latitude(), system=_SYSTEM_STRAT)
def test_identity_conversion_is_a_no_op(lon, lat, system):
    c = Coordinates.from_spherical(lon, lat, system)
    assert c.convert(system) is c


@_SETTINGS
@given(
    lon1=_longitude(),
    lat1=_latitude(),
    lon2=_longitude(),
    lat2=_latitude(),
    target=_SYSTEM_STRAT,
)
def test_separation_is_preserved_by_mean_conversions(lon1, lat1, lon2, lat2, target):
    a = Coordinates.equatorial(lon1, lat1)
    b = Coordinates.equatorial(lon2, lat2)
    before = a.angular_separation(b).deg
    after = a.convert(target).angular_separation(b.convert(target)).deg
    assert abs(before - after) < 1e-7


@_SETTINGS
@given(ra=_longitude(), dec=_latitude())
def test_precession_forward_and_back(ra, dec):
    c = Coordinates.equatorial(ra, dec)
    back = c.precess(B1950).precess(J2000)
    assert np.allclose(back.unit_vector(), c.unit_vector(), atol=1e-9)


@_SETTINGS
@given(lon=_longitude(), lat=_latitude(), system=_SYSTEM_STRAT)
def test_spherical_view_stays_in_range(lon, lat, system):
    s = Coordinates.equatorial(lon, lat).convert(system).spherical
    assert 0.0 <= s.longitude.deg < 360.0
    assert -90.0 <= s.latitude.deg <= 90.0
    assert s.distance is None
