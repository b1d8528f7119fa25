from __future__ import annotations

import astropy.units as u
import numpy as np
import pytest

from celestial_frames.coordinates.coordinates import AU_M, Coordinates
from celestial_frames.coordinates.system import EQUATORIAL_J2000, CoordinateSystem
from celestial_frames.frame_core.errors import ConversionNotImplementedError
from celestial_frames.frame_core.model import BARYCENTRIC, GEOCENTRIC, HELIOCENTRIC
from celestial_frames.frame_core.timescales import J2000, as_time

DATE = as_time(2459000.5)


def _geocentric_j2000(epoch=DATE) -> CoordinateSystem:
    return CoordinateSystem.equatorial(J2000, GEOCENTRIC, epoch=epoch)


def test_barycentric_geocentric_round_trip(ephemeris):
    c = Coordinates.equatorial(80.0, 15.0, distance=5.0 * u.AU)
    geo = c.convert(_geocentric_j2000(), ephemeris=ephemeris)
    assert geo.system.origin == GEOCENTRIC
    assert geo.distance.to_value(u.AU) != pytest.approx(5.0, abs=1e-6)
    back = geo.convert(EQUATORIAL_J2000, ephemeris=ephemeris)
    assert back.rectangular.x.to_value(u.m) == pytest.approx(
        c.rectangular.x.to_value(u.m), rel=1e-12
    )
    assert back.longitude.deg == pytest.approx(80.0, abs=1e-9)
    assert back.latitude.deg == pytest.approx(15.0, abs=1e-9)
    assert back.distance.to_value(u.AU) == pytest.approx(5.0, rel=1e-12)


def test_heliocentric_origin_seen_from_earth(ephemeris):
    ecliptic = CoordinateSystem.ecliptical(J2000, origin=HELIOCENTRIC, epoch=DATE)
    near_sun = Coordinates([1.0, 0.0, 0.0], ecliptic)
    geo = near_sun.convert(
        CoordinateSystem.ecliptical(J2000, origin=GEOCENTRIC, epoch=DATE),
        ephemeris=ephemeris,
    )
    earth = ephemeris.position_au("earth", DATE)
    assert geo.unit_vector() * geo.distance.to_value(u.AU) == pytest.approx(
        -earth, abs=1e-9
    )


def test_epoch_falls_back_to_source(ephemeris):
    c = Coordinates.equatorial(
        80.0, 15.0, CoordinateSystem.equatorial(J2000, BARYCENTRIC, epoch=DATE),
        distance=5.0 * u.AU,
    )
    with_source_epoch = c.convert(_geocentric_j2000(epoch=None), ephemeris=ephemeris)
    with_target_epoch = Coordinates.equatorial(
        80.0, 15.0, distance=5.0 * u.AU
    ).convert(_geocentric_j2000(), ephemeris=ephemeris)
    assert np.allclose(
        with_source_epoch.unit_vector(), with_target_epoch.unit_vector(), atol=1e-14
    )


def test_unknown_distance_is_not_shifted(ephemeris):
    c = Coordinates.equatorial(80.0, 15.0)
    geo = c.convert(_geocentric_j2000(), ephemeris=ephemeris)
    assert geo.distance is None
    assert geo.unit_vector() == pytest.approx(c.unit_vector(), abs=1e-15)


def test_far_objects_barely_move(ephemeris):
    c = Coordinates.equatorial(80.0, 15.0, distance=1.0 * u.pc)
    geo = c.convert(_geocentric_j2000(), ephemeris=ephemeris)
    assert c.angular_separation(
        Coordinates(geo.unit_vector(), EQUATORIAL_J2000, distance_known=False)
    ).to_value(u.arcsec) < 1.01


def test_topocentric_shift_of_known_distance_is_not_implemented(
    ephemeris, north_site, obs_time
):
    c = Coordinates.equatorial(80.0, 15.0, distance=5.0 * AU_M)
    with pytest.raises(ConversionNotImplementedError):
        c.convert(CoordinateSystem.horizontal(obs_time, north_site), ephemeris=ephemeris)
    with pytest.raises(NotImplementedError):
        c.convert(CoordinateSystem.horizontal(obs_time, north_site), ephemeris=ephemeris)
