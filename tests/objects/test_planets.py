from __future__ import annotations

import astropy.units as u
import numpy as np
import pytest
from astropy.time import Time

from celestial_frames.coordinates.system import CoordinateSystem
from celestial_frames.frame_core.model import (
    BARYCENTRIC,
    GEOCENTRIC,
    HELIOCENTRIC,
    FrameType,
    OriginKind,
    PositionType,
)
from celestial_frames.frame_core.timescales import J2000
from celestial_frames.objects.planets import (
    EARTH,
    JUPITER,
    MARS,
    PLANETS,
    SUN,
    VENUS,
    Planet,
    SolarSystemBody,
    Sun,
)

_DATES = [2451545.0, 2455000.5, 2459000.5, 2460500.5]


def test_body_names_are_checked():
    with pytest.raises(ValueError):
        Planet("pluto")
    with pytest.raises(ValueError):
        Planet("sun")
    with pytest.raises(ValueError):
        Planet("Mars")
    assert Sun() == SUN
    assert len(PLANETS) == 8


def test_solar_system_body_is_abstract():
    with pytest.raises(TypeError):
        SolarSystemBody("mars")


@pytest.mark.parametrize("jd", _DATES)
def test_earth_stays_near_one_au(jd, ephemeris):
    helio = EARTH.heliocentric_coordinates(jd, ephemeris)
    assert helio.system.origin.kind is OriginKind.HELIOCENTRIC
    assert helio.system.type is FrameType.ECLIPTICAL
    assert 0.98 < helio.distance.to_value(u.AU) < 1.02
    assert abs(helio.latitude.deg) < 0.01


@pytest.mark.parametrize("jd", _DATES)
def test_sun_seen_from_earth_mirrors_earth(jd, ephemeris):
    ecliptic = CoordinateSystem.ecliptical(J2000, origin=GEOCENTRIC, epoch=jd)
    sun = SUN.coordinates(jd, ecliptic, ephemeris=ephemeris)
    earth = EARTH.heliocentric_coordinates(jd, ephemeris)
    sun_au = sun.unit_vector() * sun.distance.to_value(u.AU)
    earth_au = earth.unit_vector() * earth.distance.to_value(u.AU)
    assert np.allclose(sun_au, -earth_au, atol=1e-9)


def test_venus_matches_published_heliocentric_position(ephemeris, angle_close):
    # Meeus, Astronomical Algorithms (2nd ed.), Venus on 1992 December 20,
    # 0h TD: L = 26.11428°, B = -2.62070°, R = 0.724603 AU referred to the
    # ecliptic and equinox of date.
    date = 2448976.5
    helio = VENUS.heliocentric_coordinates(date, ephemeris)
    of_date = helio.convert(
        CoordinateSystem.ecliptical(date, origin=HELIOCENTRIC, epoch=date),
        ephemeris=ephemeris,
    )
    assert angle_close(of_date.longitude.deg, 26.11428, 0.02)
    assert of_date.latitude.deg == pytest.approx(-2.62070, abs=0.01)
    assert of_date.distance.to_value(u.AU) == pytest.approx(0.724603, abs=1e-4)


def test_sun_at_march_equinox(ephemeris, angle_close):
    date = Time("2021-03-20T09:37:00", scale="tt")
    sun = SUN.ecliptical_coordinates(date, ephemeris=ephemeris)
    assert angle_close(sun.longitude.deg, 0.0, 0.1)
    assert abs(sun.latitude.deg) < 0.01


def test_sun_barycentric_offset_is_small(ephemeris):
    bary = SUN.barycentric_coordinates(2459000.5, ephemeris)
    assert bary.system.origin == BARYCENTRIC
    assert bary.distance.to_value(u.AU) < 0.011


@pytest.mark.parametrize("jd", _DATES)
def test_geocentric_distances(jd, ephemeris):
    mars = MARS.equatorial_coordinates(jd, ephemeris=ephemeris)
    jupiter = JUPITER.equatorial_coordinates(jd, ephemeris=ephemeris)
    assert 0.37 < mars.distance.to_value(u.AU) < 2.68
    assert 3.9 < jupiter.distance.to_value(u.AU) < 6.5


def test_equatorial_defaults(ephemeris):
    jd = 2459000.5
    mars = MARS.equatorial_coordinates(jd, ephemeris=ephemeris)
    assert mars.system == CoordinateSystem.equatorial(jd, GEOCENTRIC, epoch=jd)
    assert mars.position_type is PositionType.MEAN
    fixed = MARS.equatorial_coordinates(jd, equinox=J2000, ephemeris=ephemeris)
    assert fixed.system.equinox is J2000
    assert fixed.angular_separation(mars).deg == pytest.approx(0.0, abs=1e-9)


def test_galactic_coordinates(ephemeris):
    gal = JUPITER.galactic_coordinates(2459000.5, ephemeris)
    assert gal.system.type is FrameType.GALACTIC
    assert gal.distance is not None


def test_horizontal_uses_geocentric_direction(ephemeris, north_site, obs_time):
    hor = MARS.horizontal_coordinates(obs_time, north_site, ephemeris=ephemeris)
    assert hor.system == CoordinateSystem.horizontal(obs_time, north_site)
    assert hor.position_type is PositionType.APPARENT
    assert hor.distance is None
    geo = MARS.equatorial_coordinates(obs_time, equinox=J2000, ephemeris=ephemeris)
    back = hor.convert(geo.system, PositionType.MEAN, ephemeris=ephemeris)
    assert back.angular_separation(geo).deg == pytest.approx(0.0, abs=1e-7)


def test_sun_is_down_late_in_the_evening(ephemeris, north_site, obs_time):
    # 21:00 UTC at 10°E in August is about 21:35 local solar time.
    hor = SUN.horizontal_coordinates(obs_time, north_site, ephemeris=ephemeris)
    assert -20.0 < hor.latitude.deg < 0.0
