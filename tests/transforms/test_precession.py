from __future__ import annotations

import math

import astropy.units as u
import pytest
from astropy.time import Time

from celestial_frames.frame_core.timescales import B1950, J2000
from celestial_frames.transforms.precession import (
    precess_radec_deg,
    precession_angles,
    precession_angles_arcsec,
)


def test_angles_for_one_century_from_j2000():
    zeta, z, theta = precession_angles_arcsec(2451545.0, 2451545.0 + 36525.0)
    assert zeta == pytest.approx(2306.2181 + 0.30188 + 0.017998, abs=1e-9)
    assert z == pytest.approx(2306.2181 + 1.09468 + 0.018203, abs=1e-9)
    assert theta == pytest.approx(2004.3109 - 0.42665 - 0.041833, abs=1e-9)


def test_angles_vanish_without_interval():
    assert precession_angles_arcsec(2440000.5, 2440000.5) == (0.0, 0.0, 0.0)


def test_precession_angles_are_quantities():
    angles = precession_angles(J2000, Time(2451545.0 + 36525.0, format="jd", scale="tt"))
    assert angles.theta.to_value(u.arcsec) == pytest.approx(2003.842417, abs=1e-6)


def test_meeus_example_21b():
    # θ Persei, mean place J2000 precessed to 2028 Nov 13.19 TD (proper motion
    # already applied): α = 41.547214°, δ = 49.348483°.
    ra, dec = precess_radec_deg(41.054063, 49.227750, 2451545.0, 2462088.69)
    assert ra == pytest.approx(41.547214, abs=5e-6)
    assert dec == pytest.approx(49.348483, abs=5e-6)


def test_equinox_origin_precessed_one_century():
    ra, dec = precess_radec_deg(0.0, 0.0, 2451545.0, 2451545.0 + 36525.0)
    assert ra == pytest.approx(1.2816, abs=1e-3)
    assert dec == pytest.approx(0.5566, abs=1e-3)


@pytest.mark.parametrize(
    "ra, dec",
    [(0.0, 0.0), (123.4, 56.7), (359.9, -89.5), (210.0, 89.99), (75.0, -30.0)],
)
def test_forward_and_back(ra, dec):
    jd_to = float(B1950.jd)
    ra1, dec1 = precess_radec_deg(ra, dec, 2451545.0, jd_to)
    ra2, dec2 = precess_radec_deg(ra1, dec1, jd_to, 2451545.0)
    d_ra = (ra2 - ra + 180.0) % 360.0 - 180.0
    assert abs(d_ra) * math.cos(math.radians(dec)) < 1e-6
    assert dec2 == pytest.approx(dec, abs=1e-6)
