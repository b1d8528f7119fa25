from __future__ import annotations

import numpy as np
import pytest

from celestial_frames.transforms.rotations import (
    GALACTIC_POLE,
    ecliptic_pole,
    from_pole_frame,
    horizon_pole,
    pole_matrix,
    rotate_around_y,
    rotate_around_z,
    rotation_x,
    spherical_from_vector,
    to_pole_frame,
    vector_from_spherical,
)


def test_frame_rotation_about_z_lowers_longitude():
    v = rotate_around_z([1.0, 0.0, 0.0], 30.0)
    lon, lat, r = spherical_from_vector(v)
    assert lon == pytest.approx(330.0)
    assert lat == pytest.approx(0.0)
    assert r == pytest.approx(1.0)


def test_frame_rotation_about_y_tilts_pole():
    v = rotate_around_y([0.0, 0.0, 1.0], 90.0)
    assert v == pytest.approx([-1.0, 0.0, 0.0], abs=1e-15)


@pytest.mark.parametrize(
    "pole",
    [GALACTIC_POLE, ecliptic_pole(23.4392911), horizon_pole(123.0, 52.0)],
)
def test_pole_matrices_are_orthonormal(pole):
    m = pole_matrix(*pole)
    assert m @ m.T == pytest.approx(np.eye(3), abs=1e-14)
    assert np.linalg.det(m) == pytest.approx(1.0)


def test_ecliptic_pole_equals_rotation_about_x():
    eps = 23.4392911
    assert pole_matrix(*ecliptic_pole(eps)) == pytest.approx(rotation_x(eps), abs=1e-14)


def test_new_pole_maps_to_z_axis():
    pole = vector_from_spherical(GALACTIC_POLE[0], GALACTIC_POLE[1])
    assert to_pole_frame(pole, GALACTIC_POLE) == pytest.approx([0.0, 0.0, 1.0], abs=1e-12)


def test_from_pole_frame_inverts_to_pole_frame():
    v = np.array([0.3, -0.4, 0.866])
    pole = horizon_pole(200.0, -33.0)
    assert from_pole_frame(to_pole_frame(v, pole), pole) == pytest.approx(v)


def test_spherical_round_trip_keeps_radius():
    v = vector_from_spherical(250.0, -12.5, 7.0)
    lon, lat, r = spherical_from_vector(v)
    assert (lon, lat, r) == pytest.approx((250.0, -12.5, 7.0))
