"""Rotation primitives on rectangular triples.

All matrices are *frame* rotations: rotating the axes by ``angle`` about an
axis, so a vector's longitude around that axis decreases by ``angle``.
Angles are in degrees.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np


def rotation_x(angle_deg: float) -> np.ndarray:
    c, s = np.cos(np.radians(angle_deg)), np.sin(np.radians(angle_deg))
    return np.array([[1.0, 0.0, 0.0], [0.0, c, s], [0.0, -s, c]])


def rotation_y(angle_deg: float) -> np.ndarray:
    c, s = np.cos(np.radians(angle_deg)), np.sin(np.radians(angle_deg))
    return np.array([[c, 0.0, -s], [0.0, 1.0, 0.0], [s, 0.0, c]])


def rotation_z(angle_deg: float) -> np.ndarray:
    c, s = np.cos(np.radians(angle_deg)), np.sin(np.radians(angle_deg))
    return np.array([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])


def rotate_around_y(xyz, angle_deg: float) -> np.ndarray:
    return rotation_y(angle_deg) @ np.asarray(xyz, dtype=float)


def rotate_around_z(xyz, angle_deg: float) -> np.ndarray:
    return rotation_z(angle_deg) @ np.asarray(xyz, dtype=float)


def pole_matrix(
    pole_longitude_deg: float, pole_latitude_deg: float, node_deg: float
) -> np.ndarray:
    """Matrix taking equatorial vectors into a frame with a different pole.

    Parameters
    ----------
    pole_longitude_deg, pole_latitude_deg : float
        Equatorial (α, δ) of the new frame's north pole.
    node_deg : float
        Equatorial longitude of the ascending node of the new frame's
        equator, as used in the usual spherical-triangle relations
        (``l = Ω - atan2(...)``).

    Notes
    -----
    The sequence is a Z rotation by the pole longitude, a Y rotation by the
    pole co-latitude and a final Z rotation placing the node.
    """
    return (
        rotation_z(node_deg - pole_longitude_deg)
        @ rotation_y(90.0 - pole_latitude_deg)
        @ rotation_z(pole_longitude_deg)
    )


def to_pole_frame(xyz, pole: Tuple[float, float, float]) -> np.ndarray:
    """Rotate an equatorial triple into the frame defined by ``pole``."""
    return pole_matrix(*pole) @ np.asarray(xyz, dtype=float)


def from_pole_frame(xyz, pole: Tuple[float, float, float]) -> np.ndarray:
    """Inverse of ``to_pole_frame``."""
    return pole_matrix(*pole).T @ np.asarray(xyz, dtype=float)


# North galactic pole and node (IAU 1958 system in J2000 coordinates).
GALACTIC_POLE: Tuple[float, float, float] = (
    192.85948402,
    27.12829637,
    249.9276045998651,
)


def ecliptic_pole(obliquity_deg: float) -> Tuple[float, float, float]:
    return (270.0, 90.0 - obliquity_deg, 360.0)


def horizon_pole(
    local_sidereal_deg: float, latitude_deg: float
) -> Tuple[float, float, float]:
    """Pole of the horizontal frame; longitudes come out anticlockwise."""
    return (local_sidereal_deg, latitude_deg, local_sidereal_deg - 180.0)


def vector_from_spherical(lon_deg: float, lat_deg: float, r: float = 1.0) -> np.ndarray:
    lon, lat = np.radians(lon_deg), np.radians(lat_deg)
    return r * np.array(
        [np.cos(lat) * np.cos(lon), np.cos(lat) * np.sin(lon), np.sin(lat)]
    )


def spherical_from_vector(xyz) -> Tuple[float, float, float]:
    """Return (longitude in [0, 360), latitude, radius) of a triple."""
    x, y, z = (float(c) for c in xyz)
    rho = np.hypot(x, y)
    lon = np.degrees(np.arctan2(y, x)) % 360.0
    lat = np.degrees(np.arctan2(z, rho))
    return float(lon), float(lat), float(np.sqrt(rho * rho + z * z))


__all__ = [
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "rotate_around_y",
    "rotate_around_z",
    "pole_matrix",
    "to_pole_frame",
    "from_pole_frame",
    "GALACTIC_POLE",
    "ecliptic_pole",
    "horizon_pole",
    "vector_from_spherical",
    "spherical_from_vector",
]
