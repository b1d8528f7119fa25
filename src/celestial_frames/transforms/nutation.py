"""IAU 1980 nutation in longitude and obliquity.

The 63-term series of Meeus, *Astronomical Algorithms*, table 22.A, over the
fundamental arguments D, M, M', F and Ω. Accuracy is about 0.5" in Δψ and
0.1" in Δε.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

import astropy.units as u
import numpy as np
from astropy.coordinates import Angle
from astropy.time import Time

from celestial_frames.frame_core.timescales import DAYS_PER_CENTURY, JD_J2000

# Multipliers of (D, M, M', F, Ω), then Δψ coefficients (0.0001", 0.0001"/T)
# and Δε coefficients (0.0001", 0.0001"/T).
_TERMS = np.array(
    [
        ( 0,  0,  0,  0,  1,  -171996,  -174.2,  92025,   8.9),
        (-2,  0,  0,  2,  2,   -13187,    -1.6,   5736,  -3.1),
        ( 0,  0,  0,  2,  2,    -2274,    -0.2,    977,  -0.5),
        ( 0,  0,  0,  0,  2,     2062,    0.2,   -895,   0.5),
        ( 0,  1,  0,  0,  0,     1426,    -3.4,     54,  -0.1),
        ( 0,  0,  1,  0,  0,      712,     0.1,     -7,   0.0),
        (-2,  1,  0,  2,  2,     -517,     1.2,    224,  -0.6),
        ( 0,  0,  0,  2,  1,     -386,    -0.4,    200,   0.0),
        ( 0,  0,  1,  2,  2,     -301,     0.0,    129,  -0.1),
        (-2, -1,  0,  2,  2,      217,    -0.5,    -95,   0.3),
        (-2,  0,  1,  0,  0,     -158,     0.0,      0,   0.0),
        (-2,  0,  0,  2,  1,      129,     0.1,    -70,   0.0),
        ( 0,  0, -1,  2,  2,      123,     0.0,    -53,   0.0),
        ( 2,  0,  0,  0,  0,       63,     0.0,      0,   0.0),
        ( 0,  0,  1,  0,  1,       63,     0.1,    -33,   0.0),
        ( 2,  0, -1,  2,  2,      -59,     0.0,     26,   0.0),
        ( 0,  0, -1,  0,  1,      -58,    -0.1,     32,   0.0),
        ( 0,  0,  1,  2,  1,      -51,     0.0,     27,   0.0),
        (-2,  0,  2,  0,  0,       48,     0.0,      0,   0.0),
        ( 0,  0, -2,  2,  1,       46,     0.0,    -24,   0.0),
        ( 2,  0,  0,  2,  2,      -38,     0.0,     16,   0.0),
        ( 0,  0,  2,  2,  2,      -31,     0.0,     13,   0.0),
        ( 0,  0,  2,  0,  0,       29,     0.0,      0,   0.0),
        (-2,  0,  1,  2,  2,       29,     0.0,    -12,   0.0),
        ( 0,  0,  0,  2,  0,       26,     0.0,      0,   0.0),
        (-2,  0,  0,  2,  0,      -22,     0.0,      0,   0.0),
        ( 0,  0, -1,  2,  1,       21,     0.0,    -10,   0.0),
        ( 0,  2,  0,  0,  0,       17,    -0.1,      0,   0.0),
        ( 2,  0, -1,  0,  1,       16,     0.0,     -8,   0.0),
        (-2,  2,  0,  2,  2,      -16,     0.1,      7,   0.0),
        ( 0,  1,  0,  0,  1,      -15,     0.0,      9,   0.0),
        (-2,  0,  1,  0,  1,      -13,     0.0,      7,   0.0),
        ( 0, -1,  0,  0,  1,      -12,     0.0,      6,   0.0),
        ( 0,  0,  2, -2,  0,       11,     0.0,      0,   0.0),
        ( 2,  0, -1,  2,  1,      -10,     0.0,      5,   0.0),
        ( 2,  0,  1,  2,  2,       -8,     0.0,      3,   0.0),
        ( 0,  1,  0,  2,  2,        7,     0.0,     -3,   0.0),
        (-2,  1,  1,  0,  0,       -7,     0.0,      0,   0.0),
        ( 0, -1,  0,  2,  2,       -7,     0.0,      3,   0.0),
        ( 2,  0,  0,  2,  1,       -7,     0.0,      3,   0.0),
        ( 2,  0,  1,  0,  0,        6,     0.0,      0,   0.0),
        (-2,  0,  2,  2,  2,        6,     0.0,     -3,   0.0),
        (-2,  0,  1,  2,  1,        6,     0.0,     -3,   0.0),
        ( 2,  0, -2,  0,  1,       -6,     0.0,      3,   0.0),
        ( 2,  0,  0,  0,  1,       -6,     0.0,      3,   0.0),
        ( 0, -1,  1,  0,  0,        5,     0.0,      0,   0.0),
        (-2, -1,  0,  2,  1,       -5,     0.0,      3,   0.0),
        (-2,  0,  0,  0,  1,       -5,     0.0,      3,   0.0),
        ( 0,  0,  2,  2,  1,       -5,     0.0,      3,   0.0),
        (-2,  0,  2,  0,  1,        4,     0.0,      0,   0.0),
        (-2,  1,  0,  2,  1,        4,     0.0,      0,   0.0),
        ( 0,  0,  1, -2,  0,        4,     0.0,      0,   0.0),
        (-1,  0,  1,  0,  0,       -4,     0.0,      0,   0.0),
        (-2,  1,  0,  0,  0,       -4,     0.0,      0,   0.0),
        ( 1,  0,  0,  0,  0,       -4,     0.0,      0,   0.0),
        ( 0,  0,  1,  2,  0,        3,     0.0,      0,   0.0),
        ( 0,  0, -2,  2,  2,       -3,     0.0,      0,   0.0),
        (-1, -1,  1,  0,  0,       -3,     0.0,      0,   0.0),
        ( 0,  1,  1,  0,  0,       -3,     0.0,      0,   0.0),
        ( 0, -1,  1,  2,  2,       -3,     0.0,      0,   0.0),
        ( 2, -1, -1,  2,  2,       -3,     0.0,      0,   0.0),
        ( 0,  0,  3,  2,  2,       -3,     0.0,      0,   0.0),
        ( 2, -1,  0,  2,  2,       -3,     0.0,      0,   0.0),
    ]
)


def fundamental_arguments_deg(T: float) -> np.ndarray:
    """Return (D, M, M', F, Ω) in degrees for Julian centuries T."""
    T2 = T * T
    T3 = T2 * T
    return np.array(
        [
            297.85036 + 445267.111480 * T - 0.0019142 * T2 + T3 / 189474.0,
            357.52772 + 35999.050340 * T - 0.0001603 * T2 - T3 / 300000.0,
            134.96298 + 477198.867398 * T + 0.0086972 * T2 + T3 / 56250.0,
            93.27191 + 483202.017538 * T - 0.0036825 * T2 + T3 / 327270.0,
            125.04452 - 1934.136261 * T + 0.0020708 * T2 + T3 / 450000.0,
        ]
    )


def nutation_arcsec(jd: float) -> Tuple[float, float]:
    """Return (Δψ, Δε) in arcseconds at Julian Day ``jd``."""
    T = (jd - JD_J2000) / DAYS_PER_CENTURY
    args = np.radians(_TERMS[:, :5] @ fundamental_arguments_deg(T))
    d_psi = np.sum((_TERMS[:, 5] + _TERMS[:, 6] * T) * np.sin(args)) * 1e-4
    d_eps = np.sum((_TERMS[:, 7] + _TERMS[:, 8] * T) * np.cos(args)) * 1e-4
    return float(d_psi), float(d_eps)


class Nutation(NamedTuple):
    # Nutation in longitude.
    delta_psi: Angle
    # Nutation in obliquity.
    delta_epsilon: Angle


def nutation(date: Time) -> Nutation:
    d_psi, d_eps = nutation_arcsec(float(date.jd))
    return Nutation(Angle(d_psi, u.arcsec), Angle(d_eps, u.arcsec))


__all__ = ["fundamental_arguments_deg", "nutation_arcsec", "Nutation", "nutation"]
