"""Precession of equatorial coordinates between equinoxes.

Rigorous method of Meeus, *Astronomical Algorithms*, eq. 21.2-21.4. With
``T`` the Julian centuries from J2000 to the starting equinox and ``t`` the
Julian centuries from the starting to the final equinox:

    ζ = (2306.2181 + 1.39656 T - 0.000139 T²) t + (0.30188 - 0.000344 T) t²
        + 0.017998 t³
    z = (2306.2181 + 1.39656 T - 0.000139 T²) t + (1.09468 + 0.000066 T) t²
        + 0.018203 t³
    θ = (2004.3109 - 0.85330 T - 0.000217 T²) t - (0.42665 + 0.000217 T) t²
        - 0.041833 t³

all in arcseconds. The series is self-consistent: precessing forward and
back between the same two equinoxes returns the starting position.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Tuple

import astropy.units as u
from astropy.coordinates import Angle
from astropy.time import Time

from celestial_frames.frame_core.timescales import DAYS_PER_CENTURY, JD_J2000


class PrecessionAngles(NamedTuple):
    zeta: Angle
    z: Angle
    theta: Angle


def precession_angles_arcsec(
    from_jd: float, to_jd: float
) -> Tuple[float, float, float]:
    """Return (ζ, z, θ) in arcseconds."""
    T = (from_jd - JD_J2000) / DAYS_PER_CENTURY
    t = (to_jd - from_jd) / DAYS_PER_CENTURY
    t2 = t * t
    t3 = t2 * t
    base = 2306.2181 + 1.39656 * T - 0.000139 * T * T
    zeta = base * t + (0.30188 - 0.000344 * T) * t2 + 0.017998 * t3
    z = base * t + (1.09468 + 0.000066 * T) * t2 + 0.018203 * t3
    theta = (
        (2004.3109 - 0.85330 * T - 0.000217 * T * T) * t
        - (0.42665 + 0.000217 * T) * t2
        - 0.041833 * t3
    )
    return zeta, z, theta


def precession_angles(from_equinox: Time, to_equinox: Time) -> PrecessionAngles:
    zeta, z, theta = precession_angles_arcsec(
        float(from_equinox.jd), float(to_equinox.jd)
    )
    return PrecessionAngles(
        Angle(zeta, u.arcsec), Angle(z, u.arcsec), Angle(theta, u.arcsec)
    )


def precess_radec_deg(
    ra_deg: float, dec_deg: float, from_jd: float, to_jd: float
) -> Tuple[float, float]:
    """Precess (α, δ) in degrees from one equinox to another.

    Returns α in [0, 360) and δ in [-90, 90]. The declination is taken
    from ``atan2`` so it stays accurate close to the poles.
    """
    if from_jd == to_jd:
        return ra_deg % 360.0, dec_deg
    zeta, z, theta = (
        math.radians(a / 3600.0) for a in precession_angles_arcsec(from_jd, to_jd)
    )
    ra, dec = math.radians(ra_deg), math.radians(dec_deg)
    cos_dec = math.cos(dec)
    A = cos_dec * math.sin(ra + zeta)
    B = math.cos(theta) * cos_dec * math.cos(ra + zeta) - math.sin(theta) * math.sin(dec)
    C = math.sin(theta) * cos_dec * math.cos(ra + zeta) + math.cos(theta) * math.sin(dec)
    ra_out = math.degrees(math.atan2(A, B) + z) % 360.0
    dec_out = math.degrees(math.atan2(C, math.hypot(A, B)))
    return ra_out, dec_out


__all__ = [
    "PrecessionAngles",
    "precession_angles_arcsec",
    "precession_angles",
    "precess_radec_deg",
]
