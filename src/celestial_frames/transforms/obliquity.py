"""Obliquity of the ecliptic (Laskar 1986), mean and true."""

from __future__ import annotations

import astropy.units as u
from astropy.coordinates import Angle
from astropy.time import Time

from celestial_frames.frame_core.errors import ObliquityRangeError
from celestial_frames.frame_core.timescales import DAYS_PER_CENTURY, JD_J2000
from celestial_frames.transforms.nutation import nutation_arcsec

# Coefficients in arcseconds of U**0 .. U**10, U in units of 10000 years.
_LASKAR = (
    84381.448,
    -4680.93,
    -1.55,
    1999.25,
    -51.38,
    -249.67,
    -39.05,
    7.12,
    27.87,
    5.79,
    2.45,
)


def mean_obliquity_deg(jd: float) -> float:
    """Mean obliquity in degrees at Julian Day ``jd``.

    Valid for |U| < 1, i.e. 10000 years either side of J2000.
    """
    U = (jd - JD_J2000) / DAYS_PER_CENTURY / 100.0
    if abs(U) >= 1.0:
        raise ObliquityRangeError(
            f"Obliquity formula valid within 10000 years of J2000 (JD {jd})"
        )
    acc = 0.0
    for coef in reversed(_LASKAR):
        acc = acc * U + coef
    return acc / 3600.0


def true_obliquity_deg(jd: float) -> float:
    _, d_eps = nutation_arcsec(jd)
    return mean_obliquity_deg(jd) + d_eps / 3600.0


def mean_obliquity(date: Time) -> Angle:
    return Angle(mean_obliquity_deg(float(date.jd)), u.deg)


def true_obliquity(date: Time) -> Angle:
    """Mean obliquity plus nutation in obliquity."""
    return Angle(true_obliquity_deg(float(date.jd)), u.deg)


OBLIQUITY_J2000_DEG = _LASKAR[0] / 3600.0


__all__ = [
    "mean_obliquity_deg",
    "true_obliquity_deg",
    "mean_obliquity",
    "true_obliquity",
    "OBLIQUITY_J2000_DEG",
]
