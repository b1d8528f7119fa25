"""Mean and apparent sidereal time (Meeus, eq. 12.4 and ch. 12)."""

from __future__ import annotations

import math

import astropy.units as u
from astropy.coordinates import Longitude
from astropy.time import Time

from celestial_frames.frame_core.model import GeographicalLocation, PositionType
from celestial_frames.frame_core.timescales import DAYS_PER_CENTURY, JD_J2000
from celestial_frames.transforms.nutation import nutation_arcsec
from celestial_frames.transforms.obliquity import true_obliquity_deg


def greenwich_mean_sidereal_deg(jd: float) -> float:
    d = jd - JD_J2000
    T = d / DAYS_PER_CENTURY
    return (
        280.46061837
        + 360.98564736629 * d
        + 0.000387933 * T * T
        - T * T * T / 38710000.0
    )


def equation_of_equinoxes_deg(jd: float) -> float:
    """Nutation in longitude projected on the equator, Δψ·cos ε."""
    d_psi, _ = nutation_arcsec(jd)
    return d_psi / 3600.0 * math.cos(math.radians(true_obliquity_deg(jd)))


def local_sidereal_deg(
    jd: float,
    west_longitude_deg: float,
    position_type: PositionType = PositionType.MEAN,
) -> float:
    """Local sidereal time in degrees, normalised to [0, 360)."""
    theta = greenwich_mean_sidereal_deg(jd) - west_longitude_deg
    if position_type is not PositionType.MEAN:
        theta += equation_of_equinoxes_deg(jd)
    return theta % 360.0


def sidereal_time(
    date: Time,
    location: GeographicalLocation,
    position_type: PositionType = PositionType.MEAN,
) -> Longitude:
    """Sidereal time at ``location``.

    Parameters
    ----------
    date : astropy.time.Time
        Instant; its Julian Day is used on the scale it carries (use UT1 or
        UTC for civil sidereal time).
    location : GeographicalLocation
        Observer; longitude is counted positive west.
    position_type : PositionType
        ``MEAN`` gives mean sidereal time, anything else adds the equation
        of the equinoxes (apparent sidereal time).

    Returns
    -------
    astropy.coordinates.Longitude
        Angle in [0°, 360°).
    """
    theta = local_sidereal_deg(float(date.jd), location.longitude_deg, position_type)
    return Longitude(theta * u.deg)


__all__ = [
    "greenwich_mean_sidereal_deg",
    "equation_of_equinoxes_deg",
    "local_sidereal_deg",
    "sidereal_time",
]
