"""
timescales.py
=============
Instants and the time arguments the series are written in.

Every formula in the engine is a polynomial in Julian Days, Julian
centuries or Julian millennia counted from J2000.0. The Julian Day is taken
on whatever time scale the caller built the ``Time`` with; pass TT instants
when the difference to UTC matters.
"""

from __future__ import annotations

import datetime as _dt
from typing import Optional, Tuple, Union

from astropy.time import Time

JD_J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0
DAYS_PER_MILLENNIUM = 365250.0

J2000 = Time("J2000.0", scale="tt")
J2050 = Time("J2050.0", scale="tt")
B1950 = Time("B1950.0", scale="tt")

DateLike = Union[Time, _dt.datetime, float, int, str]


def as_time(value: DateLike) -> Time:
    """Coerce ``value`` to an astropy ``Time``.

    Numbers are Julian Days in TT, datetimes are UTC and strings go through
    astropy's own parsing (ISO dates, ``"J2000"``, ``"B1950"``...).
    """
    if isinstance(value, Time):
        if not value.isscalar:
            raise ValueError("Only scalar instants are supported")
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Time(float(value), format="jd", scale="tt")
    if isinstance(value, _dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(_dt.timezone.utc).replace(tzinfo=None)
        return Time(value, scale="utc")
    if isinstance(value, str):
        if value[:1] in ("J", "B"):
            return Time(value, scale="tt")
        return Time(value)
    raise TypeError(f"Cannot interpret {value!r} as an instant")


def now() -> Time:
    return Time.now()


def julian_day(date: Time) -> float:
    return float(date.jd)


def julian_centuries(date: Time) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (julian_day(date) - JD_J2000) / DAYS_PER_CENTURY


def julian_millennia(date: Time) -> float:
    """Julian millennia elapsed since J2000.0 (the VSOP87 time argument)."""
    return (julian_day(date) - JD_J2000) / DAYS_PER_MILLENNIUM


def time_key(date: Optional[Time]) -> Optional[Tuple[str, float, float]]:
    """Exact, hashable identity of an instant (scale and two-part JD)."""
    if date is None:
        return None
    return (date.scale, float(date.jd1), float(date.jd2))


def describe(date: Optional[Time]) -> str:
    if date is None:
        return "undefined"
    if time_key(date) == time_key(B1950):
        return "B1950.0"
    return f"J{date.jyear:.3f}"


__all__ = [
    "JD_J2000",
    "DAYS_PER_CENTURY",
    "DAYS_PER_MILLENNIUM",
    "J2000",
    "J2050",
    "B1950",
    "DateLike",
    "as_time",
    "now",
    "julian_day",
    "julian_centuries",
    "julian_millennia",
    "time_key",
    "describe",
]
