"""
model.py
========
Small value types shared by every layer of the conversion engine.

Frame tags, position types, observer locations and origins live here so
that transforms, coordinates and catalog objects can agree on them without
importing each other.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import astropy.units as u
from astropy.coordinates import Angle, Latitude, Longitude


class FrameType(Enum):
    """Reference frame families understood by the engine."""

    ICRS = "ICRS"
    EQUATORIAL = "equatorial"
    ECLIPTICAL = "ecliptical"
    GALACTIC = "galactic"
    HORIZONTAL = "horizontal"


class PositionType(Enum):
    """Correction level of a position: mean, true (+ nutation), apparent."""

    MEAN = "mean"
    TRUE = "true"
    APPARENT = "apparent"


class OriginKind(Enum):
    BARYCENTRIC = "barycentric"
    HELIOCENTRIC = "heliocentric"
    GEOCENTRIC = "geocentric"
    TOPOCENTRIC = "topocentric"


class CoordinateRole(Enum):
    """Role tag of a spherical component; only affects its symbol."""

    RIGHT_ASCENSION = ("α", "right ascension")
    DECLINATION = ("δ", "declination")
    ECLIPTICAL_LONGITUDE = ("λ", "ecliptical longitude")
    ECLIPTICAL_LATITUDE = ("β", "ecliptical latitude")
    GALACTIC_LONGITUDE = ("l", "galactic longitude")
    GALACTIC_LATITUDE = ("b", "galactic latitude")
    AZIMUTH = ("A", "azimuth")
    ALTITUDE = ("h", "altitude")

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]


_ROLES = {
    FrameType.ICRS: (CoordinateRole.RIGHT_ASCENSION, CoordinateRole.DECLINATION),
    FrameType.EQUATORIAL: (
        CoordinateRole.RIGHT_ASCENSION,
        CoordinateRole.DECLINATION,
    ),
    FrameType.ECLIPTICAL: (
        CoordinateRole.ECLIPTICAL_LONGITUDE,
        CoordinateRole.ECLIPTICAL_LATITUDE,
    ),
    FrameType.GALACTIC: (
        CoordinateRole.GALACTIC_LONGITUDE,
        CoordinateRole.GALACTIC_LATITUDE,
    ),
    FrameType.HORIZONTAL: (CoordinateRole.AZIMUTH, CoordinateRole.ALTITUDE),
}


def roles_for(frame: FrameType) -> Tuple[CoordinateRole, CoordinateRole]:
    """Return the (longitude, latitude) role pair of a frame type."""
    return _ROLES[frame]


# An observer on the Earth's surface.
@dataclass(frozen=True)
class GeographicalLocation:
    # Longitude in decimal degrees (west positive, as in sidereal time).
    longitude_deg: float
    # Geodetic latitude in decimal degrees (south negative).
    latitude_deg: float
    # Elevation above mean sea level in meters, if known.
    elevation_m: Optional[float] = None
    # Human readable site name.
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude_deg <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude_deg}")

    @classmethod
    def from_east_longitude(
        cls,
        east_longitude_deg: float,
        latitude_deg: float,
        elevation_m: Optional[float] = None,
        name: Optional[str] = None,
    ) -> "GeographicalLocation":
        """Build a location from the usual east-positive longitude."""
        return cls(-east_longitude_deg, latitude_deg, elevation_m, name)

    @property
    def longitude(self) -> Longitude:
        return Longitude(self.longitude_deg * u.deg, wrap_angle=180 * u.deg)

    @property
    def latitude(self) -> Latitude:
        return Latitude(self.latitude_deg * u.deg)

    @property
    def elevation(self) -> Optional[u.Quantity]:
        if self.elevation_m is None:
            return None
        return self.elevation_m * u.m


GREENWICH = GeographicalLocation(0.0, 51.4769, 46.0, "Greenwich")


# Point the coordinates of a frame are measured from.
@dataclass(frozen=True)
class Origin:
    # Which body or place the origin sits on.
    kind: OriginKind
    # Observer location; only set for topocentric origins.
    location: Optional[GeographicalLocation] = None

    def __post_init__(self) -> None:
        if self.kind is OriginKind.TOPOCENTRIC and self.location is None:
            raise ValueError("A topocentric origin needs a location")
        if self.kind is not OriginKind.TOPOCENTRIC and self.location is not None:
            raise ValueError(f"A {self.kind.value} origin takes no location")

    @classmethod
    def topocentric(cls, location: GeographicalLocation) -> "Origin":
        return cls(OriginKind.TOPOCENTRIC, location)

    def __str__(self) -> str:
        if self.location is not None:
            where = self.location.name or (
                f"{self.location.longitude_deg:.4f}W, "
                f"{self.location.latitude_deg:.4f}N"
            )
            return f"topocentric ({where})"
        return self.kind.value


BARYCENTRIC = Origin(OriginKind.BARYCENTRIC)
HELIOCENTRIC = Origin(OriginKind.HELIOCENTRIC)
GEOCENTRIC = Origin(OriginKind.GEOCENTRIC)


def as_angle_deg(value) -> float:
    """Return ``value`` in degrees; plain numbers are taken as degrees."""
    if isinstance(value, u.Quantity):
        return float(Angle(value).to_value(u.deg))
    return float(value)


__all__ = [
    "FrameType",
    "PositionType",
    "OriginKind",
    "CoordinateRole",
    "roles_for",
    "GeographicalLocation",
    "GREENWICH",
    "Origin",
    "BARYCENTRIC",
    "HELIOCENTRIC",
    "GEOCENTRIC",
    "as_angle_deg",
]
