"""Regions of the sky and their containment and overlap tests.

``CelestialArea`` is the interface every region shape implements; the only
shape today is ``EquirectangularArea``, a box bounded by two right
ascensions and two declinations in equatorial J2000 coordinates. A box
whose south-west right ascension is larger than its north-east one wraps
through RA 0h (``crosses_zero_ra``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from celestial_frames.coordinates.coordinates import Coordinates
from celestial_frames.coordinates.system import EQUATORIAL_J2000, CoordinateSystem
from celestial_frames.frame_core.model import PositionType


@runtime_checkable
class CelestialArea(Protocol):
    """A region of the sky."""

    @property
    def coordinate_system(self) -> CoordinateSystem: ...

    @property
    def bounding_area(self) -> "EquirectangularArea": ...

    def contains(self, coordinates: Coordinates) -> bool: ...

    def intersects(self, other: "CelestialArea") -> bool: ...


@dataclass(frozen=True)
class EquirectangularArea:
    """Box between two corners, stored in equatorial J2000 (mean).

    Corners given in another frame are converted on construction.
    """

    # Corner with the smallest declination and the starting right ascension.
    south_west: Coordinates
    # Corner with the largest declination and the ending right ascension.
    north_east: Coordinates

    def __post_init__(self) -> None:
        sw = self.south_west.convert(EQUATORIAL_J2000, PositionType.MEAN)
        ne = self.north_east.convert(EQUATORIAL_J2000, PositionType.MEAN)
        if sw.latitude.deg > ne.latitude.deg:
            raise ValueError("South-west corner lies north of the north-east corner")
        object.__setattr__(self, "south_west", sw)
        object.__setattr__(self, "north_east", ne)

    @classmethod
    def from_degrees(
        cls, ra_min: float, dec_min: float, ra_max: float, dec_max: float
    ) -> "EquirectangularArea":
        return cls(
            Coordinates.equatorial(ra_min, dec_min),
            Coordinates.equatorial(ra_max, dec_max),
        )

    @property
    def coordinate_system(self) -> CoordinateSystem:
        return EQUATORIAL_J2000

    @property
    def bounding_area(self) -> "EquirectangularArea":
        return self

    @property
    def south_east(self) -> Coordinates:
        return Coordinates.equatorial(
            self.north_east.longitude, self.south_west.latitude
        )

    @property
    def north_west(self) -> Coordinates:
        return Coordinates.equatorial(
            self.south_west.longitude, self.north_east.latitude
        )

    @property
    def crosses_zero_ra(self) -> bool:
        return bool(self.south_west.longitude.deg > self.north_east.longitude.deg)

    def contains(self, coordinates: Coordinates) -> bool:
        point = coordinates.convert(EQUATORIAL_J2000, PositionType.MEAN)
        ra, dec = point.longitude.deg, point.latitude.deg
        if not self.south_west.latitude.deg <= dec <= self.north_east.latitude.deg:
            return False
        sw_ra, ne_ra = self.south_west.longitude.deg, self.north_east.longitude.deg
        if self.crosses_zero_ra:
            return bool(ra >= sw_ra or ra <= ne_ra)
        return bool(sw_ra <= ra <= ne_ra)

    def intersects(self, other: CelestialArea) -> bool:
        area = other.bounding_area
        if not (
            area.south_west.latitude.deg < self.north_east.latitude.deg
            and area.north_east.latitude.deg > self.south_west.latitude.deg
        ):
            return False

        self_sw = self.south_west.longitude.deg
        self_ne = self.north_east.longitude.deg
        area_sw = area.south_west.longitude.deg
        area_ne = area.north_east.longitude.deg
        if area_sw < self_ne and area_ne > self_sw:
            return True
        if not (self.crosses_zero_ra or area.crosses_zero_ra):
            return False

        # Move both spans onto one non-wrapping line, then retest.
        if self.crosses_zero_ra:
            self_sw -= 360.0
        if area.crosses_zero_ra:
            area_sw -= 360.0
        if area_sw > 180.0:
            area_sw -= 360.0
        if self_sw > 180.0 or self_ne > 180.0:
            self_sw -= 360.0
            self_ne -= 360.0
        if area_sw > 180.0 or area_ne > 180.0:
            area_sw -= 360.0
            area_ne -= 360.0
        return bool(area_sw < self_ne and area_ne > self_sw)


__all__ = ["CelestialArea", "EquirectangularArea"]
