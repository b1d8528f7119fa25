"""Catalog stars.

A ``Star`` is the record catalog loaders hand to the engine: names, an
optional visual magnitude and a position in any system. The position is
normalised to ICRS once, on construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from celestial_frames.coordinates.coordinates import Coordinates
from celestial_frames.coordinates.system import GALACTIC, ICRS, CoordinateSystem
from celestial_frames.frame_core.model import (
    GEOCENTRIC,
    GeographicalLocation,
    Origin,
    PositionType,
)
from celestial_frames.frame_core.timescales import DateLike, as_time


# A star from a catalog.
@dataclass(frozen=True)
class Star:
    # Position, stored in ICRS after construction.
    coordinates: Coordinates
    # Proper name (e.g. "Arcturus"), if any.
    name: Optional[str] = None
    # Catalog designations such as "HR 5340" or "α Boo".
    designations: Tuple[str, ...] = field(default_factory=tuple)
    # Visual magnitude.
    magnitude: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", self.coordinates.convert(ICRS))
        object.__setattr__(self, "designations", tuple(self.designations))

    @classmethod
    def from_equatorial(
        cls,
        right_ascension,
        declination,
        system: CoordinateSystem = ICRS,
        **kwargs,
    ) -> "Star":
        """Build from (α, δ) in ``system`` (ICRS by default)."""
        return cls(Coordinates.equatorial(right_ascension, declination, system), **kwargs)

    def equatorial_coordinates(
        self,
        date: DateLike,
        equinox: Optional[DateLike] = None,
        origin: Origin = GEOCENTRIC,
        position_type: PositionType = PositionType.MEAN,
    ) -> Coordinates:
        date = as_time(date)
        system = CoordinateSystem.equatorial(
            date if equinox is None else equinox, origin, epoch=date
        )
        return self.coordinates.convert(system, position_type)

    def ecliptical_coordinates(
        self,
        date: DateLike,
        origin: Origin = GEOCENTRIC,
        position_type: PositionType = PositionType.MEAN,
    ) -> Coordinates:
        date = as_time(date)
        system = CoordinateSystem.ecliptical(date, origin=origin, epoch=date)
        return self.coordinates.convert(system, position_type)

    def galactic_coordinates(self) -> Coordinates:
        return self.coordinates.convert(GALACTIC)

    def horizontal_coordinates(
        self,
        date: DateLike,
        location: GeographicalLocation,
        position_type: PositionType = PositionType.APPARENT,
    ) -> Coordinates:
        """Azimuth and altitude for an observer (apparent by default)."""
        system = CoordinateSystem.horizontal(as_time(date), location)
        return self.coordinates.convert(system, position_type)

    def __str__(self) -> str:
        label = self.name or (self.designations[0] if self.designations else "star")
        return f"{label} ({self.coordinates.spherical})"


__all__ = ["Star"]
