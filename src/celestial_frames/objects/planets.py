"""Planets and the Sun as seen through the series store.

Each body knows how to place itself in any coordinate system at a date.
Positions carry a known distance, so every frame change includes the
origin shift (geocentric by default for equatorial and ecliptical views).
Horizontal positions are the exception: they are built from the geocentric
direction, so topocentric parallax is ignored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from celestial_frames.coordinates.coordinates import AU_M, Coordinates
from celestial_frames.coordinates.system import GALACTIC, CoordinateSystem
from celestial_frames.ephemeris.vsop87 import BODY_FILES, Ephemeris, default_ephemeris
from celestial_frames.frame_core.model import (
    BARYCENTRIC,
    GEOCENTRIC,
    HELIOCENTRIC,
    GeographicalLocation,
    Origin,
    PositionType,
)
from celestial_frames.frame_core.timescales import J2000, DateLike, as_time


@dataclass(frozen=True)
class SolarSystemBody(ABC):
    """Common frame handling for bodies placed by the series store."""

    # Lowercase body name, also the series key.
    name: str

    def __post_init__(self) -> None:
        if self.name not in BODY_FILES:
            raise ValueError(f"Unknown body: {self.name}")

    def _ephemeris(self, ephemeris: Optional[Ephemeris]) -> Ephemeris:
        return ephemeris if ephemeris is not None else default_ephemeris()

    @abstractmethod
    def native_coordinates(
        self, date: DateLike, ephemeris: Optional[Ephemeris] = None
    ) -> Coordinates:
        """Position in the frame the body's series is given in."""

    def coordinates(
        self,
        date: DateLike,
        system: CoordinateSystem,
        position_type: PositionType = PositionType.MEAN,
        ephemeris: Optional[Ephemeris] = None,
    ) -> Coordinates:
        """Position in ``system`` at ``date``."""
        native = self.native_coordinates(date, ephemeris)
        return native.convert(system, position_type, ephemeris=ephemeris)

    def equatorial_coordinates(
        self,
        date: DateLike,
        equinox: Optional[DateLike] = None,
        origin: Origin = GEOCENTRIC,
        position_type: PositionType = PositionType.MEAN,
        ephemeris: Optional[Ephemeris] = None,
    ) -> Coordinates:
        """Equatorial position; the equinox defaults to the date itself."""
        date = as_time(date)
        system = CoordinateSystem.equatorial(
            date if equinox is None else equinox, origin, epoch=date
        )
        return self.coordinates(date, system, position_type, ephemeris)

    def ecliptical_coordinates(
        self,
        date: DateLike,
        origin: Origin = GEOCENTRIC,
        position_type: PositionType = PositionType.MEAN,
        ephemeris: Optional[Ephemeris] = None,
    ) -> Coordinates:
        date = as_time(date)
        system = CoordinateSystem.ecliptical(date, origin=origin, epoch=date)
        return self.coordinates(date, system, position_type, ephemeris)

    def galactic_coordinates(
        self, date: DateLike, ephemeris: Optional[Ephemeris] = None
    ) -> Coordinates:
        return self.coordinates(date, GALACTIC, PositionType.MEAN, ephemeris)

    def horizontal_coordinates(
        self,
        date: DateLike,
        location: GeographicalLocation,
        position_type: PositionType = PositionType.APPARENT,
        ephemeris: Optional[Ephemeris] = None,
    ) -> Coordinates:
        """Horizontal position for an observer, without distance.

        The geocentric direction at ``date`` is turned into the observer's
        horizon frame with its distance dropped. Topocentric parallax is
        ignored: 8.8 arcsec for the Sun and about 30 arcsec for Venus at
        inferior conjunction.
        """
        date = as_time(date)
        geocentric = self.equatorial_coordinates(
            date, equinox=J2000, ephemeris=ephemeris
        )
        direction = Coordinates(
            geocentric.unit_vector(), geocentric.system, distance_known=False
        )
        system = CoordinateSystem.horizontal(date, location)
        return direction.convert(system, position_type, ephemeris=ephemeris)


@dataclass(frozen=True)
class Planet(SolarSystemBody):
    """A major planet; its series is heliocentric, ecliptic J2000."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.name == "sun":
            raise ValueError("The Sun is not a planet; use Sun()")

    def native_coordinates(
        self, date: DateLike, ephemeris: Optional[Ephemeris] = None
    ) -> Coordinates:
        return self.heliocentric_coordinates(date, ephemeris)

    def heliocentric_coordinates(
        self, date: DateLike, ephemeris: Optional[Ephemeris] = None
    ) -> Coordinates:
        date = as_time(date)
        xyz = self._ephemeris(ephemeris).position_au(self.name, date) * AU_M
        system = CoordinateSystem.ecliptical(J2000, origin=HELIOCENTRIC, epoch=date)
        return Coordinates(xyz, system, PositionType.MEAN, distance_known=True)


@dataclass(frozen=True)
class Sun(SolarSystemBody):
    """The Sun; its series is barycentric, ecliptic J2000."""

    name: str = "sun"

    def native_coordinates(
        self, date: DateLike, ephemeris: Optional[Ephemeris] = None
    ) -> Coordinates:
        return self.barycentric_coordinates(date, ephemeris)

    def barycentric_coordinates(
        self, date: DateLike, ephemeris: Optional[Ephemeris] = None
    ) -> Coordinates:
        date = as_time(date)
        xyz = self._ephemeris(ephemeris).sun_barycentric_au(date) * AU_M
        system = CoordinateSystem.ecliptical(J2000, origin=BARYCENTRIC, epoch=date)
        return Coordinates(xyz, system, PositionType.MEAN, distance_known=True)


MERCURY = Planet("mercury")
VENUS = Planet("venus")
EARTH = Planet("earth")
MARS = Planet("mars")
JUPITER = Planet("jupiter")
SATURN = Planet("saturn")
URANUS = Planet("uranus")
NEPTUNE = Planet("neptune")
SUN = Sun()

PLANETS = (MERCURY, VENUS, EARTH, MARS, JUPITER, SATURN, URANUS, NEPTUNE)


__all__ = [
    "SolarSystemBody",
    "Planet",
    "Sun",
    "MERCURY",
    "VENUS",
    "EARTH",
    "MARS",
    "JUPITER",
    "SATURN",
    "URANUS",
    "NEPTUNE",
    "SUN",
    "PLANETS",
]
