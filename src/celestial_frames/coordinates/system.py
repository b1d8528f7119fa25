"""
system.py
=========
Immutable descriptors of the reference frames a position can be expressed in.

A ``CoordinateSystem`` names the frame family, the origin, and the dates the
frame depends on:

- ``equinox``: orientation of the equatorial grid (equatorial, ecliptical)
- ``epoch``: instant of observation (horizontal frames, origin shifts)
- ``ecliptic``: date of the ecliptic plane (ecliptical only; defaults to
  the equinox)

Systems compare by value. Dates compare by their exact representation, so
the same instant given on two time scales makes two different systems.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from astropy.time import Time

from celestial_frames.frame_core.model import (
    BARYCENTRIC,
    GEOCENTRIC,
    FrameType,
    GeographicalLocation,
    Origin,
)
from celestial_frames.frame_core.timescales import (
    B1950,
    J2000,
    J2050,
    DateLike,
    as_time,
    describe,
    time_key,
)


def _opt_time(value: Optional[DateLike]) -> Optional[Time]:
    return None if value is None else as_time(value)


@dataclass(frozen=True, eq=False)
class CoordinateSystem:
    # Frame family.
    type: FrameType
    # Point the coordinates are measured from.
    origin: Origin = BARYCENTRIC
    # Equinox of the equatorial grid.
    equinox: Optional[Time] = None
    # Observation instant.
    epoch: Optional[Time] = None
    # Date of the ecliptic plane.
    ecliptic: Optional[Time] = None
    # Longitude grows eastward (false only for horizontal azimuth).
    anti_clockwise: bool = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.type, FrameType):
            raise TypeError(f"Frame type must be a FrameType, got {self.type!r}")
        object.__setattr__(self, "equinox", _opt_time(self.equinox))
        object.__setattr__(self, "epoch", _opt_time(self.epoch))
        object.__setattr__(self, "ecliptic", _opt_time(self.ecliptic))
        object.__setattr__(self, "anti_clockwise", self.type is not FrameType.HORIZONTAL)

    # ---------------- factories ----------------

    @classmethod
    def equatorial(
        cls,
        equinox: DateLike,
        origin: Origin = GEOCENTRIC,
        epoch: Optional[DateLike] = None,
    ) -> "CoordinateSystem":
        return cls(FrameType.EQUATORIAL, origin, equinox=equinox, epoch=epoch)

    @classmethod
    def ecliptical(
        cls,
        ecliptic_at: DateLike,
        equinox: Optional[DateLike] = None,
        origin: Origin = GEOCENTRIC,
        epoch: Optional[DateLike] = None,
    ) -> "CoordinateSystem":
        """Ecliptical frame of the ecliptic at ``ecliptic_at``.

        The equinox defaults to the ecliptic date.
        """
        return cls(
            FrameType.ECLIPTICAL,
            origin,
            equinox=ecliptic_at if equinox is None else equinox,
            epoch=epoch,
            ecliptic=ecliptic_at,
        )

    @classmethod
    def horizontal(
        cls, epoch: DateLike, location: GeographicalLocation
    ) -> "CoordinateSystem":
        """Horizontal frame of an observer at ``location`` at ``epoch``."""
        return cls(FrameType.HORIZONTAL, Origin.topocentric(location), epoch=epoch)

    # ---------------- value semantics ----------------

    def _key(self):
        return (
            self.type,
            self.origin,
            time_key(self.equinox),
            time_key(self.epoch),
            time_key(self.ecliptic),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinateSystem):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        parts = []
        if self.type in (FrameType.EQUATORIAL, FrameType.ECLIPTICAL):
            parts.append(f"equinox {describe(self.equinox)}")
        if self.ecliptic is not None and time_key(self.ecliptic) != time_key(
            self.equinox
        ):
            parts.append(f"ecliptic {describe(self.ecliptic)}")
        if self.epoch is not None:
            parts.append(f"epoch {self.epoch.isot}")
        parts.append(str(self.origin))
        return f"{self.type.value} ({', '.join(parts)})"

    def __repr__(self) -> str:
        return f"CoordinateSystem<{self}>"


ICRS = CoordinateSystem(FrameType.ICRS, BARYCENTRIC)
EQUATORIAL_J2000 = CoordinateSystem(FrameType.EQUATORIAL, BARYCENTRIC, equinox=J2000)
EQUATORIAL_J2050 = CoordinateSystem(FrameType.EQUATORIAL, BARYCENTRIC, equinox=J2050)
EQUATORIAL_B1950 = CoordinateSystem(FrameType.EQUATORIAL, BARYCENTRIC, equinox=B1950)
GALACTIC = CoordinateSystem(FrameType.GALACTIC, BARYCENTRIC)

CoordinateSystem.ICRS = ICRS
CoordinateSystem.EQUATORIAL_J2000 = EQUATORIAL_J2000
CoordinateSystem.EQUATORIAL_J2050 = EQUATORIAL_J2050
CoordinateSystem.EQUATORIAL_B1950 = EQUATORIAL_B1950
CoordinateSystem.GALACTIC = GALACTIC


__all__ = [
    "CoordinateSystem",
    "ICRS",
    "EQUATORIAL_J2000",
    "EQUATORIAL_J2050",
    "EQUATORIAL_B1950",
    "GALACTIC",
]
