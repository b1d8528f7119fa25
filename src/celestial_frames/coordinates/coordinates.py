"""Positions of celestial objects and conversions between reference frames.

A ``Coordinates`` value stores one rectangular triple (metres) in the frame
described by its ``CoordinateSystem``; the spherical view is derived from
it. Values are immutable: every conversion returns a new instance.

----------------------------------------------------------------------------
Conversion pipeline
----------------------------------------------------------------------------
Every conversion goes through one hub frame, equatorial of J2000 with a
barycentric origin, mean position:

    convert(target) = from_hub(to_hub(self), target)

``to_hub`` dispatches on the source frame type:

- ICRS: values are taken as equatorial J2000.
- equatorial: remove nutation (true/apparent), precess to J2000.
- ecliptical: rotate about the ecliptic pole (mean obliquity, or true
  obliquity for true/apparent positions) into equatorial of the equinox,
  then as equatorial.
- galactic: rotate about the galactic pole into equatorial J2000.
- horizontal: rotate about the local pole (sidereal time, latitude) into
  equatorial of the epoch, then as equatorial.

The origin is then shifted to the barycentre. ``from_hub`` runs the mirror
image. Origin shifts use the series positions of the Sun and the Earth at
the target epoch, else the source epoch, else now. A direction at unknown
distance has no parallax and is never shifted. Topocentric shifts of
positions at a known distance are not implemented.

----------------------------------------------------------------------------
Unknown distances
----------------------------------------------------------------------------
When the distance is unknown the triple is a unit vector of 1 m; the
spherical view reports no distance and the rectangular view is withheld.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import astropy.units as u
import numpy as np
from astropy.coordinates import Angle, Latitude, Longitude
from astropy.time import Time

from celestial_frames.coordinates.system import EQUATORIAL_J2000, CoordinateSystem
from celestial_frames.ephemeris.vsop87 import Ephemeris, default_ephemeris
from celestial_frames.frame_core.errors import (
    ConversionNotImplementedError,
    EpochNotDefinedError,
    EquinoxNotDefinedError,
    GeographicLocationNotDefinedError,
    IncorrectCoordinateSystemError,
)
from celestial_frames.frame_core.model import (
    CoordinateRole,
    FrameType,
    GeographicalLocation,
    Origin,
    OriginKind,
    PositionType,
    as_angle_deg,
    roles_for,
)
from celestial_frames.frame_core.timescales import J2000, DateLike, as_time, now
from celestial_frames.transforms.nutation import nutation_arcsec
from celestial_frames.transforms.obliquity import (
    OBLIQUITY_J2000_DEG,
    mean_obliquity_deg,
)
from celestial_frames.transforms.precession import precess_radec_deg
from celestial_frames.transforms.rotations import (
    GALACTIC_POLE,
    ecliptic_pole,
    from_pole_frame,
    horizon_pole,
    rotation_x,
    rotation_z,
    spherical_from_vector,
    to_pole_frame,
    vector_from_spherical,
)
from celestial_frames.transforms.sidereal import local_sidereal_deg

logger = logging.getLogger(__name__)

AU_M = float((1 * u.AU).to_value(u.m))
_HUB = EQUATORIAL_J2000


# Spherical view of a position.
@dataclass(frozen=True)
class SphericalCoordinates:
    # Longitude-like component in [0, 360) deg (α, λ, l or azimuth).
    longitude: Longitude
    # Latitude-like component (δ, β, b or altitude).
    latitude: Latitude
    # Distance, or None when unknown.
    distance: Optional[u.Quantity]
    # Roles of the two angles in their frame.
    longitude_role: CoordinateRole
    latitude_role: CoordinateRole

    def __str__(self) -> str:
        text = (
            f"{self.longitude_role.symbol}={self.longitude.deg:.6f}°, "
            f"{self.latitude_role.symbol}={self.latitude.deg:.6f}°"
        )
        if self.distance is not None:
            text += f", d={self.distance:.6g}"
        return text


# Rectangular view of a position at known distance.
@dataclass(frozen=True)
class RectangularCoordinates:
    x: u.Quantity
    y: u.Quantity
    z: u.Quantity


class Coordinates:
    """Position of an object in a coordinate system.

    Build with ``from_spherical``, ``from_rectangular`` or ``equatorial``.
    Two values are equal only if system, position type, distance flag and
    the stored triple are identical; convert to a common frame before
    comparing positions.
    """

    __slots__ = ("_xyz", "_system", "_position_type", "_distance_known")

    def __init__(
        self,
        xyz,
        system: CoordinateSystem,
        position_type: PositionType = PositionType.MEAN,
        distance_known: bool = True,
    ) -> None:
        vec = np.array(xyz, dtype=float).reshape(3)
        if not np.all(np.isfinite(vec)):
            raise ValueError("Rectangular components must be finite")
        norm = float(np.linalg.norm(vec))
        if norm == 0.0:
            raise ValueError("A position needs a non-zero vector")
        if not distance_known:
            vec = vec / norm
        vec.setflags(write=False)
        self._xyz = vec
        self._system = system
        self._position_type = position_type
        self._distance_known = bool(distance_known)

    # ---------------- constructors ----------------

    @classmethod
    def from_spherical(
        cls,
        longitude,
        latitude,
        system: CoordinateSystem,
        position_type: PositionType = PositionType.MEAN,
        distance=None,
    ) -> "Coordinates":
        """Build from spherical components.

        Angles may be astropy angles/quantities or plain degrees; the
        distance a length quantity or plain metres. For horizontal systems
        the longitude is the azimuth, clockwise from north.
        """
        lon = as_angle_deg(longitude)
        lat = as_angle_deg(latitude)
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"Latitude out of range: {lat}")
        if not system.anti_clockwise:
            lon = -lon
        if distance is None:
            return cls(vector_from_spherical(lon, lat), system, position_type, False)
        r = _as_metres(distance)
        if r <= 0.0:
            raise ValueError("Distance must be positive")
        return cls(vector_from_spherical(lon, lat, r), system, position_type, True)

    @classmethod
    def from_rectangular(
        cls,
        x,
        y,
        z,
        system: CoordinateSystem,
        position_type: PositionType = PositionType.MEAN,
        distance_known: bool = True,
    ) -> "Coordinates":
        """Build from rectangular components (length quantities or metres).

        Rectangular triples are right-handed in every frame.
        """
        return cls(
            [_as_metres(x), _as_metres(y), _as_metres(z)],
            system,
            position_type,
            distance_known,
        )

    @classmethod
    def equatorial(
        cls,
        right_ascension,
        declination,
        system: CoordinateSystem = EQUATORIAL_J2000,
        position_type: PositionType = PositionType.MEAN,
        distance=None,
    ) -> "Coordinates":
        if system.type not in (FrameType.EQUATORIAL, FrameType.ICRS):
            raise IncorrectCoordinateSystemError(
                f"Right ascension and declination need an equatorial frame, "
                f"got {system}"
            )
        return cls.from_spherical(
            right_ascension, declination, system, position_type, distance
        )

    # ---------------- views ----------------

    @property
    def system(self) -> CoordinateSystem:
        return self._system

    @property
    def position_type(self) -> PositionType:
        return self._position_type

    @property
    def distance_is_known(self) -> bool:
        return self._distance_known

    @property
    def spherical(self) -> SphericalCoordinates:
        lon, lat, r = spherical_from_vector(self._xyz)
        if not self._system.anti_clockwise:
            lon = (-lon) % 360.0
        lon_role, lat_role = roles_for(self._system.type)
        return SphericalCoordinates(
            longitude=Longitude(lon * u.deg),
            latitude=Latitude(lat * u.deg),
            distance=(r * u.m) if self._distance_known else None,
            longitude_role=lon_role,
            latitude_role=lat_role,
        )

    @property
    def rectangular(self) -> Optional[RectangularCoordinates]:
        if not self._distance_known:
            return None
        x, y, z = self._xyz
        return RectangularCoordinates(x * u.m, y * u.m, z * u.m)

    @property
    def longitude(self) -> Longitude:
        return self.spherical.longitude

    @property
    def latitude(self) -> Latitude:
        return self.spherical.latitude

    @property
    def distance(self) -> Optional[u.Quantity]:
        return self.spherical.distance

    def unit_vector(self) -> np.ndarray:
        """Right-handed direction cosines in the coordinates' frame."""
        return self._xyz / np.linalg.norm(self._xyz)

    # ---------------- value semantics ----------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        return (
            self._system == other._system
            and self._position_type is other._position_type
            and self._distance_known == other._distance_known
            and bool(np.array_equal(self._xyz, other._xyz))
        )

    def __hash__(self) -> int:
        return hash(
            (self._system, self._position_type, self._distance_known, self._xyz.tobytes())
        )

    def __repr__(self) -> str:
        return (
            f"Coordinates({self.spherical}, {self._position_type.value}, "
            f"{self._system})"
        )

    # ---------------- conversion ----------------

    def convert(
        self,
        target: CoordinateSystem,
        position_type: Optional[PositionType] = None,
        *,
        ephemeris: Optional[Ephemeris] = None,
    ) -> "Coordinates":
        """Return the same point expressed in ``target``.

        Parameters
        ----------
        target : CoordinateSystem
            Frame of the result; ``result.system == target``.
        position_type : PositionType, optional
            Correction level of the result, default: that of ``self``.
        ephemeris : Ephemeris, optional
            Series store used for origin shifts, default: packaged series.

        Raises
        ------
        EquinoxNotDefinedError, EpochNotDefinedError,
        GeographicLocationNotDefinedError, ConversionNotImplementedError
            When the data a conversion step needs is missing or the path is
            not supported.
        """
        if position_type is None:
            position_type = self._position_type
        if self._system == target and self._position_type is position_type:
            return self
        logger.debug(
            "Converting %s (%s) -> %s (%s)",
            self._system,
            self._position_type.value,
            target,
            position_type.value,
        )
        route = _Route(self._system, target, ephemeris)
        hub = route.to_equatorial2000(self)
        return route.from_equatorial2000(hub, target, position_type)

    def precess(self, to_equinox: DateLike) -> "Coordinates":
        return precess(self, to_equinox)

    # ---------------- angles between points ----------------

    def angular_separation(self, other: "Coordinates") -> Angle:
        """Great-circle distance to ``other`` (haversine formula)."""
        other = other.convert(self._system, self._position_type)
        a, b = self.spherical, other.spherical
        phi1, phi2 = a.latitude.rad, b.latitude.rad
        d_phi = phi2 - phi1
        d_lambda = b.longitude.rad - a.longitude.rad
        h = math.sin(d_phi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(
            d_lambda / 2.0
        ) ** 2
        sep = 2.0 * math.asin(min(1.0, math.sqrt(h)))
        return Angle(math.degrees(sep), u.deg)

    def relative_position_angle(self, other: "Coordinates") -> Angle:
        """Bearing of ``other`` seen from ``self``: 0° north, 90° east."""
        other = other.convert(self._system, self._position_type)
        a, b = self.spherical, other.spherical
        phi1, phi2 = a.latitude.rad, b.latitude.rad
        d_lambda = b.longitude.rad - a.longitude.rad
        if abs(phi2) >= math.pi / 2.0:
            return Angle(0.0 if phi2 > 0 else 180.0, u.deg)
        pa = math.atan2(
            math.sin(d_lambda),
            math.cos(phi1) * math.tan(phi2) - math.sin(phi1) * math.cos(d_lambda),
        )
        return Angle(math.degrees(pa) % 360.0, u.deg)


def precess(coordinates: Coordinates, to_equinox: DateLike) -> Coordinates:
    """Precess equatorial or ICRS coordinates to another equinox.

    ICRS counts as equinox J2000. The result is an equatorial system with
    the same origin and epoch; the distance is preserved.
    """
    system = coordinates.system
    if system.type is FrameType.ICRS:
        from_equinox = J2000
    elif system.type is FrameType.EQUATORIAL:
        from_equinox = _require_equinox(system)
    else:
        raise IncorrectCoordinateSystemError(
            f"Precession needs equatorial coordinates, got {system}"
        )
    to_equinox = as_time(to_equinox)
    vec = _precess_vector(coordinates._xyz, float(from_equinox.jd), float(to_equinox.jd))
    target = CoordinateSystem.equatorial(to_equinox, system.origin, system.epoch)
    return Coordinates(
        vec, target, coordinates.position_type, coordinates.distance_is_known
    )


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


def _as_metres(value) -> float:
    if isinstance(value, u.Quantity):
        return float(value.to_value(u.m))
    return float(value)


def _require_equinox(system: CoordinateSystem) -> Time:
    if system.equinox is None:
        raise EquinoxNotDefinedError(f"No equinox defined for {system}")
    return system.equinox


def _require_epoch(system: CoordinateSystem) -> Time:
    if system.epoch is None:
        raise EpochNotDefinedError(f"No epoch defined for {system}")
    return system.epoch


def _require_location(system: CoordinateSystem) -> GeographicalLocation:
    if system.origin.kind is not OriginKind.TOPOCENTRIC:
        raise GeographicLocationNotDefinedError(
            f"Horizontal frames need a topocentric origin, got {system}"
        )
    return system.origin.location


def _precess_vector(xyz: np.ndarray, from_jd: float, to_jd: float) -> np.ndarray:
    if from_jd == to_jd:
        return np.array(xyz, dtype=float)
    lon, lat, r = spherical_from_vector(xyz)
    ra, dec = precess_radec_deg(lon, lat, from_jd, to_jd)
    return vector_from_spherical(ra, dec, r)


def _nutation_matrix(jd: float) -> np.ndarray:
    """Mean equator and equinox of date -> true equator and equinox of date."""
    d_psi, d_eps = nutation_arcsec(jd)
    eps = mean_obliquity_deg(jd)
    return (
        rotation_x(-(eps + d_eps / 3600.0))
        @ rotation_z(-d_psi / 3600.0)
        @ rotation_x(eps)
    )


def _obliquity_for(jd: float, position_type: PositionType) -> float:
    eps = mean_obliquity_deg(jd)
    if position_type is not PositionType.MEAN:
        eps += nutation_arcsec(jd)[1] / 3600.0
    return eps


def _ecliptic_to_equatorial_j2000(xyz_au: np.ndarray) -> np.ndarray:
    return from_pole_frame(xyz_au, ecliptic_pole(OBLIQUITY_J2000_DEG))


class _Route:
    """One conversion: the epoch and series store shared by both legs."""

    def __init__(
        self,
        source: CoordinateSystem,
        target: CoordinateSystem,
        ephemeris: Optional[Ephemeris],
    ) -> None:
        self._source = source
        self._target = target
        self._ephemeris = ephemeris
        self._epoch: Optional[Time] = None

    @property
    def epoch(self) -> Time:
        if self._epoch is None:
            if self._target.epoch is not None:
                self._epoch = self._target.epoch
            elif self._source.epoch is not None:
                self._epoch = self._source.epoch
            else:
                self._epoch = now()
                logger.debug("No epoch on either system; shifting origin at now")
        return self._epoch

    @property
    def ephemeris(self) -> Ephemeris:
        if self._ephemeris is None:
            self._ephemeris = default_ephemeris()
        return self._ephemeris

    # ----- origins -----

    def _origin_position(self, origin: Origin) -> np.ndarray:
        """Barycentric position of ``origin`` in metres, equatorial J2000."""
        if origin.kind is OriginKind.BARYCENTRIC:
            return np.zeros(3)
        if origin.kind is OriginKind.HELIOCENTRIC:
            au = self.ephemeris.sun_barycentric_au(self.epoch)
        elif origin.kind is OriginKind.GEOCENTRIC:
            au = self.ephemeris.earth_barycentric_au(self.epoch)
        else:
            raise ConversionNotImplementedError(
                "Topocentric origin translation is not implemented"
            )
        return _ecliptic_to_equatorial_j2000(au) * AU_M

    def shift_origin(
        self, xyz: np.ndarray, source: Origin, target: Origin, known: bool
    ) -> np.ndarray:
        if source == target or not known:
            return xyz
        return xyz + self._origin_position(source) - self._origin_position(target)

    # ----- legs -----

    def to_equatorial2000(self, c: Coordinates) -> Coordinates:
        system = c.system
        kind = system.type
        pt = c.position_type
        xyz = c._xyz
        if kind is FrameType.ICRS:
            pass
        elif kind is FrameType.EQUATORIAL:
            xyz = _equatorial_to_j2000(xyz, _require_equinox(system), pt)
        elif kind is FrameType.ECLIPTICAL:
            equinox = _require_equinox(system)
            ecliptic = system.ecliptic if system.ecliptic is not None else equinox
            eps = _obliquity_for(float(ecliptic.jd), pt)
            xyz = from_pole_frame(xyz, ecliptic_pole(eps))
            xyz = _equatorial_to_j2000(xyz, equinox, pt)
        elif kind is FrameType.GALACTIC:
            xyz = from_pole_frame(xyz, GALACTIC_POLE)
        elif kind is FrameType.HORIZONTAL:
            epoch = _require_epoch(system)
            location = _require_location(system)
            lst = local_sidereal_deg(float(epoch.jd), location.longitude_deg, pt)
            xyz = from_pole_frame(xyz, horizon_pole(lst, location.latitude_deg))
            xyz = _equatorial_to_j2000(xyz, epoch, pt)
        xyz = self.shift_origin(
            xyz, system.origin, _HUB.origin, c.distance_is_known
        )
        return Coordinates(xyz, _HUB, PositionType.MEAN, c.distance_is_known)

    def from_equatorial2000(
        self, hub: Coordinates, target: CoordinateSystem, pt: PositionType
    ) -> Coordinates:
        kind = target.type
        known = hub.distance_is_known
        xyz = self.shift_origin(hub._xyz, _HUB.origin, target.origin, known)
        if kind is FrameType.ICRS:
            pass
        elif kind is FrameType.EQUATORIAL:
            xyz = _equatorial_from_j2000(xyz, _require_equinox(target), pt)
        elif kind is FrameType.ECLIPTICAL:
            equinox = _require_equinox(target)
            ecliptic = target.ecliptic if target.ecliptic is not None else equinox
            xyz = _equatorial_from_j2000(xyz, equinox, pt)
            eps = _obliquity_for(float(ecliptic.jd), pt)
            xyz = to_pole_frame(xyz, ecliptic_pole(eps))
        elif kind is FrameType.GALACTIC:
            xyz = to_pole_frame(xyz, GALACTIC_POLE)
        elif kind is FrameType.HORIZONTAL:
            epoch = _require_epoch(target)
            location = _require_location(target)
            xyz = _equatorial_from_j2000(xyz, epoch, pt)
            lst = local_sidereal_deg(float(epoch.jd), location.longitude_deg, pt)
            xyz = to_pole_frame(xyz, horizon_pole(lst, location.latitude_deg))
        return Coordinates(xyz, target, pt, known)


def _equatorial_to_j2000(
    xyz: np.ndarray, equinox: Time, position_type: PositionType
) -> np.ndarray:
    jd = float(equinox.jd)
    if position_type is not PositionType.MEAN:
        xyz = _nutation_matrix(jd).T @ xyz
    return _precess_vector(xyz, jd, float(J2000.jd))


def _equatorial_from_j2000(
    xyz: np.ndarray, equinox: Time, position_type: PositionType
) -> np.ndarray:
    jd = float(equinox.jd)
    xyz = _precess_vector(xyz, float(J2000.jd), jd)
    if position_type is not PositionType.MEAN:
        xyz = _nutation_matrix(jd) @ xyz
    return xyz


__all__ = [
    "AU_M",
    "SphericalCoordinates",
    "RectangularCoordinates",
    "Coordinates",
    "precess",
]
