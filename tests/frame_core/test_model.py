from __future__ import annotations

import astropy.units as u
import pytest

from celestial_frames.frame_core.model import (
    BARYCENTRIC,
    GREENWICH,
    CoordinateRole,
    FrameType,
    GeographicalLocation,
    Origin,
    OriginKind,
    as_angle_deg,
    roles_for,
)


def test_location_from_east_longitude_flips_sign():
    loc = GeographicalLocation.from_east_longitude(11.65, 44.52, 28.0, "Medicina")
    assert loc.longitude_deg == -11.65
    assert loc.longitude.deg == pytest.approx(-11.65)
    assert loc.latitude.deg == pytest.approx(44.52)
    assert loc.elevation == 28.0 * u.m


def test_location_rejects_bad_latitude():
    with pytest.raises(ValueError):
        GeographicalLocation(0.0, 91.0)


def test_greenwich_site():
    assert GREENWICH.longitude_deg == 0.0
    assert GREENWICH.elevation.to_value(u.m) == pytest.approx(46.0)
    assert str(Origin.topocentric(GREENWICH)) == "topocentric (Greenwich)"


def test_location_without_elevation():
    assert GeographicalLocation(0.0, 0.0).elevation is None


def test_topocentric_origin_requires_location():
    with pytest.raises(ValueError):
        Origin(OriginKind.TOPOCENTRIC)
    with pytest.raises(ValueError):
        Origin(OriginKind.GEOCENTRIC, GeographicalLocation(0.0, 0.0))


def test_origins_compare_by_value():
    loc = GeographicalLocation(5.0, 45.0, name="Site")
    assert Origin.topocentric(loc) == Origin.topocentric(
        GeographicalLocation(5.0, 45.0, name="Site")
    )
    assert Origin(OriginKind.BARYCENTRIC) == BARYCENTRIC
    assert "Site" in str(Origin.topocentric(loc))


@pytest.mark.parametrize(
    "frame, symbols",
    [
        (FrameType.ICRS, ("α", "δ")),
        (FrameType.EQUATORIAL, ("α", "δ")),
        (FrameType.ECLIPTICAL, ("λ", "β")),
        (FrameType.GALACTIC, ("l", "b")),
        (FrameType.HORIZONTAL, ("A", "h")),
    ],
)
def test_roles_per_frame(frame, symbols):
    lon, lat = roles_for(frame)
    assert (lon.symbol, lat.symbol) == symbols


def test_role_labels():
    assert CoordinateRole.AZIMUTH.label == "azimuth"


def test_as_angle_deg_accepts_quantities_and_numbers():
    assert as_angle_deg(12.5) == 12.5
    assert as_angle_deg(1.0 * u.hourangle) == pytest.approx(15.0)
    assert as_angle_deg(3600.0 * u.arcsec) == pytest.approx(1.0)
