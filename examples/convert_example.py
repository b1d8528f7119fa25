"""
convert_example.py
==================

Purpose
-------
Minimal example showing how to use `celestial_frames.coordinates` to express
one star position in several reference frames and to measure angles between
stars.

Requirements
------------
- The package installed (``pip install -e .``).
- All angles in this example are in **degrees**.

What this example does
----------------------
1) Builds the ICRS position of Arcturus and Spica.
2) Converts Arcturus to ecliptical, galactic and B1950 equatorial frames.
3) Computes azimuth and altitude from a site at a given UTC instant.
4) Prints the separation and position angle between the two stars.

Usage
-----
Run the example:

    python examples/convert_example.py

Adapt `site` and `when` as needed.
"""

from astropy.time import Time

from celestial_frames.coordinates.coordinates import Coordinates
from celestial_frames.coordinates.system import (
    EQUATORIAL_B1950,
    GALACTIC,
    ICRS,
    CoordinateSystem,
)
from celestial_frames.frame_core.model import GeographicalLocation, PositionType
from celestial_frames.frame_core.timescales import J2000

# 1) Catalog positions (ICRS, degrees).
arcturus = Coordinates.equatorial(213.9154, 19.1825, ICRS)
spica = Coordinates.equatorial(201.2983, -11.1614, ICRS)

# 2) Same point, other frames.
print("Ecliptical J2000:", arcturus.convert(CoordinateSystem.ecliptical(J2000)).spherical)
print("Galactic:        ", arcturus.convert(GALACTIC).spherical)
print("Equatorial B1950:", arcturus.convert(EQUATORIAL_B1950).spherical)

# 3) Horizontal coordinates (longitude is counted positive west).
site = GeographicalLocation.from_east_longitude(11.6469, 44.5208, 28.0, "Medicina")
when = Time("2025-05-01T21:30:00", scale="utc")
altaz = arcturus.convert(CoordinateSystem.horizontal(when, site), PositionType.APPARENT)
print("Horizontal:      ", altaz.spherical)

# 4) Angles between the two stars.
print(f"Separation:      {arcturus.angular_separation(spica).deg:.4f} deg")
print(f"Position angle:  {arcturus.relative_position_angle(spica).deg:.4f} deg")
