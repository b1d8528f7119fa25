"""
planet_example.py
=================

Purpose
-------
Minimal example showing how to use `celestial_frames.objects.planets` to get
planet and Sun positions from the packaged mean-element series.

Requirements
------------
- The package installed (``pip install -e .``).
- Optional: a directory with the full IMCCE VSOP87 files, selected through a
  TOML configuration (see config/engine.toml).

What this example does
----------------------
1) Builds an ephemeris store from config/engine.toml.
2) Prints the heliocentric distance of Mars and its geocentric position.
3) Prints the apparent geocentric equatorial position of the Sun.

Usage
-----
Run the example from the repository root:

    python examples/planet_example.py
"""

import astropy.units as u
from astropy.time import Time

from celestial_frames.ephemeris.vsop87 import Ephemeris
from celestial_frames.frame_core.config_loader import (
    configure_logging,
    load_engine_config,
)
from celestial_frames.frame_core.model import PositionType
from celestial_frames.objects.planets import MARS, SUN

# 1) Configuration and ephemeris store.
cfg = load_engine_config("config/engine.toml")
configure_logging(cfg)
eph = Ephemeris.from_config(cfg)

when = Time("2025-01-16T00:00:00", scale="tt")

# 2) Mars.
helio = MARS.heliocentric_coordinates(when, ephemeris=eph)
print(f"Mars heliocentric distance: {helio.distance.to(u.AU):.4f}")
geo = MARS.equatorial_coordinates(when, ephemeris=eph)
print("Mars geocentric (equinox of date):", geo.spherical)

# 3) Sun, apparent place (equinox of date).
sun = SUN.equatorial_coordinates(when, position_type=PositionType.APPARENT, ephemeris=eph)
print("Sun apparent:", sun.spherical)
