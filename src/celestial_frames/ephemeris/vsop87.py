"""Planetary series in the VSOP87 layout: reader, evaluator and store.

A VSOP87 file lists periodic terms ``A * cos(B + C * T)`` grouped by
rectangular component (X, Y, Z) and by power of time ``T``, where ``T`` is
measured in Julian millennia from J2000.0. A component is the polynomial

    X(T) = sum_k T**k * sum_i A_ik * cos(B_ik + C_ik * T)

and its value is in astronomical units.

----------------------------------------------------------------------------
File format
----------------------------------------------------------------------------
Files follow the IMCCE fixed-width record layout
``1x,4i1,i5,12i3,f15.11,2f18.11,f14.11,f20.11``:

- columns 2-5: version, body, component (1..3), power of T
- columns 80-97 / 98-111 / 112-131: amplitude A, phase B, frequency C

Only lines that open with a blank and four digits are records; everything
else (the ``VSOP87 VERSION ...`` headers of the IMCCE files included) is
skipped. The S/K columns and the twelve argument multipliers are not needed
for evaluation.

----------------------------------------------------------------------------
Bodies
----------------------------------------------------------------------------
With a user data directory, planets are read from the IMCCE version A files
(``VSOP87A.<abbr>``, heliocentric, ecliptic and equinox J2000) and the Sun
from the version E file (``VSOP87E.sun``, barycentric).

The package does not ship VSOP87 itself. Its ``data/mean_elements`` files use
the same record layout and frames but hold a low-precision series built from
the JPL Keplerian mean elements (Standish, valid 1800-2050) expanded to
second order in eccentricity. Earth adds the Earth-Moon barycentre wobble,
Jupiter and Saturn the largest terms of their mutual perturbations, and the
Sun's barycentric motion is the reflex of the four giant planets. Expect
errors up to several arcminutes for the planets; point ``Ephemeris`` at the
full IMCCE files for arcsecond work. Precision degrades away from the
present century; this is not checked.
"""

from __future__ import annotations

import functools
import io
import logging
import os
import re
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import numpy as np
import pandas as pd
from astropy.time import Time

from celestial_frames.frame_core.errors import SeriesDataError
from celestial_frames.frame_core.timescales import julian_millennia

logger = logging.getLogger(__name__)

PACKAGE_DATA_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "data",
    "mean_elements",
)

# body name -> IMCCE file name inside a user data directory
BODY_FILES: Dict[str, str] = {
    "mercury": "VSOP87A.mer",
    "venus": "VSOP87A.ven",
    "earth": "VSOP87A.ear",
    "mars": "VSOP87A.mar",
    "jupiter": "VSOP87A.jup",
    "saturn": "VSOP87A.sat",
    "uranus": "VSOP87A.ura",
    "neptune": "VSOP87A.nep",
    "sun": "VSOP87E.sun",
}

# body name -> packaged mean-element file
PACKAGED_FILES: Dict[str, str] = {body: f"{body}.txt" for body in BODY_FILES}

_RECORD = re.compile(r"^ \d{4}")

_COLSPECS = [(1, 2), (2, 3), (3, 4), (4, 5), (79, 97), (97, 111), (111, 131)]
_COLUMNS = ["version", "body", "component", "power", "A", "B", "C"]


def parse_vsop87(text: str) -> pd.DataFrame:
    """Parse series file content into one row per term.

    Returns a DataFrame with columns ``version, body, component, power,
    A, B, C``. Raises ``SeriesDataError`` if no term can be read or a
    component index is outside 1..3.
    """
    records = [ln for ln in text.splitlines() if _RECORD.match(ln)]
    if not records:
        raise SeriesDataError("No series records found")
    try:
        df = pd.read_fwf(
            io.StringIO("\n".join(records)),
            colspecs=_COLSPECS,
            names=_COLUMNS,
            header=None,
        )
    except ValueError as exc:
        raise SeriesDataError(f"Malformed VSOP87 records: {exc}") from exc

    if df[["component", "power", "A", "B", "C"]].isna().any().any():
        raise SeriesDataError("Malformed VSOP87 records: missing values")
    if not df["component"].between(1, 3).all():
        raise SeriesDataError("VSOP87 component index must be 1, 2 or 3")
    return df


@dataclass(frozen=True, eq=False)
class VSOPSeries:
    """Immutable series of one body."""

    # Body name (lowercase).
    body: str
    # (component 0..2, power of T) -> (A, B, C) arrays.
    terms: Mapping[Tuple[int, int], Tuple[np.ndarray, np.ndarray, np.ndarray]]

    @classmethod
    def from_frame(cls, body: str, df: pd.DataFrame) -> "VSOPSeries":
        terms = {}
        for (comp, power), grp in df.groupby(["component", "power"], sort=True):
            terms[(int(comp) - 1, int(power))] = (
                grp["A"].to_numpy(dtype=float),
                grp["B"].to_numpy(dtype=float),
                grp["C"].to_numpy(dtype=float),
            )
        return cls(body=body, terms=terms)

    @classmethod
    def from_records(
        cls, body: str, records: Iterable[Tuple[int, int, float, float, float]]
    ) -> "VSOPSeries":
        """Build a series from ``(component, power, A, B, C)`` tuples.

        ``component`` is 1, 2 or 3 as in the files.
        """
        df = pd.DataFrame(list(records), columns=["component", "power", "A", "B", "C"])
        if df.empty:
            raise SeriesDataError(f"No terms given for {body}")
        return cls.from_frame(body, df)

    @property
    def term_count(self) -> int:
        return sum(a.size for a, _, _ in self.terms.values())

    def evaluate_millennia(self, t: float) -> np.ndarray:
        """Return (x, y, z) in AU at ``t`` Julian millennia from J2000."""
        xyz = np.zeros(3)
        for (comp, power), (A, B, C) in self.terms.items():
            xyz[comp] += np.sum(A * np.cos(B + C * t)) * t**power
        return xyz

    def evaluate(self, date: Time) -> np.ndarray:
        return self.evaluate_millennia(julian_millennia(date))


def load_vsop87_file(path: str, body: Optional[str] = None) -> VSOPSeries:
    """Read one series file (IMCCE or packaged layout) into a series."""
    body = body or os.path.basename(path).split(".")[-1]
    try:
        with open(path, "r", encoding="ascii") as f:
            text = f.read()
    except OSError as exc:
        raise SeriesDataError(f"Cannot read series file {path}: {exc}") from exc
    try:
        df = parse_vsop87(text)
    except SeriesDataError as exc:
        raise SeriesDataError(f"{path}: {exc}") from exc
    series = VSOPSeries.from_frame(body, df)
    logger.info(
        "Loaded series for %s (%d terms) from %s",
        body,
        series.term_count,
        path,
    )
    return series


class Ephemeris:
    """Per-body series store over one data directory.

    Without ``data_dir`` the packaged mean-element series are used; with it,
    the directory must hold the IMCCE files named in ``BODY_FILES``.

    Series are read on first use, at most once per body, and then shared
    read-only. Loading is guarded by a lock so concurrent first use is safe.
    """

    def __init__(
        self,
        data_dir: Optional[str] = None,
        series: Optional[Mapping[str, VSOPSeries]] = None,
    ) -> None:
        self.data_dir = data_dir or PACKAGE_DATA_DIR
        self._files = BODY_FILES if data_dir else PACKAGED_FILES
        self._series: Dict[str, VSOPSeries] = dict(series or {})
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "Ephemeris":
        eph_cfg = cfg.get("ephemeris", {})
        eph = cls(data_dir=eph_cfg.get("data_dir") or None)
        for body in eph_cfg.get("preload", []):
            eph.series(body)
        return eph

    def series(self, body: str) -> VSOPSeries:
        key = body.lower()
        found = self._series.get(key)
        if found is not None:
            return found
        if key not in BODY_FILES:
            raise ValueError(f"Unknown body: {body}")
        with self._lock:
            found = self._series.get(key)
            if found is None:
                path = os.path.join(self.data_dir, self._files[key])
                found = load_vsop87_file(path, body=key)
                self._series[key] = found
        return found

    def position_au(self, body: str, date: Time) -> np.ndarray:
        """Rectangular ecliptic-J2000 position of ``body`` in AU.

        Heliocentric for planets, barycentric for the Sun.
        """
        return self.series(body).evaluate(date)

    def sun_barycentric_au(self, date: Time) -> np.ndarray:
        return self.position_au("sun", date)

    def earth_barycentric_au(self, date: Time) -> np.ndarray:
        return self.position_au("earth", date) + self.sun_barycentric_au(date)


@functools.lru_cache(maxsize=1)
def default_ephemeris() -> Ephemeris:
    """Process-wide store over the packaged series files."""
    return Ephemeris()


__all__ = [
    "PACKAGE_DATA_DIR",
    "BODY_FILES",
    "PACKAGED_FILES",
    "parse_vsop87",
    "VSOPSeries",
    "load_vsop87_file",
    "Ephemeris",
    "default_ephemeris",
]
