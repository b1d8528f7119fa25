from __future__ import annotations

import copy
import logging
import os
import tomllib
from typing import Dict, Any, Iterable, Optional

# Built-in defaults; a TOML file and key=value overrides are merged on top.
DEFAULTS: Dict[str, Any] = {
    "ephemeris": {
        # Directory with IMCCE VSOP87 files; empty means the packaged series.
        "data_dir": "",
        # Bodies whose series are loaded when the store is built.
        "preload": [],
    },
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    },
}


def load_toml(path: str) -> Dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def merge_dicts(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = merge_dicts(out[k], v)
        else:
            out[k] = v
    return out


def apply_sets(cfg: Dict[str, Any], sets: Iterable[str]) -> Dict[str, Any]:
    for item in sets:
        if "=" not in item:
            raise ValueError(f"Override requires key=value, got: {item}")
        key, val = item.split("=", 1)
        path = key.strip().split(".")
        cursor = cfg
        for p in path[:-1]:
            if p not in cursor or not isinstance(cursor[p], dict):
                cursor[p] = {}
            cursor = cursor[p]
        # parse bool, int, float, or keep string
        cursor[path[-1]] = parse_scalar(val.strip())
    return cfg


def parse_scalar(s: str):
    sl = s.lower()
    if sl in ("true", "false"):
        return sl == "true"
    try:
        if "." in s or "e" in sl:
            return float(s)
        return int(s)
    except ValueError:
        return s


def load_engine_config(
    path: Optional[str] = None,
    set_overrides: Iterable[str] = (),
) -> Dict[str, Any]:
    """Compose the effective engine configuration.

    Merge order is defaults -> TOML file (if given) -> ``set_overrides``.
    A relative ``ephemeris.data_dir`` in the file is resolved against the
    directory holding that file.
    """
    cfg = copy.deepcopy(DEFAULTS)
    if path:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")
        file_cfg = load_toml(path)
        data_dir = file_cfg.get("ephemeris", {}).get("data_dir")
        if data_dir and not os.path.isabs(data_dir):
            base = os.path.dirname(os.path.abspath(path))
            file_cfg["ephemeris"]["data_dir"] = os.path.normpath(
                os.path.join(base, data_dir)
            )
        cfg = merge_dicts(cfg, file_cfg)

    # Apply overrides last
    cfg = apply_sets(cfg, set_overrides)

    preload = cfg["ephemeris"].get("preload", [])
    if isinstance(preload, str):
        cfg["ephemeris"]["preload"] = [
            b.strip() for b in preload.split(",") if b.strip()
        ]
    return cfg


def configure_logging(cfg: Dict[str, Any]) -> logging.Logger:
    """Attach a stream handler to the package logger at the configured level."""
    log_cfg = cfg.get("logging", {})
    level_name = str(log_cfg.get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name}")
    logger = logging.getLogger("celestial_frames")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(log_cfg.get("format", DEFAULTS["logging"]["format"]))
        )
        logger.addHandler(handler)
    return logger


__all__ = [
    "DEFAULTS",
    "load_toml",
    "merge_dicts",
    "apply_sets",
    "parse_scalar",
    "load_engine_config",
    "configure_logging",
]
