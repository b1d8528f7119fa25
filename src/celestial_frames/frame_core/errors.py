from __future__ import annotations


class CoordinateError(RuntimeError):
    """Raised when a coordinate conversion cannot be carried out."""


class EquinoxNotDefinedError(CoordinateError):
    """Raised when a frame needs an equinox and the system has none."""


class EpochNotDefinedError(CoordinateError):
    """Raised when a horizontal frame has no observation epoch."""


class GeographicLocationNotDefinedError(CoordinateError):
    """Raised when a horizontal frame has no topocentric observer location."""


class IncorrectCoordinateSystemError(CoordinateError):
    """Raised when a helper receives coordinates in a frame it cannot handle."""


class ConversionNotImplementedError(CoordinateError, NotImplementedError):
    """Raised for recognised conversion paths that are not supported."""


class ObliquityRangeError(ValueError):
    """Raised when a date lies outside the validity of the obliquity formula."""


class SeriesDataError(RuntimeError):
    """Raised when VSOP87 series data for a body is missing or malformed."""


__all__ = [
    "CoordinateError",
    "EquinoxNotDefinedError",
    "EpochNotDefinedError",
    "GeographicLocationNotDefinedError",
    "IncorrectCoordinateSystemError",
    "ConversionNotImplementedError",
    "ObliquityRangeError",
    "SeriesDataError",
]
