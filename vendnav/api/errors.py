# vendnav/api/errors.py
"""Exceptions raised by the planner, catalog and validation helpers."""


class VendNavError(Exception):
    """Base class for all vendnav errors."""


class EmptyCandidateSetError(VendNavError, LookupError):
    """There are no vending machines to choose from."""


class InvalidCoordinateError(VendNavError, ValueError):
    """Latitude or longitude is missing, not numeric or out of range."""


class CatalogError(VendNavError):
    """The vending machine data file is missing or malformed."""


class ConfigError(VendNavError, ValueError):
    """An environment setting holds an unusable value."""


__all__ = [
    "VendNavError",
    "EmptyCandidateSetError",
    "InvalidCoordinateError",
    "CatalogError",
    "ConfigError",
]
