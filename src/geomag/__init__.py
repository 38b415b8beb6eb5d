"""
geomag: Earth's main magnetic field from the IGRF-13 spherical-harmonic model.
"""

from .exceptions import (
    GeoMagError,
    EpochOutOfRangeError,
    EmptyModelSetError,
    InvalidCoordinateKindError,
    MalformedCoefficientFileError,
    InvalidDateTimeError,
    ConfigurationError
)
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all

__version__ = "1.0.1"

__all__ = [
    'GeoMagError',
    'EpochOutOfRangeError',
    'EmptyModelSetError',
    'InvalidCoordinateKindError',
    'MalformedCoefficientFileError',
    'InvalidDateTimeError',
    'ConfigurationError'
] + list(_models_all)
