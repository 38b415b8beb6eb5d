"""
Utility functions and helpers for geomagnetic field evaluation.
"""

from .logging import GeoMagLogger, setup_logging
from .time import (
    parse_datetime,
    fractional_years,
    datetime_from_fractional_years,
    to_fractional_years
)
from .validation import (
    validate_type,
    validate_range,
    validate_latitude,
    validate_dict_keys
)

__all__ = [
    'GeoMagLogger',
    'setup_logging',
    'parse_datetime',
    'fractional_years',
    'datetime_from_fractional_years',
    'to_fractional_years',
    'validate_type',
    'validate_range',
    'validate_latitude',
    'validate_dict_keys'
]
