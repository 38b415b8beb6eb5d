"""
Geomagnetic field models.
"""

from .model import Model, ModelKind, ModelSet, MAX_DEGREE, COEFFICIENT_SIZE
from .coordinates import CoordinateKind, Wgs84, GeocentricSpherical, Ecef, Position
from .synthesis import interpolate_model, extrapolate_model, synthesize_model
from .igrf import Igrf, legendre_tables, spherical_field, calculate_field
from .coefficient_file import read_model_set, write_model_set
from .magnetic_field import (
    MagFluxUnit,
    MagneticFieldComponents,
    MagneticFieldModel,
    MagneticFieldState,
    field,
    components,
    field_scaled
)

__all__ = [
    'Model',
    'ModelKind',
    'ModelSet',
    'MAX_DEGREE',
    'COEFFICIENT_SIZE',
    'CoordinateKind',
    'Wgs84',
    'GeocentricSpherical',
    'Ecef',
    'Position',
    'interpolate_model',
    'extrapolate_model',
    'synthesize_model',
    'Igrf',
    'legendre_tables',
    'spherical_field',
    'calculate_field',
    'read_model_set',
    'write_model_set',
    'MagFluxUnit',
    'MagneticFieldComponents',
    'MagneticFieldModel',
    'MagneticFieldState',
    'field',
    'components',
    'field_scaled'
]
