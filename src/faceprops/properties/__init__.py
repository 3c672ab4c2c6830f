"""
Polygon area properties and their error types.
"""

from .errors import (
    ComputationError,
    InvalidVertexCount,
    InternalHoleDetected,
    DegenerateGeometry,
)
from .calculator import (
    PolygonProperties,
    ComputationOutcome,
    PolygonPropertiesCalculator,
    validate_loop,
    integrate_area_centroid,
    integrate_moments,
    radii_of_gyration,
    compute_properties,
    try_compute_properties,
)

__all__ = [
    'ComputationError',
    'InvalidVertexCount',
    'InternalHoleDetected',
    'DegenerateGeometry',
    'PolygonProperties',
    'ComputationOutcome',
    'PolygonPropertiesCalculator',
    'validate_loop',
    'integrate_area_centroid',
    'integrate_moments',
    'radii_of_gyration',
    'compute_properties',
    'try_compute_properties',
]
