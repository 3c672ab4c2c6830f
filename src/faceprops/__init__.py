"""
faceprops - Area properties of planar faces.

This package computes, for a simple planar polygon given as an ordered
vertex loop:
- Enclosed area and centroid
- Perimeter
- Second moments of area Ix, Iy, Ixy about centroidal axes
- Radii of gyration rx, ry

Main Functions
--------------
compute_properties : Compute properties, raising on invalid loops
try_compute_properties : Compute properties, returning errors as values
analyze_faces : Evaluate a selection of faces with a reference-plane filter
format_properties : Text report in a chosen linear unit
plot_face_properties : Plot a face with its centroid crosshairs

Example
-------
>>> from faceprops import compute_properties
>>> props = compute_properties([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)])
>>> props.area, props.centroid
(1.0, (0.5, 0.5, 0.0))
"""

from .properties import (
    ComputationError,
    InvalidVertexCount,
    InternalHoleDetected,
    DegenerateGeometry,
    PolygonProperties,
    ComputationOutcome,
    PolygonPropertiesCalculator,
    compute_properties,
    try_compute_properties,
)
from .faces import Face, SelectionError, BatchReport, analyze_faces, fit_plane, is_parallel
from .presentation import LinearUnit, convert_properties, format_properties, format_batch_summary
from .visualization import crosshair_segments, reference_length, plot_face_properties, plot_batch
from .logging_config import setup_logging

__all__ = [
    # Core computation
    'ComputationError',
    'InvalidVertexCount',
    'InternalHoleDetected',
    'DegenerateGeometry',
    'PolygonProperties',
    'ComputationOutcome',
    'PolygonPropertiesCalculator',
    'compute_properties',
    'try_compute_properties',
    # Faces and batches
    'Face',
    'SelectionError',
    'BatchReport',
    'analyze_faces',
    'fit_plane',
    'is_parallel',
    # Presentation
    'LinearUnit',
    'convert_properties',
    'format_properties',
    'format_batch_summary',
    # Visualization
    'crosshair_segments',
    'reference_length',
    'plot_face_properties',
    'plot_batch',
    # Logging
    'setup_logging',
]
