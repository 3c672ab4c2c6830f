"""
Core geometry operations.
"""

from .geometry import (
    as_vertex_array,
    loop_perimeter,
    bounding_diagonal,
    ring_to_numpy,
    shapely_to_numpy,
)

__all__ = [
    'as_vertex_array',
    'loop_perimeter',
    'bounding_diagonal',
    'ring_to_numpy',
    'shapely_to_numpy',
]
