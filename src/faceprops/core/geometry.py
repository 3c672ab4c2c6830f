"""
Core geometry operations for vertex loops.

Contains utility functions for:
- Vertex array normalisation
- Perimeter and bounding box measures
- Shapely/numpy conversions
"""

import numpy as np
from shapely.geometry import Polygon, MultiPolygon

from ..config import EPS


def as_vertex_array(vertices) -> np.ndarray:
    """
    Convert a vertex sequence into a float array of shape (N, 3).

    Two-component vertices are lifted onto the z = 0 plane. A trailing
    vertex that repeats the first one is dropped, since loops are closed
    implicitly.

    Parameters
    ----------
    vertices : array-like
        Vertices of shape (N, 3) or (N, 2).

    Returns
    -------
    np.ndarray
        New vertex array of shape (N, 3). The input is never modified.
    """
    loop = np.array(vertices, dtype=np.float64)

    if loop.size == 0:
        return np.zeros((0, 3))

    if loop.ndim != 2 or loop.shape[1] not in (2, 3):
        raise ValueError(f"Expected vertices of shape (N, 3) or (N, 2), got {loop.shape}")

    if not np.all(np.isfinite(loop)):
        raise ValueError("Vertex coordinates must be finite")

    if loop.shape[1] == 2:
        loop = np.column_stack([loop, np.zeros(len(loop))])

    # Remove the closing duplicate vertex if the caller supplied one
    if len(loop) > 1 and np.allclose(loop[0], loop[-1], rtol=0.0, atol=EPS):
        loop = loop[:-1]

    return loop


def loop_perimeter(poly: np.ndarray) -> float:
    """
    Sum of edge lengths around the closed loop, closing edge included.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2) or (M, 3).

    Returns
    -------
    float
        Perimeter in the units of the coordinates.
    """
    if len(poly) < 2:
        return 0.0

    edges = np.roll(poly, -1, axis=0) - poly
    return float(np.sum(np.linalg.norm(edges, axis=1)))


def bounding_diagonal(poly: np.ndarray) -> float:
    """Length of the diagonal of the axis-aligned bounding box."""
    if len(poly) == 0:
        return 0.0
    return float(np.linalg.norm(poly.max(axis=0) - poly.min(axis=0)))


def ring_to_numpy(ring, z: float = 0.0) -> np.ndarray:
    """
    Convert a Shapely ring to an (M, 3) vertex array without the closing vertex.

    Rings carrying their own z values keep them; flat rings are placed at
    height ``z``.
    """
    coords = np.array(ring.coords, dtype=np.float64)
    if len(coords) > 1 and np.allclose(coords[0], coords[-1]):
        coords = coords[:-1]
    if coords.shape[1] == 2:
        coords = np.column_stack([coords, np.full(len(coords), z)])
    return coords


def shapely_to_numpy(geom, z: float = 0.0):
    """
    Convert a Shapely polygon to numpy arrays of vertices.

    Parameters
    ----------
    geom : Polygon
        Shapely polygon, possibly with interiors.
    z : float
        Plane height used for two-dimensional geometries.

    Returns
    -------
    tuple
        ``(outer, holes)`` where ``outer`` has shape (M, 3) and ``holes``
        is a list of arrays of shape (K, 3).
    """
    if isinstance(geom, MultiPolygon):
        raise ValueError("MultiPolygon has more than one outer boundary; pass each part separately")
    if not isinstance(geom, Polygon):
        raise ValueError(f"Expected a shapely Polygon, got {type(geom).__name__}")

    outer = ring_to_numpy(geom.exterior, z=z)
    holes = [ring_to_numpy(interior, z=z) for interior in geom.interiors]
    return outer, holes
