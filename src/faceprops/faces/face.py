"""
Face model: an outer vertex loop plus any inner loops (holes).
"""

from dataclasses import dataclass, field
from typing import List

import numpy as np
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from ..core.geometry import as_vertex_array, bounding_diagonal, shapely_to_numpy
from .plane import fit_plane


@dataclass
class Face:
    """
    A planar face as supplied by the selection side.

    Attributes
    ----------
    outer : np.ndarray
        Outer boundary vertices of shape (N, 3).
    holes : list of np.ndarray
        Inner boundaries, each of shape (K, 3).
    """
    outer: np.ndarray
    holes: List[np.ndarray] = field(default_factory=list)

    def __post_init__(self):
        self.outer = as_vertex_array(self.outer)
        self.holes = [as_vertex_array(h) for h in self.holes]

    @classmethod
    def from_shapely(cls, polygon: Polygon, z: float = 0.0) -> "Face":
        """Build a face from a Shapely polygon; interiors become holes."""
        outer, holes = shapely_to_numpy(polygon, z=z)
        return cls(outer=outer, holes=holes)

    @property
    def outer_vertex_count(self) -> int:
        return len(self.outer)

    @property
    def vertex_count(self) -> int:
        """Vertices on all loops of the face."""
        return self.outer_vertex_count + sum(len(h) for h in self.holes)

    @property
    def has_internal_hole(self) -> bool:
        return self.vertex_count != self.outer_vertex_count

    @property
    def bounds(self) -> np.ndarray:
        """Bounding box corners as an array of shape (2, 3): min, max."""
        return np.vstack([self.outer.min(axis=0), self.outer.max(axis=0)])

    @property
    def bounding_diagonal(self) -> float:
        return bounding_diagonal(self.outer)

    @property
    def normal(self) -> np.ndarray:
        return fit_plane(self.outer).normal


def as_face(obj) -> Face:
    """Coerce a Face, Shapely polygon or vertex array into a Face."""
    if isinstance(obj, Face):
        return obj
    if isinstance(obj, BaseGeometry):
        return Face.from_shapely(obj)
    return Face(outer=obj)
