"""
Polygon Properties Module

Computes area-based properties of a simple planar vertex loop:
- Enclosed area and centroid (shoelace / Green's theorem)
- Second moments of area Ix, Iy, Ixy about centroidal axes
- Radii of gyration and perimeter

The loop is closed implicitly (vertex 0 follows the last vertex). Only the
xy coordinates enter the integrals; the centroid height is taken from the
first vertex.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Optional, Tuple

import numpy as np

from ..config import AREA_RTOL
from ..core.geometry import as_vertex_array, bounding_diagonal, loop_perimeter
from .errors import (
    ComputationError,
    DegenerateGeometry,
    InternalHoleDetected,
    InvalidVertexCount,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolygonProperties:
    """
    Area properties of one vertex loop.

    All values are in the linear unit of the input coordinates (area in
    unit^2, moments in unit^4). Unsigned fields are magnitudes; the
    ``signed_*`` fields keep the sign given by the winding direction.

    Attributes
    ----------
    area : float
        Enclosed area.
    signed_area : float
        Area with sign, positive for counter-clockwise loops.
    centroid : tuple
        Centroid (x, y, z); z is the height of the first vertex.
    perimeter : float
        Sum of edge lengths, closing edge included.
    ix, iy, ixy : float
        Second moments and product of area about centroidal axes.
    signed_ix, signed_iy, signed_ixy : float
        The same moments before taking magnitudes.
    rx, ry : float
        Radii of gyration about the centroidal x and y axes.
    vertex_count : int
        Number of vertices in the evaluated loop.
    """
    area: float
    signed_area: float
    centroid: Tuple[float, float, float]
    perimeter: float
    ix: float
    iy: float
    ixy: float
    signed_ix: float
    signed_iy: float
    signed_ixy: float
    rx: float
    ry: float
    vertex_count: int

    @property
    def winding(self) -> str:
        """'ccw' or 'cw', read from the sign of the raw area."""
        return 'ccw' if self.signed_area > 0 else 'cw'

    @property
    def polar_moment(self) -> float:
        """Polar second moment about the centroid, Ix + Iy."""
        return self.ix + self.iy

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ComputationOutcome:
    """Either a computed ``PolygonProperties`` or the error that prevented it."""
    properties: Optional[PolygonProperties] = None
    error: Optional[ComputationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_loop(vertices, has_internal_hole: bool = False) -> np.ndarray:
    """
    Check that a vertex loop is eligible for integration.

    Parameters
    ----------
    vertices : array-like
        Vertices of shape (N, 3) or (N, 2).
    has_internal_hole : bool
        True when the caller's face representation has inner loops that are
        not connected to the outer boundary.

    Returns
    -------
    np.ndarray
        Vertex array of shape (N, 3) in the original order.

    Raises
    ------
    InvalidVertexCount
        Fewer than 3 vertices.
    InternalHoleDetected
        ``has_internal_hole`` is set.
    """
    loop = as_vertex_array(vertices)

    if len(loop) < 3:
        raise InvalidVertexCount(len(loop))

    if has_internal_hole:
        raise InternalHoleDetected(vertex_count=len(loop))

    return loop


def integrate_area_centroid(
    loop: np.ndarray,
    area_rtol: float = AREA_RTOL
) -> Tuple[float, np.ndarray]:
    """
    Signed area and centroid of a closed loop.

    Parameters
    ----------
    loop : np.ndarray
        Validated vertices of shape (N, 3).
    area_rtol : float
        Loops with ``|area| <= area_rtol * diagonal**2`` are degenerate.

    Returns
    -------
    tuple
        ``(signed_area, centroid)`` with centroid of shape (3,).
    """
    # Relative to the first vertex so far-off faces keep their precision
    x0, y0 = float(loop[0, 0]), float(loop[0, 1])
    x = loop[:, 0] - x0
    y = loop[:, 1] - y0
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)

    cross = x * y_next - x_next * y
    a_sum = float(np.sum(cross))
    area = a_sum / 2

    # Scale-relative threshold so that tiny but valid loops are not rejected
    diagonal = bounding_diagonal(np.column_stack([x, y]))
    if abs(area) <= area_rtol * diagonal ** 2:
        raise DegenerateGeometry(
            f"Degenerate face: enclosed area {area!r} is zero or negligible "
            f"(collinear vertices?)"
        )

    # a_sum is twice the area, so 3 * a_sum == 6 * area
    centroid = np.array([
        x0 + float(np.sum((x + x_next) * cross)) / (3 * a_sum),
        y0 + float(np.sum((y + y_next) * cross)) / (3 * a_sum),
        float(loop[0, 2]),
    ])

    return area, centroid


def integrate_moments(loop: np.ndarray, centroid: np.ndarray) -> Tuple[float, float, float]:
    """
    Second moments of area about axes through ``centroid``.

    The results are signed and follow the winding direction of the loop
    the same way the signed area does.

    Parameters
    ----------
    loop : np.ndarray
        Validated vertices of shape (N, 3).
    centroid : np.ndarray
        Centroid of the loop, shape (3,) or (2,).

    Returns
    -------
    tuple
        ``(ix, iy, ixy)``.
    """
    ax = loop[:, 0] - centroid[0]
    ay = loop[:, 1] - centroid[1]
    ax_next = np.roll(ax, -1)
    ay_next = np.roll(ay, -1)

    t = 0.5 * (ax * ay_next - ax_next * ay)
    ix = np.sum((ay * ay + ay * ay_next + ay_next * ay_next) / 6 * t)
    iy = np.sum((ax * ax + ax * ax_next + ax_next * ax_next) / 6 * t)
    ixy = np.sum(
        (2 * ax * ay + ax * ay_next + ax_next * ay + 2 * ax_next * ay_next) / 12 * t
    )

    return float(ix), float(iy), float(ixy)


def radii_of_gyration(ix: float, iy: float, area: float) -> Tuple[float, float]:
    """
    Radii of gyration ``sqrt(I / A)`` about the centroidal axes.

    ``ix``, ``iy`` and ``area`` may all be signed; they are expected to share
    the sign of the winding, so their ratios are non-negative.

    Raises
    ------
    DegenerateGeometry
        If the area is zero or a ratio is negative.
    """
    if area == 0:
        raise DegenerateGeometry("Degenerate face: radius of gyration needs a non-zero area")

    ratio_x = ix / area
    ratio_y = iy / area
    if ratio_x < 0 or ratio_y < 0:
        raise DegenerateGeometry(
            f"Degenerate face: negative radicand for radius of gyration "
            f"(Ix/A={ratio_x!r}, Iy/A={ratio_y!r})"
        )

    return float(np.sqrt(ratio_x)), float(np.sqrt(ratio_y))


def compute_properties(
    vertices,
    has_internal_hole: bool = False,
    area_rtol: float = AREA_RTOL
) -> PolygonProperties:
    """
    Compute area properties of a simple planar polygon.

    Parameters
    ----------
    vertices : array-like
        Ordered vertices of shape (N, 3) or (N, 2), N >= 3. The loop is
        closed implicitly.
    has_internal_hole : bool
        Whether the face has unseamed inner boundaries.
    area_rtol : float
        Relative zero-area tolerance, see ``integrate_area_centroid``.

    Returns
    -------
    PolygonProperties
        Freshly computed properties.

    Raises
    ------
    ComputationError
        ``InvalidVertexCount``, ``InternalHoleDetected`` or
        ``DegenerateGeometry``.
    """
    loop = validate_loop(vertices, has_internal_hole=has_internal_hole)

    area, centroid = integrate_area_centroid(loop, area_rtol=area_rtol)
    ix, iy, ixy = integrate_moments(loop, centroid)
    rx, ry = radii_of_gyration(ix, iy, area)
    perimeter = loop_perimeter(loop)

    return PolygonProperties(
        area=abs(area),
        signed_area=area,
        centroid=(float(centroid[0]), float(centroid[1]), float(centroid[2])),
        perimeter=perimeter,
        ix=abs(ix),
        iy=abs(iy),
        ixy=abs(ixy),
        signed_ix=ix,
        signed_iy=iy,
        signed_ixy=ixy,
        rx=rx,
        ry=ry,
        vertex_count=len(loop),
    )


def try_compute_properties(
    vertices,
    has_internal_hole: bool = False,
    area_rtol: float = AREA_RTOL
) -> ComputationOutcome:
    """
    Like ``compute_properties`` but returns computation errors as values.

    Malformed input arrays still raise ``ValueError``.
    """
    try:
        props = compute_properties(vertices, has_internal_hole=has_internal_hole, area_rtol=area_rtol)
    except ComputationError as e:
        logger.debug("Rejected loop (%s): %s", e.code, e)
        return ComputationOutcome(error=e)
    return ComputationOutcome(properties=props)


class PolygonPropertiesCalculator:
    """
    Reusable calculator holding computation options.

    Keeps no state between calls; every method returns fresh values.
    """

    def __init__(self, area_rtol: float = AREA_RTOL):
        if area_rtol < 0:
            raise ValueError(f"area_rtol must be >= 0, got {area_rtol}")
        self.area_rtol = area_rtol

    def compute(self, vertices, has_internal_hole: bool = False) -> PolygonProperties:
        return compute_properties(vertices, has_internal_hole=has_internal_hole, area_rtol=self.area_rtol)

    def try_compute(self, vertices, has_internal_hole: bool = False) -> ComputationOutcome:
        return try_compute_properties(vertices, has_internal_hole=has_internal_hole, area_rtol=self.area_rtol)

    def compute_face(self, face) -> ComputationOutcome:
        """Evaluate the outer loop of a ``Face``, refusing faces with holes."""
        return self.try_compute(face.outer, has_internal_hole=face.has_internal_hole)
