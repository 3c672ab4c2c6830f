"""
Visualization utilities for face properties.

Contains:
- Crosshair construction through a centroid
- 2D plot of a face with its centroid marker and report
- Overview figure of a batch run
"""

from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from ..config import REFERENCE_LENGTH_FRACTION
from ..core.geometry import as_vertex_array, bounding_diagonal
from ..faces.face import Face
from ..presentation.report import format_properties
from ..presentation.units import LinearUnit
from ..properties.calculator import PolygonProperties

if TYPE_CHECKING:
    from ..faces.batch import BatchReport


def reference_length(face, fraction: float = REFERENCE_LENGTH_FRACTION) -> float:
    """
    Size reference for construction geometry: a fraction of the bounding diagonal.

    Parameters
    ----------
    face : Face or array-like
        Face or its vertices.
    fraction : float
        Fraction of the diagonal. Default 0.2 (diagonal / 5).
    """
    vertices = face.outer if isinstance(face, Face) else as_vertex_array(face)
    return bounding_diagonal(vertices) * fraction


def crosshair_segments(centroid, length: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Two segments crossing at ``centroid``, parallel to the X and Y axes.

    Parameters
    ----------
    centroid : array-like
        Point of shape (3,).
    length : float
        Distance each segment extends on either side of the centroid.

    Returns
    -------
    tuple of np.ndarray
        ``(x_segment, y_segment)``, each of shape (2, 3).
    """
    c = np.asarray(centroid, dtype=np.float64)
    dx = np.array([length, 0.0, 0.0])
    dy = np.array([0.0, length, 0.0])
    return np.vstack([c - dx, c + dx]), np.vstack([c - dy, c + dy])


def plot_face_properties(
    face: Face,
    props: PolygonProperties,
    ax: Optional[plt.Axes] = None,
    show_crosshairs: bool = True,
    show_report: bool = True,
    unit: LinearUnit = LinearUnit.INCH,
    title: str = "Face properties"
) -> plt.Axes:
    """
    Draw a face in plan view with its centroid.

    Parameters
    ----------
    face : Face
        Face whose outer loop is drawn.
    props : PolygonProperties
        Properties computed for the face.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    show_crosshairs : bool
        Whether to draw crosshairs through the centroid.
    show_report : bool
        Whether to show the text report.
    unit : LinearUnit
        Unit of the report text; coordinates are assumed to be inches.
    title : str
        Plot title.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    poly = face.outer
    closed_poly = np.vstack([poly, poly[0]])
    ax.plot(closed_poly[:, 0], closed_poly[:, 1], 'k-', linewidth=2, zorder=3)
    ax.fill(poly[:, 0], poly[:, 1], alpha=0.15, color='green', zorder=1)
    ax.scatter(poly[:, 0], poly[:, 1], c='black', s=30, marker='s', zorder=4)

    cx, cy, _ = props.centroid
    ax.scatter([cx], [cy], c='red', s=80, marker='+', zorder=5, label='Centroid')

    if show_crosshairs:
        length = reference_length(face)
        for segment in crosshair_segments(props.centroid, length):
            ax.plot(segment[:, 0], segment[:, 1], 'r--', linewidth=1, zorder=4)

    if show_report:
        ax.text(
            0.02, 0.98, format_properties(props, unit=unit),
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=8,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    ax.legend(loc='upper right')
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    return ax


def plot_batch(
    report: "BatchReport",
    figsize: Tuple[int, int] = (8, 8)
) -> plt.Figure:
    """
    Draw every computed face of a batch on one set of axes.

    Rejected faces are outlined in grey without a centroid; empty loops
    are left out.
    """
    fig, ax = plt.subplots(1, 1, figsize=figsize)

    for result in report.results:
        poly = result.face.outer
        if len(poly) == 0:
            continue
        closed_poly = np.vstack([poly, poly[0]])
        if not result.ok:
            ax.plot(closed_poly[:, 0], closed_poly[:, 1], color='grey', linestyle=':', zorder=2)
            continue

        ax.plot(closed_poly[:, 0], closed_poly[:, 1], 'k-', linewidth=1.5, zorder=3)
        ax.fill(poly[:, 0], poly[:, 1], alpha=0.15, color='green', zorder=1)
        cx, cy, _ = result.properties.centroid
        ax.scatter([cx], [cy], c='red', s=60, marker='+', zorder=5)
        for segment in crosshair_segments(result.properties.centroid, reference_length(result.face)):
            ax.plot(segment[:, 0], segment[:, 1], 'r--', linewidth=1, zorder=4)
        ax.annotate(str(result.index), (cx, cy), textcoords='offset points', xytext=(4, 4), fontsize=8)

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(f"{len(report.computed)} faces computed, {report.skipped_nonparallel} skipped")
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig
