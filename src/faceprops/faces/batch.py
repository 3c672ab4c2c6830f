"""
Batch evaluation of a face selection.

Each face is computed independently. Faces whose plane is not parallel to
the reference plane are skipped and counted; faces the computation refuses
are kept in the report with their error.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import numpy as np

from ..config import DEFAULT_MAX_FACES, PARALLEL_TOL, REFERENCE_NORMAL
from ..properties.calculator import (
    ComputationOutcome,
    PolygonProperties,
    PolygonPropertiesCalculator,
)
from ..properties.errors import ComputationError
from .face import Face, as_face
from .plane import is_parallel, newell_normal

logger = logging.getLogger(__name__)


class SelectionError(ValueError):
    """The selection as a whole cannot be processed."""


@dataclass
class FaceResult:
    """Outcome for one face of the selection, with its position in it."""
    index: int
    face: Face
    outcome: ComputationOutcome

    @property
    def ok(self) -> bool:
        return self.outcome.ok

    @property
    def properties(self) -> Optional[PolygonProperties]:
        return self.outcome.properties

    @property
    def error(self) -> Optional[ComputationError]:
        return self.outcome.error


@dataclass
class BatchReport:
    """
    Results of ``analyze_faces``.

    Attributes
    ----------
    results : list of FaceResult
        One entry per face that passed the plane filter, in selection order.
    skipped_nonparallel : int
        Faces left out because they are not parallel to the reference plane.
    """
    results: List[FaceResult] = field(default_factory=list)
    skipped_nonparallel: int = 0

    @property
    def computed(self) -> List[FaceResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[FaceResult]:
        return [r for r in self.results if not r.ok]

    @property
    def total(self) -> int:
        return len(self.results) + self.skipped_nonparallel


def _off_reference_plane(face: Face, reference_normal, tol: float, area_rtol: float) -> bool:
    # Loops too short or too thin to span a plane go straight to the calculator
    if face.outer_vertex_count < 3:
        return False
    if np.linalg.norm(newell_normal(face.outer)) <= 2 * area_rtol * face.bounding_diagonal ** 2:
        return False
    return not is_parallel(face.normal, reference_normal, tol=tol)


def analyze_faces(
    faces: Iterable,
    max_faces: int = DEFAULT_MAX_FACES,
    reference_normal=REFERENCE_NORMAL,
    parallel_tol: float = PARALLEL_TOL,
    calculator: Optional[PolygonPropertiesCalculator] = None
) -> BatchReport:
    """
    Compute properties for every face in a selection.

    Parameters
    ----------
    faces : iterable
        Faces, Shapely polygons or vertex arrays.
    max_faces : int
        Largest selection accepted. ``None`` disables the limit.
    reference_normal : array-like
        Normal of the plane faces must be parallel to.
    parallel_tol : float
        Tolerance passed to ``is_parallel``.
    calculator : PolygonPropertiesCalculator, optional
        Calculator to use. A default one is created if None.

    Returns
    -------
    BatchReport
        Per-face outcomes and the count of skipped faces.

    Raises
    ------
    SelectionError
        If the selection is empty or larger than ``max_faces``.
    """
    faces = [as_face(f) for f in faces]

    if not faces:
        raise SelectionError("Select at least one ungrouped face to use this tool.")

    if max_faces is not None and len(faces) > max_faces:
        raise SelectionError(
            f"You have {len(faces)} faces selected. For efficiency, this tool only works "
            f"with max. {max_faces} selected faces at a time. Reduce selection and restart."
        )

    if calculator is None:
        calculator = PolygonPropertiesCalculator()

    report = BatchReport()
    for index, face in enumerate(faces):
        if _off_reference_plane(face, reference_normal, parallel_tol, calculator.area_rtol):
            logger.debug("Face %d is not parallel to the reference plane, skipping", index)
            report.skipped_nonparallel += 1
            continue

        outcome = calculator.compute_face(face)
        if not outcome.ok:
            logger.info("Face %d rejected: %s", index, outcome.error)
        report.results.append(FaceResult(index=index, face=face, outcome=outcome))

    if report.skipped_nonparallel:
        logger.warning(
            "Skipped %d of %d faces that were not parallel to the reference plane",
            report.skipped_nonparallel, report.total
        )
    logger.info(
        "Computed %d faces, %d rejected, %d skipped",
        len(report.computed), len(report.failed), report.skipped_nonparallel
    )

    return report
