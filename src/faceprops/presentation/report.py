"""
Plain-text reports for computed properties and batch runs.
"""

from ..config import REPORT_DECIMALS
from ..faces.batch import BatchReport
from ..properties.calculator import PolygonProperties
from ..properties.errors import ComputationError
from .units import LinearUnit, convert_properties


def format_properties(
    props: PolygonProperties,
    unit: LinearUnit = LinearUnit.INCH,
    source_unit: LinearUnit = LinearUnit.INCH,
    decimals: int = REPORT_DECIMALS
) -> str:
    """
    Format properties as a multi-line report in ``unit``.

    Parameters
    ----------
    props : PolygonProperties
        Properties in ``source_unit``.
    unit : LinearUnit
        Unit to report in.
    source_unit : LinearUnit
        Unit of the coordinates the properties were computed from.
    decimals : int
        Digits after the decimal point.

    Returns
    -------
    str
        The report text.
    """
    p = convert_properties(props, unit, from_unit=source_unit)
    u = unit.symbol
    d = decimals
    cx, cy, cz = p.centroid

    return (
        "Face properties (in current model units):\n\n"
        f"Centroid = [{cx:.{d}f},{cy:.{d}f},{cz:.{d}f}] (x,y,z {u} from origin)\n"
        f"Area = {p.area:.{d}f} {u}^2\n"
        f"Perimeter = {p.perimeter:.{d}f} {u}\n"
        f"Ix = {p.ix:.{d}f} {u}^4\n"
        f"Iy = {p.iy:.{d}f} {u}^4\n"
        f"Ixy = {p.ixy:.{d}f} {u}^4\n"
        f"rx = {p.rx:.{d}f} {u}\n"
        f"ry = {p.ry:.{d}f} {u}"
    )


def format_error(error: ComputationError) -> str:
    """One-line description of a computation error, prefixed with its type."""
    return f"{type(error).__name__}: {error}"


def format_batch_summary(report: BatchReport) -> str:
    """One-paragraph summary of a batch run, including the skipped-face notice."""
    lines = [
        f"Computed {len(report.computed)} of {report.total} faces."
    ]
    for result in report.failed:
        lines.append(f"Face {result.index}: {format_error(result.error)}")
    if report.skipped_nonparallel > 0:
        lines.append(
            "This tool only works on faces that are parallel to the reference plane. "
            f"Skipped {report.skipped_nonparallel} faces that were not parallel."
        )
    return "\n".join(lines)
