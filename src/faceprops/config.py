"""
Configuration & Global Constants
================================
Central registry for the numerical tolerances and caller-side defaults.

Every value here can be overridden per call through keyword arguments; the
module only provides the defaults.

Exports:
    EPS (float): Absolute tolerance for coordinate comparisons.
    AREA_RTOL (float): Relative tolerance below which a loop counts as zero-area.
    PARALLEL_TOL (float): Tolerance on ``1 - |cos(angle)|`` for plane parallelism.
    REFERENCE_NORMAL (tuple): Normal of the reference (ground) plane.
    DEFAULT_MAX_FACES (int): Largest batch the batch runner accepts.
    REFERENCE_LENGTH_FRACTION (float): Crosshair half-length as a fraction of
        the bounding box diagonal.
    REPORT_DECIMALS (int): Digits after the decimal point in text reports.
"""
from typing import Tuple

# Numerical tolerance for floating point comparisons
EPS: float = 1e-10

# Signed area is degenerate when |A| <= AREA_RTOL * diagonal**2
AREA_RTOL: float = 1e-12

PARALLEL_TOL: float = 1e-6
REFERENCE_NORMAL: Tuple[float, float, float] = (0.0, 0.0, 1.0)

DEFAULT_MAX_FACES: int = 50
REFERENCE_LENGTH_FRACTION: float = 0.2
REPORT_DECIMALS: int = 4
