"""
Error taxonomy for the property computation.

All errors derive from ``ValueError`` so callers that already guard array
validation with ``except ValueError`` also catch computation failures.
"""


class ComputationError(ValueError):
    """Base class for a vertex loop the computation refuses to evaluate."""

    code = "computation_error"


class InvalidVertexCount(ComputationError):
    """Fewer than three vertices were supplied."""

    code = "invalid_vertex_count"

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Invalid face detected. Can't calculate centroid for a loop of {count} vertices."
        )


class InternalHoleDetected(ComputationError):
    """The loop has inner boundaries that are not seamed to the outer one."""

    code = "internal_hole"

    def __init__(self, vertex_count=None):
        self.vertex_count = vertex_count
        super().__init__(
            "Face with internal hole detected. Draw a single connecting line between "
            "each hole and the face perimeter before using this tool."
        )


class DegenerateGeometry(ComputationError):
    """Zero-area loop, or a moment whose radius of gyration is not real."""

    code = "degenerate_geometry"
