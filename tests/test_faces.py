"""
Tests for the face model, plane fitting and batch evaluation.
"""

import logging

import numpy as np
import pytest
from shapely.geometry import Polygon

from faceprops.faces import (
    BatchReport,
    Face,
    SelectionError,
    analyze_faces,
    as_face,
    fit_plane,
    is_parallel,
    newell_normal,
)
from faceprops.properties import (
    DegenerateGeometry,
    InternalHoleDetected,
    InvalidVertexCount,
    PolygonPropertiesCalculator,
)


FLAT_SQUARE = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
VERTICAL_SQUARE = [(0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1)]
SQUARE_WITH_HOLE = Polygon(
    [(0, 0), (4, 0), (4, 4), (0, 4)],
    [[(1, 1), (2, 1), (2, 2), (1, 2)]]
)


class TestPlaneFit:
    """Tests for fit_plane() and newell_normal()."""

    def test_flat_ccw_normal_points_up(self):
        fit = fit_plane(np.array(FLAT_SQUARE, dtype=float))
        np.testing.assert_allclose(fit.normal, [0, 0, 1], atol=1e-9)
        np.testing.assert_allclose(fit.center, [0.5, 0.5, 0.0])

    def test_flat_cw_normal_points_down(self):
        fit = fit_plane(np.array(FLAT_SQUARE[::-1], dtype=float))
        np.testing.assert_allclose(fit.normal, [0, 0, -1], atol=1e-9)

    def test_flat_loop_has_no_out_of_plane_variance(self):
        fit = fit_plane(np.array(FLAT_SQUARE, dtype=float))
        assert fit.explained_variance_ratio[2] == pytest.approx(0.0, abs=1e-12)
        assert fit.basis.shape == (2, 3)

    def test_newell_normal_length(self):
        """Newell's normal has length twice the area."""
        n = newell_normal(np.array(FLAT_SQUARE, dtype=float))
        np.testing.assert_allclose(n, [0, 0, 2])

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            fit_plane(np.zeros((4, 2)))

    def test_too_few_vertices(self):
        with pytest.raises(ValueError):
            fit_plane(np.zeros((2, 3)))


class TestIsParallel:
    """Tests for is_parallel() function."""

    def test_same_direction(self):
        assert is_parallel([0, 0, 1])

    def test_opposite_direction(self):
        """Faces pointing down are still parallel to the ground."""
        assert is_parallel([0, 0, -2])

    def test_perpendicular(self):
        assert not is_parallel([0, 1, 0])

    def test_slightly_tilted(self):
        tilted = [np.sin(0.01), 0, np.cos(0.01)]
        assert not is_parallel(tilted)
        assert is_parallel(tilted, tol=1e-3)

    def test_custom_reference(self):
        assert is_parallel([1, 0, 0], reference=[-1, 0, 0])

    def test_zero_normal(self):
        assert not is_parallel([0, 0, 0])


class TestFace:
    """Tests for the Face model."""

    def test_simple_face(self):
        face = Face(outer=FLAT_SQUARE)
        assert face.outer.shape == (4, 3)
        assert face.vertex_count == 4
        assert face.outer_vertex_count == 4
        assert not face.has_internal_hole

    def test_from_shapely_with_hole(self):
        face = Face.from_shapely(SQUARE_WITH_HOLE, z=1.5)
        assert face.outer_vertex_count == 4
        assert face.vertex_count == 8
        assert face.has_internal_hole
        np.testing.assert_array_equal(face.outer[:, 2], 1.5)

    def test_bounds(self):
        face = Face(outer=[(0, 0, 0), (3, 0, 0), (3, 4, 0), (0, 4, 0)])
        np.testing.assert_array_equal(face.bounds, [[0, 0, 0], [3, 4, 0]])
        assert face.bounding_diagonal == pytest.approx(5.0)

    def test_normal(self):
        np.testing.assert_allclose(Face(outer=VERTICAL_SQUARE).normal[1], -1.0, atol=1e-9)

    def test_as_face(self):
        face = Face(outer=FLAT_SQUARE)
        assert as_face(face) is face
        assert as_face(SQUARE_WITH_HOLE).has_internal_hole
        assert as_face(FLAT_SQUARE).outer_vertex_count == 4


class TestAnalyzeFaces:
    """Tests for analyze_faces() batch runner."""

    def test_mixed_selection(self):
        faces = [
            FLAT_SQUARE,
            VERTICAL_SQUARE,
            SQUARE_WITH_HOLE,
            Face(outer=[(0, 0, 0), (1, 0, 0)]),
            Polygon([(0, 0), (2, 0), (2, 4), (0, 4)]),
        ]
        report = analyze_faces(faces)

        assert isinstance(report, BatchReport)
        assert report.skipped_nonparallel == 1
        assert report.total == 5
        assert [r.index for r in report.computed] == [0, 4]
        assert [r.index for r in report.failed] == [2, 3]

        assert isinstance(report.failed[0].error, InternalHoleDetected)
        assert isinstance(report.failed[1].error, InvalidVertexCount)
        assert report.computed[1].properties.area == pytest.approx(8.0)

    def test_raised_face_is_parallel(self):
        """A flat face above the ground is still evaluated."""
        raised = [(x, y, 10.0) for x, y, _ in FLAT_SQUARE]
        report = analyze_faces([raised])
        assert report.computed[0].properties.centroid == pytest.approx((0.5, 0.5, 10.0))

    def test_custom_reference_normal(self):
        report = analyze_faces([FLAT_SQUARE, VERTICAL_SQUARE], reference_normal=(0, 1, 0))
        assert report.skipped_nonparallel == 1
        assert report.results[0].index == 1

    def test_calculator_tolerance_applies_to_plane_filter(self):
        """A thin vertical sliver counts as plane-less under a loose tolerance."""
        sliver = [(0, 0, 0), (10, 0, 0), (10, 0, 1e-4), (0, 0, 1e-4)]

        report = analyze_faces([sliver])
        assert report.skipped_nonparallel == 1

        loose = PolygonPropertiesCalculator(area_rtol=1e-3)
        report = analyze_faces([sliver], calculator=loose)
        assert report.skipped_nonparallel == 0
        assert isinstance(report.failed[0].error, DegenerateGeometry)

    def test_empty_selection(self):
        with pytest.raises(SelectionError):
            analyze_faces([])

    def test_too_many_faces(self):
        with pytest.raises(SelectionError, match="51 faces"):
            analyze_faces([FLAT_SQUARE] * 51)

    def test_limit_configurable(self):
        with pytest.raises(SelectionError):
            analyze_faces([FLAT_SQUARE] * 11, max_faces=10)
        report = analyze_faces([FLAT_SQUARE] * 60, max_faces=None)
        assert len(report.computed) == 60

    def test_skips_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="faceprops"):
            analyze_faces([FLAT_SQUARE, VERTICAL_SQUARE])
        assert "Skipped 1 of 2 faces" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
