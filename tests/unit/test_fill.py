"""Tests for triangulation-based interior fill."""

import logging
from unittest.mock import Mock

import pytest

from svg_interpolator.core.data_models import Edge, Point
from svg_interpolator.core.error_handling import EmptyPointCloudError, ValidationError
from svg_interpolator.generators.fill import fill_points, tessellate
from svg_interpolator.generators.triangulation import delaunay_triangulate
from svg_interpolator.geometry.primitives import squared_distance

# A 3-4-5 right triangle
TRIANGLE = [Point(0, 0), Point(4, 0), Point(0, 3)]


def two_rows(length: int = 16, gap: float = 2.5):
    """Two parallel rows of points one unit apart."""
    return [Point(x, 0) for x in range(length + 1)] + [
        Point(x, gap) for x in range(length + 1)
    ]


class TestDelaunayTriangulate:
    """Test the scipy-backed triangulation."""

    def test_single_triangle(self):
        """Test three points make one triangle."""
        assert sorted(delaunay_triangulate([(0, 0), (4, 0), (0, 3)])) == [0, 1, 2]

    def test_square_has_two_triangles(self):
        """Test four corners make two triangles."""
        indices = delaunay_triangulate([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert len(indices) == 6
        assert set(indices) == {0, 1, 2, 3}

    def test_too_few_points(self, caplog):
        """Test fewer than three points give no triangles."""
        with caplog.at_level(logging.WARNING):
            assert delaunay_triangulate([(0, 0), (1, 1)]) == []
        assert "at least 3 points" in caplog.text

    def test_collinear_points(self, caplog):
        """Test collinear points give no triangles instead of raising."""
        with caplog.at_level(logging.WARNING):
            assert delaunay_triangulate([(0, 0), (1, 0), (2, 0), (3, 0)]) == []
        assert "degenerate" in caplog.text


class TestTessellate:
    """Test edge selection by length band."""

    def test_band_selects_edges(self):
        """Test only edges inside the band are kept."""
        edges = tessellate(TRIANGLE, 3.5, 4.5, lambda coords: [0, 1, 2])
        assert edges == [Edge(Point(0, 0), Point(4, 0))]

    def test_band_is_exclusive(self):
        """Test edges exactly at either limit are excluded."""
        assert tessellate(TRIANGLE, 3, 5, lambda coords: [0, 1, 2]) == [
            Edge(Point(0, 0), Point(4, 0))
        ]

    def test_edge_order(self):
        """Test each triangle contributes edges 1-2, 1-3, 2-3."""
        edges = tessellate(TRIANGLE, 0, 10, lambda coords: [0, 1, 2])
        assert edges == [
            Edge(Point(0, 0), Point(4, 0)),
            Edge(Point(0, 0), Point(0, 3)),
            Edge(Point(4, 0), Point(0, 3)),
        ]

    def test_triangulator_receives_coordinates(self):
        """Test the triangulator is handed plain coordinate pairs."""
        triangulator = Mock(return_value=[])
        assert tessellate(TRIANGLE, 0, 10, triangulator) == []
        triangulator.assert_called_once_with([(0, 0), (4, 0), (0, 3)])

    def test_shared_edges_repeat(self):
        """Test an edge shared by two triangles is reported twice."""
        square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        edges = tessellate(square, 2.5, 3, lambda coords: [0, 1, 2, 0, 2, 3])
        assert edges == [Edge(Point(0, 0), Point(2, 2))] * 2


class TestFillPoints:
    """Test midpoint insertion."""

    def test_adds_midpoints(self):
        """Test midpoints of band edges are appended after the originals."""
        points = fill_points(TRIANGLE, 1, 3.5, 4.5, lambda coords: [0, 1, 2])
        assert points == TRIANGLE + [Point(2, 0)]

    def test_duplicate_midpoints_are_cleaned(self):
        """Test a shared edge only adds its midpoint once."""
        square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        points = fill_points(square, 1, 2.5, 3, lambda coords: [0, 1, 2, 0, 2, 3])
        assert points == square + [Point(1, 1)]

    def test_midpoints_too_close_are_dropped(self):
        """Test a midpoint nearer than the spacing to a point is removed."""
        assert fill_points(TRIANGLE, 3, 3.5, 4.5, lambda coords: [0, 1, 2]) == TRIANGLE

    def test_parallel_rows_gain_interior_points(self):
        """Test real triangulation fills the gap between two rows."""
        rows = two_rows()
        filled = fill_points(rows, 1, 1, 3)
        assert len(filled) > len(rows)
        assert filled[: len(rows)] == rows
        for p in filled[len(rows):]:
            assert p.y == pytest.approx(1.25)
        for i, a in enumerate(filled):
            for b in filled[i + 1:]:
                assert squared_distance(a, b) >= 1

    def test_collinear_cloud_is_unchanged(self):
        """Test a cloud that cannot be triangulated is returned as is."""
        line = [Point(x, 0) for x in range(5)]
        assert fill_points(line, 1, 0.5, 3) == line

    def test_inverted_band_raises(self):
        """Test min_length above max_length is rejected."""
        with pytest.raises(ValidationError):
            fill_points(TRIANGLE, 1, 5, 2)

    def test_empty_cloud_raises(self):
        """Test filling nothing is an error."""
        with pytest.raises(EmptyPointCloudError):
            fill_points([], 1, 1, 3)
