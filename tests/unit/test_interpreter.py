"""Tests for walking path commands into points."""

import logging

import pytest

from svg_interpolator.core.commands import (
    CubicCurveTo,
    EllipticalArcTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    UnsupportedCommand,
    VerticalLineTo,
)
from svg_interpolator.core.data_models import BoundingBox, Point, SamplingConfig
from svg_interpolator.core.error_handling import EmptyPathError, UnsupportedCommandError
from svg_interpolator.generators.interpreter import (
    interpret_path,
    points_for_command,
    trace_path,
)
from svg_interpolator.generators.post_processing import bounding_box, clean_points

SQUARE = [
    MoveTo(0, 0),
    LineTo(10, 0),
    LineTo(10, 10),
    LineTo(0, 10),
    LineTo(0, 0),
]
CONFIG = SamplingConfig(spacing=2, resolution=100)


class TestPointsForCommand:
    """Test single command dispatch."""

    def test_move_emits_nothing(self):
        """Test a move only changes the current point."""
        assert points_for_command(MoveTo(5, 5), Point(0, 0), CONFIG) == []

    def test_line_from_current(self):
        """Test a line starts at the current point."""
        points = points_for_command(LineTo(4, 0), Point(0, 0), CONFIG)
        assert points == [Point(0, 0), Point(2, 0), Point(4, 0)]

    def test_horizontal_and_vertical(self):
        """Test H and V keep the other coordinate of the current point."""
        horizontal = points_for_command(HorizontalLineTo(6), Point(2, 3), CONFIG)
        assert horizontal[-1] == Point(6, 3)
        vertical = points_for_command(VerticalLineTo(-1), Point(2, 3), CONFIG)
        assert vertical[-1] == Point(2, -1)

    def test_curves_end_on_target(self):
        """Test curve commands finish on their end point."""
        commands = [
            CubicCurveTo(Point(0, 10), Point(10, 10), 10, 0),
            QuadraticCurveTo(Point(5, 10), 10, 0),
            EllipticalArcTo(5, 5, 0, False, True, 10, 0),
        ]
        for command in commands:
            last = points_for_command(command, Point(0, 0), CONFIG)[-1]
            assert last.x == pytest.approx(10)
            assert last.y == pytest.approx(0, abs=1e-9)

    def test_unsupported_raises(self):
        """Test unknown commands are reported by code."""
        with pytest.raises(UnsupportedCommandError) as exc_info:
            points_for_command(UnsupportedCommand("S"), Point(0, 0), CONFIG)
        assert exc_info.value.code == "S"
        assert "Unsupported SVG command S" in str(exc_info.value)


class TestTracePath:
    """Test the raw walk over a path."""

    def test_square_keeps_shared_corners(self):
        """Test each side emits its own endpoints, so corners repeat."""
        points = trace_path(SQUARE, CONFIG)
        assert len(points) == 24
        assert points[5] == points[6] == Point(10, 0)

    def test_square_bounds_before_recentering(self):
        """Test the cleaned trace spans the drawn square."""
        points = clean_points(trace_path(SQUARE, CONFIG), CONFIG.spacing)
        assert len(points) == 20
        assert bounding_box(points) == BoundingBox(0, 0, 10, 10)

    def test_first_command_sets_current_point(self):
        """Test a path not starting with a move begins at its first end point."""
        points = trace_path([LineTo(5, 0), LineTo(5, 4)], CONFIG)
        assert points[0] == Point(5, 0)
        assert points[-1] == Point(5, 4)

    def test_unsupported_command_is_skipped(self, caplog):
        """Test unsupported commands log a warning and move the current point."""
        commands = [MoveTo(0, 0), UnsupportedCommand("S", Point(10, 0)), LineTo(10, 4)]
        with caplog.at_level(logging.WARNING):
            points = trace_path(commands, CONFIG)
        assert all(p.x == 10 for p in points)
        assert "Unsupported SVG command S" in caplog.text

    def test_unsupported_without_end_keeps_current(self):
        """Test a command without an end point leaves the current point alone."""
        commands = [MoveTo(0, 0), UnsupportedCommand("T"), LineTo(4, 0)]
        assert trace_path(commands, CONFIG)[0] == Point(0, 0)

    def test_empty_path_raises(self):
        """Test tracing no commands is an error."""
        with pytest.raises(EmptyPathError):
            trace_path([], CONFIG)


class TestInterpretPath:
    """Test the cleaned, recentered result."""

    def test_square(self):
        """Test the square is centered on the origin."""
        points = interpret_path(SQUARE, CONFIG)
        assert len(points) == 20
        assert bounding_box(points) == BoundingBox(-5, -5, 10, 10)
        for p in points:
            assert abs(p.x) == 5 or abs(p.y) == 5

    def test_moves_only(self):
        """Test a path that never draws gives no points."""
        assert interpret_path([MoveTo(1, 1), MoveTo(4, 4)], CONFIG) == []
