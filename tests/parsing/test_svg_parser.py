"""Tests for SVG file and path data parsing."""

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
from svg_interpolator.core.data_models import Point
from svg_interpolator.core.error_handling import FileProcessingError, ParsingError
from svg_interpolator.parsers.svg_parser import SVGParser


@pytest.fixture
def parser():
    return SVGParser()


class TestTokenize:
    """Test path data tokenisation."""

    def test_commands_and_numbers(self, parser):
        """Test letters and numbers are split apart."""
        assert parser.tokenize("M 10,20 L30 40") == ["M", 10.0, 20.0, "L", 30.0, 40.0]

    def test_compact_numbers(self, parser):
        """Test signs and dots start new numbers."""
        assert parser.tokenize("M10-5L.5.5") == ["M", 10.0, -5.0, "L", 0.5, 0.5]

    def test_exponents(self, parser):
        """Test scientific notation."""
        assert parser.tokenize("L1e2 -2.5E-1") == ["L", 100.0, -0.25]

    def test_arc_flags_are_single_digits(self, parser):
        """Test arc flags never merge with the number that follows."""
        assert parser.tokenize("a5 5 0 0110 0") == ["a", 5.0, 5.0, 0.0, 0.0, 1.0, 10.0, 0.0]

    def test_invalid_character(self, parser):
        """Test stray characters are rejected with their position."""
        with pytest.raises(ParsingError) as exc_info:
            parser.tokenize("M 0 0 L 1 x")
        assert exc_info.value.details["position"] == 10


class TestParsePathData:
    """Test conversion of path data to commands."""

    def test_absolute_square(self, parser):
        """Test absolute lines and close path."""
        assert parser.parse_path_data("M 0 0 L 10 0 L 10 10 Z") == [
            MoveTo(0, 0),
            LineTo(10, 0),
            LineTo(10, 10),
            LineTo(0, 0),
        ]

    def test_relative_commands(self, parser):
        """Test relative commands resolve against the current point."""
        assert parser.parse_path_data("m 10 10 l 5 0 h 5 v 5 z") == [
            MoveTo(10, 10),
            LineTo(15, 10),
            HorizontalLineTo(20),
            VerticalLineTo(15),
            LineTo(10, 10),
        ]

    def test_implicit_lines_after_move(self, parser):
        """Test extra pairs after a move become lines."""
        assert parser.parse_path_data("M0,0 10,0 10,10") == [
            MoveTo(0, 0),
            LineTo(10, 0),
            LineTo(10, 10),
        ]

    def test_implicit_relative_lines(self, parser):
        """Test extra pairs after a relative move become relative lines."""
        assert parser.parse_path_data("m 1 1 2 0 0 2") == [
            MoveTo(1, 1),
            LineTo(3, 1),
            LineTo(3, 3),
        ]

    def test_repeated_command(self, parser):
        """Test a command letter applies to following argument groups."""
        assert parser.parse_path_data("M 0 0 L 1 0 2 0") == [
            MoveTo(0, 0),
            LineTo(1, 0),
            LineTo(2, 0),
        ]

    def test_relative_cubic(self, parser):
        """Test control points of relative curves are resolved too."""
        assert parser.parse_path_data("M10 10 c 0 10 10 10 10 0") == [
            MoveTo(10, 10),
            CubicCurveTo(Point(10, 20), Point(20, 20), 20, 10),
        ]

    def test_quadratic(self, parser):
        """Test quadratic curves."""
        assert parser.parse_path_data("M0 0 Q 5 10 10 0")[1] == QuadraticCurveTo(
            Point(5, 10), 10, 0
        )

    def test_arcs(self, parser):
        """Test arc radii and flags, absolute and relative."""
        commands = parser.parse_path_data("M0 0 A 5 5 0 0 1 10 0 a 5 5 30 1 0 10 0")
        assert commands[1] == EllipticalArcTo(5, 5, 0, False, True, 10, 0)
        assert commands[2] == EllipticalArcTo(5, 5, 30, True, False, 20, 0)

    def test_compact_arc_flags(self, parser):
        """Test flags written without separators split into single digits."""
        commands = parser.parse_path_data("M0 0 a5 5 0 0110 0 5 5 0 1010 0")
        assert commands[1] == EllipticalArcTo(5, 5, 0, False, True, 10, 0)
        assert commands[2] == EllipticalArcTo(5, 5, 0, True, False, 20, 0)

    def test_comma_separated_arc(self, parser):
        """Test comma separated arc arguments."""
        commands = parser.parse_path_data("M0 0 A5,5,0,1,1,10,0")
        assert commands[1] == EllipticalArcTo(5, 5, 0, True, True, 10, 0)

    def test_invalid_arc_flag(self, parser):
        """Test a flag other than 0 or 1 is rejected."""
        with pytest.raises(ParsingError):
            parser.parse_path_data("M0 0 A 5 5 0 2 1 10 0")

    def test_smooth_curves_are_unsupported(self, parser):
        """Test S and T are kept with their end points."""
        commands = parser.parse_path_data("M0 0 S 5 5 10 0 t 5 0 L 20 0")
        assert commands[1] == UnsupportedCommand("S", Point(10, 0))
        assert commands[2] == UnsupportedCommand("T", Point(15, 0))
        assert commands[3] == LineTo(20, 0)

    def test_close_at_start_draws_nothing(self, parser):
        """Test closing an already closed subpath adds no command."""
        assert parser.parse_path_data("M 0 0 L 5 0 L 0 0 Z") == [
            MoveTo(0, 0),
            LineTo(5, 0),
            LineTo(0, 0),
        ]

    def test_close_returns_to_subpath_start(self, parser):
        """Test a later subpath closes to its own start."""
        commands = parser.parse_path_data("M 0 0 L 5 0 Z M 10 10 L 15 10 z l 0 5")
        assert commands[2] == LineTo(0, 0)
        assert commands[5] == LineTo(10, 10)
        assert commands[6] == LineTo(10, 15)

    def test_empty(self, parser):
        """Test empty data gives no commands."""
        assert parser.parse_path_data("  ") == []

    @pytest.mark.parametrize(
        "d", ["10 10", "M 10", "M 0 0 Z 5", "M 0 0 L 1 L 2 3", "M 0 0 A 5 5 0 0 1"]
    )
    def test_malformed(self, parser, d):
        """Test malformed path data raises a parsing error."""
        with pytest.raises(ParsingError):
            parser.parse_path_data(d)


class TestParseFile:
    """Test reading SVG documents."""

    def test_paths_in_document_order(self, parser, tmp_path):
        """Test all paths are read and definitions skipped."""
        svg = tmp_path / "shape.svg"
        svg.write_text(
            '<svg xmlns="http://www.w3.org/2000/svg">'
            '<defs><path d="M 50 50 L 60 60"/></defs>'
            '<path d="M 0 0 L 10 0"/>'
            '<g><path d="M 0 5 H 10"/></g>'
            '<path d=""/>'
            "</svg>"
        )
        assert parser.parse_file(svg) == [
            MoveTo(0, 0),
            LineTo(10, 0),
            MoveTo(0, 5),
            HorizontalLineTo(10),
        ]

    def test_without_namespace(self, parser, tmp_path):
        """Test documents without the SVG namespace are accepted."""
        svg = tmp_path / "plain.svg"
        svg.write_text('<svg><path d="M 1 2 L 3 4"/></svg>')
        assert parser.parse_file(str(svg)) == [MoveTo(1, 2), LineTo(3, 4)]

    def test_bad_path_reports_file(self, parser, tmp_path):
        """Test path data errors name the file and element."""
        svg = tmp_path / "bad.svg"
        svg.write_text('<svg><path id="outline" d="M 1"/></svg>')
        with pytest.raises(ParsingError) as exc_info:
            parser.parse_file(svg)
        assert exc_info.value.details["file"] == str(svg)
        assert exc_info.value.details["id"] == "outline"

    def test_invalid_xml(self, parser, tmp_path):
        """Test malformed XML raises a parsing error."""
        svg = tmp_path / "broken.svg"
        svg.write_text("<svg><path d='M 0 0'></svg>")
        with pytest.raises(ParsingError):
            parser.parse_file(svg)

    def test_missing_file(self, parser, tmp_path):
        """Test a missing file raises a file processing error."""
        with pytest.raises(FileProcessingError):
            parser.parse_file(tmp_path / "missing.svg")
