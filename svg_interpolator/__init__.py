"""SVG Interpolator - sample vector paths into evenly spaced point clouds."""

__version__ = "1.0.0"
__author__ = "Tutive Ltd."

from svg_interpolator.core.commands import (
    CubicCurveTo,
    EllipticalArcTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
    UnsupportedCommand,
    VerticalLineTo,
    command_from_dict,
    commands_from_dicts,
)
from svg_interpolator.core.config import Config
from svg_interpolator.core.data_models import BoundingBox, Point, PointCloud
from svg_interpolator.generators.point_generator import PointGenerator
from svg_interpolator.parsers.svg_parser import SVGParser

__all__ = [
    "PointGenerator",
    "Point",
    "PointCloud",
    "BoundingBox",
    "Config",
    "SVGParser",
    "PathCommand",
    "MoveTo",
    "LineTo",
    "HorizontalLineTo",
    "VerticalLineTo",
    "CubicCurveTo",
    "QuadraticCurveTo",
    "EllipticalArcTo",
    "UnsupportedCommand",
    "command_from_dict",
    "commands_from_dicts",
]
