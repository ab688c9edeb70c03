"""Point generation from path commands."""

from .fill import fill_points, tessellate
from .interpreter import interpret_path, points_for_command, trace_path
from .point_generator import PointGenerator
from .post_processing import (
    bounding_box,
    clean_points,
    recenter_points,
    scale_points,
    translate_points,
)
from .triangulation import Triangulator, delaunay_triangulate

__all__ = [
    "PointGenerator",
    "interpret_path",
    "points_for_command",
    "trace_path",
    "fill_points",
    "tessellate",
    "bounding_box",
    "clean_points",
    "recenter_points",
    "scale_points",
    "translate_points",
    "Triangulator",
    "delaunay_triangulate",
]
