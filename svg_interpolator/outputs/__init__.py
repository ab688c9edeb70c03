"""Writers for generated point clouds."""

from .preview import render_preview
from .writers import write_points, write_points_csv, write_points_json

__all__ = ["render_preview", "write_points", "write_points_csv", "write_points_json"]
