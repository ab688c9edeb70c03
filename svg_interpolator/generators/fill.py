"""Interior fill by triangulating the cloud and splitting mid-length edges."""

import logging
from typing import List, Sequence

from ..core.data_models import Edge, Point
from ..core.error_handling import EmptyPointCloudError, ValidationError
from .post_processing import clean_points
from .triangulation import Triangulator, delaunay_triangulate

logger = logging.getLogger(__name__)


def tessellate(
    points: Sequence[Point],
    min_length: float,
    max_length: float,
    triangulator: Triangulator = delaunay_triangulate,
) -> List[Edge]:
    """Triangle edges whose length lies strictly between the two limits.

    Shorter edges are already dense enough; longer ones are assumed to cross
    a concavity or the outside of the shape. Edges shared by two triangles
    appear once per triangle.
    """
    min_sq = min_length**2
    max_sq = max_length**2

    indices = triangulator([(p.x, p.y) for p in points])

    edges = []
    for i in range(0, len(indices) - 2, 3):
        p1 = points[indices[i]]
        p2 = points[indices[i + 1]]
        p3 = points[indices[i + 2]]
        for edge in (Edge(p1, p2), Edge(p1, p3), Edge(p2, p3)):
            if min_sq < edge.squared_length < max_sq:
                edges.append(edge)

    logger.debug(
        f"Kept {len(edges)} edges from {len(indices) // 3} triangles "
        f"in length band ({min_length}, {max_length})"
    )
    return edges


def fill_points(
    points: Sequence[Point],
    spacing: float,
    min_length: float,
    max_length: float,
    triangulator: Triangulator = delaunay_triangulate,
) -> List[Point]:
    """Add the midpoint of every edge in the length band, then clean.

    Raises:
        EmptyPointCloudError: If there are no points to fill between
        ValidationError: If the length band is inverted
    """
    if min_length > max_length:
        raise ValidationError(
            f"min_length ({min_length}) must not exceed max_length ({max_length})"
        )
    if not points:
        raise EmptyPointCloudError("Cannot fill an empty point cloud")

    midpoints = [
        edge.midpoint()
        for edge in tessellate(points, min_length, max_length, triangulator)
    ]
    filled = clean_points(list(points) + midpoints, spacing)

    logger.debug(
        f"Fill added {len(filled) - len(points)} points "
        f"({len(midpoints)} candidates)"
    )
    return filled
