"""Default triangulation capability backed by scipy's Delaunay."""

import logging
from typing import Callable, List, Sequence, Tuple

import numpy as np
from scipy.spatial import Delaunay, QhullError

logger = logging.getLogger(__name__)

# Maps 2D coordinates to a flat index list, one triangle per consecutive triple.
Triangulator = Callable[[Sequence[Tuple[float, float]]], List[int]]


def delaunay_triangulate(coordinates: Sequence[Tuple[float, float]]) -> List[int]:
    """Delaunay-triangulate ``coordinates``.

    Degenerate input (fewer than three points, or all points on one line)
    has no triangles and returns an empty list.
    """
    if len(coordinates) < 3:
        logger.warning(
            f"Triangulation needs at least 3 points, got {len(coordinates)}"
        )
        return []

    try:
        triangulation = Delaunay(np.asarray(coordinates, dtype=float))
    except QhullError as e:
        logger.warning(f"Triangulation failed on degenerate input: {e}")
        return []

    return [int(index) for index in triangulation.simplices.ravel()]
