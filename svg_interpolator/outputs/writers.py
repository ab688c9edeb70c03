"""Export point clouds to JSON or CSV."""

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..core.constants import OutputFormat
from ..core.data_models import PointCloud
from ..core.error_handling import COMMON_ERROR_MAPPINGS, ValidationError, handle_errors
from ..generators.post_processing import bounding_box

logger = logging.getLogger(__name__)


def cloud_to_dict(cloud: PointCloud, precision: int = 3) -> Dict[str, Any]:
    """Serializable summary of a cloud, coordinates rounded to ``precision``."""
    data: Dict[str, Any] = {
        "count": len(cloud),
        "points": [
            {"x": round(p.x, precision), "y": round(p.y, precision)} for p in cloud
        ],
        "center": {
            "x": round(cloud.center.x, precision),
            "y": round(cloud.center.y, precision),
        },
        "bounding_box": None,
    }
    if not cloud.is_empty:
        bbox = bounding_box(cloud.points)
        data["bounding_box"] = {
            key: round(value, precision) for key, value in bbox.as_dict().items()
        }
    return data


@handle_errors(error_types=COMMON_ERROR_MAPPINGS, log_errors=False)
def write_points_json(
    cloud: PointCloud, output_path: Union[str, Path], precision: int = 3
) -> Path:
    output_path = Path(output_path)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(cloud_to_dict(cloud, precision), f, indent=2)
    logger.info(f"Wrote {len(cloud)} points to {output_path}")
    return output_path


@handle_errors(error_types=COMMON_ERROR_MAPPINGS, log_errors=False)
def write_points_csv(
    cloud: PointCloud, output_path: Union[str, Path], precision: int = 3
) -> Path:
    """Write one ``x,y`` row per point under a header row."""
    output_path = Path(output_path)
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["x", "y"])
        for point in cloud:
            writer.writerow([round(point.x, precision), round(point.y, precision)])
    logger.info(f"Wrote {len(cloud)} points to {output_path}")
    return output_path


def write_points(
    cloud: PointCloud,
    output_path: Union[str, Path],
    output_format: Union[str, OutputFormat] = OutputFormat.JSON,
    precision: int = 3,
) -> Path:
    """Write ``cloud`` in the requested format.

    Raises:
        ValidationError: If the format is unknown
        FileProcessingError: If the file cannot be written
    """
    try:
        fmt = OutputFormat(output_format)
    except ValueError:
        raise ValidationError(f"Unsupported output format: {output_format}")

    if fmt is OutputFormat.CSV:
        return write_points_csv(cloud, output_path, precision)
    return write_points_json(cloud, output_path, precision)
