"""Constants and enums for SVG Interpolator to eliminate magic strings and values."""

from enum import Enum
from typing import List

# Polyline subdivisions used to approximate a curve's arc length.
DEFAULT_RESOLUTION = 500

# Target distance between emitted points, in path units.
DEFAULT_SPACING = 10.0

CONFIG_FILENAME = "svg_interpolator.toml"
CONFIG_DIR_NAME = "svg_interpolator"


class CommandCode(Enum):
    """Path command letters (absolute form)."""

    MOVE = "M"
    LINE = "L"
    HORIZONTAL_LINE = "H"
    VERTICAL_LINE = "V"
    CUBIC_CURVE = "C"
    QUADRATIC_CURVE = "Q"
    ELLIPTICAL_ARC = "A"
    CLOSE_PATH = "Z"
    SMOOTH_CUBIC_CURVE = "S"  # Parsed but not interpolated
    SMOOTH_QUADRATIC_CURVE = "T"  # Parsed but not interpolated


class OutputFormat(Enum):
    """Supported point export formats."""

    JSON = "json"
    CSV = "csv"


class ConfigSections:
    """Configuration file section names."""

    SAMPLING = "sampling"
    FILL = "fill"
    TRANSFORM = "transform"
    OUTPUT = "output"
    LOGGING = "logging"


class FileExtensions:
    """File extensions used throughout the system."""

    SVG = ".svg"
    JSON = ".json"
    CSV = ".csv"
    PNG = ".png"
    CONFIG = ".toml"


def get_supported_command_codes() -> List[str]:
    """Get the command letters the interpreter turns into points."""
    return [
        CommandCode.LINE.value,
        CommandCode.HORIZONTAL_LINE.value,
        CommandCode.VERTICAL_LINE.value,
        CommandCode.CUBIC_CURVE.value,
        CommandCode.QUADRATIC_CURVE.value,
        CommandCode.ELLIPTICAL_ARC.value,
    ]


def get_output_formats() -> List[str]:
    """Get all valid output format strings."""
    return [fmt.value for fmt in OutputFormat]
