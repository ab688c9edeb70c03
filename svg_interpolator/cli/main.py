"""Command line interface for sampling SVG paths into point clouds."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core.commands import PathCommand, commands_from_dicts
from ..core.config import Config
from ..core.constants import ConfigSections, FileExtensions, get_output_formats
from ..core.error_handling import (
    COMMON_ERROR_MAPPINGS,
    ParsingError,
    SVGInterpolatorError,
    ValidationError,
    error_context,
    handle_errors,
)
from ..core.logging_config import LogContext, setup_logging
from ..generators.point_generator import PointGenerator
from ..outputs.preview import render_preview
from ..outputs.writers import write_points
from ..parsers.svg_parser import SVGParser

logger = logging.getLogger(__name__)


def get_version() -> str:
    """Get the current version of SVG Interpolator."""
    from .. import __version__

    return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="svg-interpolator",
        description="Sample SVG paths into evenly spaced boundary and fill points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Usage Examples:

  # Boundary points, 10 units apart:
  svg-interpolator logo.svg -o logo.json

  # Denser interior fill and a preview image:
  svg-interpolator logo.svg --resolution 1000 --spacing 10 --fill 15 32 --preview logo.png

  # Pre-parsed command list:
  svg-interpolator commands.json --format csv -o points.csv
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"SVG Interpolator {get_version()}"
    )
    parser.add_argument(
        "input",
        type=str,
        help="SVG file, or JSON list of command dicts ({code, x, y, ...})",
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Output file for the points")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=get_output_formats(),
        help="Output format (default: from config, json)",
    )
    parser.add_argument("--preview", type=str, help="Render the points to a PNG file")

    # Sampling
    parser.add_argument(
        "--resolution", type=int, help="Polyline subdivisions per curve"
    )
    parser.add_argument(
        "--spacing", type=float, help="Distance between generated points"
    )

    # Fill and transform
    parser.add_argument(
        "--fill",
        nargs=2,
        type=float,
        metavar=("MIN", "MAX"),
        help="Fill the interior using triangle edges between MIN and MAX long",
    )
    parser.add_argument(
        "--fill-passes", type=int, help="Number of fill passes (default: 1)"
    )
    parser.add_argument("--scale", type=float, help="Scale factor applied last")
    parser.add_argument(
        "--translate",
        nargs=2,
        type=float,
        metavar=("DX", "DY"),
        help="Translation applied after scaling",
    )

    # Configuration and logging
    parser.add_argument("--config", type=str, help="Path to svg_interpolator.toml")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from config, INFO)",
    )
    parser.add_argument("--log-file", type=str, help="Also log to this file")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress the summary and info logs"
    )

    return parser


def apply_overrides(config: Config, args: argparse.Namespace) -> None:
    """Let command line flags override configuration values."""
    if args.resolution is not None:
        config.set(ConfigSections.SAMPLING, "resolution", args.resolution)
    if args.spacing is not None:
        config.set(ConfigSections.SAMPLING, "spacing", args.spacing)
    if args.fill is not None:
        config.set(ConfigSections.FILL, "enabled", True)
        config.set(ConfigSections.FILL, "min_length", args.fill[0])
        config.set(ConfigSections.FILL, "max_length", args.fill[1])
    if args.fill_passes is not None:
        config.set(ConfigSections.FILL, "passes", args.fill_passes)
    if args.scale is not None:
        config.set(ConfigSections.TRANSFORM, "scale", args.scale)
    if args.translate is not None:
        config.set(ConfigSections.TRANSFORM, "translate_x", args.translate[0])
        config.set(ConfigSections.TRANSFORM, "translate_y", args.translate[1])
    if args.output_format is not None:
        config.set(ConfigSections.OUTPUT, "format", args.output_format)
    if args.log_level is not None:
        config.set(ConfigSections.LOGGING, "level", args.log_level)
    if args.log_file is not None:
        config.set(ConfigSections.LOGGING, "file", args.log_file)


@handle_errors(error_types=COMMON_ERROR_MAPPINGS, log_errors=False)
def load_commands(input_path: Path) -> List[PathCommand]:
    """Read commands from an SVG file or a JSON list of command dicts.

    Raises:
        ParsingError: If the file content is malformed
        FileProcessingError: If the file cannot be read
        ValidationError: If the format is not recognised
    """
    suffix = input_path.suffix.lower()
    if suffix == FileExtensions.SVG:
        return SVGParser().parse_file(input_path)
    elif suffix == FileExtensions.JSON:
        with open(input_path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ParsingError(f"Invalid JSON in {input_path}: {e}") from e
        if not isinstance(data, list):
            raise ParsingError(f"{input_path} must contain a list of commands")
        return commands_from_dicts(data)

    raise ValidationError(f"Unsupported input format: {input_path.suffix}")


def run(config: Config, input_path: Path, args: argparse.Namespace) -> PointGenerator:
    """Generate, fill and transform the points described by ``config``."""
    with error_context("load", input=str(input_path)):
        commands = load_commands(input_path)

    generator = PointGenerator.from_config(config)
    with LogContext("generate", logger):
        generator.generate(commands)

    fill = config.fill
    if fill["enabled"] and len(generator.cloud) > 0:
        for _ in range(fill["passes"]):
            generator.fill_with_points(fill["min_length"], fill["max_length"])

    transform = config.transform
    if transform["scale"] != 1.0:
        generator.scale(transform["scale"])
    if transform["translate_x"] or transform["translate_y"]:
        generator.translate(transform["translate_x"], transform["translate_y"])

    if args.output:
        output = config.output
        write_points(
            generator.cloud, args.output, output["format"], output["precision"]
        )
    if args.preview:
        render_preview(generator.points, args.preview)

    return generator


def print_summary(generator: PointGenerator) -> None:
    print(f"Points: {len(generator.cloud)}")
    if len(generator.cloud) > 0:
        bbox = generator.bounding_box()
        print(
            f"Bounding box: x={bbox.x:.3f} y={bbox.y:.3f} "
            f"width={bbox.width:.3f} height={bbox.height:.3f}"
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
        apply_overrides(config, args)
        config.validate()

        log_settings = config.logging
        setup_logging(
            level="WARNING" if args.quiet else log_settings["level"],
            log_file=log_settings["file"] or None,
        )

        input_path = Path(args.input)
        generator = run(config, input_path, args)
    except SVGInterpolatorError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        logger.debug(f"Error details: {e.details}")
        return 1

    if not args.quiet:
        print_summary(generator)
    return 0


if __name__ == "__main__":
    sys.exit(main())
