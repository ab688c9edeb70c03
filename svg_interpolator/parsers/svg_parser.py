"""SVG parsing functionality.

Reads ``<path>`` elements and tokenises their ``d`` attribute into typed,
absolute path commands.
"""

import logging
import re
import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from ..core.commands import (
    CubicCurveTo,
    EllipticalArcTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
    UnsupportedCommand,
    VerticalLineTo,
)
from ..core.data_models import Point
from ..core.error_handling import (
    COMMON_ERROR_MAPPINGS,
    ParsingError,
    handle_errors,
)

logger = logging.getLogger(__name__)

# Number of arguments each command letter consumes
COMMAND_ARGUMENTS = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}

COMMAND_LETTERS = frozenset("MmLlHhVvCcSsQqTtAaZz")

NUMBER_PATTERN = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
# Arc flags are a single digit and may run into the next number
FLAG_PATTERN = re.compile(r"[01]")
SEPARATOR_PATTERN = re.compile(r"[\s,]*")

# Argument positions of the large-arc and sweep flags
ARC_FLAG_ARGUMENTS = (3, 4)

PARSE_ERROR_MAPPINGS = {**COMMON_ERROR_MAPPINGS, ET.ParseError: ParsingError}


def _local_name(tag: str) -> str:
    """Strip the XML namespace from a tag."""
    return tag.rsplit("}", 1)[-1]


class SVGParser:
    """Parser for SVG files and path data into path commands."""

    def parse_file(self, svg_path: Union[str, Path]) -> List[PathCommand]:
        """Parse an SVG file and return the commands of all its paths.

        Paths inside ``<defs>`` are ignored. Commands of separate paths are
        concatenated in document order; each path starts with its own move.

        Raises:
            ParsingError: If the file is not valid XML or has bad path data
            FileProcessingError: If the file cannot be read
        """
        root = self._read_root(svg_path)

        commands: List[PathCommand] = []
        path_count = 0
        for element in self._iter_paths(root):
            d = element.get("d", "")
            if not d.strip():
                continue
            try:
                commands.extend(self.parse_path_data(d))
            except ParsingError as e:
                e.details.update({"file": str(svg_path), "id": element.get("id")})
                raise
            path_count += 1

        logger.info(
            f"Parsed {len(commands)} commands from {path_count} paths in {svg_path}"
        )
        return commands

    @handle_errors(error_types=PARSE_ERROR_MAPPINGS, log_errors=False)
    def _read_root(self, svg_path: Union[str, Path]) -> ET.Element:
        tree = ET.parse(svg_path)  # nosec B314 - Parsing trusted user SVG files
        return tree.getroot()

    def _iter_paths(self, element: ET.Element) -> Iterator[ET.Element]:
        """Yield ``<path>`` descendants in document order, skipping ``<defs>``."""
        for child in element:
            name = _local_name(child.tag)
            if name == "defs":
                continue
            if name == "path":
                yield child
            yield from self._iter_paths(child)

    def tokenize(self, d: str) -> List[Union[str, float]]:
        """Split path data into command letters and numbers.

        The large-arc and sweep flags of ``A`` are read as one digit each, so
        compact data such as ``a5 5 0 0110 0`` splits into seven arguments.

        Raises:
            ParsingError: On characters that belong to neither
        """
        tokens: List[Union[str, float]] = []
        letter: Optional[str] = None
        argument = 0
        position = SEPARATOR_PATTERN.match(d).end()

        while position < len(d):
            if d[position] in COMMAND_LETTERS:
                letter = d[position]
                argument = 0
                tokens.append(letter)
                position += 1
            else:
                pattern = NUMBER_PATTERN
                if letter in ("A", "a") and argument % 7 in ARC_FLAG_ARGUMENTS:
                    pattern = FLAG_PATTERN
                match = pattern.match(d, position)
                if match is None:
                    raise ParsingError(
                        f"Unexpected character {d[position]!r} "
                        f"at position {position} in path data",
                        details={"position": position},
                    )
                tokens.append(float(match.group()))
                argument += 1
                position = match.end()
            position = SEPARATOR_PATTERN.match(d, position).end()

        return tokens

    def parse_path_data(self, d: str) -> List[PathCommand]:
        """Convert one ``d`` attribute into absolute path commands.

        Relative commands are resolved against the current point, implicit
        repeats are expanded (extra pairs after a move are lines) and ``Z``
        becomes a line back to the start of the subpath. ``S`` and ``T`` are
        kept as unsupported commands.

        Raises:
            ParsingError: If the data is malformed
        """
        tokens = self.tokenize(d)
        commands: List[PathCommand] = []
        current = Point(0.0, 0.0)
        subpath_start = current
        letter: Optional[str] = None
        index = 0

        while index < len(tokens):
            token = tokens[index]
            if isinstance(token, str):
                letter = token
                index += 1
            elif letter is None:
                raise ParsingError("Path data must start with a command")
            elif letter in "Zz":
                raise ParsingError("Close path takes no arguments")
            elif letter in "Mm":
                # Coordinates following a move are implicit lines
                letter = "L" if letter == "M" else "l"

            count = COMMAND_ARGUMENTS[letter.upper()]
            args = tokens[index : index + count]
            if len(args) < count or any(isinstance(a, str) for a in args):
                raise ParsingError(
                    f"Command '{letter}' needs {count} numbers",
                    details={"command": letter},
                )
            index += count

            command, current, subpath_start = self._build_command(
                letter, args, current, subpath_start
            )
            if command is not None:
                commands.append(command)

        return commands

    def _build_command(
        self,
        letter: str,
        args: List[float],
        current: Point,
        subpath_start: Point,
    ) -> Tuple[Optional[PathCommand], Point, Point]:
        """Build one absolute command.

        Returns:
            The command (None when nothing is drawn), the new current point
            and the new subpath start
        """
        relative = letter.islower()
        code = letter.upper()

        def absolute(x: float, y: float) -> Point:
            if relative:
                return Point(current.x + x, current.y + y)
            return Point(x, y)

        if code == "Z":
            if current == subpath_start:
                return None, current, subpath_start
            close = LineTo(subpath_start.x, subpath_start.y)
            return close, subpath_start, subpath_start

        if code == "H":
            x = current.x + args[0] if relative else args[0]
            return HorizontalLineTo(x), Point(x, current.y), subpath_start
        if code == "V":
            y = current.y + args[0] if relative else args[0]
            return VerticalLineTo(y), Point(current.x, y), subpath_start

        end = absolute(args[-2], args[-1])
        if code == "M":
            return MoveTo(end.x, end.y), end, end
        elif code == "L":
            command: PathCommand = LineTo(end.x, end.y)
        elif code == "C":
            command = CubicCurveTo(
                cp1=absolute(args[0], args[1]),
                cp2=absolute(args[2], args[3]),
                x=end.x,
                y=end.y,
            )
        elif code == "Q":
            command = QuadraticCurveTo(cp=absolute(args[0], args[1]), x=end.x, y=end.y)
        elif code == "A":
            command = EllipticalArcTo(
                rx=args[0],
                ry=args[1],
                rotation=args[2],
                large_arc=bool(args[3]),
                sweep=bool(args[4]),
                x=end.x,
                y=end.y,
            )
        else:
            command = UnsupportedCommand(code, end)

        return command, end, subpath_start
