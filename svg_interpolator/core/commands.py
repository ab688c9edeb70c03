"""Typed path commands.

Each command describes one drawing step relative to the current point. The
interpreter walks commands in order; ``end_point`` tells it where the current
point ends up afterwards.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from .constants import CommandCode
from .data_models import Point
from .error_handling import MissingFieldError, ValidationError


class PathCommand(ABC):
    """Base class for all path commands."""

    code: str = ""

    @abstractmethod
    def end_point(self, current: Point) -> Optional[Point]:
        """Where the current point moves after this command."""
        pass


@dataclass(frozen=True)
class MoveTo(PathCommand):
    x: float
    y: float

    code = CommandCode.MOVE.value

    def end_point(self, current: Point) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class LineTo(PathCommand):
    x: float
    y: float

    code = CommandCode.LINE.value

    def end_point(self, current: Point) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class HorizontalLineTo(PathCommand):
    x: float

    code = CommandCode.HORIZONTAL_LINE.value

    def end_point(self, current: Point) -> Point:
        return Point(self.x, current.y)


@dataclass(frozen=True)
class VerticalLineTo(PathCommand):
    y: float

    code = CommandCode.VERTICAL_LINE.value

    def end_point(self, current: Point) -> Point:
        return Point(current.x, self.y)


@dataclass(frozen=True)
class CubicCurveTo(PathCommand):
    cp1: Point
    cp2: Point
    x: float
    y: float

    code = CommandCode.CUBIC_CURVE.value

    def end_point(self, current: Point) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class QuadraticCurveTo(PathCommand):
    cp: Point
    x: float
    y: float

    code = CommandCode.QUADRATIC_CURVE.value

    def end_point(self, current: Point) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class EllipticalArcTo(PathCommand):
    """SVG endpoint-parameterized elliptical arc.

    ``rotation`` is the x-axis rotation in degrees.
    """

    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float

    code = CommandCode.ELLIPTICAL_ARC.value

    def end_point(self, current: Point) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class UnsupportedCommand(PathCommand):
    """A command outside the interpolated subset, kept so it can be reported."""

    name: str
    end: Optional[Point] = None

    @property
    def code(self) -> str:  # type: ignore[override]
        return self.name

    def end_point(self, current: Point) -> Optional[Point]:
        return self.end


def _require(data: Mapping[str, Any], code: str, key: str) -> Any:
    if key not in data or data[key] is None:
        raise MissingFieldError(code, key)
    return data[key]


def _number(data: Mapping[str, Any], code: str, key: str) -> float:
    value = _require(data, code, key)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(
            f"Command '{code}' field '{key}' must be numeric, got {value!r}",
            details={"code": code, "field": key},
        )


def _point(data: Mapping[str, Any], code: str, key: str) -> Point:
    value = _require(data, code, key)
    if not isinstance(value, Mapping):
        raise ValidationError(
            f"Command '{code}' field '{key}' must be an object with x and y",
            details={"code": code, "field": key},
        )
    if value.get("x") is None:
        raise MissingFieldError(code, f"{key}.x")
    if value.get("y") is None:
        raise MissingFieldError(code, f"{key}.y")
    return Point(_number(value, code, "x"), _number(value, code, "y"))


def command_from_dict(data: Mapping[str, Any]) -> PathCommand:
    """Build a typed command from a loader-style dict.

    The expected shape is ``{"code": "C", "x": .., "y": .., "cp1": {"x", "y"},
    "cp2": {..}}`` for curves, ``"cp"`` for quadratic curves and ``"rads"``,
    ``"rot"``, ``"lrg"``, ``"swp"`` for arcs. Unknown codes become
    :class:`UnsupportedCommand` so the interpreter can skip them.

    Raises:
        MissingFieldError: If a field required by the code is absent
        ValidationError: If a field has the wrong type
    """
    code = str(_require(data, "?", "code"))

    if code == CommandCode.MOVE.value:
        return MoveTo(_number(data, code, "x"), _number(data, code, "y"))
    elif code == CommandCode.LINE.value:
        return LineTo(_number(data, code, "x"), _number(data, code, "y"))
    elif code == CommandCode.HORIZONTAL_LINE.value:
        return HorizontalLineTo(_number(data, code, "x"))
    elif code == CommandCode.VERTICAL_LINE.value:
        return VerticalLineTo(_number(data, code, "y"))
    elif code == CommandCode.CUBIC_CURVE.value:
        return CubicCurveTo(
            cp1=_point(data, code, "cp1"),
            cp2=_point(data, code, "cp2"),
            x=_number(data, code, "x"),
            y=_number(data, code, "y"),
        )
    elif code == CommandCode.QUADRATIC_CURVE.value:
        return QuadraticCurveTo(
            cp=_point(data, code, "cp"),
            x=_number(data, code, "x"),
            y=_number(data, code, "y"),
        )
    elif code == CommandCode.ELLIPTICAL_ARC.value:
        radii = _point(data, code, "rads")
        return EllipticalArcTo(
            rx=radii.x,
            ry=radii.y,
            rotation=_number(data, code, "rot"),
            large_arc=bool(_require(data, code, "lrg")),
            sweep=bool(_require(data, code, "swp")),
            x=_number(data, code, "x"),
            y=_number(data, code, "y"),
        )

    end = None
    if data.get("x") is not None and data.get("y") is not None:
        end = Point(_number(data, code, "x"), _number(data, code, "y"))
    return UnsupportedCommand(code, end)


def commands_from_dicts(items: Iterable[Mapping[str, Any]]) -> List[PathCommand]:
    """Convert a sequence of command dicts, preserving order."""
    return [command_from_dict(item) for item in items]
