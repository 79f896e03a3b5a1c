"""Path primitives shared by every pipeline stage.

This module defines the drawing vocabulary of the icon pipeline:
- Point: A 2D point
- CommandType: The five drawing primitives
- PathCommand: One tagged drawing command
- FillRule: How overlapping contours are filled
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


class FillRule(str, Enum):
    """Fill rule declared by the icon source.

    TrueType outlines are always rendered with the non-zero rule, so
    even-odd icons need their contour directions normalized.
    """

    NON_ZERO = "nonzero"
    EVEN_ODD = "evenodd"


class CommandType(str, Enum):
    """Drawing command kinds."""

    MOVE_TO = "M"
    LINE_TO = "L"
    QUAD_TO = "Q"
    CUBIC_TO = "C"
    CLOSE = "Z"


# Number of points each command carries
_ARITY = {
    CommandType.MOVE_TO: 1,
    CommandType.LINE_TO: 1,
    CommandType.QUAD_TO: 2,
    CommandType.CUBIC_TO: 3,
    CommandType.CLOSE: 0,
}


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def midpoint(self, other: "Point") -> "Point":
        """Return the point halfway between this point and another."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single drawing command.

    The command kind decides how many points are carried:
    MoveTo/LineTo carry the end point, QuadTo carries (control, end),
    CubicTo carries (control1, control2, end) and Close carries nothing.

    Attributes:
        kind: Command kind
        points: Control points followed by the end point
    """

    kind: CommandType
    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        expected = _ARITY[self.kind]
        if len(self.points) != expected:
            raise ValueError(
                f"{self.kind.name} takes {expected} point(s), got {len(self.points)}"
            )

    @classmethod
    def move_to(cls, point: Point) -> "PathCommand":
        return cls(CommandType.MOVE_TO, (point,))

    @classmethod
    def line_to(cls, point: Point) -> "PathCommand":
        return cls(CommandType.LINE_TO, (point,))

    @classmethod
    def quad_to(cls, control: Point, point: Point) -> "PathCommand":
        return cls(CommandType.QUAD_TO, (control, point))

    @classmethod
    def cubic_to(cls, control1: Point, control2: Point, point: Point) -> "PathCommand":
        return cls(CommandType.CUBIC_TO, (control1, control2, point))

    @classmethod
    def close(cls) -> "PathCommand":
        return cls(CommandType.CLOSE)

    @property
    def end_point(self) -> Point | None:
        """The on-curve point this command ends at, None for Close."""
        return self.points[-1] if self.points else None

    @property
    def control_points(self) -> tuple[Point, ...]:
        """Off-curve points of a curve command."""
        return self.points[:-1]

    def map_points(self, func: Callable[[Point], Point]) -> "PathCommand":
        """Return a copy with every point passed through func."""
        return PathCommand(self.kind, tuple(func(p) for p in self.points))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with the command letter and flat point list
        """
        return {
            "kind": self.kind.value,
            "points": [p.to_tuple() for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathCommand":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with kind and points fields

        Returns:
            PathCommand instance
        """
        return cls(
            kind=CommandType(data["kind"]),
            points=tuple(Point(x, y) for x, y in data["points"]),
        )


Path = list[PathCommand]


def path_to_dicts(path: Sequence[PathCommand]) -> list[dict[str, Any]]:
    """Serialize a whole path for IPC."""
    return [command.to_dict() for command in path]


def path_from_dicts(data: Sequence[dict[str, Any]]) -> Path:
    """Deserialize a path produced by path_to_dicts."""
    return [PathCommand.from_dict(item) for item in data]
