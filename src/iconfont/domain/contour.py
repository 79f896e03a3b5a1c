"""Contour representation.

This module defines the contour types used by the winding normalizer:
- WindingDirection: Enum for contour winding direction
- Contour: One closed sub-path of a larger path
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from iconfont.domain.path import CommandType, PathCommand, Point


class WindingDirection(Enum):
    """Contour winding direction.

    In TrueType convention (y axis pointing up):
    - Outer contours wind clockwise (negative signed area)
    - Holes wind counter-clockwise (positive signed area)
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass
class Contour:
    """A sub-path that starts at a MoveTo and runs to the next one.

    Contours are conceptually closed whether or not they end with an
    explicit Close command, since TrueType contours always are.

    Attributes:
        commands: Drawing commands, normally starting with MoveTo
    """

    commands: list[PathCommand]
    _endpoints: list[Point] | None = field(default=None, repr=False, init=False)

    @property
    def endpoints(self) -> list[Point]:
        """On-curve points of the contour, in drawing order.

        Curve control points are deliberately left out; area and
        containment tests treat the contour as the polygon through
        these points.
        """
        if self._endpoints is None:
            self._endpoints = [
                cmd.end_point for cmd in self.commands if cmd.end_point is not None
            ]
        return self._endpoints

    @property
    def is_closed(self) -> bool:
        """Whether the contour carries an explicit Close command."""
        return any(cmd.kind == CommandType.CLOSE for cmd in self.commands)

    def reversed(self) -> "Contour":
        """Return the same shape traversed in the opposite direction.

        The new contour starts at the old end point, visits every segment
        in reverse order with control points swapped, and keeps the
        Close command if there was one.

        Returns:
            Reversed contour
        """
        if not self.commands or self.commands[0].kind != CommandType.MOVE_TO:
            return Contour(commands=list(self.commands))

        segments = [
            cmd for cmd in self.commands[1:] if cmd.kind != CommandType.CLOSE
        ]
        if not segments:
            return Contour(commands=list(self.commands))

        # starts[i] is where segments[i] begins
        starts = [self.commands[0].points[0]]
        starts.extend(seg.points[-1] for seg in segments[:-1])

        reversed_commands = [PathCommand.move_to(segments[-1].points[-1])]
        for seg, start in zip(reversed(segments), reversed(starts)):
            controls = tuple(reversed(seg.control_points))
            reversed_commands.append(PathCommand(seg.kind, controls + (start,)))

        if self.is_closed:
            reversed_commands.append(PathCommand.close())

        return Contour(commands=reversed_commands)


def split_contours(path: Sequence[PathCommand]) -> list[Contour]:
    """Split a path into contours at every MoveTo.

    Commands before the first MoveTo form a contour of their own, so
    nothing is lost; callers that need well-formed input validate first.

    Args:
        path: Drawing commands

    Returns:
        Contours in drawing order
    """
    contours: list[Contour] = []
    current: list[PathCommand] = []

    for cmd in path:
        if cmd.kind == CommandType.MOVE_TO and current:
            contours.append(Contour(commands=current))
            current = []
        current.append(cmd)

    if current:
        contours.append(Contour(commands=current))

    return contours


def join_contours(contours: Sequence[Contour]) -> list[PathCommand]:
    """Concatenate contours back into a single path."""
    return [cmd for contour in contours for cmd in contour.commands]
