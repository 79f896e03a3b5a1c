"""Converters between fonttools pens and domain models.

Two directions are covered:

- A RecordingPen recording (what fontTools.svgLib draws for an SVG file)
  becomes a domain Path
- A GlyphOutline becomes a fonttools glyf Glyph via TTGlyphPen
"""

from typing import Any

from fontTools.pens.basePen import (
    decomposeQuadraticSegment,
    decomposeSuperBezierSegment,
)
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib.tables._g_l_y_f import Glyph

from iconfont.domain import CommandType, GlyphOutline, Path, PathCommand, Point


def _point(xy: tuple[float, float]) -> Point:
    return Point(float(xy[0]), float(xy[1]))


def recording_to_path(recording: list[tuple[str, tuple[Any, ...]]]) -> Path:
    """Convert a RecordingPen recording to a domain Path.

    The recording holds drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), ..., (xn, yn)))  # Quadratic, implied on-curves
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ())
    - ('endPath', ())

    endPath leaves the contour open; the next moveTo starts a new one.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        Path in the coordinate space of the recording

    Raises:
        ValueError: On a command this converter cannot represent
    """
    path: Path = []

    for command, args in recording:
        points = [_point(xy) for xy in args if xy is not None]

        if command == "moveTo":
            path.append(PathCommand.move_to(points[0]))

        elif command == "lineTo":
            path.append(PathCommand.line_to(points[0]))

        elif command == "qCurveTo":
            if args[-1] is None:
                raise ValueError(
                    "quadratic contours without on-curve points are not supported"
                )
            if len(args) == 1:
                path.append(PathCommand.line_to(points[0]))
                continue
            for control, end in decomposeQuadraticSegment(args):
                path.append(PathCommand.quad_to(_point(control), _point(end)))

        elif command == "curveTo":
            if len(points) == 1:
                path.append(PathCommand.line_to(points[0]))
            elif len(points) == 2:
                path.append(PathCommand.quad_to(points[0], points[1]))
            elif len(points) == 3:
                path.append(PathCommand.cubic_to(*points))
            else:
                for c1, c2, end in decomposeSuperBezierSegment(
                    [p.to_tuple() for p in points]
                ):
                    path.append(
                        PathCommand.cubic_to(_point(c1), _point(c2), _point(end))
                    )

        elif command == "closePath":
            path.append(PathCommand.close())

        elif command == "endPath":
            continue

        else:
            raise ValueError(f"Unsupported pen command: {command}")

    return path


def outline_to_ttglyph(outline: GlyphOutline) -> Glyph:
    """Draw a GlyphOutline into a TrueType glyph.

    Every contour is closed, whether or not it ends with an explicit
    Close. Coordinates are rounded to integers by the pen.

    Args:
        outline: Quadratic-only outline in font units

    Returns:
        Glyph ready to be stored in a glyf table
    """
    pen = TTGlyphPen(None)
    contour_open = False

    for cmd in outline.commands:
        if cmd.kind == CommandType.MOVE_TO:
            if contour_open:
                pen.closePath()
            pen.moveTo(cmd.points[0].to_tuple())
            contour_open = True
        elif cmd.kind == CommandType.LINE_TO:
            pen.lineTo(cmd.points[0].to_tuple())
        elif cmd.kind == CommandType.QUAD_TO:
            control, end = cmd.points
            pen.qCurveTo(control.to_tuple(), end.to_tuple())
        elif cmd.kind == CommandType.CLOSE:
            if contour_open:
                pen.closePath()
            contour_open = False

    if contour_open:
        pen.closePath()

    return pen.glyph()
