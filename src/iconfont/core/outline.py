"""Glyph outline construction.

This module turns an Icon (SVG user space, y axis pointing down) into a
GlyphOutline (font units, y axis pointing up):

1. Scale the viewport uniformly so its longer side spans the em square
2. Flip the y axis and move the content back into positive y
3. Normalize contour winding for even-odd icons
4. Replace cubic curves with quadratic approximations
"""

import math
from collections.abc import Sequence

from fontTools.misc.transform import Transform

from iconfont.config import IconFontSettings, get_default_settings
from iconfont.core.curves import CurveApproximator
from iconfont.core.winding import WindingNormalizer
from iconfont.domain import CommandType, GlyphOutline, Icon, PathCommand, Point
from iconfont.exceptions import InvalidIconError, OutlineBuildError


def font_transform(width: float, height: float, units_per_em: int) -> Transform:
    """Affine transform from icon space to font space.

    Args:
        width: Viewport width
        height: Viewport height
        units_per_em: Target em size

    Returns:
        Transform scaling by units_per_em / max(width, height) with the y
        axis flipped and translated by the scaled height
    """
    scale = units_per_em / max(width, height)
    return Transform(scale, 0, 0, -scale, 0, height * scale)


def check_path_structure(icon_name: str, path: Sequence[PathCommand]) -> None:
    """Reject command sequences that cannot form contours.

    A non-empty path must start with MoveTo, drawing commands are only
    allowed while a contour is open, and every coordinate must be finite.

    Args:
        icon_name: Name used in error messages
        path: Drawing commands

    Raises:
        OutlineBuildError: If the path is malformed
    """
    contour_open = False

    for index, cmd in enumerate(path):
        for point in cmd.points:
            if not (math.isfinite(point.x) and math.isfinite(point.y)):
                raise OutlineBuildError(
                    icon_name, f"non-finite coordinate in command {index}"
                )

        if cmd.kind == CommandType.MOVE_TO:
            contour_open = True
        elif not contour_open:
            raise OutlineBuildError(
                icon_name,
                f"{cmd.kind.name} at command {index} has no open contour",
            )
        elif cmd.kind == CommandType.CLOSE:
            contour_open = False


class GlyphOutlineBuilder:
    """Builds TrueType-ready outlines from icons.

    The builder is stateless once constructed and safe for use in worker
    processes.

    Example:
        builder = GlyphOutlineBuilder(settings)
        outline = builder.build(icon)
    """

    def __init__(self, settings: IconFontSettings | None = None) -> None:
        """Initialize the builder.

        Args:
            settings: Application settings (defaults if None)
        """
        if settings is None:
            settings = get_default_settings()
        self.units_per_em = settings.metrics.units_per_em
        self.normalizer = WindingNormalizer(area_epsilon=settings.geometry.area_epsilon)
        self.approximator = CurveApproximator(
            tolerance=settings.geometry.curve_tolerance,
            max_depth=settings.geometry.max_subdivision_depth,
        )

    @staticmethod
    def missing_glyph() -> GlyphOutline:
        """Outline for glyph index 0."""
        return GlyphOutline.empty()

    def build(self, icon: Icon) -> GlyphOutline:
        """Build the glyph outline of an icon.

        Args:
            icon: Icon to convert

        Returns:
            Outline in font units, containing no cubic curves

        Raises:
            InvalidIconError: If the viewport has no usable size
            OutlineBuildError: If the path is malformed
        """
        for label, value in (("width", icon.width), ("height", icon.height)):
            if not math.isfinite(value) or value <= 0:
                raise InvalidIconError(
                    icon.name, f"viewport {label} must be positive, got {value}"
                )

        check_path_structure(icon.name, icon.path)

        transform = font_transform(icon.width, icon.height, self.units_per_em)

        def to_font(point: Point) -> Point:
            x, y = transform.transformPoint((point.x, point.y))
            return Point(x, y)

        transformed = [cmd.map_points(to_font) for cmd in icon.path]
        normalized = self.normalizer.normalize(transformed, icon.fill_rule)
        commands = self._eliminate_cubics(normalized)

        if not commands:
            return GlyphOutline.empty()
        return GlyphOutline(commands=tuple(commands))

    def _eliminate_cubics(self, path: Sequence[PathCommand]) -> list[PathCommand]:
        """Replace every CubicTo with QuadTo commands.

        Args:
            path: Well-formed path in font units

        Returns:
            Path with only MoveTo, LineTo, QuadTo and Close
        """
        result: list[PathCommand] = []
        current = Point(0.0, 0.0)
        contour_start = current

        for cmd in path:
            if cmd.kind == CommandType.CUBIC_TO:
                result.extend(self.approximator.to_quad_commands(current, cmd))
            else:
                result.append(cmd)

            if cmd.kind == CommandType.MOVE_TO:
                contour_start = cmd.points[0]
            if cmd.kind == CommandType.CLOSE:
                current = contour_start
            else:
                current = cmd.points[-1]

        return result
