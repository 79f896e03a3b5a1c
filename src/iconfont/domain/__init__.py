"""Domain models for iconfont.

This module contains the models the pipeline passes between stages. All
models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel outline building)
- Independent of fonttools implementation details

Key classes:
- Point: A 2D point
- PathCommand: A single move/line/quad/cubic/close drawing command
- Contour: A sub-path between two MoveTo commands
- Icon: A parsed icon with its path, viewport and codepoint
- GlyphOutline: A quadratic-only outline in font units
- FontDocument: The serialized font with its font-wide values
- QuadraticBezier / CubicBezier: Single curve segments
"""

from iconfont.domain.contour import (
    Contour,
    WindingDirection,
    join_contours,
    split_contours,
)
from iconfont.domain.font import FontDocument, LocaFormat
from iconfont.domain.glyph import GlyphOutline, Icon
from iconfont.domain.path import (
    CommandType,
    FillRule,
    Path,
    PathCommand,
    Point,
    path_from_dicts,
    path_to_dicts,
)
from iconfont.domain.segment import CubicBezier, QuadraticBezier

__all__: list[str] = [
    # Enums
    "CommandType",
    "FillRule",
    "LocaFormat",
    "WindingDirection",
    # Core types
    "Point",
    "PathCommand",
    "Path",
    "Contour",
    "Icon",
    "GlyphOutline",
    "FontDocument",
    "CubicBezier",
    "QuadraticBezier",
    # Helpers
    "join_contours",
    "path_from_dicts",
    "path_to_dicts",
    "split_contours",
]
