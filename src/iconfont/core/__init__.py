"""Core processing algorithms for iconfont.

This module contains the core algorithms for:

- Geometry operations (signed area, point-in-polygon, bounding boxes)
- Winding normalization (even-odd to non-zero contour directions)
- Curve approximation (cubic to quadratic Bezier)
- Glyph outline construction (transform, normalize, approximate)
- Font table assembly and build orchestration

All services except the processor are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- signed_area: Calculate polygon area using shoelace formula
- point_in_polygon: Test if point is inside polygon
- normalize_winding: Rewrite contour directions for non-zero fill
- approximate_cubic: Convert a cubic curve to quadratic curves

Key classes:
- WindingNormalizer: Contour direction rewriting
- CurveApproximator: Cubic curve elimination
- GlyphOutlineBuilder: Icon to glyph outline conversion
- FontAssembler: Table layout and serialization
- FontProcessor: End-to-end font builds
"""

from iconfont.core.assembler import (
    TABLE_ORDER,
    FontAssembler,
    glyph_order,
    is_unicode_scalar,
)
from iconfont.core.curves import (
    CubicFit,
    CurveApproximator,
    approximate_cubic,
    fit_cubic,
)
from iconfont.core.geometry import (
    bounding_box,
    point_in_polygon,
    signed_area,
    winding_direction,
)
from iconfont.core.outline import GlyphOutlineBuilder, font_transform
from iconfont.core.processor import BuildResult, FontProcessor, build_outline
from iconfont.core.winding import (
    ContourInfo,
    WindingNormalizer,
    nesting_levels,
    normalize_winding,
)

__all__ = [
    "TABLE_ORDER",
    # Processor classes
    "BuildResult",
    "FontProcessor",
    # Assembler
    "FontAssembler",
    # Outline
    "GlyphOutlineBuilder",
    # Curves
    "CubicFit",
    "CurveApproximator",
    # Winding
    "ContourInfo",
    "WindingNormalizer",
    # Functions
    "approximate_cubic",
    "bounding_box",
    "build_outline",
    "fit_cubic",
    "font_transform",
    "glyph_order",
    "is_unicode_scalar",
    "nesting_levels",
    "normalize_winding",
    "point_in_polygon",
    "signed_area",
    "winding_direction",
]
