"""Bezier curve segments.

Plain value types for single curve segments. Evaluation and subdivision
live in iconfont.core.curves.
"""

from dataclasses import dataclass

from iconfont.domain.path import Point


@dataclass(frozen=True, slots=True)
class QuadraticBezier:
    """A quadratic Bezier segment.

    Attributes:
        p0: Start point
        p1: Control point
        p2: End point
    """

    p0: Point
    p1: Point
    p2: Point


@dataclass(frozen=True, slots=True)
class CubicBezier:
    """A cubic Bezier segment.

    Attributes:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
    """

    p0: Point
    p1: Point
    p2: Point
    p3: Point
