"""Cubic to quadratic curve approximation.

TrueType outlines only support quadratic Bezier curves. Cubic segments
are replaced by a sequence of quadratics using recursive bisection:

1. Evaluate the cubic at t=0.5
2. Build a trial quadratic sharing the cubic's end points, with its
   control point at the mean of the two cubic control points
3. Measure the L1 distance between both midpoints
4. Accept the trial quadratic when the distance is below tolerance,
   otherwise split the cubic with De Casteljau and recurse on both halves

Recursion stops at a fixed depth, where the trial quadratic is accepted
regardless of its error, so cusps and loops cannot recurse forever.
"""

from dataclasses import dataclass

from iconfont.domain import CubicBezier, PathCommand, Point, QuadraticBezier

DEFAULT_TOLERANCE = 1.0
DEFAULT_MAX_DEPTH = 16


def evaluate_cubic(cubic: CubicBezier, t: float) -> Point:
    """Evaluate a cubic Bezier curve at parameter t.

    Args:
        cubic: Curve to evaluate
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    u = 1.0 - t
    a = u * u * u
    b = 3 * u * u * t
    c = 3 * u * t * t
    d = t * t * t
    return Point(
        a * cubic.p0.x + b * cubic.p1.x + c * cubic.p2.x + d * cubic.p3.x,
        a * cubic.p0.y + b * cubic.p1.y + c * cubic.p2.y + d * cubic.p3.y,
    )


def evaluate_quadratic(quad: QuadraticBezier, t: float) -> Point:
    """Evaluate a quadratic Bezier curve at parameter t."""
    u = 1.0 - t
    a = u * u
    b = 2 * u * t
    c = t * t
    return Point(
        a * quad.p0.x + b * quad.p1.x + c * quad.p2.x,
        a * quad.p0.y + b * quad.p1.y + c * quad.p2.y,
    )


def split_cubic(cubic: CubicBezier) -> tuple[CubicBezier, CubicBezier]:
    """Split a cubic Bezier curve at t=0.5.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        cubic: Curve to split

    Returns:
        Tuple of (left half, right half)
    """
    # First level
    p01 = cubic.p0.midpoint(cubic.p1)
    p12 = cubic.p1.midpoint(cubic.p2)
    p23 = cubic.p2.midpoint(cubic.p3)

    # Second level
    p012 = p01.midpoint(p12)
    p123 = p12.midpoint(p23)

    # Third level (point on the curve)
    mid = p012.midpoint(p123)

    left = CubicBezier(cubic.p0, p01, p012, mid)
    right = CubicBezier(mid, p123, p23, cubic.p3)
    return left, right


def trial_quadratic(cubic: CubicBezier) -> QuadraticBezier:
    """Single-quadratic stand-in for a cubic.

    Keeps the end points and averages the two interior control points.
    """
    return QuadraticBezier(cubic.p0, cubic.p1.midpoint(cubic.p2), cubic.p3)


def midpoint_error(cubic: CubicBezier, quad: QuadraticBezier) -> float:
    """L1 distance between the midpoints of a cubic and a quadratic."""
    true_mid = evaluate_cubic(cubic, 0.5)
    quad_mid = evaluate_quadratic(quad, 0.5)
    return abs(true_mid.x - quad_mid.x) + abs(true_mid.y - quad_mid.y)


@dataclass(frozen=True)
class CubicFit:
    """One accepted quadratic together with the cubic piece it replaces.

    Attributes:
        piece: Part of the original cubic covered by this fit
        quadratic: Accepted quadratic
        error: Midpoint error of the quadratic against the piece
        depth: Subdivision depth at which the fit was accepted
    """

    piece: CubicBezier
    quadratic: QuadraticBezier
    error: float
    depth: int


def fit_cubic(
    cubic: CubicBezier,
    tolerance: float = DEFAULT_TOLERANCE,
    max_depth: int = DEFAULT_MAX_DEPTH,
    depth: int = 0,
) -> list[CubicFit]:
    """Fit quadratics to a cubic by recursive bisection.

    Args:
        cubic: Curve to approximate
        tolerance: Maximum midpoint error in font units
        max_depth: Depth at which the trial quadratic is accepted as is
        depth: Current recursion depth

    Returns:
        Fits in curve order, at least one
    """
    quad = trial_quadratic(cubic)
    error = midpoint_error(cubic, quad)

    if error < tolerance or depth >= max_depth:
        return [CubicFit(piece=cubic, quadratic=quad, error=error, depth=depth)]

    left, right = split_cubic(cubic)
    return fit_cubic(left, tolerance, max_depth, depth + 1) + fit_cubic(
        right, tolerance, max_depth, depth + 1
    )


def approximate_cubic(
    cubic: CubicBezier,
    tolerance: float = DEFAULT_TOLERANCE,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[QuadraticBezier]:
    """Approximate a cubic Bezier curve with quadratic curves.

    Args:
        cubic: Curve to approximate
        tolerance: Maximum midpoint error in font units
        max_depth: Safety limit for subdivision

    Returns:
        Quadratic segments joined end to end, from cubic.p0 to cubic.p3
    """
    return [fit.quadratic for fit in fit_cubic(cubic, tolerance, max_depth)]


class CurveApproximator:
    """Replaces cubic drawing commands with quadratic ones.

    Example:
        approximator = CurveApproximator(tolerance=1.0)
        commands = approximator.to_quad_commands(current_point, cubic_command)
    """

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.tolerance = tolerance
        self.max_depth = max_depth

    def to_quad_commands(self, start: Point, command: PathCommand) -> list[PathCommand]:
        """Convert one CubicTo command into QuadTo commands.

        Args:
            start: Current point before the command
            command: CubicTo command

        Returns:
            QuadTo commands ending at the cubic's end point
        """
        control1, control2, end = command.points
        cubic = CubicBezier(start, control1, control2, end)
        return [
            PathCommand.quad_to(quad.p1, quad.p2)
            for quad in approximate_cubic(cubic, self.tolerance, self.max_depth)
        ]
