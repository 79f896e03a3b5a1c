"""Geometric operations for contour classification.

This module provides the mathematical utilities behind winding
normalization:
- Signed area calculation (shoelace formula)
- Point-in-polygon testing (ray casting algorithm)
- Bounding box helpers

All functions are pure, stateless, and safe for use in worker processes.
Polygons are the on-curve points of a contour; curve control points are
not taken into account.
"""

from collections.abc import Sequence

from iconfont.domain import Point, WindingDirection

BoundingBox = tuple[float, float, float, float]


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # CCW square
        1.0
        >>> signed_area([p1, p4, p3, p2])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def winding_direction(
    points: Sequence[Point], epsilon: float = 0.0
) -> WindingDirection | None:
    """Classify the winding direction of a polygon.

    Args:
        points: Polygon boundary
        epsilon: Areas with an absolute value up to epsilon count as degenerate

    Returns:
        Winding direction, or None when the polygon has no usable area
    """
    area = signed_area(points)
    if abs(area) <= epsilon:
        return None
    if area < 0:
        return WindingDirection.CLOCKWISE
    return WindingDirection.COUNTER_CLOCKWISE


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)  # Center
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)  # Outside
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def bounding_box(points: Sequence[Point]) -> BoundingBox:
    """Calculate the bounding box of a set of points.

    Args:
        points: Points to enclose

    Returns:
        Tuple of (min_x, min_y, max_x, max_y); all zeros for no points
    """
    if not points:
        return (0.0, 0.0, 0.0, 0.0)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


def bbox_area(bbox: BoundingBox) -> float:
    """Area of a bounding box."""
    min_x, min_y, max_x, max_y = bbox
    return (max_x - min_x) * (max_y - min_y)


def bbox_center(bbox: BoundingBox) -> Point:
    """Midpoint of a bounding box."""
    min_x, min_y, max_x, max_y = bbox
    return Point((min_x + max_x) / 2, (min_y + max_y) / 2)


def bbox_contains(bbox: BoundingBox, point: Point) -> bool:
    """Check whether a point lies inside a bounding box (edges included)."""
    min_x, min_y, max_x, max_y = bbox
    return min_x <= point.x <= max_x and min_y <= point.y <= max_y
