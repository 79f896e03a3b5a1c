"""Winding normalization for even-odd icons.

TrueType rasterizers fill outlines with the non-zero winding rule. Icons
authored for the even-odd rule can draw holes in the same direction as
their outer shape, which would render as solid under non-zero. This
module rewrites contour directions so that nesting levels alternate:

- Level 0 (outermost) and every even level wind clockwise (filled)
- Odd levels wind counter-clockwise (holes)

Nesting is decided with bounding-box ordering and point-in-polygon tests
against the on-curve points of each contour.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from iconfont.core.geometry import (
    BoundingBox,
    bbox_area,
    bbox_center,
    bbox_contains,
    bounding_box,
    point_in_polygon,
    signed_area,
    winding_direction,
)
from iconfont.domain import (
    Contour,
    FillRule,
    PathCommand,
    Point,
    WindingDirection,
    join_contours,
    split_contours,
)


@dataclass(frozen=True)
class ContourInfo:
    """A contour with its derived measurements.

    Attributes:
        contour: The contour itself
        area: Signed area of its on-curve polygon
        bbox: Bounding box of its on-curve points
    """

    contour: Contour
    area: float
    bbox: BoundingBox

    @classmethod
    def measure(cls, contour: Contour) -> "ContourInfo":
        points = contour.endpoints
        return cls(contour=contour, area=signed_area(points), bbox=bounding_box(points))

    @property
    def center(self) -> Point:
        return bbox_center(self.bbox)

    @property
    def extent(self) -> float:
        return bbox_area(self.bbox)


def nesting_levels(infos: Sequence[ContourInfo]) -> list[int]:
    """Compute the nesting level of each contour.

    Contours must already be ordered by decreasing bounding-box area, so
    that any contour able to enclose another comes before it. The level of
    contour i is the number of earlier contours whose bounding box holds
    its center and whose polygon contains that center.

    Args:
        infos: Measured contours, largest first

    Returns:
        Nesting level per contour, parallel to infos
    """
    levels: list[int] = []

    for i, info in enumerate(infos):
        center = info.center
        level = 0
        for outer in infos[:i]:
            if bbox_contains(outer.bbox, center) and point_in_polygon(
                center, outer.contour.endpoints
            ):
                level += 1
        levels.append(level)

    return levels


def desired_direction(level: int) -> WindingDirection:
    """Direction a contour at the given nesting level must wind."""
    if level % 2 == 0:
        return WindingDirection.CLOCKWISE
    return WindingDirection.COUNTER_CLOCKWISE


class WindingNormalizer:
    """Rewrites even-odd paths so they render the same under non-zero.

    The normalizer is stateless and safe for use in parallel processing.

    Example:
        normalizer = WindingNormalizer()
        path = normalizer.normalize(icon_path, FillRule.EVEN_ODD)
    """

    def __init__(self, area_epsilon: float = 1e-9) -> None:
        """Initialize the normalizer.

        Args:
            area_epsilon: Contours whose absolute signed area does not exceed
                this value are degenerate and never reversed
        """
        self.area_epsilon = area_epsilon

    def normalize(
        self, path: Sequence[PathCommand], fill_rule: FillRule
    ) -> list[PathCommand]:
        """Normalize contour directions of a path.

        Non-zero paths and single-contour paths come back unchanged. For
        even-odd paths, contours are returned largest first, each wound
        according to its nesting level.

        Args:
            path: Drawing commands
            fill_rule: Fill rule the path was authored for

        Returns:
            Path that renders correctly under the non-zero rule
        """
        if fill_rule != FillRule.EVEN_ODD:
            return list(path)

        contours = split_contours(path)
        if len(contours) <= 1:
            return list(path)

        infos = [ContourInfo.measure(contour) for contour in contours]
        # sorted() is stable, so equal extents keep their drawing order
        infos = sorted(infos, key=lambda info: info.extent, reverse=True)
        levels = nesting_levels(infos)

        normalized = [
            self._orient(info, desired_direction(level))
            for info, level in zip(infos, levels)
        ]
        return join_contours(normalized)

    def _orient(self, info: ContourInfo, wanted: WindingDirection) -> Contour:
        """Reverse a contour if it winds the wrong way.

        Args:
            info: Measured contour
            wanted: Required direction

        Returns:
            The original contour, or its reversal
        """
        actual = winding_direction(info.contour.endpoints, self.area_epsilon)
        if actual is None or actual == wanted:
            return info.contour
        return info.contour.reversed()


def normalize_winding(
    path: Sequence[PathCommand],
    fill_rule: FillRule,
    area_epsilon: float = 1e-9,
) -> list[PathCommand]:
    """Normalize contour directions with a default WindingNormalizer.

    Args:
        path: Drawing commands
        fill_rule: Fill rule the path was authored for
        area_epsilon: Degenerate area threshold

    Returns:
        Normalized path
    """
    return WindingNormalizer(area_epsilon=area_epsilon).normalize(path, fill_rule)
