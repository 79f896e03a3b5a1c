"""Tests for glyph outline construction."""

import math

import pytest
from conftest import make_icon, rect

from iconfont.config import GeometryConfig, IconFontSettings, MetricsConfig
from iconfont.core.geometry import signed_area
from iconfont.core.outline import GlyphOutlineBuilder, check_path_structure, font_transform
from iconfont.domain import CommandType, GlyphOutline, Icon, PathCommand, Point
from iconfont.exceptions import InvalidIconError, OutlineBuildError


class TestFontTransform:
    """Tests for the icon to font space transform."""

    def test_square_viewport(self) -> None:
        t = font_transform(100, 100, 1000)
        assert t.transformPoint((0, 0)) == (0, 1000)
        assert t.transformPoint((100, 100)) == (1000, 0)

    def test_wide_viewport_scales_by_longer_side(self) -> None:
        t = font_transform(200, 100, 1000)
        assert t.transformPoint((200, 0)) == (1000, 500)
        assert t.transformPoint((0, 100)) == (0, 0)


class TestCheckPathStructure:
    """Tests for path validation."""

    def test_valid(self) -> None:
        check_path_structure("ok", rect(0, 0, 1, 1) + rect(2, 2, 3, 3))

    def test_missing_move_to(self) -> None:
        with pytest.raises(OutlineBuildError, match="no open contour"):
            check_path_structure("bad", [PathCommand.line_to(Point(1, 1))])

    def test_draw_after_close(self) -> None:
        path = rect(0, 0, 1, 1) + [PathCommand.line_to(Point(5, 5))]
        with pytest.raises(OutlineBuildError):
            check_path_structure("bad", path)

    def test_non_finite(self) -> None:
        path = [PathCommand.move_to(Point(math.nan, 0))]
        with pytest.raises(OutlineBuildError, match="non-finite"):
            check_path_structure("bad", path)


class TestGlyphOutlineBuilder:
    """Tests for GlyphOutlineBuilder."""

    def test_square(self, square_icon: Icon) -> None:
        outline = GlyphOutlineBuilder().build(square_icon)

        assert outline.commands == (
            PathCommand.move_to(Point(100, 900)),
            PathCommand.line_to(Point(900, 900)),
            PathCommand.line_to(Point(900, 100)),
            PathCommand.line_to(Point(100, 100)),
            PathCommand.close(),
        )

    def test_y_flip_makes_outer_clockwise(self, square_icon: Icon) -> None:
        """A counter-clockwise source contour winds clockwise in font space."""
        outline = GlyphOutlineBuilder().build(square_icon)
        assert signed_area(outline.contours()[0].endpoints) < 0

    def test_even_odd_ring(self, ring_icon: Icon) -> None:
        outline = GlyphOutlineBuilder().build(ring_icon)
        outer, inner = outline.contours()

        assert signed_area(outer.endpoints) < 0
        assert signed_area(inner.endpoints) > 0

    def test_cubics_replaced(self) -> None:
        icon = make_icon(
            "curve",
            [
                PathCommand.move_to(Point(2, 12)),
                PathCommand.cubic_to(Point(2, 2), Point(22, 2), Point(22, 12)),
                PathCommand.close(),
            ],
            width=24,
            height=24,
        )
        outline = GlyphOutlineBuilder().build(icon)
        kinds = {cmd.kind for cmd in outline.commands}

        assert CommandType.CUBIC_TO not in kinds
        assert CommandType.QUAD_TO in kinds
        end = outline.commands[-2].end_point
        assert end is not None
        assert end.x == pytest.approx(22 * 1000 / 24)
        assert end.y == pytest.approx(500)

    def test_tolerance_from_settings(self) -> None:
        path = [
            PathCommand.move_to(Point(0, 50)),
            PathCommand.cubic_to(Point(0, 0), Point(100, 0), Point(100, 50)),
            PathCommand.close(),
        ]
        icon = make_icon("arc", path)
        coarse = GlyphOutlineBuilder(
            IconFontSettings(geometry=GeometryConfig(curve_tolerance=50.0))
        ).build(icon)
        fine = GlyphOutlineBuilder(
            IconFontSettings(geometry=GeometryConfig(curve_tolerance=0.1))
        ).build(icon)

        assert len(fine.commands) > len(coarse.commands)

    def test_units_per_em_from_settings(self, square_icon: Icon) -> None:
        settings = IconFontSettings(metrics=MetricsConfig(units_per_em=2048))
        outline = GlyphOutlineBuilder(settings).build(square_icon)
        start = outline.commands[0].points[0]
        assert start.x == pytest.approx(204.8)
        assert start.y == pytest.approx(1843.2)

    def test_empty_path(self) -> None:
        outline = GlyphOutlineBuilder().build(make_icon("blank", []))
        assert outline.is_empty()

    @pytest.mark.parametrize(("width", "height"), [(0, 100), (100, -1), (math.inf, 100)])
    def test_invalid_viewport(self, width: float, height: float) -> None:
        icon = make_icon("bad", rect(0, 0, 1, 1), width=width, height=height)
        with pytest.raises(InvalidIconError):
            GlyphOutlineBuilder().build(icon)

    def test_malformed_path(self) -> None:
        icon = make_icon("bad", [PathCommand.line_to(Point(1, 1))])
        with pytest.raises(OutlineBuildError):
            GlyphOutlineBuilder().build(icon)

    def test_missing_glyph(self) -> None:
        assert GlyphOutlineBuilder.missing_glyph() == GlyphOutline.empty()
