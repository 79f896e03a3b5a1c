"""Tests for domain models to verify they work correctly."""

import pytest
from conftest import rect

from iconfont.domain import (
    CommandType,
    Contour,
    FillRule,
    FontDocument,
    GlyphOutline,
    Icon,
    LocaFormat,
    PathCommand,
    Point,
    join_contours,
    path_from_dicts,
    path_to_dicts,
    split_contours,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_midpoint(self) -> None:
        """Test midpoint between two points."""
        assert Point(0, 0).midpoint(Point(10, 20)) == Point(5, 10)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test that equal points hash equally."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


class TestPathCommand:
    """Tests for PathCommand class."""

    def test_constructors(self) -> None:
        """Test the per-kind constructors."""
        a, b, c = Point(0, 0), Point(1, 1), Point(2, 0)
        assert PathCommand.move_to(a).kind == CommandType.MOVE_TO
        assert PathCommand.line_to(a).points == (a,)
        assert PathCommand.quad_to(a, b).points == (a, b)
        assert PathCommand.cubic_to(a, b, c).points == (a, b, c)
        assert PathCommand.close().points == ()

    def test_wrong_point_count_rejected(self) -> None:
        """Test that each kind enforces its number of points."""
        with pytest.raises(ValueError, match="QUAD_TO takes 2"):
            PathCommand(CommandType.QUAD_TO, (Point(0, 0),))
        with pytest.raises(ValueError):
            PathCommand(CommandType.CLOSE, (Point(0, 0),))

    def test_end_and_control_points(self) -> None:
        """Test end point and control point accessors."""
        cmd = PathCommand.cubic_to(Point(1, 1), Point(2, 2), Point(3, 0))
        assert cmd.end_point == Point(3, 0)
        assert cmd.control_points == (Point(1, 1), Point(2, 2))
        assert PathCommand.close().end_point is None

    def test_map_points(self) -> None:
        """Test mapping a function over every point."""
        cmd = PathCommand.quad_to(Point(1, 2), Point(3, 4))
        doubled = cmd.map_points(lambda p: Point(p.x * 2, p.y * 2))
        assert doubled == PathCommand.quad_to(Point(2, 4), Point(6, 8))
        assert cmd.points == (Point(1, 2), Point(3, 4))

    def test_path_serialization(self) -> None:
        """Test path serialization and deserialization."""
        path = rect(0, 0, 10, 10) + [
            PathCommand.move_to(Point(0, 0)),
            PathCommand.cubic_to(Point(1, 5), Point(9, 5), Point(10, 0)),
        ]
        assert path_from_dicts(path_to_dicts(path)) == path


class TestContour:
    """Tests for Contour class."""

    def test_endpoints_skip_close_and_controls(self) -> None:
        """Test that endpoints only holds on-curve points."""
        contour = Contour(
            commands=[
                PathCommand.move_to(Point(0, 0)),
                PathCommand.quad_to(Point(5, 10), Point(10, 0)),
                PathCommand.close(),
            ]
        )
        assert contour.endpoints == [Point(0, 0), Point(10, 0)]
        assert contour.is_closed

    def test_reversed_polygon(self) -> None:
        """Test reversing a closed polygon."""
        contour = Contour(commands=rect(0, 0, 10, 10))
        rev = contour.reversed()

        assert rev.commands[0] == PathCommand.move_to(Point(0, 10))
        assert rev.endpoints == [Point(0, 10), Point(10, 10), Point(10, 0), Point(0, 0)]
        assert rev.is_closed

    def test_reversed_swaps_control_points(self) -> None:
        """Test that curve controls are swapped and segments end at old starts."""
        contour = Contour(
            commands=[
                PathCommand.move_to(Point(0, 0)),
                PathCommand.cubic_to(Point(1, 5), Point(9, 5), Point(10, 0)),
                PathCommand.quad_to(Point(5, -5), Point(0, 0)),
            ]
        )
        rev = contour.reversed()

        assert rev.commands == [
            PathCommand.move_to(Point(0, 0)),
            PathCommand.quad_to(Point(5, -5), Point(10, 0)),
            PathCommand.cubic_to(Point(9, 5), Point(1, 5), Point(0, 0)),
        ]
        assert not rev.is_closed

    def test_reversed_twice_is_identity(self) -> None:
        """Test that reversing twice restores the original commands."""
        contour = Contour(commands=rect(3, 4, 20, 30))
        assert contour.reversed().reversed().commands == contour.commands

    def test_reversed_degenerate(self) -> None:
        """Test that a lone MoveTo is returned unchanged."""
        contour = Contour(commands=[PathCommand.move_to(Point(1, 1))])
        assert contour.reversed().commands == contour.commands

    def test_split_and_join(self) -> None:
        """Test splitting a path at MoveTo commands and joining it back."""
        path = rect(0, 0, 10, 10) + rect(2, 2, 8, 8)
        contours = split_contours(path)

        assert len(contours) == 2
        assert contours[1].commands[0] == PathCommand.move_to(Point(2, 2))
        assert join_contours(contours) == path

    def test_split_keeps_leading_commands(self) -> None:
        """Test that commands before the first MoveTo are not dropped."""
        path = [PathCommand.line_to(Point(1, 1))] + rect(0, 0, 10, 10)
        contours = split_contours(path)
        assert len(contours) == 2
        assert contours[0].commands == [PathCommand.line_to(Point(1, 1))]


class TestIcon:
    """Tests for Icon class."""

    def test_icon_serialization(self) -> None:
        """Test icon serialization and deserialization."""
        icon = Icon(
            name="arrow_down",
            path=tuple(rect(0, 0, 24, 24)),
            width=24.0,
            height=24.0,
            fill_rule=FillRule.EVEN_ODD,
            codepoint=0xE005,
            filename="arrow-down",
        )
        assert Icon.from_dict(icon.to_dict()) == icon

    def test_icon_immutable(self) -> None:
        """Test that icon is immutable."""
        icon = Icon(name="a", path=(), width=1.0, height=1.0)
        with pytest.raises(AttributeError):
            icon.codepoint = 0xE001  # type: ignore


class TestGlyphOutline:
    """Tests for GlyphOutline class."""

    def test_rejects_cubic(self) -> None:
        """Test that cubic curves cannot enter an outline."""
        with pytest.raises(ValueError, match="CUBIC_TO"):
            GlyphOutline(
                commands=(
                    PathCommand.move_to(Point(0, 0)),
                    PathCommand.cubic_to(Point(1, 1), Point(2, 1), Point(3, 0)),
                )
            )

    def test_empty(self) -> None:
        """Test the missing glyph outline."""
        outline = GlyphOutline.empty()
        assert outline.is_empty()
        assert outline.contours() == []

    def test_contours_and_serialization(self) -> None:
        """Test contour splitting and serialization round trip."""
        outline = GlyphOutline(commands=tuple(rect(0, 0, 10, 10) + rect(2, 2, 8, 8)))
        assert len(outline.contours()) == 2
        assert GlyphOutline.from_dict(outline.to_dict()) == outline


class TestFontDocument:
    """Tests for FontDocument class."""

    def test_table_order_and_bytes(self) -> None:
        """Test table order property and byte access."""
        doc = FontDocument(
            data=b"\x00\x01\x00\x00",
            tables={"head": b"h", "hhea": b"hh", "glyf": b""},
            units_per_em=1000,
            glyph_count=1,
            loca_format=LocaFormat.SHORT,
        )
        assert doc.table_order == ("head", "hhea", "glyf")
        assert doc.to_bytes() == b"\x00\x01\x00\x00"
        assert len(doc) == 4
        assert LocaFormat(1) is LocaFormat.LONG
