"""Shared fixtures and builders for iconfont tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from iconfont.domain import FillRule, Icon, PathCommand, Point


def rect(
    x0: float, y0: float, x1: float, y1: float, reverse: bool = False
) -> list[PathCommand]:
    """Closed rectangle contour.

    Visits (x0, y0) -> (x1, y0) -> (x1, y1) -> (x0, y1), which is
    counter-clockwise with the y axis up. reverse=True walks the other way.
    """
    corners = [Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)]
    if reverse:
        corners = [corners[0], *reversed(corners[1:])]
    commands = [PathCommand.move_to(corners[0])]
    commands.extend(PathCommand.line_to(p) for p in corners[1:])
    commands.append(PathCommand.close())
    return commands


def make_icon(
    name: str,
    path: list[PathCommand],
    codepoint: int = 0xE000,
    fill_rule: FillRule = FillRule.NON_ZERO,
    width: float = 100.0,
    height: float = 100.0,
) -> Icon:
    return Icon(
        name=name,
        path=tuple(path),
        width=width,
        height=height,
        fill_rule=fill_rule,
        codepoint=codepoint,
        filename=name.replace("_", "-"),
    )


SQUARE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M10 10 L90 10 L90 90 L10 90 Z"/>
</svg>
"""

RING_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path fill-rule="evenodd" d="M0 0 L100 0 L100 100 L0 100 Z M25 25 L75 25 L75 75 L25 75 Z"/>
</svg>
"""

CURVE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="24px" height="24px">
  <path d="M2 12 C2 2 22 2 22 12 L22 22 L2 22 Z"/>
</svg>
"""


@pytest.fixture
def square_icon() -> Icon:
    """Single axis-aligned square, non-zero fill, 100x100 viewport."""
    return make_icon("square", rect(10, 10, 90, 90))


@pytest.fixture
def ring_icon() -> Icon:
    """Even-odd ring: outer square and inner square drawn the same way."""
    return make_icon(
        "ring",
        rect(0, 0, 100, 100) + rect(25, 25, 75, 75),
        fill_rule=FillRule.EVEN_ODD,
    )


@pytest.fixture
def write_svg(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write an SVG document into tmp_path/icons and return its path."""
    icons_dir = tmp_path / "icons"
    icons_dir.mkdir(exist_ok=True)

    def _write(filename: str, content: str) -> Path:
        path = icons_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def icons_dir(write_svg: Callable[[str, str], Path]) -> Path:
    """Directory with three valid icons."""
    write_svg("square.svg", SQUARE_SVG)
    write_svg("ring-outline.svg", RING_SVG)
    return write_svg("arrowDown-filled.svg", CURVE_SVG).parent


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    """Remove handlers configure_logging attached to the root logger."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_iconfont", False):
            root.removeHandler(handler)
            handler.close()
