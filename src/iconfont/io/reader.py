"""SVG icon reader.

This module provides the IconReader class for loading a directory of
SVG files into Icon domain models, using fontTools.svgLib to walk the
path and basic shape elements.
"""

import re
from pathlib import Path

import structlog
from fontTools.misc import etree
from fontTools.misc.transform import Transform
from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path import SVGPath

from iconfont.config import PRIVATE_USE_AREA_START
from iconfont.domain import FillRule, Icon
from iconfont.exceptions import IconLoadError
from iconfont.io.converter import recording_to_path

logger = structlog.get_logger(__name__)

DEFAULT_VIEWPORT = (100.0, 100.0)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_FILL_RULE_STYLE_RE = re.compile(r"(?:^|;)\s*fill-rule\s*:\s*evenodd\s*(?:;|$)")


def filename_to_identifier(filename: str) -> str:
    """Convert a file stem to a snake_case identifier.

    Style suffixes are folded in first, so "arrowDown-filled" becomes
    "arrow_down_filled". Identifiers that would start with a digit (or
    be empty) are prefixed with "icon_".

    Args:
        filename: File name without extension

    Returns:
        Identifier usable as a glyph and code symbol name
    """
    name = (
        filename.replace("-filled", "Filled")
        .replace("-stroke", "Stroke")
        .replace("-outline", "Outline")
    )

    chars: list[str] = []
    prev_lower = False
    for c in name:
        if c in "- ":
            chars.append("_")
            prev_lower = False
        elif c.isupper() and prev_lower:
            chars.append("_")
            chars.append(c.lower())
            prev_lower = False
        else:
            chars.append(c.lower() if c.isascii() else c)
            prev_lower = c.islower()

    result = "".join(chars)
    if not result or result[0].isnumeric():
        result = f"icon_{result}"
    return result


def parse_length(value: str | None) -> float | None:
    """Leading number of an SVG length ("24px" -> 24.0), or None."""
    if value is None:
        return None
    match = _NUMBER_RE.match(value.strip())
    if not match:
        return None
    return float(match.group())


def parse_view_box(value: str | None) -> tuple[float, float, float, float] | None:
    """Parse a viewBox attribute into (min_x, min_y, width, height)."""
    if value is None:
        return None
    numbers = _NUMBER_RE.findall(value)
    if len(numbers) != 4:
        return None
    min_x, min_y, width, height = (float(n) for n in numbers)
    return min_x, min_y, width, height


def detect_fill_rule(root) -> FillRule:
    """EVEN_ODD if any element declares fill-rule evenodd.

    Both the presentation attribute and inline style declarations count.
    """
    for el in root.iter():
        if not isinstance(el.tag, str):
            continue
        if el.get("fill-rule", "").strip() == "evenodd":
            return FillRule.EVEN_ODD
        style = el.get("style")
        if style and _FILL_RULE_STYLE_RE.search(style):
            return FillRule.EVEN_ODD
    return FillRule.NON_ZERO


class IconReader:
    """Loads SVG icons from a directory.

    Only files directly inside the directory are read, in file name
    order. Codepoints are assigned consecutively to the files that parse.

    Example:
        reader = IconReader(Path("icons"))
        for icon in reader.read_all():
            print(icon.name, hex(icon.codepoint))
    """

    def __init__(
        self, directory: Path, codepoint_start: int = PRIVATE_USE_AREA_START
    ) -> None:
        """Initialize the icon reader.

        Args:
            directory: Directory holding .svg files
            codepoint_start: Codepoint of the first icon
        """
        self._directory = directory
        self._codepoint_start = codepoint_start
        self.failures: list[IconLoadError] = []

    def svg_files(self) -> list[Path]:
        """SVG files directly inside the directory, sorted by file name.

        Raises:
            FileNotFoundError: If the directory does not exist
        """
        if not self._directory.is_dir():
            raise FileNotFoundError(f"Icon directory not found: {self._directory}")

        files = [
            p for p in self._directory.iterdir() if p.suffix == ".svg" and p.is_file()
        ]
        return sorted(files, key=lambda p: p.name)

    def read_all(self) -> list[Icon]:
        """Read every icon in the directory.

        Files that fail to parse are logged, recorded in ``failures`` and
        skipped without consuming a codepoint.

        Returns:
            Icons in file name order
        """
        icons: list[Icon] = []
        self.failures = []
        codepoint = self._codepoint_start

        for path in self.svg_files():
            try:
                icon = self.read_icon(path, codepoint)
            except IconLoadError as e:
                logger.warning("icon_skipped", path=str(path), reason=e.reason)
                self.failures.append(e)
                continue

            logger.debug(
                "icon_parsed",
                filename=icon.filename,
                codepoint=f"U+{icon.codepoint:04X}",
            )
            icons.append(icon)
            codepoint += 1

        return icons

    def read_icon(self, path: Path, codepoint: int) -> Icon:
        """Read a single SVG file.

        Args:
            path: SVG file
            codepoint: Codepoint to assign

        Returns:
            Icon with its path in viewport coordinates

        Raises:
            IconLoadError: If the file cannot be read or parsed
        """
        try:
            svg = SVGPath(str(path))
        except OSError as e:
            raise IconLoadError(str(path), f"cannot read file: {e}") from e
        except etree.ParseError as e:
            raise IconLoadError(str(path), f"invalid XML: {e}") from e

        root = svg.root
        view_box = parse_view_box(root.get("viewBox"))
        if view_box is not None:
            min_x, min_y, width, height = view_box
        else:
            min_x = min_y = 0.0
            width = parse_length(root.get("width")) or DEFAULT_VIEWPORT[0]
            height = parse_length(root.get("height")) or DEFAULT_VIEWPORT[1]

        if min_x or min_y:
            svg.transform = Transform().translate(-min_x, -min_y)

        pen = RecordingPen()
        try:
            svg.draw(pen)
            commands = recording_to_path(pen.value)
        except NotImplementedError as e:
            raise IconLoadError(str(path), "unsupported transform") from e
        except ValueError as e:
            raise IconLoadError(str(path), str(e)) from e

        return Icon(
            name=filename_to_identifier(path.stem),
            path=tuple(commands),
            width=width,
            height=height,
            fill_rule=detect_fill_rule(root),
            codepoint=codepoint,
            filename=path.stem,
        )
