"""Icon input and glyph outline models.

This module defines the two records that travel through the pipeline:
the Icon handed over by the reader and the GlyphOutline produced for it.
"""

from dataclasses import dataclass, field
from typing import Any

from iconfont.domain.contour import Contour, split_contours
from iconfont.domain.path import (
    CommandType,
    FillRule,
    PathCommand,
    path_from_dicts,
    path_to_dicts,
)


@dataclass(frozen=True)
class Icon:
    """A parsed icon, ready to become a glyph.

    Attributes:
        name: Identifier derived from the file name (e.g. "arrow_down")
        path: Drawing commands in source (SVG user space) coordinates
        width: Viewport width in source units
        height: Viewport height in source units
        fill_rule: Fill rule declared by the source
        codepoint: Codepoint the glyph is mapped to
        filename: Source file stem, kept for manifests
    """

    name: str
    path: tuple[PathCommand, ...]
    width: float
    height: float
    fill_rule: FillRule = FillRule.NON_ZERO
    codepoint: int = 0xE000
    filename: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the icon
        """
        return {
            "name": self.name,
            "path": path_to_dicts(self.path),
            "width": self.width,
            "height": self.height,
            "fill_rule": self.fill_rule.value,
            "codepoint": self.codepoint,
            "filename": self.filename,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Icon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an icon

        Returns:
            Icon instance
        """
        return cls(
            name=data["name"],
            path=tuple(path_from_dicts(data["path"])),
            width=data["width"],
            height=data["height"],
            fill_rule=FillRule(data["fill_rule"]),
            codepoint=data["codepoint"],
            filename=data.get("filename", ""),
        )


_OUTLINE_COMMANDS = frozenset(
    {CommandType.MOVE_TO, CommandType.LINE_TO, CommandType.QUAD_TO, CommandType.CLOSE}
)


@dataclass(frozen=True)
class GlyphOutline:
    """A TrueType-ready outline in font units.

    Only MoveTo, LineTo, QuadTo and Close are allowed; cubic curves must
    have been approximated before the outline is created.

    Attributes:
        commands: Drawing commands in font units
    """

    commands: tuple[PathCommand, ...] = field(default=())

    def __post_init__(self) -> None:
        for cmd in self.commands:
            if cmd.kind not in _OUTLINE_COMMANDS:
                raise ValueError(f"Glyph outlines cannot contain {cmd.kind.name}")

    @classmethod
    def empty(cls) -> "GlyphOutline":
        """The outline of the missing glyph: no contours at all."""
        return cls()

    def is_empty(self) -> bool:
        """Check if the outline has no drawing commands."""
        return len(self.commands) == 0

    def contours(self) -> list[Contour]:
        """Split the outline into its contours.

        Returns:
            One Contour per MoveTo
        """
        return split_contours(self.commands)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"commands": path_to_dicts(self.commands)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphOutline":
        """Deserialize from dictionary."""
        return cls(commands=tuple(path_from_dicts(data["commands"])))
