"""Finished font document.

The FontDocument is the single output of the core pipeline: the binary
font plus the few font-wide values fixed while it was assembled.
"""

from dataclasses import dataclass, field
from enum import Enum


class LocaFormat(Enum):
    """Offset width of the loca table, as stored in head.indexToLocFormat."""

    SHORT = 0
    LONG = 1


@dataclass(frozen=True)
class FontDocument:
    """A serialized TrueType font.

    Attributes:
        data: Complete font file
        tables: Raw table payloads keyed by tag, in file data order
        units_per_em: Em size of the font
        glyph_count: Number of glyphs including the missing glyph
        loca_format: Offset width selected for the loca table
    """

    data: bytes
    tables: dict[str, bytes] = field(repr=False)
    units_per_em: int
    glyph_count: int
    loca_format: LocaFormat

    @property
    def table_order(self) -> tuple[str, ...]:
        """Tags in the order their data appears in the file."""
        return tuple(self.tables)

    def to_bytes(self) -> bytes:
        """Return the font file contents."""
        return self.data

    def __len__(self) -> int:
        return len(self.data)
