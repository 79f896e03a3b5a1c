"""Font table assembly.

This module lays out every table of the output font from the glyph
outlines and serializes them into a FontDocument. fontTools'
FontBuilder does the table construction; the assembler fixes the
values it must not derive on its own:

- head timestamps (zero, so output bytes are reproducible)
- hmtx keeps one long metric per glyph
- table data is written in a fixed order
"""

import struct
from collections.abc import Sequence
from io import BytesIO

import structlog
from fontTools.fontBuilder import FontBuilder
from fontTools.ttLib import TTLibError
from fontTools.ttLib.sfnt import SFNTReader
from fontTools.ttLib.tables._h_m_t_x import table__h_m_t_x
from fontTools.ttLib.ttFont import reorderFontTables

from iconfont.config import IconFontSettings, get_default_settings
from iconfont.domain import FontDocument, GlyphOutline, Icon, LocaFormat
from iconfont.exceptions import EncodingOverflowError, FontAssemblyError
from iconfont.io.converter import outline_to_ttglyph

logger = structlog.get_logger(__name__)

TABLE_ORDER: tuple[str, ...] = (
    "head",
    "hhea",
    "maxp",
    "OS/2",
    "hmtx",
    "cmap",
    "name",
    "post",
    "loca",
    "glyf",
)

MAX_GLYPHS = 0xFFFF
NOTDEF = ".notdef"

# ulUnicodeRange bit 60: Private Use Area (plane 0)
PRIVATE_USE_RANGE_BIT = 60


def is_unicode_scalar(codepoint: int) -> bool:
    """True for 0..0x10FFFF excluding the surrogate block."""
    return 0 <= codepoint <= 0x10FFFF and not 0xD800 <= codepoint <= 0xDFFF


def glyph_order(icons: Sequence[Icon]) -> list[str]:
    """Glyph names in glyph index order.

    Index 0 is .notdef. Repeated icon names get .1, .2 ... suffixes so
    every glyph name is unique.

    Args:
        icons: Icons in caller order

    Returns:
        List of len(icons) + 1 unique names
    """
    order = [NOTDEF]
    seen = {NOTDEF}

    for index, icon in enumerate(icons, start=1):
        base = icon.name or f"glyph{index:05d}"
        name = base
        suffix = 0
        while name in seen:
            suffix += 1
            name = f"{base}.{suffix}"
        seen.add(name)
        order.append(name)

    return order


class FullHorizontalMetrics(table__h_m_t_x):
    """hmtx table that writes a long metric for every glyph.

    The stock table drops trailing advances equal to the last one; this
    one keeps them all and sets hhea.numberOfHMetrics to the glyph count.
    """

    def __init__(self) -> None:
        super().__init__("hmtx")

    def compile(self, ttFont):
        order = ttFont.getGlyphOrder()
        ttFont["hhea"].numberOfHMetrics = len(order)
        return b"".join(
            struct.pack(">Hh", *self.metrics[name]) for name in order
        )


class FontAssembler:
    """Builds and serializes the font tables.

    Example:
        assembler = FontAssembler(settings)
        document = assembler.assemble(outlines, icons, "My Icons")
    """

    def __init__(self, settings: IconFontSettings | None = None) -> None:
        if settings is None:
            settings = get_default_settings()
        self.metrics = settings.metrics
        self.naming = settings.naming

    def assemble(
        self,
        outlines: Sequence[GlyphOutline],
        icons: Sequence[Icon],
        family_name: str,
    ) -> FontDocument:
        """Assemble a complete font.

        Args:
            outlines: Missing glyph outline followed by one outline per icon
            icons: Icons in glyph order (glyph i + 1 is icons[i])
            family_name: Font family name

        Returns:
            Serialized font document

        Raises:
            EncodingOverflowError: If a value does not fit its table field
            FontAssemblyError: If the tables cannot be built
        """
        if len(outlines) != len(icons) + 1:
            raise FontAssemblyError(
                f"expected {len(icons) + 1} outlines, got {len(outlines)}"
            )
        if len(outlines) > MAX_GLYPHS:
            raise EncodingOverflowError(
                f"{len(outlines)} glyphs exceed the limit of {MAX_GLYPHS}"
            )
        if not family_name.strip():
            raise FontAssemblyError("family name must not be empty")

        try:
            builder = self._build(outlines, icons, family_name)
            data = self._serialize(builder)
        except OverflowError as e:
            raise EncodingOverflowError(str(e)) from e
        except (struct.error, TTLibError, ValueError) as e:
            raise FontAssemblyError(str(e)) from e

        loca_format = LocaFormat(builder.font["head"].indexToLocFormat)
        document = FontDocument(
            data=data,
            tables=self._read_tables(data),
            units_per_em=self.metrics.units_per_em,
            glyph_count=len(outlines),
            loca_format=loca_format,
        )

        logger.debug(
            "font_assembled",
            family=family_name,
            glyphs=document.glyph_count,
            size_bytes=len(data),
            loca_format=loca_format.name,
        )
        return document

    def _build(
        self,
        outlines: Sequence[GlyphOutline],
        icons: Sequence[Icon],
        family_name: str,
    ) -> FontBuilder:
        metrics = self.metrics
        upem = metrics.units_per_em
        names = glyph_order(icons)

        builder = FontBuilder(unitsPerEm=upem, isTTF=True)
        builder.updateHead(
            created=0,
            modified=0,
            fontRevision=1.0,
            lowestRecPPEM=metrics.lowest_rec_ppem,
        )
        builder.setupGlyphOrder(names)
        builder.setupCharacterMap(
            {
                icon.codepoint: name
                for icon, name in zip(icons, names[1:])
                if is_unicode_scalar(icon.codepoint)
            },
            allowFallback=True,
        )
        builder.setupGlyf(
            {name: outline_to_ttglyph(outline) for name, outline in zip(names, outlines)}
        )

        hmtx = FullHorizontalMetrics()
        hmtx.metrics = {name: (upem, 0) for name in names}
        builder.font["hmtx"] = hmtx

        builder.setupHorizontalHeader(
            ascent=metrics.ascender,
            descent=metrics.descender,
            lineGap=metrics.line_gap,
            advanceWidthMax=upem,
        )
        builder.setupNameTable(
            {
                "copyright": self.naming.copyright,
                "familyName": family_name,
                "styleName": self.naming.style_name,
                "uniqueFontIdentifier": f"{self.naming.unique_id_prefix}: {family_name}",
                "fullName": family_name,
                "version": self.naming.version,
                "psName": family_name.replace(" ", ""),
            },
            mac=False,
        )
        builder.setupOS2(
            version=3,
            xAvgCharWidth=upem,
            usWeightClass=metrics.weight_class,
            usWidthClass=metrics.width_class,
            fsType=0,
            ySubscriptXSize=metrics.subscript_x_size,
            ySubscriptYSize=metrics.subscript_y_size,
            ySubscriptXOffset=metrics.subscript_x_offset,
            ySubscriptYOffset=metrics.subscript_y_offset,
            ySuperscriptXSize=metrics.superscript_x_size,
            ySuperscriptYSize=metrics.superscript_y_size,
            ySuperscriptXOffset=metrics.superscript_x_offset,
            ySuperscriptYOffset=metrics.superscript_y_offset,
            yStrikeoutSize=metrics.strikeout_size,
            yStrikeoutPosition=metrics.strikeout_position,
            ulUnicodeRange1=0,
            ulUnicodeRange2=1 << (PRIVATE_USE_RANGE_BIT - 32),
            ulUnicodeRange3=0,
            ulUnicodeRange4=0,
            sTypoAscender=metrics.ascender,
            sTypoDescender=metrics.descender,
            sTypoLineGap=metrics.line_gap,
            usWinAscent=metrics.win_ascent,
            usWinDescent=metrics.win_descent,
            ulCodePageRange1=1,
            ulCodePageRange2=0,
            sxHeight=metrics.x_height,
            sCapHeight=metrics.cap_height,
            usDefaultChar=metrics.default_char,
            usBreakChar=metrics.break_char,
            usMaxContext=0,
        )
        builder.setupPost(keepGlyphNames=False)
        return builder

    @staticmethod
    def _serialize(builder: FontBuilder) -> bytes:
        """Compile all tables and lay their data out in TABLE_ORDER."""
        compiled = BytesIO()
        builder.font.save(compiled, reorderTables=False)

        ordered = BytesIO()
        reorderFontTables(compiled, ordered, tableOrder=list(TABLE_ORDER))
        return ordered.getvalue()

    @staticmethod
    def _read_tables(data: bytes) -> dict[str, bytes]:
        """Raw table payloads keyed by tag, in file data order."""
        reader = SFNTReader(BytesIO(data))
        tags = sorted(reader.tables, key=lambda tag: reader.tables[tag].offset)
        return {str(tag): reader[tag] for tag in tags}
