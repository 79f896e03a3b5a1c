"""Icon I/O layer for iconfont.

This module handles reading SVG icons and writing the generated font
and its companion files. fontTools pens are the bridge between SVG
drawing commands, domain paths and TrueType glyphs.

Key responsibilities:
- Load SVG icons and assign codepoints
- Convert pen recordings to domain paths
- Convert glyph outlines to TrueType glyphs
- Write the font, manifest and preview page

Key classes:
- IconReader: Load icons from a directory
- OutputWriter: Save the font and companion files
"""

from iconfont.io.converter import outline_to_ttglyph, recording_to_path
from iconfont.io.reader import IconReader, filename_to_identifier
from iconfont.io.writer import Manifest, ManifestEntry, OutputWriter

__all__ = [
    "IconReader",
    "Manifest",
    "ManifestEntry",
    "OutputWriter",
    "filename_to_identifier",
    "outline_to_ttglyph",
    "recording_to_path",
]
