"""iconfont - Build TrueType icon fonts from SVG icons.

iconfont is a CLI tool that reads a directory of standalone SVG icons and
packs them into a single TrueType font. Every icon becomes a glyph mapped to a
Private Use Area codepoint (starting at U+E000), so icons can be rendered as
plain text.

Example:
    $ iconfont generate ./icons -o ./output -n "My Icons"

This will create output/my_icons.ttf with one glyph per SVG file.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
