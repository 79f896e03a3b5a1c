"""Output writer for generated fonts.

This module provides the OutputWriter class, which persists the font
buffer together with its optional companions: a JSON manifest mapping
icon names to codepoints and a self-contained HTML preview page.
"""

import base64
import html
from collections.abc import Sequence
from pathlib import Path
from string import Template

from pydantic import BaseModel, ConfigDict, Field

from iconfont.domain import Icon
from iconfont.exceptions import FontSaveError


class ManifestEntry(BaseModel):
    """One icon in the manifest."""

    model_config = ConfigDict(frozen=True)

    name: str
    filename: str
    codepoint: str = Field(description="Uppercase hex, at least four digits")

    @classmethod
    def from_icon(cls, icon: Icon) -> "ManifestEntry":
        return cls(
            name=icon.name, filename=icon.filename, codepoint=f"{icon.codepoint:04X}"
        )


class Manifest(BaseModel):
    """Icon manifest written next to the font."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    font_family: str = Field(alias="fontFamily")
    icons: list[ManifestEntry] = Field(default_factory=list)


_PREVIEW_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>$title - Icon Font Preview</title>
    <style>
        @font-face {
            font-family: '$font_family';
            src: url('data:font/truetype;base64,$font_data') format('truetype');
            font-weight: normal;
            font-style: normal;
        }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #0a0a0a;
            color: #e0e0e0;
            margin: 0;
        }
        header {
            background: #111;
            border-bottom: 1px solid #222;
            padding: 1.5rem 2rem;
            display: flex;
            justify-content: space-between;
            align-items: center;
        }
        .stats { color: #888; font-size: 0.875rem; }
        .search-box {
            background: #1a1a1a;
            border: 1px solid #333;
            border-radius: 8px;
            padding: 0.5rem 1rem;
            color: #e0e0e0;
        }
        .grid {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(120px, 1fr));
            gap: 1rem;
            padding: 2rem;
        }
        .icon-card {
            background: #151515;
            border: 1px solid #222;
            border-radius: 8px;
            padding: 1rem;
            text-align: center;
        }
        .icon-glyph { font-family: '$font_family'; font-size: 48px; line-height: 1; }
        .icon-name { font-size: 0.75rem; margin-top: 0.5rem; word-break: break-all; }
        .icon-code { font-size: 0.7rem; color: #666; font-family: monospace; }
    </style>
</head>
<body>
    <header>
        <h1>$title</h1>
        <span class="stats">$count icons</span>
        <input class="search-box" type="search" placeholder="Search icons..." id="search">
    </header>
    <main class="grid">$cards
    </main>
    <script>
        document.getElementById('search').addEventListener('input', function (e) {
            var query = e.target.value.toLowerCase();
            document.querySelectorAll('.icon-card').forEach(function (card) {
                var match = card.dataset.name.toLowerCase().indexOf(query) !== -1
                    || card.dataset.codepoint.toLowerCase().indexOf(query) !== -1;
                card.style.display = match ? '' : 'none';
            });
        });
    </script>
</body>
</html>
""")

_CARD_TEMPLATE = Template("""
        <div class="icon-card" data-name="$name" data-codepoint="$codepoint">
            <div class="icon-glyph">&#x$codepoint;</div>
            <div class="icon-name">$name</div>
            <div class="icon-code">U+$codepoint</div>
        </div>""")


def render_preview(icons: Sequence[Icon], family_name: str, font_data: bytes) -> str:
    """Render the HTML preview page.

    Args:
        icons: Icons to show, one card each
        family_name: Font family name
        font_data: Font file embedded as a base64 data URL

    Returns:
        Complete HTML document
    """
    cards = "".join(
        _CARD_TEMPLATE.substitute(
            name=html.escape(icon.filename or icon.name),
            codepoint=f"{icon.codepoint:04X}",
        )
        for icon in icons
    )
    return _PREVIEW_TEMPLATE.substitute(
        title=html.escape(family_name),
        font_family=html.escape(family_name.replace("'", "")),
        font_data=base64.b64encode(font_data).decode("ascii"),
        count=len(icons),
        cards=cards,
    )


class OutputWriter:
    """Writes the font and its companion files.

    All files share a base name derived from the family name:
    "My Icons" gives my_icons.ttf, my_icons.json and
    my_icons_preview.html.

    Example:
        writer = OutputWriter(Path("output"), "My Icons")
        writer.write_font(document.to_bytes())
        writer.write_manifest(icons)
    """

    def __init__(self, output_dir: Path, family_name: str) -> None:
        """Initialize the writer.

        Args:
            output_dir: Directory for output files (created on first write)
            family_name: Font family name
        """
        self._output_dir = output_dir
        self._family_name = family_name

    @property
    def base_name(self) -> str:
        return self._family_name.lower().replace(" ", "_")

    @property
    def font_path(self) -> Path:
        return self._output_dir / f"{self.base_name}.ttf"

    @property
    def manifest_path(self) -> Path:
        return self._output_dir / f"{self.base_name}.json"

    @property
    def preview_path(self) -> Path:
        return self._output_dir / f"{self.base_name}_preview.html"

    def write_font(self, data: bytes) -> Path:
        """Write the font file.

        Args:
            data: Serialized font

        Returns:
            Path of the written file

        Raises:
            FontSaveError: If the file cannot be written
        """
        return self._write(self.font_path, data)

    def write_manifest(self, icons: Sequence[Icon]) -> Path:
        """Write the JSON manifest.

        Raises:
            FontSaveError: If the file cannot be written
        """
        manifest = Manifest(
            font_family=self._family_name,
            icons=[ManifestEntry.from_icon(icon) for icon in icons],
        )
        content = manifest.model_dump_json(by_alias=True, indent=2)
        return self._write(self.manifest_path, content.encode("utf-8"))

    def write_preview(self, icons: Sequence[Icon], font_data: bytes) -> Path:
        """Write the HTML preview page with the font embedded.

        Raises:
            FontSaveError: If the file cannot be written
        """
        content = render_preview(icons, self._family_name, font_data)
        return self._write(self.preview_path, content.encode("utf-8"))

    def _write(self, path: Path, data: bytes) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise FontSaveError(str(path), str(e)) from e
        return path
