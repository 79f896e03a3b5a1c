"""Exception hierarchy for iconfont."""


class IconFontError(Exception):
    """Base exception for all iconfont errors."""

    pass


class IconError(IconFontError):
    """Errors related to icon input."""

    pass


class IconLoadError(IconError):
    """Error reading or decoding an icon source file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load icon '{path}': {reason}")


class InvalidIconError(IconError):
    """Icon data that cannot be turned into a glyph."""

    def __init__(self, icon_name: str, reason: str) -> None:
        self.icon_name = icon_name
        self.reason = reason
        super().__init__(f"Invalid icon '{icon_name}': {reason}")


class EmptyIconSetError(IconError):
    """No icons were supplied to the font builder."""

    def __init__(self) -> None:
        super().__init__("Cannot build a font without icons")


class DuplicateCodepointError(IconError):
    """Two icons were assigned the same codepoint."""

    def __init__(self, codepoint: int, first: str, second: str) -> None:
        self.codepoint = codepoint
        self.first = first
        self.second = second
        super().__init__(
            f"Codepoint U+{codepoint:04X} assigned to both '{first}' and '{second}'"
        )


class GeometryError(IconFontError):
    """Errors in geometric calculations."""

    pass


class OutlineBuildError(GeometryError):
    """Error turning an icon path into a glyph outline."""

    def __init__(self, icon_name: str, reason: str) -> None:
        self.icon_name = icon_name
        self.reason = reason
        super().__init__(f"Failed to build outline for '{icon_name}': {reason}")


class FontError(IconFontError):
    """Errors related to font assembly or saving."""

    pass


class FontAssemblyError(FontError):
    """Error building the font tables."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Font assembly failed: {reason}")


class EncodingOverflowError(FontAssemblyError):
    """A value does not fit the field width the font format provides."""

    pass


class FontSaveError(FontError):
    """Error saving a font or one of its companion files."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save '{path}': {reason}")
