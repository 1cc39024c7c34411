"""CSS-style font matching, glyph outlines, font metrics and sfnt container helpers."""

__version__ = "0.1.0"

__all__ = [
    "canonicalize",
    "design",
    "geometry",
    "mapping",
    "matching",
    "metrics",
    "outline",
    "properties",
    "sfnt",
]