"""Glyph and font values derived from design-unit metrics and raw table data."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .geometry import RectF, Vector2F
from .properties import Stretch

# Offset of xMin/yMin/xMax/yMax within the OpenType 'head' table.
_HEAD_BBOX_OFFSET = 36
_HEAD_BBOX = struct.Struct(">4h")


@dataclass(frozen=True)
class DesignGlyphMetrics:
    """Per-glyph metrics in font design units, with y increasing upwards."""

    advance_width: int
    advance_height: int
    left_side_bearing: int
    right_side_bearing: int
    top_side_bearing: int
    bottom_side_bearing: int
    vertical_origin_y: int

    def typographic_bounds(self) -> RectF:
        """Return the glyph's bounding rectangle in font units."""
        y_offset = self.vertical_origin_y + self.bottom_side_bearing - self.advance_height
        width = self.advance_width - (self.left_side_bearing + self.right_side_bearing)
        height = self.advance_height - (self.top_side_bearing + self.bottom_side_bearing)
        return RectF(
            Vector2F(float(self.left_side_bearing), float(y_offset)),
            Vector2F(float(width), float(height)),
        )

    def advance(self) -> Vector2F:
        """Return the distance from this glyph's origin to the next one's."""
        return Vector2F(float(self.advance_width), 0.0)

    def origin(self) -> Vector2F:
        """Return how far the glyph is displaced from the pen position."""
        return Vector2F(
            float(self.left_side_bearing),
            float(self.vertical_origin_y + self.bottom_side_bearing),
        )


def convert_len_utf16_to_utf8(text: str, len_utf16: int) -> int:
    """Return the UTF-8 byte length of the prefix of ``text`` covering ``len_utf16`` code units.

    A character that straddles the limit is counted whole.
    """
    len_utf8 = 0
    units = 0
    for char in text:
        if units >= len_utf16:
            break
        len_utf8 += len(char.encode("utf-8", "surrogatepass"))
        units += 2 if ord(char) > 0xFFFF else 1
    return len_utf8


def stretch_for_width_class(width_class: int) -> Stretch:
    """Map an OS/2 ``usWidthClass`` value (1 to 9) to a CSS stretch.

    Raises ValueError for values outside 1 to 9.
    """
    if not 1 <= width_class <= len(Stretch.MAPPING):
        raise ValueError(f"width class {width_class} is outside 1..{len(Stretch.MAPPING)}")
    return Stretch(Stretch.MAPPING[width_class - 1])


def bounding_box_from_head_table(head: bytes | None) -> RectF:
    """Return the font bounding box stored in an OpenType 'head' table.

    An absent table gives an empty rectangle. Raises ValueError if the table
    is too short to hold the bounding box.
    """
    if head is None:
        return RectF()
    try:
        x_min, y_min, x_max, y_max = _HEAD_BBOX.unpack_from(bytes(head), _HEAD_BBOX_OFFSET)
    except struct.error as exc:
        raise ValueError("head table is too short to hold a bounding box") from exc
    return RectF(
        Vector2F(float(x_min), float(y_min)),
        Vector2F(float(x_max - x_min), float(y_max - y_min)),
    )