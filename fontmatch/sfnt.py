"""Recognition and unpacking of OpenType collections and data-fork font suitcases."""

from __future__ import annotations

TTC_TAG = b"ttcf"
OTTO_TAG = b"OTTO"

_TRUETYPE_VERSION = 0x00010000
_OTTO_HEX = 0x4F54544F  # 'OTTO'
_TRUE_HEX = 0x74727565  # 'true'
_TYP1_HEX = 0x74797031  # 'typ1'
_SFNT_HEX = 0x73666E74  # 'sfnt'

_SFNT_VERSIONS = frozenset({_TRUETYPE_VERSION, _OTTO_HEX, _TRUE_HEX, _TYP1_HEX})


class FontLoadingError(ValueError):
    """Font data could not be parsed or loaded."""


class NoSuchFontInCollectionError(FontLoadingError):
    """The requested font index is not present in the collection."""


class UnknownFormatError(FontLoadingError):
    """The data is not in a recognised font format."""


def _read_uint(data: bytes, offset: int, size: int) -> int:
    if offset < 0 or offset + size > len(data):
        raise FontLoadingError(
            f"cannot read {size} bytes at offset {offset} of {len(data)}-byte data"
        )
    return int.from_bytes(data[offset : offset + size], "big")


def font_is_collection(header: bytes) -> bool:
    """Return True if the data starts with the OpenType collection tag."""
    return len(header) >= 4 and bytes(header[:4]) == TTC_TAG


def font_is_single_otf(header: bytes) -> bool:
    """Return True if the data starts like a single TrueType or OpenType font."""
    if len(header) < 4:
        return False
    return (
        int.from_bytes(header[:4], "big") == _TRUETYPE_VERSION
        or bytes(header[:4]) == OTTO_TAG
    )


def read_number_of_fonts_from_otc_header(header: bytes) -> int:
    """Return the number of fonts declared in a collection header.

    Raises UnknownFormatError if the data is not a collection, and
    FontLoadingError if the header is truncated.
    """
    if not font_is_collection(header):
        raise UnknownFormatError("data is not an OpenType collection")
    return _read_uint(bytes(header), 8, 4)


def unpack_otc_font(data: bytes, font_index: int) -> bytes:
    """Return the collection data with the chosen font's offset table moved to the front.

    The offset table and its table records are copied over the start of the
    data; the table offsets in a collection are absolute, so the result can
    be read as a single font. The length of the data is unchanged.
    """
    data = bytes(data)
    if font_index < 0 or font_index >= read_number_of_fonts_from_otc_header(data):
        raise NoSuchFontInCollectionError(
            f"font index {font_index} is not in the collection"
        )

    offset_table_pos = _read_uint(data, 12 + 4 * font_index, 4)
    num_tables = _read_uint(data, offset_table_pos + 4, 2)

    size = 12 + num_tables * 16
    if offset_table_pos + size > len(data):
        raise FontLoadingError("offset table runs past the end of the data")
    return data[offset_table_pos : offset_table_pos + size] + data[size:]


def unpack_data_fork_font(data: bytes) -> bytes:
    """Return data-fork suitcase data with its 'sfnt' resource moved to the front.

    The resource's bytes overwrite the start of the data; the length of the
    data is unchanged. Raises FontLoadingError if no 'sfnt' resource is found
    or the resource map is malformed.
    """
    data = bytes(data)
    data_offset = _read_uint(data, 0, 4)
    map_offset = _read_uint(data, 4, 4)
    num_types = _read_uint(data, map_offset + 28, 2) + 1
    type_list_offset = _read_uint(data, map_offset + 24, 2) + map_offset

    font_data_offset = 0
    font_data_len = 0
    for i in range(num_types):
        entry = map_offset + 30 + i * 8
        if _read_uint(data, entry, 4) != _SFNT_HEX:
            continue
        ref_list_offset = _read_uint(data, entry + 6, 2)
        res_data_offset = _read_uint(data, type_list_offset + ref_list_offset + 5, 3)
        font_data_len = _read_uint(data, data_offset + res_data_offset, 4)
        font_data_offset = data_offset + res_data_offset + 4
        if _read_uint(data, font_data_offset, 4) in _SFNT_VERSIONS:
            break

    if font_data_len == 0:
        raise FontLoadingError("no sfnt resource in data fork font")
    end = font_data_offset + font_data_len
    if end > len(data):
        raise FontLoadingError("sfnt resource runs past the end of the data")
    return data[font_data_offset:end] + data[font_data_len:]