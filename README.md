# fontmatch

Pure-Python helpers for choosing fonts and working with font data. The package has no
dependencies.

- `fontmatch.matching`: picks a font by the CSS Fonts Level 3 rules (stretch first, then
  style, then weight).
- `fontmatch.properties`: the `Style`, `Weight`, `Stretch` and `Properties` types.
- `fontmatch.outline`: builds Bézier glyph outlines from drawing commands and replays them
  to any sink.
- `fontmatch.canonicalize`: turns y-down path commands into outlines and recovers
  quadratic curves.
- `fontmatch.metrics`: the `Metrics` record of font-wide values.
- `fontmatch.geometry`: the `Vector2F`, `LineSegment2F` and `RectF` types.
- `fontmatch.sfnt`: recognises and unpacks OpenType collections (`.ttc`/`.otc`) and Mac
  data-fork fonts.
- `fontmatch.mapping`: converts normalised weight and width values to CSS weights and
  stretches.
- `fontmatch.design`: derives values from per-glyph design metrics and from raw table data.

## Installation

```
pip install fontmatch
```

To run the tests:

```
pip install "fontmatch[test]"
pytest
```

## Matching a font

```python
from fontmatch.properties import Properties, Style, Weight
from fontmatch.matching import find_best_match, SelectionError

candidates = [
    Properties(),
    Properties(style=Style.ITALIC),
    Properties(weight=Weight.BOLD),
]
query = Properties(weight=Weight(650.0))

index = find_best_match(candidates, query)   # 2, the bold face
```

`find_best_match` returns the index of the best candidate. When several candidates match
equally well, the first one wins. An empty candidate list raises `SelectionError` (a
`LookupError`).

`Weight` and `Stretch` are frozen, ordered dataclasses holding one `value`. Both have the
usual named constants: `Weight.THIN` to `Weight.BLACK` and `Stretch.ULTRA_CONDENSED` to
`Stretch.ULTRA_EXPANDED`. `Stretch.MAPPING` maps OS/2 `usWidthClass` values 1 to 9 (as
indices 0 to 8) to stretch values.

## Building outlines

```python
from fontmatch.geometry import Vector2F
from fontmatch.outline import OutlineBuilder

builder = OutlineBuilder()
builder.move_to(Vector2F(0.0, 0.0))
builder.line_to(Vector2F(10.0, 0.0))
builder.quadratic_curve_to(Vector2F(10.0, 10.0), Vector2F(0.0, 10.0))
builder.close()

outline = builder.take_outline()
outline.copy_to(another_builder)   # any OutlineSink subclass
```

An `Outline` is a list of `Contour`s. A contour keeps its point positions in one list and
the matching `PointFlags` in another. `CONTROL_POINT_0` and `CONTROL_POINT_1` mark control
points, and no flags means an on-curve point. `Contour.copy_to` turns the points back into
move, line, quadratic, cubic and close commands. It raises `ValueError` when the flags do
not describe a valid sequence. `OutlineBuilder.take_outline` raises `ValueError` while a
contour is still open.

To receive commands yourself, subclass `OutlineSink` and implement `move_to`, `line_to`,
`quadratic_curve_to`, `cubic_curve_to` (which takes a `LineSegment2F` of the two control
points) and `close`.

`OutlineCanonicalizer` takes commands as plain coordinates with the y axis pointing down
(`move_to(x, y)`, `line_to(x, y)`, `curve_to(c0x, c0y, c1x, c1y, x, y)`, `close()`). It
flips them to y-up. A cubic curve that is a degree-elevated quadratic is stored as a
quadratic, and its control point is snapped to the nearest half unit. Collect the result
with `take_outline()`.

## OpenType collections and data-fork fonts

```python
from fontmatch.sfnt import (
    font_is_collection,
    read_number_of_fonts_from_otc_header,
    unpack_otc_font,
)

with open("fonts.ttc", "rb") as f:
    data = f.read()

if font_is_collection(data):
    count = read_number_of_fonts_from_otc_header(data)
    single = unpack_otc_font(data, 0)
```

`unpack_otc_font` returns new bytes with the chosen font's offset table and table records
copied over the start of the data. The length stays the same. Table offsets in a
collection are absolute, so the result reads as a single font.

`unpack_data_fork_font` works in the same way for Mac data-fork suitcases. It copies the
first usable `sfnt` resource to the front. `font_is_single_otf` recognises a single
TrueType or `OTTO` font.

Errors are subclasses of `FontLoadingError`, which is a `ValueError`:

- `UnknownFormatError`: the data is not a collection.
- `NoSuchFontInCollectionError`: the font index is out of range.
- `FontLoadingError` itself: truncated or malformed data.

## Weight and width mapping

```python
from fontmatch.mapping import core_text_to_css_font_weight, core_text_width_to_css_stretchiness

core_text_to_css_font_weight(0.1)          # Weight(450.0)
core_text_width_to_css_stretchiness(0.34)  # Stretch of about 1.7
```

The general helpers are `piecewise_linear_lookup` and `piecewise_linear_find_index`.
`piecewise_linear_lookup` raises `IndexError` when the index falls outside the mapping.

## Design metrics and table data

- `DesignGlyphMetrics` holds one glyph's advance, side-bearing and vertical-origin values
  in design units. It provides `typographic_bounds()`, `advance()` and `origin()`.
- `stretch_for_width_class` maps a `usWidthClass` of 1 to 9 to a `Stretch`, and raises
  `ValueError` for any other value.
- `bounding_box_from_head_table` reads the bounding box from raw `head` table bytes.
  `None` gives an empty rectangle, and a table that is too short raises `ValueError`.
- `convert_len_utf16_to_utf8` converts a length in UTF-16 code units into the UTF-8 byte
  length of the same prefix of a string.

## What the package does not do

The package does not open or parse font files beyond the container headers described
above. It does not rasterise glyphs, find installed system fonts, or look up fallback
fonts. It works on values you supply: candidate properties, drawing commands, metrics and
raw bytes.