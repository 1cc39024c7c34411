"""Selects the closest font to a description, following CSS Fonts Level 3 § 5.2."""

from __future__ import annotations

from collections.abc import Sequence

from .properties import Properties, Style, Weight


class SelectionError(LookupError):
    """No font matching the request could be found."""


_STYLE_PREFERENCE = {
    Style.ITALIC: (Style.ITALIC, Style.OBLIQUE, Style.NORMAL),
    Style.OBLIQUE: (Style.OBLIQUE, Style.ITALIC, Style.NORMAL),
    Style.NORMAL: (Style.NORMAL, Style.OBLIQUE, Style.ITALIC),
}


def _closest_stretch(values: list[float], query: float) -> float:
    if query in values:
        return query
    if query <= 1.0:
        narrower = [v for v in values if v < query]
        return max(narrower) if narrower else min(values)
    wider = [v for v in values if v > query]
    return min(wider) if wider else max(values)


def _closest_weight(values: list[float], query: float) -> float:
    if query in values:
        return query
    # The spec leaves 400 < w < 500 open; 450 is the cutoff used here.
    if 400.0 <= query < 450.0 and Weight.MEDIUM.value in values:
        return Weight.MEDIUM.value
    if 450.0 <= query <= 500.0 and Weight.NORMAL.value in values:
        return Weight.NORMAL.value
    if query <= 500.0:
        lighter = [v for v in values if v <= query]
        return max(lighter) if lighter else min(values)
    heavier = [v for v in values if v >= query]
    return min(heavier) if heavier else max(values)


def find_best_match(candidates: Sequence[Properties], query: Properties) -> int:
    """Return the index of the candidate that best matches ``query``.

    Raises SelectionError if there are no candidates.
    """
    matching = list(range(len(candidates)))
    if not matching:
        raise SelectionError("no candidate fonts")

    stretch = _closest_stretch(
        [candidates[i].stretch.value for i in matching], query.stretch.value
    )
    matching = [i for i in matching if candidates[i].stretch.value == stretch]

    style = next(
        s
        for s in _STYLE_PREFERENCE[query.style]
        if any(candidates[i].style is s for i in matching)
    )
    matching = [i for i in matching if candidates[i].style is style]

    weight = _closest_weight(
        [candidates[i].weight.value for i in matching], query.weight.value
    )
    matching = [i for i in matching if candidates[i].weight.value == weight]

    # Font size matching does not apply: fonts here are unsized.
    if not matching:
        raise SelectionError("no matching font")
    return matching[0]