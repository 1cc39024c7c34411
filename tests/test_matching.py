import pytest

from fontmatch.matching import SelectionError, find_best_match
from fontmatch.properties import Properties, Stretch, Style, Weight


def _chosen(candidates, query):
    return candidates[find_best_match(candidates, query)]


def test_empty_candidates_raise():
    with pytest.raises(SelectionError):
        find_best_match([], Properties())


def test_exact_match_wins():
    candidates = [
        Properties(weight=Weight.BOLD),
        Properties(),
        Properties(style=Style.ITALIC),
    ]
    assert _chosen(candidates, Properties()) == Properties()


def test_italic_falls_back_to_oblique_then_normal():
    candidates = [Properties(style=Style.NORMAL), Properties(style=Style.OBLIQUE)]
    assert _chosen(candidates, Properties(style=Style.ITALIC)).style is Style.OBLIQUE
    only_normal = [Properties(style=Style.NORMAL)]
    assert _chosen(only_normal, Properties(style=Style.ITALIC)).style is Style.NORMAL


def test_normal_prefers_oblique_over_italic():
    candidates = [Properties(style=Style.ITALIC), Properties(style=Style.OBLIQUE)]
    assert _chosen(candidates, Properties()).style is Style.OBLIQUE


def test_weight_400_prefers_500():
    candidates = [Properties(weight=Weight.LIGHT), Properties(weight=Weight.MEDIUM)]
    assert _chosen(candidates, Properties(weight=Weight.NORMAL)).weight == Weight.MEDIUM


def test_weight_500_prefers_400():
    candidates = [Properties(weight=Weight.SEMIBOLD), Properties(weight=Weight.NORMAL)]
    assert _chosen(candidates, Properties(weight=Weight.MEDIUM)).weight == Weight.NORMAL


def test_light_query_prefers_thinner():
    candidates = [
        Properties(weight=Weight.THIN),
        Properties(weight=Weight.EXTRA_LIGHT),
        Properties(weight=Weight.BOLD),
    ]
    assert _chosen(candidates, Properties(weight=Weight.LIGHT)).weight == Weight.EXTRA_LIGHT


def test_light_query_without_thinner_takes_lightest_heavier():
    candidates = [Properties(weight=Weight.BLACK), Properties(weight=Weight.SEMIBOLD)]
    assert _chosen(candidates, Properties(weight=Weight.LIGHT)).weight == Weight.SEMIBOLD


def test_bold_query_prefers_heavier_then_thinner():
    candidates = [Properties(weight=Weight.NORMAL), Properties(weight=Weight.BLACK)]
    assert _chosen(candidates, Properties(weight=Weight.BOLD)).weight == Weight.BLACK
    thinner = [Properties(weight=Weight.THIN), Properties(weight=Weight.NORMAL)]
    assert _chosen(thinner, Properties(weight=Weight.BOLD)).weight == Weight.NORMAL


def test_condensed_query_prefers_narrower():
    candidates = [
        Properties(stretch=Stretch.NORMAL),
        Properties(stretch=Stretch.EXTRA_CONDENSED),
        Properties(stretch=Stretch.ULTRA_CONDENSED),
    ]
    chosen = _chosen(candidates, Properties(stretch=Stretch.CONDENSED))
    assert chosen.stretch == Stretch.EXTRA_CONDENSED


def test_expanded_query_prefers_wider_then_narrower():
    candidates = [Properties(stretch=Stretch.NORMAL), Properties(stretch=Stretch.ULTRA_EXPANDED)]
    chosen = _chosen(candidates, Properties(stretch=Stretch.EXPANDED))
    assert chosen.stretch == Stretch.ULTRA_EXPANDED
    narrower = [Properties(stretch=Stretch.CONDENSED), Properties(stretch=Stretch.NORMAL)]
    chosen = _chosen(narrower, Properties(stretch=Stretch.EXPANDED))
    assert chosen.stretch == Stretch.NORMAL


def test_first_of_equal_candidates_is_returned():
    candidates = [Properties(weight=Weight.BOLD), Properties(), Properties()]
    assert find_best_match(candidates, Properties()) == candidates.index(Properties())


def test_result_is_valid_index():
    candidates = [Properties(style=Style.ITALIC, weight=Weight.BLACK, stretch=Stretch.EXPANDED)]
    assert find_best_match(candidates, Properties()) in range(len(candidates))