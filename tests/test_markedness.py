"""Tests for the markedness score."""

import pytest

from article_features.features.context import AnalysisContext
from article_features.features.markedness import (
    background_term,
    color_measures,
    markedness,
    markedness_differs,
    markedness_terms,
)
from article_features.utils.constants import DEFAULT_WEIGHTS, WEIGHT_NAMES

from helpers import StaticColorMetrics


def unit_weights(index):
    return [1.0 if i == index else 0.0 for i in range(len(WEIGHT_NAMES))]


def test_terms_of_centered_title(page):
    tree, areas = page
    ctx = AnalysisContext.for_root(tree)
    terms = markedness_terms(ctx, areas["title"])

    assert len(terms) == len(WEIGHT_NAMES)
    assert terms[0] == 2.0  # 24px over the 12px page average
    assert terms[1] == 1.0
    assert terms[2] == 0.0
    assert terms[3] == 1.0
    assert terms[4] == pytest.approx(21.0)
    assert terms[5] == 1.0
    assert terms[6] == pytest.approx(6 / 63)
    assert terms[7] == pytest.approx(0.0)


@pytest.mark.parametrize("index", range(len(WEIGHT_NAMES)))
def test_unit_weight_selects_single_term(page, index):
    tree, areas = page
    ctx = AnalysisContext.for_root(tree, weights=unit_weights(index))
    assert markedness(ctx, areas["title"]) == pytest.approx(markedness_terms(ctx, areas["title"])[index])


@pytest.mark.parametrize("index", range(len(WEIGHT_NAMES)))
def test_markedness_grows_with_each_weight(page, index):
    tree, areas = page
    base = AnalysisContext.for_root(tree)
    heavier = list(DEFAULT_WEIGHTS)
    heavier[index] += 3.0
    for area in areas.values():
        assert markedness(base.with_weights(heavier), area) >= markedness(base, area)


def test_default_weights_rank_title_first(page):
    tree, areas = page
    ctx = AnalysisContext.for_root(tree)
    title, body, footer = (markedness(ctx, areas[k]) for k in ("title", "body", "footer"))
    assert title > body > footer
    assert markedness_differs(title, body)


def test_zero_weights_give_zero(page):
    tree, areas = page
    ctx = AnalysisContext.for_root(tree, weights=[0.0] * 8)
    assert markedness(ctx, areas["title"]) == 0.0


@pytest.mark.parametrize("percentage,expected", [
    (None, 1.0),
    (-1.0, 1.0),
    (0.0, 1.0),
    (0.25, 0.75),
    (1.0, 0.0),
    (1.5, 0.0),
])
def test_background_term(percentage, expected):
    assert background_term(percentage) == pytest.approx(expected)


def test_unavailable_background_coverage(page):
    tree, areas = page
    ctx = AnalysisContext.for_root(
        tree,
        weights=unit_weights(7),
        background_analyzer=StaticColorMetrics(-1.0),
    )
    assert markedness(ctx, areas["body"]) == 1.0


def test_foreground_coverage_term(page):
    tree, areas = page
    ctx = AnalysisContext.for_root(tree, weights=unit_weights(6), color_analyzer=StaticColorMetrics(0.2))
    assert markedness(ctx, areas["body"]) == pytest.approx(0.8)


def test_markedness_differs():
    assert not markedness_differs(1.0, 1.4)
    assert markedness_differs(1.0, 1.5)
    assert markedness_differs(3.0, 1.0)


def test_supplied_color_measures_are_used(page):
    tree, areas = page
    ctx = AnalysisContext.for_root(tree, weights=unit_weights(4))
    measures = color_measures(ctx, areas["title"])
    assert measures["contrast"] == pytest.approx(21.0)

    measures["contrast"] = 3.0
    assert markedness(ctx, areas["title"], measures) == 3.0
    assert markedness(ctx, areas["title"]) == pytest.approx(21.0)
