"""Tests for character class ratios and line counting."""

import pytest

from article_features.features.text_stats import char_ratios, count_lines, count_punctuation, line_count
from article_features.model.area import AreaTree, Box, Rect


def box_at(y, text="word"):
    return Box(text=text, bounds=Rect(0, y, 50, y + 10))


def test_char_ratios_mixed_text():
    stats = char_ratios("Abc123, ")
    assert stats.p_digits == 3 / 8
    assert stats.p_upper == 1 / 8
    assert stats.p_lower == 2 / 8
    assert stats.p_spaces == 1 / 8
    assert stats.p_punct == 1 / 8


def test_char_ratios_empty_text():
    stats = char_ratios("")
    assert (stats.p_digits, stats.p_lower, stats.p_upper, stats.p_spaces, stats.p_punct) == (0, 0, 0, 0, 0)


@pytest.mark.parametrize("text", [
    "Hello, World.",
    "ÉCOLE élève 42",
    "١٢٣ Arabic-Indic digits",
    "non breaking space",
    "!?!?-- ##",
])
def test_char_ratios_are_bounded(text):
    stats = char_ratios(text)
    ratios = [stats.p_digits, stats.p_lower, stats.p_upper, stats.p_spaces, stats.p_punct]
    assert all(0.0 <= r <= 1.0 for r in ratios)
    assert stats.p_digits + stats.p_lower + stats.p_upper + stats.p_spaces <= 1.0


def test_unicode_categories():
    stats = char_ratios("Éé٣ ")
    assert stats.p_upper == 0.25
    assert stats.p_lower == 0.25
    assert stats.p_digits == 0.25
    assert stats.p_spaces == 0.25


def test_punctuation_is_limited_to_separators():
    assert count_punctuation(",.;:") == 4
    assert count_punctuation("!?-()'\"") == 0
    assert char_ratios("Wow!").p_punct == 0.0


@pytest.mark.parametrize("positions,expected", [
    ([0, 3], 1),
    ([0, 10], 2),
    ([0, 5], 1),
    ([0, 6], 2),
    ([20, 0, 10], 3),
    ([0, 4, 8, 12], 2),
    ([], 0),
])
def test_count_lines(positions, expected):
    assert count_lines([box_at(y) for y in positions]) == expected


def test_line_count_collects_all_descendant_boxes():
    tree = AreaTree()
    root = tree.add_area((0, 0, 100, 100), boxes=[box_at(0)])
    child = tree.add_area((0, 20, 100, 60), parent=root, boxes=[box_at(20), box_at(22)])
    tree.add_area((0, 40, 100, 60), parent=child, boxes=[box_at(40)])
    assert line_count(tree, root) == 3
    assert line_count(tree, child) == 2
    assert line_count(tree, child.index) == 2
