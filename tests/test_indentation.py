"""Tests for the indentation metric."""

import pytest

from article_features.features.centering import CenteringResolver
from article_features.features.indentation import indentation
from article_features.model.area import AreaTree


@pytest.fixture
def column():
    """Left aligned lines in a 3-column grid: base, indented once, indented twice."""
    tree = AreaTree()
    root = tree.add_area((0, 0, 1000, 500))
    base = tree.add_area((0, 0, 400, 20), parent=root, topology=(0, 0, 2, 0))
    once = tree.add_area((40, 30, 400, 50), parent=root, topology=(1, 1, 2, 1))
    twice = tree.add_area((80, 60, 400, 80), parent=root, topology=(2, 2, 2, 2))
    return tree, root, base, once, twice


def test_root_is_not_indented(column):
    tree, root, *_ = column
    assert indentation(tree, CenteringResolver(tree), root) == 1.0


def test_indentation_levels(column):
    tree, _, base, once, twice = column
    centering = CenteringResolver(tree)
    assert indentation(tree, centering, base) == 1.0
    assert indentation(tree, centering, once) == pytest.approx(2 / 3)
    assert indentation(tree, centering, twice) == pytest.approx(1 / 3)


def test_indentation_is_capped_at_three_levels():
    tree = AreaTree()
    root = tree.add_area((0, 0, 1000, 500))
    tree.add_area((0, 0, 400, 20), parent=root, topology=(0, 0, 0, 0))
    deep = tree.add_area((200, 30, 400, 50), parent=root, topology=(5, 1, 5, 1))
    assert indentation(tree, CenteringResolver(tree), deep) == 0.0


def test_centered_area_is_not_indented():
    tree = AreaTree()
    root = tree.add_area((0, 0, 1000, 500))
    tree.add_area((0, 0, 100, 20), parent=root, topology=(0, 0, 0, 0))
    centered = tree.add_area((300, 30, 700, 50), parent=root, topology=(2, 1, 2, 1))
    centering = CenteringResolver(tree)
    assert centering.is_centered(centered)
    assert indentation(tree, centering, centered) == 1.0


def test_explicit_min_indent_of_parent():
    tree = AreaTree()
    root = tree.add_area((0, 0, 1000, 500), min_indent=1)
    area = tree.add_area((40, 0, 400, 20), parent=root, topology=(2, 0, 2, 0))
    assert indentation(tree, CenteringResolver(tree), area) == pytest.approx(2 / 3)


def test_line_continuation_uses_first_area_on_line():
    tree = AreaTree()
    root = tree.add_area((0, 0, 1000, 500))
    first = tree.add_area((0, 0, 300, 20), parent=root, topology=(0, 0, 0, 0))
    second = tree.add_area((320, 0, 600, 20), parent=root, topology=(1, 0, 1, 0))
    centering = CenteringResolver(tree)

    assert tree.previous_on_line(second) is first
    assert indentation(tree, centering, second) == indentation(tree, centering, first) == 1.0


def test_explicit_previous_on_line_link():
    tree = AreaTree()
    root = tree.add_area((0, 0, 1000, 500))
    first = tree.add_area((0, 0, 300, 20), parent=root, topology=(0, 0, 0, 0))
    tree.add_area((0, 30, 300, 50), parent=root, topology=(0, 1, 0, 1))
    linked = tree.add_area((320, 0, 600, 20), parent=root, topology=(2, 0, 2, 0), previous_on_line=first.index)
    assert tree.previous_on_line(linked) is first
    assert indentation(tree, CenteringResolver(tree), linked) == 1.0
