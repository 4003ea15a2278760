"""Tests for the area tree arena and its navigation."""

import pytest

from article_features.model.area import AreaTree


@pytest.fixture
def row():
    tree = AreaTree()
    root = tree.add_area((0, 0, 300, 100))
    cells = [
        tree.add_area((100 * i, 0, 100 * i + 90, 20), parent=root, topology=(i, 0, i, 0))
        for i in range(3)
    ]
    return tree, root, cells


def test_siblings(row):
    tree, root, (first, middle, last) = row
    assert [c.position for c in (first, middle, last)] == [0, 1, 2]
    assert tree.previous_sibling(first) is None
    assert tree.previous_sibling(middle) is first
    assert tree.next_sibling(middle) is last
    assert tree.next_sibling(last) is None
    assert tree.next_sibling(root) is None


def test_sibling_lookup_in_wide_parent():
    tree = AreaTree()
    root = tree.add_area((0, 0, 100, 100))
    children = [tree.add_area((0, i, 100, i), parent=root) for i in range(5000)]
    assert tree.previous_sibling(children[4000]) is children[3999]
    assert tree.next_sibling(children[4998]) is children[4999]


def test_previous_on_line(row):
    tree, _, (first, middle, last) = row
    assert tree.previous_on_line(first) is None
    assert tree.previous_on_line(middle) is first
    assert tree.previous_on_line(last) is middle

    last.previous_on_line = first.index
    assert tree.previous_on_line(last) is first


def test_second_root_rejected(row):
    tree, _, _ = row
    with pytest.raises(ValueError):
        tree.add_area((0, 0, 10, 10))
    with pytest.raises(IndexError):
        tree.add_area((0, 0, 10, 10), parent=99)


def test_version_tracks_changes(row):
    tree, root, _ = row
    version = tree.version
    tree.touch()
    assert tree.version == version + 1
    tree.add_area((0, 50, 10, 60), parent=root)
    assert tree.version == version + 2
    assert [a.index for a in tree] == [0, 1, 2, 3, 4]
