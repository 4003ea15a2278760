"""Position of an area relative to the page root and to its siblings."""

import sys

from article_features.model.area import Area, AreaTree, Rect

GRID_INFINITY = sys.maxsize


def _relative(obj1: int, obj2: int, top1: int, top2: int) -> float:
    obj1, obj2, top1, top2 = (max(v, 0) for v in (obj1, obj2, top1, top2))

    mid = (obj2 - obj1) / 2.0
    start = top1 + mid  # leftmost/topmost position of the center
    center = (obj1 + obj2) / 2.0 - start
    span = (top2 - top1) - (obj2 - obj1)  # room the center can move in
    if span == 0:
        return 0.0
    return center / span


def relative_x(root: Area, area: Area) -> float:
    return _relative(area.x1, area.x2, root.x1, root.x2)


def relative_y(root: Area, area: Area) -> float:
    return _relative(area.y1, area.y2, root.y1, root.y2)


# --- Sibling counts in the parent's grid ---

def count_areas(tree: AreaTree, parent: Area, region: Rect) -> int:
    """Number of the parent's children whose grid position intersects region."""
    return sum(1 for child in tree.children(parent) if child.topology.intersects(region))


def areas_above(tree: AreaTree, area: Area) -> int:
    parent = tree.parent(area)
    if parent is None:
        return 0
    gp = area.topology
    return count_areas(tree, parent, Rect(gp.x1, 0, gp.x2, gp.y1 - 1))


def areas_below(tree: AreaTree, area: Area) -> int:
    parent = tree.parent(area)
    if parent is None:
        return 0
    gp = area.topology
    return count_areas(tree, parent, Rect(gp.x1, gp.y2 + 1, gp.x2, GRID_INFINITY))


def areas_left(tree: AreaTree, area: Area) -> int:
    parent = tree.parent(area)
    if parent is None:
        return 0
    gp = area.topology
    return count_areas(tree, parent, Rect(0, gp.y1, gp.x1 - 1, gp.y2))


def areas_right(tree: AreaTree, area: Area) -> int:
    parent = tree.parent(area)
    if parent is None:
        return 0
    gp = area.topology
    return count_areas(tree, parent, Rect(gp.x2 + 1, gp.y1, GRID_INFINITY, gp.y2))
