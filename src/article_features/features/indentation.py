"""Indentation metric based on the grid topology."""

from article_features.features.centering import CenteringResolver
from article_features.model.area import Area, AreaTree
from article_features.utils.constants import MAX_INDENT_LEVELS


def indentation(tree: AreaTree, centering: CenteringResolver, area: Area) -> float:
    """
    Compute the indentation metric of an area.

    Indentation belongs to a visual line, so an area that continues a line
    takes the value of the first area on that line.

    Args:
        tree: The area tree.
        centering: Centering resolver bound to the same tree.
        area: The area to examine.

    Returns:
        float: 1.0 for non-indented areas down to 0.0 for the most indented.
    """
    # follow the line back to its first area
    first = area
    seen = {first.index}
    prev = tree.previous_on_line(first)
    while prev is not None and prev.index not in seen:
        seen.add(prev.index)
        first = prev
        prev = tree.previous_on_line(first)

    levels = float(MAX_INDENT_LEVELS)
    parent = tree.parent(first)
    if parent is not None and not centering.is_centered(first):
        levels -= first.topology.x1 - tree.min_indent(parent)
    return min(max(levels, 0.0), MAX_INDENT_LEVELS) / MAX_INDENT_LEVELS
