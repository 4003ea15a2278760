"""Layout tree model: areas, boxes, tags and the tree loader."""

from .area import Area, AreaTree, Box, Color, Rect, Tag
from .loader import TreeFormatError, load_tree, tree_from_dict

__all__ = [
    'Area',
    'AreaTree',
    'Box',
    'Color',
    'Rect',
    'Tag',
    'TreeFormatError',
    'load_tree',
    'tree_from_dict',
]
