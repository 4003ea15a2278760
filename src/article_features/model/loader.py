"""Loading serialized area trees (YAML or JSON) into an AreaTree."""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import numpy as np
import yaml

from article_features.model.area import Area, AreaTree, Box, Color, Rect, Tag

TYPOGRAPHY_FIELDS = ('font_size', 'font_weight', 'font_style')


class TreeFormatError(ValueError):
    """Raised when a serialized area tree cannot be interpreted."""


def _parse_box(data: Mapping[str, Any]) -> Box:
    try:
        return Box(
            text=str(data.get('text', '')),
            bounds=Rect.of(data['bounds']),
            color=Color.parse(data['color']) if data.get('color') is not None else None,
            font_size=float(data.get('font_size', 0.0)),
            font_weight=float(data.get('font_weight', 0.0)),
            font_style=float(data.get('font_style', 0.0)),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise TreeFormatError(f"Invalid box {data!r}: {e}") from e


def _parse_tags(entries: List[Mapping[str, Any]]) -> Dict[Tag, float]:
    tags: Dict[Tag, float] = {}
    for entry in entries:
        try:
            tag = Tag(
                name=str(entry['name']),
                tag_type=str(entry.get('type', 'entity')),
                level=int(entry.get('level', 0)),
            )
            tags[tag] = float(entry.get('support', 1.0))
        except (KeyError, TypeError, ValueError) as e:
            raise TreeFormatError(f"Invalid tag {entry!r}: {e}") from e
    return tags


def _subtree_average(tree: AreaTree, area: Area, attribute: str) -> float:
    """Text-length weighted average of a box attribute over the subtree."""
    boxes = tree.all_boxes(area)
    if not boxes:
        return 0.0
    values = np.array([getattr(box, attribute) for box in boxes], dtype=float)
    lengths = np.array([len(box.text) for box in boxes], dtype=float)
    if lengths.sum() == 0:
        return float(values.mean())
    return float(np.average(values, weights=lengths))


def _add_node(tree: AreaTree, data: Mapping[str, Any], parent: Optional[Area], missing: List[tuple]) -> None:
    if not isinstance(data, Mapping):
        raise TreeFormatError(f"Area must be a mapping, got {type(data).__name__}")
    if 'bounds' not in data:
        raise TreeFormatError("Area is missing 'bounds'")

    attributes: Dict[str, Any] = {}
    try:
        for name in TYPOGRAPHY_FIELDS:
            if name in data:
                attributes[name] = float(data[name])
        if 'replaced' in data:
            attributes['replaced'] = bool(data['replaced'])
        if data.get('min_indent') is not None:
            attributes['min_indent'] = int(data['min_indent'])

        area = tree.add_area(
            bounds=data['bounds'],
            parent=parent,
            topology=data.get('topology', (0, 0, 0, 0)),
            boxes=[_parse_box(b) for b in data.get('boxes', [])],
            background=data.get('background'),
            **attributes,
        )
    except (TypeError, ValueError) as e:
        raise TreeFormatError(f"Invalid area: {e}") from e

    area.tags.update(_parse_tags(data.get('tags', [])))
    missing.extend((area, name) for name in TYPOGRAPHY_FIELDS if name not in data)

    for child in data.get('children', []):
        _add_node(tree, child, area, missing)


def tree_from_dict(data: Mapping[str, Any]) -> AreaTree:
    """
    Build an area tree from a nested mapping.

    Each area mapping holds ``bounds`` and optionally ``topology``,
    ``font_size``, ``font_weight``, ``font_style``, ``replaced``,
    ``background``, ``min_indent``, ``boxes``, ``tags`` and ``children``.
    Typography missing on an area is derived from the boxes of its subtree.

    Args:
        data: The root area mapping.

    Returns:
        AreaTree: The populated tree.

    Raises:
        TreeFormatError: If the mapping is malformed.
    """
    tree = AreaTree()
    missing: List[tuple] = []
    _add_node(tree, data, None, missing)
    for area, name in missing:
        setattr(area, name, _subtree_average(tree, area, name))
    tree.touch()
    return tree


def load_tree(path: Union[str, Path]) -> AreaTree:
    """Read an area tree from a YAML (.yaml/.yml) or JSON file."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() in ('.yaml', '.yml'):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise TreeFormatError(f"Failed to read area tree from {path}: {e}") from e

    if not isinstance(data, Mapping):
        raise TreeFormatError(f"Area tree in {path} must be a mapping")
    # Allow the root to be wrapped as {'root': {...}}
    if 'root' in data and 'bounds' not in data:
        data = data['root']
    return tree_from_dict(data)
