"""
Area tree data model.

The layout tree is stored as an arena: every Area is addressed by a stable
integer index and refers to its parent, children and line neighbours by index
only. The parent's child list is the single ownership edge.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Union

ColorLike = Union['Color', str, Sequence[int]]


@dataclass(frozen=True)
class Rect:
    """Integer rectangle with inclusive corners (x1, y1) and (x2, y2)."""

    x1: int
    y1: int
    x2: int
    y2: int

    def intersects(self, other: 'Rect') -> bool:
        return (self.x1 <= other.x2 and other.x1 <= self.x2
                and self.y1 <= other.y2 and other.y1 <= self.y2)

    @classmethod
    def of(cls, values: Union['Rect', Sequence[int]]) -> 'Rect':
        if isinstance(values, Rect):
            return values
        x1, y1, x2, y2 = (int(v) for v in values)
        return cls(x1, y1, x2, y2)


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def parse(cls, value: ColorLike) -> 'Color':
        """Accepts '#rrggbb', '#rgb', an (r, g, b) sequence or a Color."""
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            hex_value = value.strip().lstrip('#')
            if len(hex_value) == 3:
                hex_value = ''.join(c * 2 for c in hex_value)
            if len(hex_value) != 6:
                raise ValueError(f"Invalid color string: {value!r}")
            return cls(int(hex_value[0:2], 16), int(hex_value[2:4], 16), int(hex_value[4:6], 16))
        red, green, blue = (int(v) for v in value)
        for channel in (red, green, blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {value!r}")
        return cls(red, green, blue)


@dataclass(frozen=True)
class Tag:
    """A classification label assigned to areas by the taggers."""

    name: str
    tag_type: str = 'entity'
    level: int = 0


@dataclass
class Box:
    """A leaf text fragment with its own bounds and foreground color."""

    text: str
    bounds: Rect
    color: Optional[Color] = None
    font_size: float = 0.0
    font_weight: float = 0.0
    font_style: float = 0.0


@dataclass(eq=False)
class Area:
    index: int
    bounds: Rect
    topology: Rect = Rect(0, 0, 0, 0)
    font_size: float = 0.0
    font_weight: float = 0.0
    font_style: float = 0.0
    replaced: bool = False
    boxes: List[Box] = field(default_factory=list)
    background: Optional[Color] = None
    tags: Dict[Tag, float] = field(default_factory=dict)
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)
    depth: int = 0
    position: int = 0  # index within the parent's child list
    min_indent: Optional[int] = None
    previous_on_line: Optional[int] = None

    # Pixel geometry shortcuts
    @property
    def x1(self) -> int:
        return self.bounds.x1

    @property
    def y1(self) -> int:
        return self.bounds.y1

    @property
    def x2(self) -> int:
        return self.bounds.x2

    @property
    def y2(self) -> int:
        return self.bounds.y2

    def add_tag(self, tag: Tag, support: float) -> None:
        """Attach a tag, keeping the strongest support seen so far."""
        if support > self.tags.get(tag, float('-inf')):
            self.tags[tag] = support

    def most_supported_tag(self) -> Optional[Tag]:
        if not self.tags:
            return None
        return max(self.tags.items(), key=lambda item: item[1])[0]


class AreaTree:
    """Arena holding all areas of one segmented page."""

    def __init__(self):
        self._areas: List[Area] = []
        self._text_cache: Dict[int, str] = {}
        self._text_cache_version = -1
        self.version = 0

    # --- Construction ---

    def add_area(
        self,
        bounds: Union[Rect, Sequence[int]],
        parent: Optional[Union[Area, int]] = None,
        topology: Union[Rect, Sequence[int]] = (0, 0, 0, 0),
        boxes: Optional[List[Box]] = None,
        background: Optional[ColorLike] = None,
        **attributes,
    ) -> Area:
        """
        Append a new area to the arena.

        Args:
            bounds: Pixel bounding box (x1, y1, x2, y2).
            parent: Parent area or its index. None creates the root.
            topology: Grid position within the parent's grid.
            boxes: Text boxes owned directly by the area.
            background: Own background color, if any.
            **attributes: Any other Area field (font_size, replaced, ...).

        Returns:
            Area: The created area.
        """
        parent_index = parent.index if isinstance(parent, Area) else parent
        if parent_index is None and self._areas:
            raise ValueError("Tree already has a root; pass a parent")
        if parent_index is not None and not 0 <= parent_index < len(self._areas):
            raise IndexError(f"Unknown parent area {parent_index}")

        area = Area(
            index=len(self._areas),
            bounds=Rect.of(bounds),
            topology=Rect.of(topology),
            boxes=list(boxes) if boxes else [],
            background=Color.parse(background) if background is not None else None,
            parent=parent_index,
            **attributes,
        )
        if parent_index is not None:
            parent_area = self._areas[parent_index]
            area.depth = parent_area.depth + 1
            area.position = len(parent_area.children)
            parent_area.children.append(area.index)

        self._areas.append(area)
        self.version += 1
        return area

    def touch(self) -> None:
        """Mark the tree as modified after editing areas in place."""
        self.version += 1

    # --- Access ---

    @property
    def root(self) -> Area:
        if not self._areas:
            raise IndexError("Empty area tree")
        return self._areas[0]

    def __getitem__(self, index: int) -> Area:
        return self._areas[index]

    def __len__(self) -> int:
        return len(self._areas)

    def __iter__(self) -> Iterator[Area]:
        if self._areas:
            yield from self.subtree(self.root)

    # --- Navigation ---

    def parent(self, area: Area) -> Optional[Area]:
        return self._areas[area.parent] if area.parent is not None else None

    def children(self, area: Area) -> List[Area]:
        return [self._areas[i] for i in area.children]

    def _sibling(self, area: Area, offset: int) -> Optional[Area]:
        if area.parent is None:
            return None
        siblings = self._areas[area.parent].children
        position = area.position + offset
        if 0 <= position < len(siblings):
            return self._areas[siblings[position]]
        return None

    def previous_sibling(self, area: Area) -> Optional[Area]:
        return self._sibling(area, -1)

    def next_sibling(self, area: Area) -> Optional[Area]:
        return self._sibling(area, 1)

    def previous_on_line(self, area: Area) -> Optional[Area]:
        """
        The area preceding this one on the same visual line.

        An explicit link set by the layout engine wins. Otherwise the previous
        sibling qualifies when it shares a grid row and ends before this area
        starts.
        """
        if area.previous_on_line is not None:
            return self._areas[area.previous_on_line]
        prev = self.previous_sibling(area)
        if prev is None:
            return None
        same_row = prev.topology.y1 <= area.topology.y2 and area.topology.y1 <= prev.topology.y2
        if same_row and prev.topology.x2 < area.topology.x1:
            return prev
        return None

    def subtree(self, area: Area) -> Iterator[Area]:
        """Pre-order iteration over the area and all its descendants."""
        stack = [area.index]
        while stack:
            current = self._areas[stack.pop()]
            yield current
            stack.extend(reversed(current.children))

    def all_boxes(self, area: Area) -> List[Box]:
        return [box for node in self.subtree(area) for box in node.boxes]

    def min_indent(self, area: Area) -> int:
        """Minimal grid column used by the area's children."""
        if area.min_indent is not None:
            return area.min_indent
        if not area.children:
            return 0
        return min(self._areas[i].topology.x1 for i in area.children)

    def effective_background(self, area: Optional[Area]) -> Optional[Color]:
        while area is not None:
            if area.background is not None:
                return area.background
            area = self.parent(area)
        return None

    def text(self, area: Area) -> str:
        """Text of the area: own boxes first, then the children, space separated."""
        if self._text_cache_version != self.version:
            self._text_cache = {}
            self._text_cache_version = self.version
        cached = self._text_cache.get(area.index)
        if cached is not None:
            return cached

        parts = [box.text for box in area.boxes]
        parts.extend(self.text(child) for child in self.children(area))
        text = ' '.join(part for part in parts if part)
        self._text_cache[area.index] = text
        return text

