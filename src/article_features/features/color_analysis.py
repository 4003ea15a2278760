"""
Color coverage metrics.

Both analyzers look at the whole page once and then answer, for any area,
how common its colors are: text in a rare color or on a rare background
stands out.
"""

from collections import Counter
from typing import Dict, Optional, Protocol

from article_features.model.area import Area, AreaTree, Color

UNAVAILABLE = -1.0


class ColorMetricsProvider(Protocol):
    def color_percentage(self, area: Area) -> float:
        ...


class ColorAnalyzer:
    """
    Share of the page text written in the area's dominant text color.

    Per-area color usage is built from the children's usage and kept, so
    every box of the page is counted once.
    """

    def __init__(self, tree: AreaTree, root: Optional[Area] = None):
        self.tree = tree
        self.root = root if root is not None else tree.root
        self._usage_cache: Dict[int, Counter] = {}
        self.histogram: Counter = self._usage(self.root)
        self.total = sum(self.histogram.values())

    def _usage(self, area: Area) -> Counter:
        usage = self._usage_cache.get(area.index)
        if usage is None:
            usage = Counter()
            for box in area.boxes:
                if box.text:
                    usage[box.color] += len(box.text)
            for child in self.tree.children(area):
                usage.update(self._usage(child))
            self._usage_cache[area.index] = usage
        return usage

    def dominant_color(self, area: Area) -> Optional[Color]:
        usage = self._usage(area)
        return usage.most_common(1)[0][0] if usage else None

    def color_percentage(self, area: Area) -> float:
        if self.total == 0:
            return 0.0
        color = self.dominant_color(area)
        if color is None:
            return 0.0
        return self.histogram[color] / self.total


class BackgroundColorAnalyzer:
    """
    Share of the page text lying on the area's effective background color.

    Areas without any background (not even inherited) get UNAVAILABLE.
    """

    def __init__(self, tree: AreaTree, root: Optional[Area] = None):
        self.tree = tree
        self.root = root if root is not None else tree.root
        self.histogram: Counter = Counter()
        for area in tree.subtree(self.root):
            size = sum(len(box.text) for box in area.boxes)
            if size:
                self.histogram[tree.effective_background(area)] += size
        self.total = sum(self.histogram.values())

    def color_percentage(self, area: Area) -> float:
        background = self.tree.effective_background(area)
        if background is None:
            return UNAVAILABLE
        if self.total == 0:
            return 0.0
        return self.histogram[background] / self.total
