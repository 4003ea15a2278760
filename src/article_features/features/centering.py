"""
Horizontal centering inference.

Whether an area is centered in its parent cannot always be decided from its
own margins: a full-width area may hold centered content or may just be
stretched. Such cases are resolved by looking at the nearest siblings whose
own state is known.
"""

import logging
from enum import Enum
from typing import Dict, Optional, Tuple

from article_features.model.area import Area, AreaTree
from article_features.utils.constants import CENTERING_THRESHOLD

logger = logging.getLogger(__name__)


class CenteringState(Enum):
    NOT_CENTERED = 0
    CENTERED = 1
    UNKNOWN = 2


def _lr_aligned(a1: Area, a2: Area) -> bool:
    """True when the areas share the left edge, the right edge or both."""
    return a1.x1 == a2.x1 or a1.x2 == a2.x2


Neighbour = Tuple[Optional[Area], CenteringState]
NO_NEIGHBOUR: Neighbour = (None, CenteringState.UNKNOWN)


class CenteringResolver:
    """
    Three-valued centering inference over one area tree.

    Results are memoized per (area, look_before, look_after); the memo is
    dropped as soon as the tree version changes.

    A one-directional state only depends on the siblings on that side, so
    the nearest decided sibling in each direction is found by one pass over
    the parent's children instead of chasing siblings one call at a time.
    """

    def __init__(self, tree: AreaTree):
        self.tree = tree
        self._memo: Dict[Tuple[int, bool, bool], CenteringState] = {}
        self._nearest: Dict[Tuple[int, bool], Neighbour] = {}
        self._memo_version = tree.version

    def clear(self) -> None:
        self._memo.clear()
        self._nearest.clear()
        self._memo_version = self.tree.version

    def is_centered(self, area: Area) -> bool:
        return self.state(area) is CenteringState.CENTERED

    def state(self, area: Area, look_before: bool = True, look_after: bool = True) -> CenteringState:
        """
        Guess whether the area is horizontally centered within its parent.

        Args:
            area: The area to examine.
            look_before: May the preceding siblings be compared?
            look_after: May the following siblings be compared?

        Returns:
            CenteringState: NOT_CENTERED, CENTERED, or UNKNOWN when there is
            nothing to decide from.
        """
        if self._memo_version != self.tree.version:
            self.clear()
        key = (area.index, look_before, look_after)
        state = self._memo.get(key)
        if state is None:
            state = self._compute(area, look_before, look_after)
            self._memo[key] = state
        return state

    def _compute(self, area: Area, look_before: bool, look_after: bool) -> CenteringState:
        parent = self.tree.parent(area)
        if parent is None:
            return CenteringState.UNKNOWN
        prev = self._nearest_known(parent, area, backwards=True) if look_before else NO_NEIGHBOUR
        next_ = self._nearest_known(parent, area, backwards=False) if look_after else NO_NEIGHBOUR
        return self._decide(parent, area, prev, next_)

    def _decide(self, parent: Area, area: Area, prev: Neighbour, next_: Neighbour) -> CenteringState:
        left = area.x1 - parent.x1
        right = parent.x2 - area.x2
        limit = max(1, int(round(((left + right) / 2.0) * CENTERING_THRESHOLD)))
        middle = abs(left - right) <= limit
        fullwidth = left == 0 and right == 0

        if not middle and not fullwidth:
            return CenteringState.NOT_CENTERED

        (prev_area, prev_state), (next_area, next_state) = prev, next_
        if prev_state is not CenteringState.UNKNOWN or next_state is not CenteringState.UNKNOWN:
            if fullwidth:
                if CenteringState.NOT_CENTERED in (prev_state, next_state):
                    return CenteringState.NOT_CENTERED
                return CenteringState.CENTERED
            # in the middle: centered unless aligned with a neighbour
            if ((prev_area is not None and _lr_aligned(area, prev_area))
                    or (next_area is not None and _lr_aligned(area, next_area))):
                return CenteringState.NOT_CENTERED
            return CenteringState.CENTERED

        if fullwidth:
            return CenteringState.UNKNOWN
        return CenteringState.CENTERED if middle else CenteringState.NOT_CENTERED

    def _nearest_known(self, parent: Area, area: Area, backwards: bool) -> Neighbour:
        key = (area.index, backwards)
        if key not in self._nearest:
            self._scan_siblings(parent, backwards)
        neighbour = self._nearest[key]
        if neighbour[0] is None:
            logger.debug("No sibling with a known centering state for area %d", area.index)
        return neighbour

    def _scan_siblings(self, parent: Area, backwards: bool) -> None:
        """
        Walk the children of parent in one direction, recording for each the
        nearest sibling already passed whose one-sided state is decided.

        Looking backwards the walk goes first to last and settles the
        (look_before=True, look_after=False) states; looking forwards it goes
        last to first and settles (look_before=False, look_after=True).
        """
        children = self.tree.children(parent)
        if not backwards:
            children = list(reversed(children))

        nearest = NO_NEIGHBOUR
        for child in children:
            self._nearest[(child.index, backwards)] = nearest
            key = (child.index, backwards, not backwards)
            state = self._memo.get(key)
            if state is None:
                if backwards:
                    state = self._decide(parent, child, nearest, NO_NEIGHBOUR)
                else:
                    state = self._decide(parent, child, NO_NEIGHBOUR, nearest)
                self._memo[key] = state
            if state is not CenteringState.UNKNOWN:
                nearest = (child, state)
