"""
Entity tagging operator.

The taggers themselves (dates, times, persons, ...) live outside this
package; the operator only walks the tree and attaches whatever tags they
report.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Set, Tuple

from article_features.model.area import Area, AreaTree, Tag

logger = logging.getLogger(__name__)

Annotation = Tuple[Tag, float]


class TaggerKind(Enum):
    TIME = 'time'
    DATE = 'date'
    PERSONS = 'persons'
    LOCATIONS = 'locations'
    TITLE = 'title'
    PAGES = 'pages'


@dataclass(frozen=True)
class Tagger:
    """
    One entity tagger.

    ``annotate`` receives the tree and an area and yields zero or more
    (tag, support) pairs for that area.
    """

    kind: TaggerKind
    annotate: Callable[[AreaTree, Area], Iterable[Annotation]]


class TagEntitiesOperator:
    operator_id = 'ArticleFeatures.Tag.Entities'
    name = 'Tag entities'
    description = 'Applies the registered entity taggers to every area of a subtree'

    def __init__(self, taggers: Optional[Iterable[Tagger]] = None):
        self._taggers: List[Tagger] = list(taggers) if taggers else []

    @property
    def taggers(self) -> List[Tagger]:
        return list(self._taggers)

    def add_tagger(self, tagger: Tagger) -> None:
        """Register a new tagger to be used by this operator."""
        self._taggers.append(tagger)

    def apply(self, tree: AreaTree, root: Optional[Area] = None) -> int:
        """
        Tag all areas under root (the tree root by default).

        Returns:
            int: Number of (area, tag) annotations attached.
        """
        root = root if root is not None else tree.root
        attached = 0
        for area in tree.subtree(root):
            for tagger in self._taggers:
                for tag, support in tagger.annotate(tree, area):
                    area.add_tag(tag, support)
                    attached += 1
        logger.debug("%s: %d annotations from %d taggers", self.name, attached, len(self._taggers))
        return attached


def all_tags(tree: AreaTree, area: Area) -> Set[Tag]:
    """Tags of the area and of its direct child areas."""
    tags = set(area.tags)
    for child in tree.children(area):
        tags.update(child.tags)
    return tags
