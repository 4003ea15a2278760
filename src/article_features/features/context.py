"""Per-root analysis state shared by all feature computations of one pass."""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from article_features.features.centering import CenteringResolver
from article_features.features.color_analysis import (
    BackgroundColorAnalyzer,
    ColorAnalyzer,
    ColorMetricsProvider,
)
from article_features.model.area import Area, AreaTree
from article_features.utils.config import validate_weights
from article_features.utils.console import log_warning
from article_features.utils.constants import DEFAULT_WEIGHTS


@dataclass(frozen=True)
class AnalysisContext:
    """
    Everything derived from the analyzed root.

    A context is built once per root and never modified; analyzing another
    root, or the same root after it changed, means building a new one.
    """

    tree: AreaTree
    root: Area
    average_font_size: float
    color_analyzer: ColorMetricsProvider
    background_analyzer: ColorMetricsProvider
    centering: CenteringResolver
    weights: Tuple[float, ...] = DEFAULT_WEIGHTS

    @classmethod
    def for_root(
        cls,
        tree: AreaTree,
        root: Optional[Area] = None,
        weights: Iterable[float] = DEFAULT_WEIGHTS,
        color_analyzer: Optional[ColorMetricsProvider] = None,
        background_analyzer: Optional[ColorMetricsProvider] = None,
    ) -> 'AnalysisContext':
        """
        Build the analysis context for a root area.

        Args:
            tree: The area tree.
            root: The analyzed root; the tree root when omitted.
            weights: Markedness weights, validated here.
            color_analyzer: Foreground color coverage provider.
            background_analyzer: Background color coverage provider.

        Returns:
            AnalysisContext: A fresh context.
        """
        root = root if root is not None else tree.root
        weights = validate_weights(weights)

        # the root's font size is the text-weighted average of the page
        average_font_size = root.font_size
        if average_font_size <= 0:
            log_warning(f"Root area {root.index} has no font size, using 1.0 as the average")
            average_font_size = 1.0

        return cls(
            tree=tree,
            root=root,
            average_font_size=average_font_size,
            color_analyzer=color_analyzer if color_analyzer is not None else ColorAnalyzer(tree, root),
            background_analyzer=(
                background_analyzer if background_analyzer is not None else BackgroundColorAnalyzer(tree, root)
            ),
            centering=CenteringResolver(tree),
            weights=weights,
        )

    def with_weights(self, weights: Iterable[float]) -> 'AnalysisContext':
        return replace(self, weights=validate_weights(weights))
