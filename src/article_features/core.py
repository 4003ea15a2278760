"""
ArticleFeatureExtractor: main interface for area feature extraction and markedness scoring.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from article_features.dataset.rows import create_empty_dataset, feature_row, tree_to_dataframe
from article_features.features.centering import CenteringState
from article_features.features.color_analysis import ColorMetricsProvider
from article_features.features.context import AnalysisContext
from article_features.features.indentation import indentation
from article_features.features.luminosity import contrast
from article_features.features.markedness import markedness
from article_features.features.text_stats import line_count
from article_features.features.vector import FeatureVector, extract_feature_vector
from article_features.model.area import Area, AreaTree
from article_features.utils.config import load_config, validate_weights
from article_features.utils.console import log_info
from article_features.utils.constants import DEFAULT_WEIGHTS


class ArticleFeatureExtractor:
    def __init__(
        self,
        weights: Optional[Iterable[float]] = None,
        schema_path: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the ArticleFeatureExtractor instance.

        Args:
            weights (Optional[Iterable[float]]): Eight markedness weights; DEFAULT_WEIGHTS when omitted.
            schema_path (Optional[Union[str, Path]]): Dataset header file; the packaged header when omitted.

        Raises:
            WeightConfigurationError: If the weights are malformed.
        """
        self._weights = validate_weights(weights if weights is not None else DEFAULT_WEIGHTS)
        self.schema_path = schema_path
        self._context: Optional[AnalysisContext] = None

    @classmethod
    def from_config(cls, path: Union[str, Path]) -> "ArticleFeatureExtractor":
        """
        Create an extractor from a YAML configuration file.

        Args:
            path (Union[str, Path]): Path to the configuration.

        Returns:
            ArticleFeatureExtractor: The configured extractor.
        """
        config = load_config(path)
        return cls(weights=config.weights, schema_path=config.schema_path)

    # --- Weights ---

    @property
    def weights(self) -> List[float]:
        return list(self._weights)

    @weights.setter
    def weights(self, values: Iterable[float]) -> None:
        self.set_weights(values)

    def get_weights(self) -> List[float]:
        return self.weights

    def set_weights(self, values: Iterable[float]) -> None:
        """
        Replace the markedness weights.

        Args:
            values (Iterable[float]): Eight weights ordered as WEIGHT_NAMES.

        Raises:
            WeightConfigurationError: If the weights are malformed.
        """
        self._weights = validate_weights(values)
        if self._context is not None:
            self._context = self._context.with_weights(self._weights)

    # --- Tree ---

    def set_tree(
        self,
        tree: AreaTree,
        root: Optional[Area] = None,
        color_analyzer: Optional[ColorMetricsProvider] = None,
        background_analyzer: Optional[ColorMetricsProvider] = None,
    ) -> AnalysisContext:
        """
        Start analyzing a tree. All state derived from a previous tree is dropped.

        Args:
            tree (AreaTree): The area tree.
            root (Optional[Area]): Root of the analyzed subtree; the tree root when omitted.
            color_analyzer (Optional[ColorMetricsProvider]): Foreground color coverage provider.
            background_analyzer (Optional[ColorMetricsProvider]): Background color coverage provider.

        Returns:
            AnalysisContext: The new analysis context.
        """
        context = AnalysisContext.for_root(
            tree,
            root,
            weights=self._weights,
            color_analyzer=color_analyzer,
            background_analyzer=background_analyzer,
        )
        self._context = context
        log_info(f"Analyzing tree of {len(tree)} areas (average font size {context.average_font_size:.2f})")
        return context

    @property
    def context(self) -> AnalysisContext:
        if self._context is None:
            raise RuntimeError("No area tree set; call set_tree() first")
        return self._context

    @property
    def tree_root(self) -> Optional[Area]:
        return self._context.root if self._context is not None else None

    # --- Per-area features ---

    def centering_state(self, area: Area) -> CenteringState:
        return self.context.centering.state(area)

    def is_centered(self, area: Area) -> bool:
        return self.context.centering.is_centered(area)

    def indentation(self, area: Area) -> float:
        ctx = self.context
        return indentation(ctx.tree, ctx.centering, area)

    def contrast(self, area: Area) -> float:
        return contrast(self.context.tree, area)

    def line_count(self, area: Area) -> int:
        return line_count(self.context.tree, area)

    def markedness(self, area: Area) -> float:
        """
        Compute the markedness of the area, its visual importance based on
        font, indentation, contrast, centering and color coverage.

        Args:
            area (Area): The area to score.

        Returns:
            float: The weighted markedness.
        """
        return markedness(self.context, area)

    def feature_vector(self, area: Area) -> FeatureVector:
        return extract_feature_vector(self.context, area)

    # --- Dataset ---

    def area_features(self, area: Area) -> List[float]:
        """
        Dataset row of an area, ordered as the dataset header.

        Args:
            area (Area): The area to describe.

        Returns:
            List[float]: The row values.
        """
        return feature_row(self.feature_vector(area))

    def create_empty_dataset(self) -> Optional[pd.DataFrame]:
        return create_empty_dataset(self.schema_path)

    def to_dataframe(self, areas: Optional[Iterable[Area]] = None) -> Optional[pd.DataFrame]:
        """
        Build the dataset for the current tree.

        Args:
            areas (Optional[Iterable[Area]]): Areas to include; every area under the root when omitted.

        Returns:
            Optional[pd.DataFrame]: The dataset, or None if the header is unavailable.
        """
        return tree_to_dataframe(self, areas)
