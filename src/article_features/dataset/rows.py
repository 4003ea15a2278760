"""Mapping feature vectors to dataset rows and DataFrames."""

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional, Union

import pandas as pd

from article_features.dataset.schema import RESERVED_COLUMNS, SchemaError, load_schema
from article_features.features.vector import FeatureVector
from article_features.utils.console import log_error

if TYPE_CHECKING:
    from article_features.core import ArticleFeatureExtractor
    from article_features.model.area import Area

COLUMN_COUNT = 1  # columns are not detected yet


def feature_row(vector: FeatureVector) -> List[float]:
    """Values of one dataset row, ordered as FEATURE_COLUMNS."""
    reserved = [0.0] * len(RESERVED_COLUMNS)  # id and class stay 0
    return reserved + [
        vector.font_size * 100,
        vector.weight,
        vector.style,
        1.0 if vector.replaced else 0.0,
        float(vector.areas_above),
        float(vector.areas_below),
        float(vector.areas_left),
        float(vector.areas_right),
        float(vector.line_count),
        float(COLUMN_COUNT),
        float(vector.depth),
        float(vector.text_length),
        vector.p_digits,
        vector.p_lower,
        vector.p_upper,
        vector.p_spaces,
        vector.p_punct,
        vector.rel_x,
        vector.rel_y,
        vector.text_luminosity,
        vector.background_luminosity,
        vector.contrast,
        vector.markedness,
        vector.color_percentage,
    ]


def create_empty_dataset(schema_path: Optional[Union[str, Path]] = None) -> Optional[pd.DataFrame]:
    """
    Create an empty dataset with the header columns.

    Returns:
        Optional[pd.DataFrame]: The empty frame, or None if the header
        could not be loaded.
    """
    try:
        schema = load_schema(schema_path)
    except SchemaError as e:
        log_error(f"Couldn't create empty dataset: {e}")
        return None
    return pd.DataFrame(columns=schema.columns, dtype=float)


def tree_to_dataframe(
    extractor: 'ArticleFeatureExtractor',
    areas: Optional[Iterable['Area']] = None,
) -> Optional[pd.DataFrame]:
    """
    Build the dataset rows for the areas of the extractor's current tree.

    Args:
        extractor: Extractor with a tree set.
        areas: Areas to describe; all areas under the root when omitted.

    Returns:
        Optional[pd.DataFrame]: One row per area, or None if the dataset
        header is unavailable.
    """
    empty = create_empty_dataset(extractor.schema_path)
    if empty is None:
        return None

    ctx = extractor.context
    if areas is None:
        areas = ctx.tree.subtree(ctx.root)
    rows = [feature_row(extractor.feature_vector(area)) for area in areas]
    if not rows:
        return empty
    return pd.DataFrame(rows, columns=empty.columns)
