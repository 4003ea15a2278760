"""
Feature vector extraction.

One FeatureVector per area, computed on demand from the analysis context.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from article_features.features.context import AnalysisContext
from article_features.features.markedness import color_measures, markedness
from article_features.features.position import (
    areas_above,
    areas_below,
    areas_left,
    areas_right,
    relative_x,
    relative_y,
)
from article_features.features.text_stats import char_ratios, line_count
from article_features.model.area import Area
from article_features.utils.constants import NO_TAG_LEVEL


@dataclass(frozen=True)
class FeatureVector:
    font_size: float
    weight: float
    style: float
    replaced: bool
    areas_above: int
    areas_below: int
    areas_left: int
    areas_right: int
    line_count: int
    depth: int
    text_length: int
    p_digits: float
    p_lower: float
    p_upper: float
    p_spaces: float
    p_punct: float
    rel_x: float
    rel_y: float
    text_luminosity: float
    background_luminosity: float
    contrast: float
    color_percentage: float
    background_color_percentage: float
    markedness: float
    tag_level: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# --- Feature Extraction Helpers ---

def _get_style_features(ctx: AnalysisContext, area: Area) -> Dict[str, Any]:
    return {
        'font_size': area.font_size / ctx.average_font_size,
        'weight': float(area.font_weight),
        'style': float(area.font_style),
        'replaced': bool(area.replaced),
    }


def _get_structure_features(ctx: AnalysisContext, area: Area) -> Dict[str, Any]:
    tree = ctx.tree
    return {
        'areas_above': areas_above(tree, area),
        'areas_below': areas_below(tree, area),
        'areas_left': areas_left(tree, area),
        'areas_right': areas_right(tree, area),
        'line_count': line_count(tree, area),
        'depth': area.depth + 1,
        'rel_x': relative_x(ctx.root, area),
        'rel_y': relative_y(ctx.root, area),
    }


def _get_text_features(ctx: AnalysisContext, area: Area) -> Dict[str, Any]:
    text = ctx.tree.text(area)
    return {'text_length': len(text), **asdict(char_ratios(text))}


def extract_feature_vector(ctx: AnalysisContext, area: Area) -> FeatureVector:
    """
    Compute the complete feature vector of an area.

    Args:
        ctx: Analysis context of the tree the area belongs to.
        area: The area to describe.

    Returns:
        FeatureVector: The immutable feature record.
    """
    tag = area.most_supported_tag()
    colors = color_measures(ctx, area)
    return FeatureVector(
        **_get_style_features(ctx, area),
        **_get_structure_features(ctx, area),
        **_get_text_features(ctx, area),
        **colors,
        markedness=markedness(ctx, area, colors),
        tag_level=tag.level if tag is not None else NO_TAG_LEVEL,
    )
