"""
Markedness: a weighted estimate of the visual prominence of an area.

The score is a plain linear combination of eight terms; it is neither
normalized nor clipped, so the weight vector is the only calibration.
"""

from typing import Dict, Optional, Tuple

import numpy as np

from article_features.features.color_analysis import UNAVAILABLE
from article_features.features.context import AnalysisContext
from article_features.features.indentation import indentation
from article_features.features.luminosity import average_text_luminosity, background_luminosity, contrast_ratio
from article_features.model.area import Area
from article_features.utils.constants import MIN_MARKEDNESS_DIFFERENCE

ColorMeasures = Dict[str, float]


def color_measures(ctx: AnalysisContext, area: Area) -> ColorMeasures:
    """Luminosity, contrast and color coverage of an area, computed once."""
    text_lum = average_text_luminosity(ctx.tree, area)
    background_lum = background_luminosity(ctx.tree, area)
    background_percentage = ctx.background_analyzer.color_percentage(area)
    return {
        'text_luminosity': text_lum,
        'background_luminosity': background_lum,
        'contrast': contrast_ratio(background_lum, text_lum),
        'color_percentage': ctx.color_analyzer.color_percentage(area),
        'background_color_percentage': background_percentage if background_percentage is not None else UNAVAILABLE,
    }


def background_term(percentage: Optional[float]) -> float:
    """1 - background coverage, or 1.0 when coverage is unavailable."""
    if percentage is None or percentage < 0.0:
        return 1.0
    return 1.0 - min(percentage, 1.0)


def markedness_terms(
    ctx: AnalysisContext,
    area: Area,
    measures: Optional[ColorMeasures] = None,
) -> Tuple[float, ...]:
    """The raw terms, ordered like WEIGHT_NAMES."""
    if measures is None:
        measures = color_measures(ctx, area)
    return (
        area.font_size / ctx.average_font_size,  # relative font size
        float(area.font_weight),
        float(area.font_style),
        indentation(ctx.tree, ctx.centering, area),
        measures['contrast'],
        1.0 if ctx.centering.is_centered(area) else 0.0,
        1.0 - measures['color_percentage'],
        background_term(measures['background_color_percentage']),
    )


def markedness(ctx: AnalysisContext, area: Area, measures: Optional[ColorMeasures] = None) -> float:
    return float(np.dot(ctx.weights, markedness_terms(ctx, area, measures)))


def markedness_differs(first: float, second: float) -> bool:
    """True when two markedness values are far enough apart to mean something."""
    return abs(first - second) >= MIN_MARKEDNESS_DIFFERENCE
