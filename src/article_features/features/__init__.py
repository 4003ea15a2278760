"""Feature heuristics: centering, indentation, text, luminosity, position and markedness."""

from .centering import CenteringResolver, CenteringState
from .color_analysis import BackgroundColorAnalyzer, ColorAnalyzer, ColorMetricsProvider
from .context import AnalysisContext
from .indentation import indentation
from .luminosity import average_text_luminosity, background_luminosity, color_luminosity, contrast, contrast_ratio
from .markedness import markedness, markedness_differs, markedness_terms
from .position import areas_above, areas_below, areas_left, areas_right, relative_x, relative_y
from .text_stats import TextStats, char_ratios, count_lines, line_count
from .vector import FeatureVector, extract_feature_vector

__all__ = [
    'AnalysisContext',
    'BackgroundColorAnalyzer',
    'CenteringResolver',
    'CenteringState',
    'ColorAnalyzer',
    'ColorMetricsProvider',
    'FeatureVector',
    'TextStats',
    'areas_above',
    'areas_below',
    'areas_left',
    'areas_right',
    'average_text_luminosity',
    'background_luminosity',
    'char_ratios',
    'color_luminosity',
    'contrast',
    'contrast_ratio',
    'count_lines',
    'extract_feature_vector',
    'indentation',
    'line_count',
    'markedness',
    'markedness_differs',
    'markedness_terms',
    'relative_x',
    'relative_y',
]
