"""
Article Features - visual feature extraction and markedness scoring for segmented web pages
"""
from .core import ArticleFeatureExtractor
from .features import AnalysisContext, CenteringState, FeatureVector
from .model import Area, AreaTree, Box, Color, Rect, Tag, load_tree, tree_from_dict
from .utils import DEFAULT_WEIGHTS, WeightConfigurationError

__version__ = "0.1.0"
__all__ = [
    "ArticleFeatureExtractor",
    "AnalysisContext",
    "Area",
    "AreaTree",
    "Box",
    "CenteringState",
    "Color",
    "DEFAULT_WEIGHTS",
    "FeatureVector",
    "Rect",
    "Tag",
    "WeightConfigurationError",
    "load_tree",
    "tree_from_dict",
]
