"""Utilities module for article features."""

from .config import ExtractorConfig, WeightConfigurationError, load_config, validate_weights
from .constants import DEFAULT_WEIGHTS, MIN_MARKEDNESS_DIFFERENCE, WEIGHT_NAMES

__all__ = [
    # Constants
    'DEFAULT_WEIGHTS',
    'MIN_MARKEDNESS_DIFFERENCE',
    'WEIGHT_NAMES',
    # Config
    'ExtractorConfig',
    'WeightConfigurationError',
    'load_config',
    'validate_weights',
]
