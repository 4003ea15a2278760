"""Dataset boundary: header loading and feature rows."""

from .rows import create_empty_dataset, feature_row, tree_to_dataframe
from .schema import FEATURE_COLUMNS, DatasetSchema, SchemaError, load_schema

__all__ = [
    'FEATURE_COLUMNS',
    'DatasetSchema',
    'SchemaError',
    'create_empty_dataset',
    'feature_row',
    'load_schema',
    'tree_to_dataframe',
]
