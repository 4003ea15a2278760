"""Dataset header loading and validation."""

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import List, Optional, Tuple, Union

import yaml

from article_features.utils.constants import SCHEMA_RESOURCE

# Column order of a dataset row: the reserved slots, then the features
RESERVED_COLUMNS = ['id', 'class']
FEATURE_COLUMNS = RESERVED_COLUMNS + [
    'fontsize',
    'weight',
    'style',
    'replaced',
    'above',
    'below',
    'left',
    'right',
    'nlines',
    'ncols',
    'depth',
    'length',
    'pdigits',
    'plower',
    'pupper',
    'pspaces',
    'ppunct',
    'relx',
    'rely',
    'tlum',
    'bglum',
    'contrast',
    'markedness',
    'cperc',
]

NUMERIC_TYPE = 'numeric'


class SchemaError(Exception):
    """Raised when the dataset header cannot be loaded or does not match the rows."""


@dataclass(frozen=True)
class DatasetSchema:
    relation: str
    attributes: Tuple[Tuple[str, str], ...]

    @property
    def columns(self) -> List[str]:
        return [name for name, _ in self.attributes]


def _read_header(path: Optional[Union[str, Path]]) -> str:
    if path is None:
        return resources.files('article_features.dataset').joinpath(SCHEMA_RESOURCE).read_text(encoding='utf-8')
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def load_schema(path: Optional[Union[str, Path]] = None) -> DatasetSchema:
    """
    Load the dataset header.

    Args:
        path: Header file; the packaged header when omitted.

    Returns:
        DatasetSchema: The parsed header.

    Raises:
        SchemaError: If the header is missing, malformed or its attributes
            differ from FEATURE_COLUMNS.
    """
    try:
        data = yaml.safe_load(_read_header(path))
    except (OSError, yaml.YAMLError) as e:
        raise SchemaError(f"Couldn't read dataset header: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get('attributes'), list):
        raise SchemaError("Dataset header must define an 'attributes' list")

    try:
        attributes = tuple((str(a['name']), str(a.get('type', NUMERIC_TYPE))) for a in data['attributes'])
    except (KeyError, TypeError, AttributeError) as e:
        raise SchemaError(f"Malformed attribute in dataset header: {e}") from e

    schema = DatasetSchema(relation=str(data.get('relation', 'articles')), attributes=attributes)
    if schema.columns != FEATURE_COLUMNS:
        missing = [c for c in FEATURE_COLUMNS if c not in schema.columns]
        raise SchemaError(f"Dataset header does not match the feature row (missing: {missing})")
    non_numeric = [name for name, kind in attributes if kind != NUMERIC_TYPE]
    if non_numeric:
        raise SchemaError(f"Non-numeric attributes in dataset header: {non_numeric}")
    return schema
