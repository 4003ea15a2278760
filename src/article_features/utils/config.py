"""Extractor configuration: markedness weights and dataset schema location."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

import yaml

from article_features.utils.constants import DEFAULT_WEIGHTS, WEIGHT_NAMES


class WeightConfigurationError(ValueError):
    """Raised when a weight vector or configuration file is malformed."""


@dataclass(frozen=True)
class ExtractorConfig:
    weights: Tuple[float, ...] = DEFAULT_WEIGHTS
    schema_path: Optional[Path] = None


def validate_weights(values: Iterable[Any]) -> Tuple[float, ...]:
    """
    Check a weight vector and normalize it to a tuple of floats.

    Args:
        values: Eight numbers ordered as WEIGHT_NAMES.

    Returns:
        Tuple[float, ...]: The validated weights.

    Raises:
        WeightConfigurationError: If the vector is not exactly eight numbers.
    """
    if values is None or isinstance(values, (str, bytes, Mapping)):
        raise WeightConfigurationError(f"Weights must be a sequence of {len(WEIGHT_NAMES)} numbers, got {values!r}")

    weights = list(values)
    if len(weights) != len(WEIGHT_NAMES):
        raise WeightConfigurationError(
            f"Expected {len(WEIGHT_NAMES)} weights ({', '.join(WEIGHT_NAMES)}), got {len(weights)}"
        )

    result = []
    for name, value in zip(WEIGHT_NAMES, weights):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise WeightConfigurationError(f"Weight '{name}' must be a number, got {value!r}")
        result.append(float(value))
    return tuple(result)


def weights_from_mapping(mapping: Mapping[str, Any]) -> Tuple[float, ...]:
    """Merge named weights over the defaults."""
    unknown = set(mapping) - set(WEIGHT_NAMES)
    if unknown:
        raise WeightConfigurationError(f"Unknown weight names: {sorted(unknown)}")
    merged = dict(zip(WEIGHT_NAMES, DEFAULT_WEIGHTS))
    merged.update(mapping)
    return validate_weights(merged[name] for name in WEIGHT_NAMES)


def load_config(path: Union[str, Path]) -> ExtractorConfig:
    """
    Load an extractor configuration from a YAML file.

    The file may hold a ``weights`` entry (a list of eight numbers or a
    mapping of weight name to value) and a ``schema`` path, relative to the
    configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        ExtractorConfig: The parsed configuration.

    Raises:
        WeightConfigurationError: If the file is missing or malformed.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise WeightConfigurationError(f"Failed to load configuration from {path}: {e}") from e

    if not isinstance(data, Mapping):
        raise WeightConfigurationError(f"Configuration in {path} must be a mapping")

    raw_weights = data.get("weights")
    if raw_weights is None:
        weights = DEFAULT_WEIGHTS
    elif isinstance(raw_weights, Mapping):
        weights = weights_from_mapping(raw_weights)
    else:
        weights = validate_weights(raw_weights)

    schema_path = data.get("schema")
    if schema_path is not None:
        schema_path = Path(schema_path)
        if not schema_path.is_absolute():
            schema_path = path.parent / schema_path

    return ExtractorConfig(weights=weights, schema_path=schema_path)
