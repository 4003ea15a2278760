"""Character class ratios and line counting."""

from dataclasses import dataclass
from typing import Iterable, Union

import regex as re

from article_features.model.area import Area, AreaTree, Box
from article_features.utils.constants import LINE_START_POSITION, LINE_THRESHOLD, PUNCTUATION_CHARS

# --- Compiled Regex Patterns ---
DIGIT_REGEX = re.compile(r'\p{Nd}')
LOWER_REGEX = re.compile(r'\p{Ll}')
UPPER_REGEX = re.compile(r'\p{Lu}')
SPACE_REGEX = re.compile(r'\p{Zs}')


@dataclass(frozen=True)
class TextStats:
    p_digits: float
    p_lower: float
    p_upper: float
    p_spaces: float
    p_punct: float


def count_punctuation(text: str) -> int:
    """Counts only the separators , . ; : and nothing else."""
    return sum(1 for c in text if c in PUNCTUATION_CHARS)


def char_ratios(text: str) -> TextStats:
    """Share of decimal digits, lowercase, uppercase, spaces and punctuation in text."""
    length = max(1, len(text))
    return TextStats(
        p_digits=len(DIGIT_REGEX.findall(text)) / length,
        p_lower=len(LOWER_REGEX.findall(text)) / length,
        p_upper=len(UPPER_REGEX.findall(text)) / length,
        p_spaces=len(SPACE_REGEX.findall(text)) / length,
        p_punct=count_punctuation(text) / length,
    )


def count_lines(boxes: Iterable[Box]) -> int:
    """Count text lines by grouping boxes whose top edges are close together."""
    lines = 0
    last_position = LINE_START_POSITION
    for box in sorted(boxes, key=lambda b: b.bounds.y1):
        position = box.bounds.y1
        if position - last_position > LINE_THRESHOLD:
            lines += 1
            last_position = position
    return lines


def line_count(tree: AreaTree, area: Union[Area, int]) -> int:
    if isinstance(area, int):
        area = tree[area]
    return count_lines(tree.all_boxes(area))
