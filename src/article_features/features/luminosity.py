"""Perceptual luminosity of text and background and their contrast."""

from typing import Iterable, Optional

from article_features.model.area import Area, AreaTree, Box, Color
from article_features.utils.constants import CONTRAST_EPSILON, GAMMA, LUMINOSITY_COEFFICIENTS, LUMINOSITY_SCALE


def color_luminosity(color: Optional[Color]) -> float:
    """
    Relative luminance of a color (BT.709 coefficients, gamma 2.2).

    A missing color is treated as white.
    """
    if color is None:
        channels = (1.0, 1.0, 1.0)
    else:
        channels = tuple((c / 255.0) ** GAMMA for c in (color.red, color.green, color.blue))
    return sum(k * c for k, c in zip(LUMINOSITY_COEFFICIENTS, channels)) / LUMINOSITY_SCALE


def box_luminosity(boxes: Iterable[Box]) -> float:
    """Average luminosity of the box colors weighted by their text length."""
    total = 0.0
    length = 0
    for box in boxes:
        size = len(box.text)
        total += color_luminosity(box.color) * size
        length += size
    return total / length if length > 0 else 0.0


def average_text_luminosity(tree: AreaTree, area: Area) -> float:
    """Text luminosity of the whole subtree, weighted by text length."""
    total = 0.0
    count = 0

    if area.boxes:
        size = len(tree.text(area))
        total += box_luminosity(area.boxes) * size
        count += size

    for child in tree.children(area):
        size = len(tree.text(child))
        total += average_text_luminosity(tree, child) * size
        count += size

    return total / count if count > 0 else 0.0


def background_luminosity(tree: AreaTree, area: Area) -> float:
    background = tree.effective_background(area)
    return color_luminosity(background) if background is not None else 0.0


def contrast_ratio(first: float, second: float) -> float:
    """WCAG style contrast of two luminosities; the order does not matter."""
    lighter, darker = max(first, second), min(first, second)
    return (lighter + CONTRAST_EPSILON) / (darker + CONTRAST_EPSILON)


def contrast(tree: AreaTree, area: Area) -> float:
    return contrast_ratio(background_luminosity(tree, area), average_text_luminosity(tree, area))
