"""Shared builders for the test suite."""

from article_features.model.area import Box, Color, Rect

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


def text_box(text, bounds, color=BLACK, font_size=12.0):
    return Box(text=text, bounds=Rect.of(bounds), color=color, font_size=font_size)


class StaticColorMetrics:
    """Color metrics provider returning a fixed value for every area."""

    def __init__(self, value):
        self.value = value

    def color_percentage(self, area):
        return self.value


class CountingColorMetrics:
    """Wraps a color metrics provider and counts the lookups."""

    def __init__(self, provider):
        self.provider = provider
        self.calls = 0

    def color_percentage(self, area):
        self.calls += 1
        return self.provider.color_percentage(area)
