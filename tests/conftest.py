"""Pytest configuration for test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from article_features.model.area import AreaTree, Color  # noqa: E402
from helpers import text_box  # noqa: E402


@pytest.fixture
def page():
    """A page with a centered title, a body block and a grey footer."""
    tree = AreaTree()
    root = tree.add_area((0, 0, 1000, 800), font_size=12.0, background="#ffffff")
    title = tree.add_area(
        (300, 20, 700, 60), parent=root, topology=(0, 0, 0, 0), font_size=24.0, font_weight=1.0,
        boxes=[text_box("Breaking News", (300, 20, 700, 60), font_size=24.0)],
    )
    body = tree.add_area(
        (0, 100, 1000, 400), parent=root, topology=(0, 1, 0, 1), font_size=12.0,
        boxes=[
            text_box("First line of the article.", (0, 100, 1000, 115)),
            text_box("Second line, 2024.", (0, 120, 1000, 135)),
        ],
    )
    footer = tree.add_area(
        (0, 700, 200, 720), parent=root, topology=(0, 2, 0, 2), font_size=10.0,
        boxes=[text_box("Page 1", (0, 700, 200, 720), color=Color(128, 128, 128), font_size=10.0)],
    )
    return tree, {"root": root, "title": title, "body": body, "footer": footer}
