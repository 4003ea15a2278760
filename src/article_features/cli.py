"""Command line interface: dataset export and markedness ranking."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.table import Table

from article_features.core import ArticleFeatureExtractor
from article_features.model.loader import TreeFormatError, load_tree
from article_features.utils.config import WeightConfigurationError
from article_features.utils.console import CONSOLE, log_error, log_success


def _build_extractor(config: Optional[Path]) -> ArticleFeatureExtractor:
    if config is None:
        return ArticleFeatureExtractor()
    return ArticleFeatureExtractor.from_config(config)


def run_extract(args: argparse.Namespace) -> int:
    extractor = _build_extractor(args.config)
    extractor.set_tree(load_tree(args.tree))

    df = extractor.to_dataframe()
    if df is None:
        log_error("Dataset header unavailable, nothing extracted")
        return 1

    if args.out:
        df.to_csv(args.out, index=False)
        log_success(f"Wrote {len(df)} rows to {args.out}")
    else:
        CONSOLE.print(df.head(args.head).to_string(), markup=False)
    return 0


def run_markedness(args: argparse.Namespace) -> int:
    extractor = _build_extractor(args.config)
    tree = load_tree(args.tree)
    ctx = extractor.set_tree(tree)

    ranked = sorted(
        ((extractor.markedness(area), area) for area in tree.subtree(ctx.root)),
        key=lambda item: item[0],
        reverse=True,
    )

    table = Table(title="Areas by Markedness", box=box.ROUNDED)
    table.add_column("Area", justify="right", style="cyan", no_wrap=True)
    table.add_column("Markedness", justify="right", style="green")
    table.add_column("Centered", justify="center")
    table.add_column("Indentation", justify="right", style="yellow")
    table.add_column("Text")

    for value, area in ranked[:args.top]:
        text = tree.text(area)
        table.add_row(
            str(area.index),
            f"{value:.2f}",
            "yes" if extractor.is_centered(area) else "",
            f"{extractor.indentation(area):.2f}",
            text if len(text) <= 60 else text[:57] + "...",
        )

    CONSOLE.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="article-features",
        description="Visual feature extraction for segmented page area trees",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    extract = sub.add_parser("extract", help="export the feature dataset of a tree")
    extract.add_argument("tree", type=Path, help="area tree file (YAML or JSON)")
    extract.add_argument("-o", "--out", type=Path, default=None, help="CSV output file")
    extract.add_argument("-c", "--config", type=Path, default=None, help="YAML configuration")
    extract.add_argument("--head", type=int, default=10, help="rows to print without --out")
    extract.set_defaults(func=run_extract)

    ranking = sub.add_parser("markedness", help="rank the areas of a tree by markedness")
    ranking.add_argument("tree", type=Path, help="area tree file (YAML or JSON)")
    ranking.add_argument("-c", "--config", type=Path, default=None, help="YAML configuration")
    ranking.add_argument("--top", type=int, default=20, help="number of areas to show")
    ranking.set_defaults(func=run_markedness)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (TreeFormatError, WeightConfigurationError) as e:
        log_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
