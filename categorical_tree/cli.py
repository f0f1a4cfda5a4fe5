"""Command line entry point: read a labeled CSV and build a tree over it.

Usage:
    python -m categorical_tree [DATA_PATH] [--domains PATH] [--sep ,]
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from categorical_tree.core import DataError, Settings, settings
from categorical_tree.datasets import MUSHROOM_DOMAINS
from categorical_tree.datasets import load_attribute_specs, read_records
from categorical_tree.datasets import header_attribute_names
from categorical_tree.dtree import DecisionTree, Split


logger = logging.getLogger(__name__)


def create_parser(config: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="categorical-tree",
        description="Build a categorical decision tree from a labeled CSV file.",
    )
    parser.add_argument(
        "data_path",
        nargs="?",
        default=config.DATA_PATH,
        help="CSV file: header row, then label followed by attribute tokens.",
    )
    parser.add_argument(
        "--domains",
        default=config.DOMAINS_PATH or None,
        help="JSON domain table. Defaults to the built-in mushroom table.",
    )
    parser.add_argument("--sep", default=config.CSV_SEPARATOR, help="Field delimiter.")
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    return parser


def run(args: argparse.Namespace) -> DecisionTree:
    """Load domains and records, then build the tree."""
    if args.domains:
        specs = load_attribute_specs(args.domains)
        domains: Sequence[Sequence[str]] = [attr.values for attr in specs]
        names: List[str] | tuple[str, ...] = [attr.name for attr in specs]
    else:
        domains = MUSHROOM_DOMAINS
        names = header_attribute_names(args.data_path, len(domains), sep=args.sep)

    records = read_records(args.data_path, n_attributes=len(domains), sep=args.sep)
    logger.info("Data read in...")

    tree = DecisionTree(domains, attribute_names=names).fit(records)
    logger.info("Tree built...")
    return tree


def main(argv: Optional[list[str]] = None, config: Settings = settings) -> int:
    """Main entry point for the CLI."""
    args = create_parser(config).parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        tree = run(args)
    except (DataError, FileNotFoundError) as e:
        logger.error(f"Could not build tree: {e}")
        return 1

    summary = tree.describe()
    root = tree.root
    if isinstance(root, Split):
        root_desc = f"split on {tree.attribute_names[root.attribute_index]!r}"
    else:
        root_desc = "a single leaf"
    logger.info(
        f"Root is {root_desc}; depth={summary['depth']}, "
        f"splits={summary['splits']}, leaves={summary['leaves']}"
    )
    return 0
