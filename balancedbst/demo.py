"""Demonstration driver for balancedbst.

Builds a tree from random values, prints its balance and traversals,
unbalances it with a run of larger inserts, then rebalances and prints
everything again.

Usage:
    python -m balancedbst                 # 15 values in 1..100, 5 extra in 101..200
    python -m balancedbst --seed 42 -v    # reproducible run with debug logging
    python -m balancedbst --size 7 --extra 10
"""

import argparse
import logging
import random
import sys
from typing import List, Optional, TextIO

from .config import DemoConfig, TraversalOrder
from .core.tree import Tree
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ORDER_LABELS = {
    TraversalOrder.LEVEL_ORDER: "Level order",
    TraversalOrder.PREORDER: "Preorder",
    TraversalOrder.POSTORDER: "Postorder",
    TraversalOrder.INORDER: "Inorder",
}


def print_traversals(tree: Tree, orders: List[TraversalOrder], out: TextIO) -> None:
    """Print one line per requested traversal order."""
    methods = {
        TraversalOrder.LEVEL_ORDER: tree.level_order,
        TraversalOrder.PREORDER: tree.preorder,
        TraversalOrder.POSTORDER: tree.postorder,
        TraversalOrder.INORDER: tree.inorder,
    }
    for order in orders:
        print(f"{ORDER_LABELS[order]}: {methods[order]()}", file=out)


def run_demo(config: Optional[DemoConfig] = None, out: Optional[TextIO] = None) -> Tree:
    """Run the demonstration and return the final (rebalanced) tree.

    Args:
        config: Demo settings (defaults to DemoConfig())
        out: Stream for console output (defaults to stdout)

    Returns:
        The tree after the extra inserts and the final rebalance

    Raises:
        ConfigurationError: If the config fails validation
    """
    config = config or DemoConfig()
    out = out or sys.stdout

    config_errors = config.validate()
    if config_errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )

    rng = random.Random(config.seed)
    low, high = config.value_range
    values = [rng.randint(low, high) for _ in range(config.sample_size)]
    logger.info("Generated %d values in %d..%d", len(values), low, high)

    tree = Tree(values)
    print(f"Initial tree balanced? {tree.balanced()}", file=out)
    print_traversals(tree, config.orders, out)

    low, high = config.extra_range
    for _ in range(config.extra_inserts):
        value = rng.randint(low, high)
        logger.debug("Inserting %d", value)
        tree.insert(value)
    print(f"\nTree balanced after additions? {tree.balanced()}", file=out)

    tree.rebalance()
    print(f"\nTree balanced after rebalancing? {tree.balanced()}", file=out)
    print_traversals(tree, config.orders, out)

    logger.info("Final tree holds %d values at height %d", len(tree), tree.height())
    return tree


def build_parser() -> argparse.ArgumentParser:
    defaults = DemoConfig()
    parser = argparse.ArgumentParser(
        prog="balancedbst",
        description="Build, unbalance and rebalance a binary search tree of random values.",
    )
    parser.add_argument('--size', type=int, default=defaults.sample_size,
                        help='Number of random values in the initial tree')
    parser.add_argument('--min', dest='min_value', type=int, default=defaults.value_range[0],
                        help='Smallest initial value')
    parser.add_argument('--max', dest='max_value', type=int, default=defaults.value_range[1],
                        help='Largest initial value')
    parser.add_argument('--extra', type=int, default=defaults.extra_inserts,
                        help='Number of values inserted after construction')
    parser.add_argument('--extra-min', type=int, default=defaults.extra_range[0],
                        help='Smallest extra value')
    parser.add_argument('--extra-max', type=int, default=defaults.extra_range[1],
                        help='Largest extra value')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible output')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = DemoConfig(
        sample_size=args.size,
        value_range=(args.min_value, args.max_value),
        extra_inserts=args.extra,
        extra_range=(args.extra_min, args.extra_max),
        seed=args.seed,
    )

    try:
        run_demo(config)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0
