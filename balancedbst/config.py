"""Configuration system for balancedbst.

This module defines the traversal orders the library understands and the
settings for the demonstration driver, including how much random data to
generate and which traversals to print.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class TraversalOrder(Enum):
    """The order in which a traversal visits nodes."""
    LEVEL_ORDER = "level"   # Breadth-first, depth by depth
    INORDER = "in"          # Left, self, right (ascending values)
    PREORDER = "pre"        # Self, left, right
    POSTORDER = "post"      # Left, right, self


def _default_orders() -> List[TraversalOrder]:
    return [
        TraversalOrder.LEVEL_ORDER,
        TraversalOrder.PREORDER,
        TraversalOrder.POSTORDER,
        TraversalOrder.INORDER,
    ]


@dataclass
class DemoConfig:
    """Settings for the demonstration driver.

    The demo builds a tree from ``sample_size`` random values drawn from
    ``value_range``, then inserts ``extra_inserts`` values from
    ``extra_range``. With the default ranges every extra value is larger
    than anything already in the tree, so the extra inserts pile up on the
    right and usually unbalance it before the demo rebalances.
    """

    sample_size: int = 15                       # Values in the initial tree
    value_range: Tuple[int, int] = (1, 100)     # Inclusive bounds for initial values
    extra_inserts: int = 5                      # Values inserted after construction
    extra_range: Tuple[int, int] = (101, 200)   # Inclusive bounds for extra values
    seed: Optional[int] = None                  # Random seed (None = nondeterministic)
    orders: List[TraversalOrder] = field(default_factory=_default_orders)

    # Convenience constructors for common configurations

    @classmethod
    def small(cls, seed: Optional[int] = None) -> 'DemoConfig':
        """Create config for a tree small enough to read at a glance.

        Args:
            seed: Random seed for reproducible output

        Returns:
            DemoConfig with 7 initial values and 3 extra inserts
        """
        return cls(sample_size=7, value_range=(1, 50),
                   extra_inserts=3, extra_range=(51, 99), seed=seed)

    @classmethod
    def skewed(cls, seed: Optional[int] = None) -> 'DemoConfig':
        """Create config where the extra inserts dominate the tree.

        Args:
            seed: Random seed for reproducible output

        Returns:
            DemoConfig that is virtually certain to unbalance the tree
        """
        return cls(sample_size=3, value_range=(1, 10),
                   extra_inserts=12, extra_range=(11, 1000), seed=seed)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.sample_size < 0:
            errors.append("sample_size cannot be negative")

        if self.extra_inserts < 0:
            errors.append("extra_inserts cannot be negative")

        for name in ('value_range', 'extra_range'):
            low, high = getattr(self, name)
            if low > high:
                errors.append(f"{name} lower bound {low} is greater than upper bound {high}")

        if not self.orders:
            errors.append("orders must name at least one traversal")

        return errors
