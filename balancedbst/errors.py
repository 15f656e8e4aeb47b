"""Exceptions raised by balancedbst.

Normal tree operations don't raise: a search miss, a delete miss and the
depth of a missing value all return None, and duplicate inserts are
ignored. Exceptions are reserved for calls that break a caller contract.
"""


class BSTError(Exception):
    """Base class for all balancedbst errors."""
    pass


class EmptyTreeError(BSTError, ValueError):
    """Raised when an operation needs a node but the subtree is empty.

    ``Tree.find_min`` has no answer for an empty subtree; asking for one
    is a programming error rather than a recoverable condition.
    """
    pass


class ConfigurationError(BSTError, ValueError):
    """Raised when a configuration fails validation."""
    pass
