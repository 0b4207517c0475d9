"""File system traversal with name-based exclusion, depth limiting and size aggregation.

This package walks a project directory into an ordered list of entries and provides
the memoizing directory-size calculator the walk relies on.
"""

from .entry import Entry
from .size_cache import SizeCache
from .tree_walker import TreeWalker, natural_sort_key

__all__ = ["Entry", "SizeCache", "TreeWalker", "natural_sort_key"]
