"""Depth-bounded, deterministically ordered traversal of a project tree."""

import os
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from project2md.exclusion_rules.base_rules import BaseExclusionRules
from project2md.file_system_tree.entry import Entry
from project2md.file_system_tree.size_cache import (
    ExcludedFiles,
    SizeCache,
    entry_is_dir,
    list_directory,
    modification_time,
    readable_file_size,
)
from project2md.types import EntryType, PathType

_DIGITS = re.compile(r"(\d+)")


def natural_sort_key(name: str) -> Tuple[Tuple[Union[str, int], ...], str]:
    """Sort key for natural, case-insensitive ordering of names.

    Runs of digits compare numerically and everything else compares case-insensitively.
    The original name breaks ties so that the order is total and stable.

    Example:
        >>> sorted(["file10.txt", "B.txt", "file2.txt", "a.txt"], key=natural_sort_key)
        ['a.txt', 'B.txt', 'file2.txt', 'file10.txt']
    """
    parts = _DIGITS.split(name.lower())
    return tuple(int(part) if i % 2 else part for i, part in enumerate(parts)), name


# (absolute path, relative path, depth, is_dir)
_Pending = Tuple[str, str, int, bool]


class TreeWalker:
    """Walks a directory tree into an ordered list of entries.

    At every level the children are split into directories and files, excluded names
    are dropped, and both groups are sorted naturally and case-insensitively. All
    directories are emitted before any file of the same level, and each directory is
    followed immediately by its own subtree (depth-first pre-order).

    Depth:
        The root's immediate children are at depth 0. Children at a depth greater than
        ``max_depth`` are not listed; the sizes of their parents are truncated by the
        SizeCache at the same bound.

    Permission Handling:
        A directory that cannot be listed simply has no listed children and traversal of
        its siblings continues. Unreadable files are listed with a size of 0.

    Attributes:
        root_path (Path): The directory being walked.
        exclusion_rules (Optional[BaseExclusionRules]): Names left out of the walk.
        max_depth (Optional[int]): Maximum depth, None for unbounded.
        size_cache (SizeCache): Calculator for directory sizes.
        excluded_files (ExcludedFiles): Individual files left out of the walk.

    Example:
        >>> walker = TreeWalker("src", max_depth=1)  # doctest: +SKIP
        >>> [entry.relative_path for entry in walker.walk()]  # doctest: +SKIP
        ['project2md', 'project2md/cli', 'project2md/__init__.py']
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        max_depth: Optional[int] = None,
        size_cache: Optional[SizeCache] = None,
        excluded_files: Iterable[PathType] = (),
    ) -> None:
        self.root_path = Path(root_path)
        self.exclusion_rules = exclusion_rules
        self.max_depth = max_depth
        self.excluded_files = ExcludedFiles(excluded_files)
        if size_cache is None:
            size_cache = SizeCache(exclusion_rules, max_depth, self.excluded_files.paths)
        self.size_cache = size_cache

    def walk(self) -> List[Entry]:
        """Walk the whole tree and return every entry in output order."""
        return list(self.iter_entries())

    def iter_entries(self) -> Iterator[Entry]:
        """Yield entries in output order.

        Uses an explicit stack instead of recursion so that very deep trees are safe.

        Yields:
            One Entry per listed file or directory.
        """
        stack: List[_Pending] = []
        self._push_children(stack, os.fspath(self.root_path), "", 0)

        while stack:
            absolute, relative, depth, is_dir = stack.pop()
            if is_dir:
                yield Entry(
                    EntryType.DIR,
                    relative,
                    self.size_cache.size_of(absolute, depth + 1),
                    modification_time(absolute),
                )
                self._push_children(stack, absolute, relative, depth + 1)
            else:
                yield Entry(EntryType.FILE, relative, readable_file_size(absolute), modification_time(absolute))

    def _push_children(self, stack: List[_Pending], directory: str, relative: str, depth: int) -> None:
        """Push the sorted children of a directory so that they pop in output order."""
        if self.max_depth is not None and depth > self.max_depth:
            return
        children = list_directory(directory)
        if children is None:
            return

        directories = []
        files = []
        for child in children:
            is_dir = entry_is_dir(child)
            if self.exclusion_rules is not None and self.exclusion_rules.exclude(child.name, is_dir):
                continue
            if not is_dir and self.excluded_files.matches(child.path):
                continue
            if is_dir:
                directories.append(child.name)
            else:
                files.append(child.name)
        directories.sort(key=natural_sort_key)
        files.sort(key=natural_sort_key)

        ordered = [(name, True) for name in directories] + [(name, False) for name in files]
        for name, is_dir in reversed(ordered):
            child_relative = f"{relative}/{name}" if relative else name
            stack.append((os.path.join(directory, name), child_relative, depth, is_dir))
