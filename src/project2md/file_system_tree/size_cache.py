"""Memoizing directory size calculation with depth bounding."""

import logging
import os
from datetime import datetime
from typing import Dict, FrozenSet, Iterable, List, Optional

from project2md.exclusion_rules.base_rules import BaseExclusionRules
from project2md.types import PathType

logger = logging.getLogger(__name__)


def list_directory(path: PathType) -> Optional[List[os.DirEntry]]:
    """List the immediate children of a directory.

    Returns:
        The directory entries, or None if the directory cannot be listed (missing,
        permission denied, not a directory, too many symlink levels, ...).
    """
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as e:
        logger.debug("Cannot list directory %s: %s", path, e)
        return None


def entry_is_dir(entry: os.DirEntry) -> bool:
    """Whether a directory entry is a directory, following symlinks."""
    try:
        return entry.is_dir()
    except OSError:
        return False


def readable_file_size(path: PathType) -> int:
    """Byte length of a file, or 0 if the file cannot be read."""
    if not os.access(path, os.R_OK):
        logger.debug("Unreadable file counted as 0 bytes: %s", path)
        return 0
    try:
        return os.stat(path).st_size
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return 0


def modification_time(path: PathType) -> Optional[datetime]:
    """Local modification time of a path, or None if it cannot be read."""
    try:
        return datetime.fromtimestamp(os.stat(path).st_mtime)
    except (OSError, OverflowError, ValueError):
        return None


def canonical_path(path: PathType) -> str:
    """Symlink-resolved absolute path, falling back to the raw path if resolution fails."""
    try:
        return os.path.realpath(path)
    except (OSError, ValueError):
        return os.fspath(path)


class ExcludedFiles:
    """Specific files left out of a run, such as the run's own report artifacts.

    Exclusion rules match base names anywhere in the tree; these match one file each,
    by canonical path. A path may name a file that does not exist yet.

    Example:
        >>> excluded = ExcludedFiles(["/srv/demo/report.md"])
        >>> excluded.matches("/srv/demo/report.md")
        True
        >>> excluded.matches("/srv/demo/docs/report.md")
        False
    """

    def __init__(self, paths: Iterable[PathType] = ()) -> None:
        self.paths: FrozenSet[str] = frozenset(canonical_path(path) for path in paths)
        self._names = frozenset(os.path.basename(path) for path in self.paths)

    def __bool__(self) -> bool:
        return bool(self.paths)

    def matches(self, path: PathType) -> bool:
        """Whether a path is one of the excluded files."""
        return os.path.basename(os.fspath(path)) in self._names and canonical_path(path) in self.paths


class _Frame:
    __slots__ = ("path", "depth", "key", "pending", "total")

    def __init__(self, path: str, depth: int, key: str) -> None:
        self.path = path
        self.depth = depth
        self.key = key
        self.pending: Optional[List[str]] = None
        self.total = 0


class SizeCache:
    """Memoizing calculator for the aggregated size of directories.

    The size of a directory is the sum of the sizes of all non-excluded, readable files
    below it, limited to the same depth bound the tree walk uses. Results are cached by
    canonical (symlink-resolved) path for the lifetime of the instance, so a directory is
    measured at most once per run no matter how often the walk asks for it.

    Depth semantics:
        ``size_of(directory, depth)`` takes the traversal depth of the directory's
        *children* (the root's children are at depth 0). If that depth exceeds
        ``max_depth`` the directory reports 0 and 0 is cached, mirroring the walk, which
        does not list those children either.

    Caching caveat:
        The cache key is the path alone. A directory first measured at a deep level (and
        possibly truncated to 0) keeps that result when it is later reached at a
        shallower level, e.g. through a symlink. Within one plain walk every directory is
        only ever measured at a single depth.

    Error handling:
        Nothing here raises for filesystem problems. Unreadable children are skipped,
        unreadable files count as 0 bytes and a directory whose listing fails reports 0
        (without caching, so a later query may succeed).

    Attributes:
        exclusion_rules (Optional[BaseExclusionRules]): Names excluded from the sum.
        max_depth (Optional[int]): Maximum traversal depth, None for unbounded.
        excluded_files (ExcludedFiles): Individual files excluded from the sum.

    Example:
        >>> cache = SizeCache(max_depth=0)
        >>> cache.size_of("/nonexistent", 1)
        0
    """

    def __init__(
        self,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        max_depth: Optional[int] = None,
        excluded_files: Iterable[PathType] = (),
    ) -> None:
        self.exclusion_rules = exclusion_rules
        self.max_depth = max_depth
        self.excluded_files = ExcludedFiles(excluded_files)
        self._cache: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, directory: object) -> bool:
        if not isinstance(directory, (str, os.PathLike)):
            return False
        return canonical_path(directory) in self._cache

    def _beyond_bound(self, depth: int) -> bool:
        return self.max_depth is not None and depth > self.max_depth

    def size_of(self, directory: PathType, depth: int) -> int:
        """Get the aggregated size of a directory.

        The computation uses an explicit stack rather than recursion, so arbitrarily
        deep trees cannot exhaust the interpreter's call stack.

        Args:
            directory: Directory to measure.
            depth: Traversal depth of the directory's children.

        Returns:
            Total size in bytes of the non-excluded files within the depth bound.
        """
        key = canonical_path(directory)
        if key in self._cache:
            return self._cache[key]

        stack = [_Frame(os.fspath(directory), depth, key)]
        result = 0
        while stack:
            frame = stack[-1]
            if frame.pending is None:
                if self._beyond_bound(frame.depth):
                    self._cache[frame.key] = 0
                    completed = 0
                else:
                    children = list_directory(frame.path)
                    if children is not None:
                        frame.pending = self._scan(children, frame)
                        continue
                    completed = 0
            elif frame.pending:
                child_path = frame.pending.pop()
                child_key = canonical_path(child_path)
                if child_key in self._cache:
                    frame.total += self._cache[child_key]
                else:
                    stack.append(_Frame(child_path, frame.depth + 1, child_key))
                continue
            else:
                self._cache[frame.key] = frame.total
                completed = frame.total

            stack.pop()
            if stack:
                stack[-1].total += completed
            else:
                result = completed
        return result

    def _scan(self, children: List[os.DirEntry], frame: _Frame) -> List[str]:
        """Add the sizes of a directory's files to its frame and return its subdirectories."""
        subdirectories = []
        for child in children:
            is_dir = entry_is_dir(child)
            if self.exclusion_rules is not None and self.exclusion_rules.exclude(child.name, is_dir):
                continue
            if not is_dir and self.excluded_files.matches(child.path):
                continue
            if not os.access(child.path, os.R_OK):
                continue
            if is_dir:
                subdirectories.append(child.path)
            else:
                frame.total += readable_file_size(child.path)
        return subdirectories
