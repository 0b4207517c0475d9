"""Entries recorded while walking a project tree."""

import posixpath
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from project2md.types import EntryType


@dataclass(frozen=True)
class Entry:
    """A single file or directory found during traversal.

    Attributes:
        entry_type: Whether this is a directory or a file.
        relative_path: Path relative to the scan root, always using ``/`` as separator.
        size_bytes: For a file, its byte length (0 if unreadable). For a directory, the sum
            of all non-excluded descendant files within the depth bound.
        modified_at: Local modification time, or None if it could not be read.

    Example:
        >>> entry = Entry(EntryType.FILE, "src/main.py", 120)
        >>> entry.name
        'main.py'
        >>> entry.depth
        1
    """

    entry_type: EntryType
    relative_path: str
    size_bytes: int
    modified_at: Optional[datetime] = None

    @property
    def name(self) -> str:
        return posixpath.basename(self.relative_path)

    @property
    def depth(self) -> int:
        """Traversal depth; the root's immediate children are at depth 0."""
        return self.relative_path.count("/")

    @property
    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIR
