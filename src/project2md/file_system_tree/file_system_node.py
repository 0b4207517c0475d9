"""Node representation for entries in the nested report tree."""

from typing import Any, Optional

from anytree import Node

from project2md.types import EntryType


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the nested report tree.

    Extends anytree.Node with the fields of an Entry so that the flat, ordered entry
    list can be rebuilt as a tree and exported with anytree's exporters. The root
    node stands for the project itself.

    The attribute names avoid anytree's own ``path``, ``size`` and ``depth``
    properties, which describe the node's position in the tree rather than the file.

    Attributes:
        name (str): The base name of the file or directory.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        type (str): ``"dir"`` or ``"file"``.
        relative_path (str): Path relative to the scan root (empty for the root node).
        size_bytes (int): Size in bytes, as reported for the entry.
        modified (Optional[str]): Formatted modification time, if known.

    Example:
        >>> root = FileSystemNode("project", entry_type=EntryType.DIR)
        >>> child = FileSystemNode("README.md", parent=root, relative_path="README.md", size_bytes=50)
        >>> child.type
        'file'
        >>> root.is_dir
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        entry_type: EntryType = EntryType.FILE,
        relative_path: str = "",
        size_bytes: int = 0,
        modified: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.type = entry_type.value
        self.relative_path = relative_path
        self.size_bytes = size_bytes
        self.modified = modified

    @property
    def is_dir(self) -> bool:
        return bool(self.type == EntryType.DIR.value)
