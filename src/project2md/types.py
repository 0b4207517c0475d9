from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryType(str, Enum):
    """Kind of filesystem entry recorded during traversal.

    Attributes:
        DIR: Directory (symlinks to directories are followed and reported as directories)
        FILE: Anything that is not a directory
    """

    DIR = "dir"
    FILE = "file"
