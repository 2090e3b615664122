from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Raw bytes, or a path naming the file that holds them
TextData = Union[bytes, str, PathLike[str]]


class EntryType(str, Enum):
    """Enumeration of entry types reported for items discovered during a walk.

    The type always reflects the directory entry itself. A symbolic link is a
    SYMLINK whatever it points to.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
        OTHER: FIFO, socket, device or any other special entry
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
