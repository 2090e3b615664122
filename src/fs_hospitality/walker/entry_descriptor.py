"""Descriptor representation for entries discovered during a walk."""

from dataclasses import dataclass

from fs_hospitality.types import EntryType


@dataclass(frozen=True)
class EntryDescriptor:
    """Immutable record describing one filesystem entry encountered during a walk.

    The type flags reflect the directory entry's own type and are never obtained
    by following a link. A symbolic link therefore always has ``is_directory`` and
    ``is_file`` set to False, whatever its target is, which keeps the walker from
    ever expanding a linked directory.

    Attributes:
        name (str): The base name of the entry.
        relative_path (str): Path relative to the walk root, joined with the platform separator.
        absolute_path (str): The absolute walk root joined with ``relative_path``.
        is_directory (bool): True only for a real (non-symlink) directory.
        is_file (bool): True only for a real (non-symlink) regular file.
        is_symbolic_link (bool): True for any symbolic link.

    Example:
        >>> entry = EntryDescriptor("a.txt", "a.txt", "/tmp/root/a.txt", False, True, False)
        >>> entry.entry_type
        <EntryType.FILE: 'file'>
        >>> entry.is_leaf
        True
    """

    name: str
    relative_path: str
    absolute_path: str
    is_directory: bool = False
    is_file: bool = False
    is_symbolic_link: bool = False

    @property
    def entry_type(self) -> EntryType:
        """Classify the entry as a single EntryType value."""
        if self.is_symbolic_link:
            return EntryType.SYMLINK
        if self.is_directory:
            return EntryType.DIRECTORY
        if self.is_file:
            return EntryType.FILE
        return EntryType.OTHER

    @property
    def is_leaf(self) -> bool:
        """True for anything the walker does not recurse into."""
        return not self.is_directory
