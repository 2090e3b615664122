"""Listing of immediate directory entries with link-safe type classification."""

import asyncio
import logging
import os
from typing import List, NamedTuple

from fs_hospitality.types import PathType

logger = logging.getLogger(__name__)


class RawEntry(NamedTuple):
    """One immediate entry of a directory, as reported by the listing.

    The flags come from the directory entry itself without following links.
    """

    name: str
    is_directory: bool
    is_file: bool
    is_symbolic_link: bool


class EntryStatService:
    """Lists the immediate entries of one directory level.

    Each call returns the complete batch for a single directory, in the order the
    filesystem produces it. Types are classified with ``follow_symlinks=False`` so a
    link is always reported as a link, never as its target's type.

    Errors are never translated. A missing directory raises FileNotFoundError, a
    non-directory raises NotADirectoryError and an access failure raises
    PermissionError, each with the offending path in ``filename``.

    Example:
        >>> service = EntryStatService()
        >>> entries = service.list_immediate_entries(".")  # doctest: +SKIP
        >>> entries[0]  # doctest: +SKIP
        RawEntry(name='README.md', is_directory=False, is_file=True, is_symbolic_link=False)
    """

    def list_immediate_entries(self, dir_path: PathType) -> List[RawEntry]:
        """List the immediate entries of a directory.

        Args:
            dir_path: Directory to list.

        Returns:
            One RawEntry per entry, in filesystem listing order.

        Raises:
            FileNotFoundError: If dir_path does not exist.
            NotADirectoryError: If dir_path is not a directory.
            PermissionError: If the directory cannot be read.
        """
        entries: List[RawEntry] = []
        with os.scandir(dir_path) as it:
            for dir_entry in it:
                entries.append(
                    RawEntry(
                        name=dir_entry.name,
                        is_directory=dir_entry.is_dir(follow_symlinks=False),
                        is_file=dir_entry.is_file(follow_symlinks=False),
                        is_symbolic_link=dir_entry.is_symlink(),
                    )
                )
        logger.debug("Listed %d entries in %s", len(entries), dir_path)
        return entries

    async def list_immediate_entries_async(self, dir_path: PathType) -> List[RawEntry]:
        """List the immediate entries of a directory without blocking the event loop.

        The listing runs in a worker thread and has the same results and errors as
        ``list_immediate_entries``.

        Args:
            dir_path: Directory to list.

        Returns:
            One RawEntry per entry, in filesystem listing order.
        """
        return await asyncio.to_thread(self.list_immediate_entries, dir_path)
