"""Symbolic-link creation."""

import asyncio
import logging
import os
from pathlib import Path

from fs_hospitality.types import PathType

logger = logging.getLogger(__name__)


def make_link(src_path: PathType, dest_path: PathType) -> None:
    """Create a symbolic link at dest_path pointing at src_path.

    The link target is the absolute source path. Directory sources are linked
    as directory links, which Windows requires to be distinguished.

    Args:
        src_path: The existing file or directory to link to.
        dest_path: Where to create the link.

    Raises:
        ValueError: If src_path or dest_path is empty.
        FileNotFoundError: If src_path does not exist.
        FileExistsError: If dest_path already exists.
        OSError: If the platform refuses to create the link (e.g. missing privilege on Windows).

    Example:
        >>> make_link("/data/reports", "/home/me/reports")  # doctest: +SKIP
    """
    if not src_path:
        raise ValueError("src_path is empty.")
    if not dest_path:
        raise ValueError("dest_path is empty.")

    source = Path(src_path).resolve()
    if not source.exists():
        raise FileNotFoundError(f"Link source does not exist: {source}")

    destination = os.path.abspath(dest_path)
    os.symlink(source, destination, target_is_directory=source.is_dir())
    logger.debug("Linked %s -> %s", destination, source)


async def make_link_async(src_path: PathType, dest_path: PathType) -> None:
    """Create a symbolic link without blocking the event loop.

    Takes the same arguments and raises the same errors as make_link.
    """
    await asyncio.to_thread(make_link, src_path, dest_path)
