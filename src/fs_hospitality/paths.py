"""Temporary-path helpers."""

import logging
import os
import tempfile
import uuid
from pathlib import Path
from typing import Union

from fs_hospitality.types import PathType

logger = logging.getLogger(__name__)


def make_tmp_path(base_dir: PathType = "", prefix: str = "", postfix: str = "") -> str:
    """Create a unique temporary path. Nothing is created on disk.

    Args:
        base_dir: Directory for the path. Defaults to the system temporary directory.
        prefix: Text placed before the random part of the name.
        postfix: Text placed after the random part of the name, e.g. an extension.

    Returns:
        An absolute path ``<base_dir>/<prefix><uuid4><postfix>``.

    Example:
        >>> path = make_tmp_path("", "tmp_", ".log")
        >>> path.startswith(os.path.join(tempfile.gettempdir(), "tmp_")) and path.endswith(".log")
        True
    """
    base = base_dir if base_dir else tempfile.gettempdir()
    return os.path.abspath(os.path.join(base, f"{prefix}{uuid.uuid4()}{postfix}"))


def write_tmp_file(data: Union[str, bytes], encoding: str = "utf-8") -> str:
    """Write data to a new temporary file and return its path.

    Args:
        data: Text or bytes to write. Text is encoded with ``encoding``.
        encoding: Encoding used for text data. Defaults to UTF-8.

    Returns:
        The path of the written file.

    Example:
        >>> path = write_tmp_file("The Temporary Message")
        >>> Path(path).read_text(encoding="utf-8")
        'The Temporary Message'
        >>> os.unlink(path)
    """
    tmp_path = make_tmp_path()
    raw = data.encode(encoding) if isinstance(data, str) else data
    Path(tmp_path).write_bytes(raw)
    logger.debug("Wrote temporary file %s", tmp_path)
    return tmp_path
