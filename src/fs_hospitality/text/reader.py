"""Reading text with automatic encoding detection."""

import asyncio
import logging
from pathlib import Path

from fs_hospitality.text.encoding import decode_text_bytes
from fs_hospitality.types import TextData

logger = logging.getLogger(__name__)


def read_as_text(text_file: TextData, encoding: str = "") -> str:
    """Read bytes or a file as text.

    Args:
        text_file: Raw bytes, or a path to a file.
        encoding: Encoding name. If empty, the encoding is detected.

    Returns:
        The entire contents as a string.

    Raises:
        ValueError: If text_file is empty.
        FileNotFoundError: If the file does not exist.
        EncodingDetectionError: If encoding is empty and detection fails.

    Example:
        >>> read_as_text("note.txt")  # doctest: +SKIP
        'Some text'
        >>> read_as_text("caf\\xe9".encode("latin-1"), "latin-1")
        'café'
    """
    if not text_file:
        raise ValueError("text_file is empty.")

    if isinstance(text_file, (bytes, bytearray)):
        return decode_text_bytes(bytes(text_file), encoding)

    file_path = Path(text_file).resolve()
    logger.debug("Reading %s as text", file_path)
    return decode_text_bytes(file_path.read_bytes(), encoding)


async def read_as_text_async(text_file: TextData, encoding: str = "") -> str:
    """Read bytes or a file as text without blocking the event loop.

    Takes the same arguments and raises the same errors as read_as_text.
    """
    if not text_file:
        raise ValueError("text_file is empty.")
    return await asyncio.to_thread(read_as_text, text_file, encoding)
