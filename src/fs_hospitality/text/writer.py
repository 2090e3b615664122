"""Writing text with line trimming, EOL conversion, BOM and encoding options."""

import asyncio
import codecs
import logging
from pathlib import Path
from typing import Optional, Union

from fs_hospitality.text.eol import convert_eol
from fs_hospitality.text.trimming import TrimOption, trim_all_lines
from fs_hospitality.types import PathType

logger = logging.getLogger(__name__)

# BOMs prefixed when requested; codecs that always write their own BOM are absent
_BOMS = {
    "utf-8": codecs.BOM_UTF8,
    "utf-16-le": codecs.BOM_UTF16_LE,
    "utf-16-be": codecs.BOM_UTF16_BE,
    "utf-32-le": codecs.BOM_UTF32_LE,
    "utf-32-be": codecs.BOM_UTF32_BE,
}


def prewrite_as_text(text: str = "", trim: Optional[Union[str, TrimOption]] = None, eol: Optional[str] = None) -> str:
    """Apply the trimming and EOL options to a string before it is written.

    Args:
        text: The string to format.
        trim: If set, trim every line (see trim_all_lines).
        eol: If set, convert every line break (see convert_eol).

    Returns:
        The formatted string.

    Example:
        >>> prewrite_as_text("  a  \\n  b", trim="all", eol="crlf")
        'a\\r\\nb'
    """
    written = text
    if trim:
        written = trim_all_lines(written, trim)
    if eol:
        written = convert_eol(written, eol)
    return written


def encode_text(text: str, encoding: str = "utf-8", bom: bool = False) -> bytes:
    """Encode a string, optionally prefixed with the encoding's byte order mark.

    The BOM is only added for UTF-8, UTF-16 and UTF-32 variants. ``utf-8-sig``,
    ``utf-16`` and ``utf-32`` always carry a BOM of their own.

    Args:
        text: The string to encode.
        encoding: Target encoding name.
        bom: Whether to prefix a byte order mark.

    Returns:
        The encoded bytes.

    Raises:
        LookupError: If the encoding name is unknown.

    Example:
        >>> encode_text("a", "utf-16-le", bom=True)
        b'\\xff\\xfea\\x00'
    """
    codec_name = codecs.lookup(encoding).name
    data = text.encode(codec_name)
    if bom and codec_name in _BOMS:
        data = _BOMS[codec_name] + data
    return data


def write_as_text(
    dest_path: PathType,
    text: str = "",
    *,
    trim: Optional[Union[str, TrimOption]] = None,
    eol: Optional[str] = None,
    bom: bool = False,
    encoding: str = "utf-8",
) -> None:
    """Write a string to a file as text.

    Missing parent directories are created.

    Args:
        dest_path: Destination file path.
        text: The string to write.
        trim: If set, trim every line with this option.
        eol: If set, convert every line break to this style.
        bom: Prefix a byte order mark (UTF encodings only).
        encoding: Target encoding. Defaults to UTF-8.

    Raises:
        ValueError: If dest_path is empty.
        LookupError: If the encoding name is unknown.
        UnicodeEncodeError: If the text cannot be represented in the encoding.

    Example:
        >>> write_as_text("script.vbs", 'Dim str  \\n  str = "hoge"', trim="all", eol="crlf", bom=True)  # doctest: +SKIP
    """
    if not dest_path:
        raise ValueError("dest_path is empty.")

    file_path = Path(dest_path).resolve()
    data = encode_text(prewrite_as_text(text, trim, eol), encoding, bom)

    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_bytes(data)
    logger.debug("Wrote %d bytes to %s (%s)", len(data), file_path, encoding)


async def write_as_text_async(
    dest_path: PathType,
    text: str = "",
    *,
    trim: Optional[Union[str, TrimOption]] = None,
    eol: Optional[str] = None,
    bom: bool = False,
    encoding: str = "utf-8",
) -> None:
    """Write a string to a file as text without blocking the event loop.

    Takes the same arguments and raises the same errors as write_as_text.
    """
    if not dest_path:
        raise ValueError("dest_path is empty.")
    await asyncio.to_thread(write_as_text, dest_path, text, trim=trim, eol=eol, bom=bom, encoding=encoding)
