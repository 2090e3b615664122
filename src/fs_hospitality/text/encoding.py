"""Character-encoding detection and decoding."""

import codecs
import logging
from pathlib import Path

import chardet

from fs_hospitality.exceptions import EncodingDetectionError
from fs_hospitality.types import TextData

logger = logging.getLogger(__name__)

# Codecs whose decoders keep a leading BOM as U+FEFF
_BOM_KEEPING_CODECS = {
    "utf-8": codecs.BOM_UTF8,
    "utf-16-le": codecs.BOM_UTF16_LE,
    "utf-16-be": codecs.BOM_UTF16_BE,
    "utf-32-le": codecs.BOM_UTF32_LE,
    "utf-32-be": codecs.BOM_UTF32_BE,
}


def text_data_to_bytes(text_data: TextData) -> bytes:
    """Return the raw bytes of some text data.

    Bytes are returned unchanged. Anything else is treated as a path and the file
    is read in full.

    Args:
        text_data: Raw bytes, or a path to a file.

    Returns:
        The entire contents.

    Raises:
        FileNotFoundError: If the path is empty or does not name an existing file.

    Example:
        >>> text_data_to_bytes(b"abc")
        b'abc'
        >>> text_data_to_bytes("")
        Traceback (most recent call last):
        ...
        FileNotFoundError: text_data is not a valid file path: ''
    """
    if isinstance(text_data, (bytes, bytearray)):
        return bytes(text_data)

    if not text_data or not Path(text_data).is_file():
        raise FileNotFoundError(f"text_data is not a valid file path: {str(text_data)!r}")

    return Path(text_data).read_bytes()


def detect_text_encoding(text_data: TextData) -> str:
    """Detect the character encoding of bytes or of a file.

    Detection is done by chardet; the encoding name is returned as chardet reports it
    (for example ``'utf-8'``, ``'UTF-8-SIG'``, ``'UTF-16'``, ``'SHIFT_JIS'``). Every
    returned name is accepted by Python's codec registry.

    There is no second detection pass for Japanese text. chardet already reports
    ``CP932``, ``SHIFT_JIS`` or ``EUC-JP`` for short Japanese samples instead of
    falling back to ``windows-1252``.

    Args:
        text_data: Raw bytes, or a path to a file.

    Returns:
        The name of the detected encoding.

    Raises:
        FileNotFoundError: If a path is given and does not name an existing file.
        EncodingDetectionError: If no encoding can be detected, e.g. for empty data.

    Example:
        >>> detect_text_encoding("plain ascii".encode("ascii"))
        'ascii'
        >>> detect_text_encoding(b"")
        Traceback (most recent call last):
        ...
        fs_hospitality.exceptions.EncodingDetectionError: Unable to detect the character encoding.
    """
    data = text_data_to_bytes(text_data)
    result = chardet.detect(data)
    encoding = result.get("encoding")
    if not encoding:
        raise EncodingDetectionError()

    logger.debug("Detected encoding %s (confidence %.2f)", encoding, result.get("confidence") or 0.0)
    return str(encoding)


def decode_text_bytes(data: bytes, encoding: str = "") -> str:
    """Decode bytes into a string, detecting the encoding when none is given.

    A byte order mark is never part of the result, even when the named codec would
    otherwise keep it (``utf-8``, ``utf-16-le`` and the like).

    Args:
        data: The bytes to decode.
        encoding: Encoding name. If empty, the encoding is detected.

    Returns:
        The decoded text.

    Raises:
        EncodingDetectionError: If encoding is empty and detection fails.
        LookupError: If the encoding name is unknown.
        UnicodeDecodeError: If the data is not valid in the encoding.

    Example:
        >>> decode_text_bytes(codecs.BOM_UTF8 + b"hello", "utf-8")
        'hello'
    """
    enc = encoding if encoding else detect_text_encoding(data)
    codec_name = codecs.lookup(enc).name
    bom = _BOM_KEEPING_CODECS.get(codec_name)
    if bom is not None and data.startswith(bom):
        data = data[len(bom) :]  # noqa: E203
    return data.decode(codec_name)
