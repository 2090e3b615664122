"""End-of-line detection and conversion."""

import re
from enum import Enum

from fs_hospitality.exceptions import EmptyTextError
from fs_hospitality.text.encoding import decode_text_bytes, text_data_to_bytes
from fs_hospitality.types import TextData

_LINE_BREAK = re.compile(r"\r?\n")


class EolStyle(str, Enum):
    """End-of-line styles reported by detect_text_eol.

    Values:
        CRLF: Carriage return followed by line feed (DOS/Windows)
        CR: Carriage return alone (classic Mac OS)
        LF: Line feed alone (Unix)
        NONE: No line break found
    """

    CRLF = "crlf"
    CR = "cr"
    LF = "lf"
    NONE = ""


_EOL_ALIASES = {
    "crlf": "\r\n",
    "dos": "\r\n",
    "lf": "\n",
    "unix": "\n",
    "cr": "\r",
    "mac": "\r",
}


def detect_text_eol(text_data: TextData) -> str:
    """Detect the end-of-line character of bytes or of a file.

    The data is decoded with its detected encoding first. CRLF wins over a lone CR,
    which wins over a lone LF.

    Args:
        text_data: Raw bytes, or a path to a file.

    Returns:
        ``"crlf"``, ``"cr"``, ``"lf"``, or ``""`` when the text has no line break.

    Raises:
        FileNotFoundError: If a path is given and does not name an existing file.
        EncodingDetectionError: If the encoding cannot be detected.
        EmptyTextError: If the decoded text is empty.

    Example:
        >>> detect_text_eol(b"foo\\r\\nbar")
        'crlf'
        >>> detect_text_eol(b"foo")
        ''
    """
    text = decode_text_bytes(text_data_to_bytes(text_data))
    if not text:
        raise EmptyTextError(str(text_data) if not isinstance(text_data, bytes) else "")

    if "\r\n" in text:
        return EolStyle.CRLF.value
    if "\r" in text:
        return EolStyle.CR.value
    if "\n" in text:
        return EolStyle.LF.value
    return EolStyle.NONE.value


def convert_eol(text: str, eol: str = "") -> str:
    """Replace every line break of a string.

    Both CRLF and LF line breaks are replaced. ``eol`` may name a style
    (``"crlf"``/``"dos"``, ``"lf"``/``"unix"``, ``"cr"``/``"mac"``, any case) or be
    the literal replacement, so an empty ``eol`` joins all lines.

    Args:
        text: The string to convert.
        eol: Target style name or literal line break.

    Returns:
        The converted string.

    Example:
        >>> convert_eol("foo\\r\\nbar\\n", "LF")
        'foo\\nbar\\n'
        >>> convert_eol("foo\\nbar", "")
        'foobar'
    """
    eol_code = _EOL_ALIASES.get(eol.lower(), eol)
    return _LINE_BREAK.sub(lambda _: eol_code, text)
