"""Text-file helpers: encoding and EOL detection, decoding, and normalized writing."""

from .encoding import decode_text_bytes, detect_text_encoding, text_data_to_bytes
from .eol import EolStyle, convert_eol, detect_text_eol
from .reader import read_as_text, read_as_text_async
from .trimming import TrimOption, trim_all_lines
from .writer import encode_text, prewrite_as_text, write_as_text, write_as_text_async

__all__ = [
    "EolStyle",
    "TrimOption",
    "convert_eol",
    "decode_text_bytes",
    "detect_text_encoding",
    "detect_text_eol",
    "encode_text",
    "prewrite_as_text",
    "read_as_text",
    "read_as_text_async",
    "text_data_to_bytes",
    "trim_all_lines",
    "write_as_text",
    "write_as_text_async",
]
