"""Per-line whitespace trimming."""

import re
from enum import Enum
from typing import Union

# Lines end at CR, LF or CRLF; only the whitespace around them is stripped
_LEADING = re.compile(r"(?:^|(?<=[\r\n]))[^\S\r\n]+")
_TRAILING = re.compile(r"[^\S\r\n]+(?=[\r\n]|\Z)")


class TrimOption(str, Enum):
    """Which side of every line trim_all_lines strips.

    Values:
        ALL: Strip both leading and trailing whitespace
        START: Strip leading whitespace only
        END: Strip trailing whitespace only
    """

    ALL = "all"
    START = "start"
    END = "end"


def trim_all_lines(text: str, option: Union[str, TrimOption] = TrimOption.ALL) -> str:
    """Trim whitespace at every line of a string, keeping the line breaks.

    Args:
        text: The string to trim.
        option: ``"all"``, ``"start"`` or ``"end"``. Defaults to ``"all"``.

    Returns:
        The trimmed string. Blank lines become empty lines, they are not removed.

    Raises:
        ValueError: If option is not a valid TrimOption.

    Example:
        >>> trim_all_lines("  foo  \\n  bar  \\n baz  ")
        'foo\\nbar\\nbaz'
        >>> trim_all_lines("  foo  \\r\\n  bar  ", "end")
        '  foo\\r\\n  bar'
    """
    trim = TrimOption(option)
    trimmed = text
    if trim in (TrimOption.START, TrimOption.ALL):
        trimmed = _LEADING.sub("", trimmed)
    if trim in (TrimOption.END, TrimOption.ALL):
        trimmed = _TRAILING.sub("", trimmed)
    return trimmed
