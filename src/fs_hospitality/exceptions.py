from typing import Any


class InvalidPatternError(ValueError):
    """
    Exception raised when a match or ignore pattern cannot be compiled.

    This exception is raised while a walk configuration is being compiled into filter
    predicates, before any filesystem access takes place.

    Attributes:
        pattern (str): The pattern source that failed to compile.
        reason (str): The message reported by the regular expression compiler.

    Example:
        >>> error = InvalidPatternError("([a-z", "missing ), unterminated subpattern at position 0")
        >>> str(error)
        "Invalid pattern '([a-z': missing ), unterminated subpattern at position 0"
        >>> error.pattern
        '([a-z'
    """

    def __init__(self, pattern: Any, reason: str) -> None:
        """
        Initialize the exception with the offending pattern.

        Args:
            pattern: The pattern source that failed to compile.
            reason: Why compilation failed.
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class EncodingDetectionError(ValueError):
    """
    Exception raised when the character encoding of some data cannot be detected.

    This typically happens for empty input, where the detector has nothing to
    analyze.

    Example:
        >>> error = EncodingDetectionError()
        >>> str(error)
        'Unable to detect the character encoding.'
    """

    def __init__(self, message: str = "Unable to detect the character encoding.") -> None:
        super().__init__(message)


class EmptyTextError(ValueError):
    """
    Exception raised when decoded text is empty but content was required.

    Example:
        >>> error = EmptyTextError("/path/to/empty.txt")
        >>> str(error)
        'Text data is empty: /path/to/empty.txt'
    """

    def __init__(self, source: str = "") -> None:
        """
        Initialize the exception with a description of where the text came from.

        Args:
            source: A path or short description of the empty input.
        """
        self.source = source
        message = f"Text data is empty: {source}" if source else "Text data is empty."
        super().__init__(message)
