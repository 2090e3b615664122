"""Admission predicates compiled from a walk configuration."""

import re
from typing import Callable, Optional

from pathspec import PathSpec

from fs_hospitality.exceptions import InvalidPatternError
from fs_hospitality.walker.entry_descriptor import EntryDescriptor
from fs_hospitality.walker.walk_configuration import PatternLike, WalkConfiguration

# Tests a relative path against a compiled pattern
PathMatcher = Callable[[str], bool]


def compile_pattern(pattern: PatternLike) -> PathMatcher:
    """Compile a match or ignore pattern into a relative-path matcher.

    String sources are compiled as regular expressions with ``re.IGNORECASE`` and
    matched anywhere in the path. Precompiled expressions keep their own flags, and
    a ``pathspec.PathSpec`` is matched with gitignore semantics.

    Args:
        pattern: A regular-expression source, a compiled expression, or a PathSpec.

    Returns:
        A callable returning True when a relative path matches.

    Raises:
        InvalidPatternError: If a string source is not a valid regular expression.
        TypeError: If the pattern is of an unsupported type.

    Example:
        >>> matches = compile_pattern(r"\\.txt$")
        >>> matches("DirBar/FILE.TXT")
        True
        >>> matches("notes.log")
        False
        >>> compile_pattern("([a-z")  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        fs_hospitality.exceptions.InvalidPatternError: Invalid pattern '([a-z': ...
    """
    if isinstance(pattern, str):
        try:
            compiled = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e
        return lambda path: compiled.search(path) is not None
    if isinstance(pattern, re.Pattern):
        return lambda path: pattern.search(path) is not None
    if isinstance(pattern, PathSpec):
        return pattern.match_file
    raise TypeError(f"Pattern must be a str, re.Pattern or PathSpec, got {type(pattern).__name__}")


class FilterPredicateSet:
    """Inclusion predicates over entry descriptors, built once per top-level walk.

    The predicates only decide whether a descriptor appears in the output. They are
    never consulted when deciding whether to recurse into a directory.

    Attributes:
        config (WalkConfiguration): The configuration the predicates were compiled from.

    Example:
        >>> predicates = FilterPredicateSet(WalkConfiguration(ignore_pattern=r"\\.txt$"))
        >>> leaf = EntryDescriptor("a.TXT", "a.TXT", "/r/a.TXT", is_file=True)
        >>> predicates.admits_leaf(leaf)
        False
        >>> folder = EntryDescriptor("docs", "docs", "/r/docs", is_directory=True)
        >>> predicates.admits_container(folder)
        True
    """

    def __init__(self, config: WalkConfiguration) -> None:
        """Compile the predicates.

        Args:
            config: The walk configuration to compile.

        Raises:
            InvalidPatternError: If a match or ignore pattern source is malformed.
            TypeError: If a pattern is of an unsupported type.
        """
        self.config = config
        self._match: Optional[PathMatcher] = None
        self._ignore: Optional[PathMatcher] = None
        if config.match_pattern is not None:
            self._match = compile_pattern(config.match_pattern)
        if config.ignore_pattern is not None:
            self._ignore = compile_pattern(config.ignore_pattern)

    def admits_leaf(self, entry: EntryDescriptor) -> bool:
        """Decide whether a non-directory entry appears in the output.

        Args:
            entry: A file, symlink or special entry.

        Returns:
            False when the entry is rejected by only_directories, exclude_symlinks,
            the match pattern or the ignore pattern, True otherwise.
        """
        if self.config.only_directories and not entry.is_directory:
            return False
        if self.config.exclude_symlinks and entry.is_symbolic_link:
            return False
        if self._match is not None and not self._match(entry.relative_path):
            return False
        if self._ignore is not None and self._ignore(entry.relative_path):
            return False
        return True

    def admits_container(self, entry: EntryDescriptor) -> bool:
        """Decide whether a directory's own descriptor appears in the output.

        Applies the leaf rules and also rejects every directory when only files
        are wanted. The directory's children are visited either way.

        Args:
            entry: A real directory.

        Returns:
            True if the directory's descriptor should be output.
        """
        if self.config.only_files:
            return False
        return self.admits_leaf(entry)
