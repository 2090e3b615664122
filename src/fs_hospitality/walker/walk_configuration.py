"""Caller-supplied configuration for a directory walk."""

import re
from dataclasses import dataclass
from typing import Optional, Union

from pathspec import PathSpec

# A regular-expression source, a compiled expression, or a gitignore-style matcher
PatternLike = Union[str, "re.Pattern[str]", PathSpec]


@dataclass(frozen=True)
class WalkConfiguration:
    """Options controlling which entries a walk reports and in which shape.

    The configuration only decides what appears in the output. Every real
    directory is recursed into regardless of whether its own entry is admitted.

    Attributes:
        only_directories (bool): Admit only directory descriptors.
        only_files (bool): Admit only non-directory descriptors (files and symlinks).
        exclude_symlinks (bool): Drop symlink descriptors.
        match_pattern (Optional[PatternLike]): Keep only entries whose relative path matches.
            String sources are compiled case-insensitively.
        ignore_pattern (Optional[PatternLike]): Drop entries whose relative path matches.
            String sources are compiled case-insensitively.
        include_descriptors (bool): Return EntryDescriptor objects instead of relative path strings.
        max_concurrency (Optional[int]): Maximum number of directory listings in flight during a
            concurrent walk. None leaves fan-out unbounded. Results never depend on this value.

    Example:
        >>> config = WalkConfiguration(only_files=True, match_pattern=r"\\.txt$")
        >>> config.only_files, config.include_descriptors
        (True, False)
        >>> WalkConfiguration(max_concurrency=0)
        Traceback (most recent call last):
        ...
        ValueError: max_concurrency must be at least 1, got 0
    """

    only_directories: bool = False
    only_files: bool = False
    exclude_symlinks: bool = False
    match_pattern: Optional[PatternLike] = None
    ignore_pattern: Optional[PatternLike] = None
    include_descriptors: bool = False
    max_concurrency: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {self.max_concurrency}")
