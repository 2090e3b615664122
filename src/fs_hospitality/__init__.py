"""File-system utilities beyond basic read/write.

This package provides automatic text-encoding and line-ending detection,
text normalization on write, temporary paths, symbolic-link creation, and a
recursive directory walker with type classification and filter predicates.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("fs-hospitality")
except PackageNotFoundError:
    __version__ = "unknown"
