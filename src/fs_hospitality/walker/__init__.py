"""Recursive directory walking with type classification and filter predicates.

This package lists a directory tree into flat entry descriptors. Symbolic links
are always reported as leaves and never expanded, and the filter predicates only
decide what is reported, never what is visited.
"""

from .entry_descriptor import EntryDescriptor
from .entry_stat import EntryStatService, RawEntry
from .filter_predicates import FilterPredicateSet, compile_pattern
from .result_projector import ResultProjector
from .traversal import TraversalEngine, walk, walk_async
from .walk_configuration import WalkConfiguration

__all__ = [
    "EntryDescriptor",
    "EntryStatService",
    "FilterPredicateSet",
    "RawEntry",
    "ResultProjector",
    "TraversalEngine",
    "WalkConfiguration",
    "compile_pattern",
    "walk",
    "walk_async",
]
