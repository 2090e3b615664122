"""Recursive directory traversal with sequential and concurrent drivers.

Both drivers share one level algorithm. A level is planned from a single listing
(descriptors are built, leaves filtered, containers collected) and merged once
the descendant lists of its containers are known. The drivers differ only in how
those descendant lists are obtained: depth-first from an explicit stack, or one
depth at a time with one asyncio task per directory.
"""

import asyncio
import logging
import os
from typing import Any, List, Optional, Sequence, Tuple, Union

from fs_hospitality.types import PathType
from fs_hospitality.walker.entry_descriptor import EntryDescriptor
from fs_hospitality.walker.entry_stat import EntryStatService, RawEntry
from fs_hospitality.walker.filter_predicates import FilterPredicateSet
from fs_hospitality.walker.result_projector import ResultProjector
from fs_hospitality.walker.walk_configuration import WalkConfiguration

logger = logging.getLogger(__name__)

WalkResult = Union[List[str], List[EntryDescriptor]]


class _Level:
    """One planned directory level: its admitted leaves and its containers."""

    def __init__(
        self, leaves: List[EntryDescriptor], containers: List[EntryDescriptor], predicates: FilterPredicateSet
    ) -> None:
        self.leaves = leaves
        self.containers = containers
        self._predicates = predicates

    def merge(self, descendants: Sequence[List[EntryDescriptor]]) -> List[EntryDescriptor]:
        """Concatenate admitted leaves with one branch per container.

        Args:
            descendants: Descendant lists indexed like ``self.containers``.

        Returns:
            Leaves in listing order, then each container's own descriptor (when
            admitted) followed by its descendants, in container listing order.
        """
        if len(descendants) != len(self.containers):
            raise ValueError(f"Expected {len(self.containers)} descendant lists, got {len(descendants)}")

        merged = list(self.leaves)
        for container, branch in zip(self.containers, descendants):
            if self._predicates.admits_container(container):
                merged.append(container)
            merged.extend(branch)
        return merged


def _describe(raw: RawEntry, dir_path: str, relative_prefix: str) -> EntryDescriptor:
    return EntryDescriptor(
        name=raw.name,
        relative_path=os.path.join(relative_prefix, raw.name),
        absolute_path=os.path.join(dir_path, raw.name),
        is_directory=raw.is_directory and not raw.is_symbolic_link,
        is_file=raw.is_file and not raw.is_symbolic_link,
        is_symbolic_link=raw.is_symbolic_link,
    )


def _plan_level(
    dir_path: str, relative_prefix: str, raw_entries: Sequence[RawEntry], predicates: FilterPredicateSet
) -> _Level:
    leaves: List[EntryDescriptor] = []
    containers: List[EntryDescriptor] = []
    for raw in raw_entries:
        entry = _describe(raw, dir_path, relative_prefix)
        if entry.is_directory:
            containers.append(entry)
        elif predicates.admits_leaf(entry):
            leaves.append(entry)
    return _Level(leaves, containers, predicates)


class TraversalEngine:
    """Walks a directory tree and returns filtered entry descriptors.

    The engine never follows symbolic links: a link is always a leaf, so a link
    cycle can never be entered. Filtering decides what is reported, never what is
    visited. Any listing failure aborts the whole walk with the original exception
    and no partial result.

    The sequential and concurrent drivers return identical ordered lists for the
    same tree. In the concurrent driver each depth spawns one task per directory
    and collects their results by spawn position, so sibling order never depends
    on which task finishes first.

    Attributes:
        config (WalkConfiguration): The walk options.
        stat_service (EntryStatService): Source of directory listings.

    Example:
        >>> engine = TraversalEngine(WalkConfiguration(only_files=True))  # doctest: +SKIP
        >>> [entry.relative_path for entry in engine.walk("src")]  # doctest: +SKIP
        ['README.md', 'pkg/__init__.py']
        >>> import asyncio
        >>> entries = asyncio.run(engine.walk_async("src"))  # doctest: +SKIP
    """

    def __init__(
        self, config: Optional[WalkConfiguration] = None, stat_service: Optional[EntryStatService] = None
    ) -> None:
        """Initialize the engine and compile its filter predicates.

        Args:
            config: The walk options. Defaults to WalkConfiguration().
            stat_service: Listing service. Defaults to EntryStatService().

        Raises:
            InvalidPatternError: If a match or ignore pattern is malformed.
        """
        self.config = config if config is not None else WalkConfiguration()
        self.stat_service = stat_service if stat_service is not None else EntryStatService()
        self._predicates = FilterPredicateSet(self.config)

    def walk(self, root: PathType) -> List[EntryDescriptor]:
        """Walk a tree sequentially, descending into containers one at a time.

        Levels are kept on an explicit stack, so the depth of the tree is not
        limited by the interpreter's recursion limit.

        Args:
            root: The directory to walk.

        Returns:
            The filtered descriptors of every entry below root.

        Raises:
            FileNotFoundError: If root or a subdirectory does not exist.
            NotADirectoryError: If root is not a directory.
            PermissionError: If any directory in the tree cannot be read.
        """
        root_path = os.path.abspath(root)
        logger.debug("Walking %s sequentially", root_path)

        # Each frame holds a planned level and the merged branches of its finished containers
        stack: List[Tuple[_Level, List[List[EntryDescriptor]]]] = [(self._plan(root_path, ""), [])]
        while True:
            level, branches = stack[-1]
            if len(branches) < len(level.containers):
                container = level.containers[len(branches)]
                stack.append((self._plan(container.absolute_path, container.relative_path), []))
                continue

            merged = level.merge(branches)
            stack.pop()
            if not stack:
                return merged
            stack[-1][1].append(merged)

    def _plan(self, dir_path: str, relative_prefix: str) -> _Level:
        raw_entries = self.stat_service.list_immediate_entries(dir_path)
        return _plan_level(dir_path, relative_prefix, raw_entries, self._predicates)

    async def walk_async(self, root: PathType) -> List[EntryDescriptor]:
        """Walk a tree with one concurrent task per subdirectory.

        The tree is listed one depth at a time: every directory found at one depth
        gets its own listing task, and the next depth starts once they have all
        settled. Levels are then merged from the deepest up. No coroutine is nested
        per directory level, so the depth of the tree is not limited by the
        interpreter's recursion limit.

        When ``config.max_concurrency`` is set, at most that many directory
        listings run at once. The bound never changes the result.

        Args:
            root: The directory to walk.

        Returns:
            The same list ``walk`` returns for the same tree.

        Raises:
            FileNotFoundError: If root or a subdirectory does not exist.
            NotADirectoryError: If root is not a directory.
            PermissionError: If any directory in the tree cannot be read.
        """
        root_path = os.path.abspath(root)
        logger.debug("Walking %s concurrently (max_concurrency=%s)", root_path, self.config.max_concurrency)
        semaphore = None
        if self.config.max_concurrency is not None:
            semaphore = asyncio.Semaphore(self.config.max_concurrency)

        depths: List[List[_Level]] = [[await self._plan_async(root_path, "", semaphore)]]
        while True:
            frontier = [container for level in depths[-1] for container in level.containers]
            if not frontier:
                break
            # gather returns results in spawn order; the first failure propagates unchanged
            planned = await asyncio.gather(
                *(self._plan_async(c.absolute_path, c.relative_path, semaphore) for c in frontier)
            )
            depths.append(list(planned))

        # The frontier of one depth lists containers in the order of the levels above it
        branches: List[List[EntryDescriptor]] = []
        for levels in reversed(depths):
            merged_levels: List[List[EntryDescriptor]] = []
            position = 0
            for level in levels:
                count = len(level.containers)
                merged_levels.append(level.merge(branches[position : position + count]))  # noqa: E203
                position += count
            branches = merged_levels
        return branches[0]

    async def _plan_async(
        self, dir_path: str, relative_prefix: str, semaphore: Optional[asyncio.Semaphore]
    ) -> _Level:
        if semaphore is None:
            raw_entries = await self.stat_service.list_immediate_entries_async(dir_path)
        else:
            async with semaphore:
                raw_entries = await self.stat_service.list_immediate_entries_async(dir_path)
        return _plan_level(dir_path, relative_prefix, raw_entries, self._predicates)


def _resolve_config(config: Optional[WalkConfiguration], options: Any) -> WalkConfiguration:
    if config is not None and options:
        raise TypeError("Pass either a WalkConfiguration or keyword options, not both")
    if config is not None:
        return config
    return WalkConfiguration(**options)


def walk(root: PathType, config: Optional[WalkConfiguration] = None, **options: Any) -> WalkResult:
    """Recursively list a directory.

    Args:
        root: The directory to walk.
        config: Walk options. Keyword options matching WalkConfiguration fields may
            be given instead.
        **options: WalkConfiguration fields, used when config is None.

    Returns:
        Relative path strings, or EntryDescriptor objects when include_descriptors is set.

    Raises:
        InvalidPatternError: If a pattern is malformed. Raised before any I/O.
        FileNotFoundError: If root or a subdirectory does not exist.
        NotADirectoryError: If root is not a directory.
        PermissionError: If any directory in the tree cannot be read.
        TypeError: If both config and keyword options are given.

    Example:
        >>> walk("project")  # doctest: +SKIP
        ['setup.cfg', 'src', 'src/main.py']
        >>> walk("project", only_files=True, match_pattern=r"\\.py$")  # doctest: +SKIP
        ['src/main.py']
    """
    resolved = _resolve_config(config, options)
    engine = TraversalEngine(resolved)
    return ResultProjector(resolved.include_descriptors).project(engine.walk(root))


async def walk_async(root: PathType, config: Optional[WalkConfiguration] = None, **options: Any) -> WalkResult:
    """Recursively list a directory, fanning out concurrently per subdirectory.

    Takes the same arguments, returns the same result and raises the same errors as
    ``walk``. Callers wanting a deadline can wrap the call in ``asyncio.wait_for``.

    Example:
        >>> import asyncio
        >>> asyncio.run(walk_async("project", only_directories=True))  # doctest: +SKIP
        ['src']
    """
    resolved = _resolve_config(config, options)
    engine = TraversalEngine(resolved)
    return ResultProjector(resolved.include_descriptors).project(await engine.walk_async(root))
