"""Projection of walk results into the shape the caller asked for."""

from typing import List, Sequence, Union

from fs_hospitality.walker.entry_descriptor import EntryDescriptor


class ResultProjector:
    """Renders a descriptor list as relative path strings or as descriptors.

    Attributes:
        include_descriptors (bool): Return descriptors unchanged instead of paths.

    Example:
        >>> entries = [EntryDescriptor("a", "a", "/r/a", is_directory=True)]
        >>> ResultProjector(include_descriptors=False).project(entries)
        ['a']
        >>> ResultProjector(include_descriptors=True).project(entries) == entries
        True
    """

    def __init__(self, include_descriptors: bool = False) -> None:
        self.include_descriptors = include_descriptors

    def project(self, descriptors: Sequence[EntryDescriptor]) -> Union[List[str], List[EntryDescriptor]]:
        if self.include_descriptors:
            return list(descriptors)
        return [descriptor.relative_path for descriptor in descriptors]
