"""Tree rendering of walk results."""

import os
from typing import Any, Iterable, Iterator, Optional

from anytree import ContStyle, Node, RenderTree

from fs_hospitality.walker.entry_descriptor import EntryDescriptor


class EntryNode(Node):  # type: ignore
    """Node class representing one path component of a walk result.

    Extends anytree.Node with the descriptor reported for the component, if any.
    Components whose descriptor was filtered out of the walk result still appear
    as intermediate nodes so that admitted descendants keep their place in the tree.

    Attributes:
        name (str): The component name.
        descriptor (Optional[EntryDescriptor]): The walk's descriptor for this path,
            or None for the root and for intermediate components.

    Example:
        >>> root = EntryNode("root")
        >>> child = EntryNode("docs", parent=root)
        >>> child.is_dir
        True
        >>> child.descriptor is None
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["EntryNode"] = None,
        descriptor: Optional[EntryDescriptor] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.descriptor = descriptor

    @property
    def is_dir(self) -> bool:
        """Nodes without a descriptor only exist as parents, so they are directories."""
        return self.descriptor is None or self.descriptor.is_directory

    @property
    def is_symlink(self) -> bool:
        return self.descriptor is not None and self.descriptor.is_symbolic_link


def build_entry_tree(root_name: str, descriptors: Iterable[EntryDescriptor]) -> EntryNode:
    """Arrange descriptors into a tree keyed by their relative path components.

    Args:
        root_name: Name for the root node, typically the walked directory's name.
        descriptors: Descriptors as returned by a walk with include_descriptors set.

    Returns:
        The root node of the tree.

    Example:
        >>> entries = [EntryDescriptor("b.txt", os.path.join("a", "b.txt"), "/r/a/b.txt", is_file=True)]
        >>> root = build_entry_tree("r", entries)
        >>> [node.name for node in root.descendants]
        ['a', 'b.txt']
    """
    root = EntryNode(root_name)
    index = {"": root}
    for descriptor in descriptors:
        parent = root
        parent_key = ""
        parts = descriptor.relative_path.split(os.sep)
        for part in parts[:-1]:
            key = os.path.join(parent_key, part)
            if key not in index:
                index[key] = EntryNode(part, parent=parent)
            parent = index[key]
            parent_key = key
        node = index.get(descriptor.relative_path)
        if node is None:
            index[descriptor.relative_path] = EntryNode(descriptor.name, parent=parent, descriptor=descriptor)
        else:
            node.descriptor = descriptor
    return root


def render_entry_tree(root: EntryNode) -> Iterator[str]:
    """Generate a tree representation one line at a time.

    Directories are suffixed with the path separator and symbolic links are
    marked with ``[symlink]``. Children keep the order of the walk result.

    Args:
        root: A tree built by build_entry_tree.

    Yields:
        Lines of the tree representation, including the connecting lines.

    Example:
        >>> root = EntryNode("r")
        >>> link = EntryDescriptor("link", "link", "/r/link", is_symbolic_link=True)
        >>> _ = EntryNode("link", parent=root, descriptor=link)
        >>> for line in render_entry_tree(root):
        ...     print(line)
        r/
        └── link [symlink]
    """
    for prefix, _, node in RenderTree(root, style=ContStyle()):
        suffix = ""
        if node.is_symlink:
            suffix = " [symlink]"
        elif node.is_dir:
            suffix = os.sep
        yield f"{prefix}{node.name}{suffix}"
