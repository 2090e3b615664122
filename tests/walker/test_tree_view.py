import os

from fs_hospitality.walker.entry_descriptor import EntryDescriptor
from fs_hospitality.walker.traversal import walk
from fs_hospitality.walker.tree_view import EntryNode, build_entry_tree, render_entry_tree


def descriptor(relative_path, **flags):
    name = os.path.basename(relative_path)
    return EntryDescriptor(name, relative_path, os.path.join("/root", relative_path), **flags)


def test_build_tree_keeps_walk_order():
    entries = [
        descriptor("b.txt", is_file=True),
        descriptor("docs", is_directory=True),
        descriptor(os.path.join("docs", "a.md"), is_file=True),
    ]
    root = build_entry_tree("root", entries)
    assert [child.name for child in root.children] == ["b.txt", "docs"]
    assert [child.name for child in root.children[1].children] == ["a.md"]
    assert root.children[1].descriptor == entries[1]


def test_build_tree_adds_intermediate_nodes():
    entries = [descriptor(os.path.join("docs", "api", "index.md"), is_file=True)]
    root = build_entry_tree("root", entries)
    docs = root.children[0]
    assert docs.name == "docs"
    assert docs.descriptor is None
    assert docs.is_dir
    assert docs.children[0].name == "api"
    assert docs.children[0].children[0].descriptor == entries[0]


def test_render_tree():
    entries = [
        descriptor("b.txt", is_file=True),
        descriptor("b-link", is_symbolic_link=True),
        descriptor("docs", is_directory=True),
        descriptor(os.path.join("docs", "a.md"), is_file=True),
    ]
    lines = list(render_entry_tree(build_entry_tree("root", entries)))
    assert lines == [
        f"root{os.sep}",
        "├── b.txt",
        "├── b-link [symlink]",
        f"└── docs{os.sep}",
        "    └── a.md",
    ]


def test_render_single_node():
    assert list(render_entry_tree(EntryNode("empty"))) == [f"empty{os.sep}"]


def test_render_walk_result(entry_tree):
    entries = walk(entry_tree, include_descriptors=True)
    lines = list(render_entry_tree(build_entry_tree(entry_tree.name, entries)))
    assert lines[0] == f"root{os.sep}"
    assert len(lines) == 11
    assert any(line.endswith(f"DirQuux{os.sep}") for line in lines)
    assert any(line.endswith("DirFoo-Symlink [symlink]") for line in lines)
