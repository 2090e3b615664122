"""Test configuration and fixtures for fs-hospitality."""

import os

import pytest

from fs_hospitality.types import EntryType


@pytest.fixture
def entry_tree(tmp_path):
    """Create the reference tree used by the walker tests.

    root/
      FILE_ROOT1.TXT
      fileRoot2.log
      fileRoot2-Symlink.log -> fileRoot2.log
      DirFoo/
      DirFoo-Symlink -> DirFoo
      DirBar/
        fileBar1.txt
        DirQuux/
          fileQuux1.txt
          fileQuux1-Symlink.txt -> fileQuux1.txt
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "FILE_ROOT1.TXT").write_text("fileRoot1")
    (root / "fileRoot2.log").write_text("fileRoot2")
    (root / "DirFoo").mkdir()
    (root / "DirBar").mkdir()
    (root / "DirBar" / "fileBar1.txt").write_text("fileBar1")
    (root / "DirBar" / "DirQuux").mkdir()
    (root / "DirBar" / "DirQuux" / "fileQuux1.txt").write_text("fileQuux1")

    try:
        os.symlink(root / "fileRoot2.log", root / "fileRoot2-Symlink.log")
        os.symlink(root / "DirFoo", root / "DirFoo-Symlink", target_is_directory=True)
        os.symlink(
            root / "DirBar" / "DirQuux" / "fileQuux1.txt",
            root / "DirBar" / "DirQuux" / "fileQuux1-Symlink.txt",
        )
    except (OSError, NotImplementedError):
        # On some platforms (like Windows) creating symlinks might require special permissions
        pytest.skip("Symlink creation not supported on this platform/environment")

    return root


@pytest.fixture
def entry_tree_types():
    """Map every relative path of entry_tree to its expected entry type."""
    return {
        "FILE_ROOT1.TXT": EntryType.FILE,
        "fileRoot2.log": EntryType.FILE,
        "fileRoot2-Symlink.log": EntryType.SYMLINK,
        "DirFoo": EntryType.DIRECTORY,
        "DirFoo-Symlink": EntryType.SYMLINK,
        "DirBar": EntryType.DIRECTORY,
        os.path.join("DirBar", "fileBar1.txt"): EntryType.FILE,
        os.path.join("DirBar", "DirQuux"): EntryType.DIRECTORY,
        os.path.join("DirBar", "DirQuux", "fileQuux1.txt"): EntryType.FILE,
        os.path.join("DirBar", "DirQuux", "fileQuux1-Symlink.txt"): EntryType.SYMLINK,
    }
