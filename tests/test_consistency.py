"""
Tests for the consistency checker and for the path map staying in step
with the directory tree across sequences of operations.
"""

import pytest

from fileindex import DirInode, FileIndex, FileInode
from fileindex.testing import assert_consistent, check_consistency


class TestCheckConsistency:

    def test_fresh_index(self):
        assert check_consistency(FileIndex()) == []

    def test_built_index(self, sample_index):
        assert check_consistency(sample_index) == []

    def test_missing_root(self):
        idx = FileIndex()
        del idx._index["/"]
        assert check_consistency(idx) == ["root directory '/' is not indexed"]

    def test_stale_entry(self):
        idx = FileIndex()
        idx.add_path("/a", DirInode())
        idx.get_inode("/").rem_item("a")  # bypass the index
        problems = check_consistency(idx)
        assert len(problems) == 1
        assert problems[0].startswith("/a:")

    def test_unindexed_directory(self):
        idx = FileIndex()
        idx.get_inode("/").add_item("hidden", DirInode())
        problems = check_consistency(idx)
        assert problems == ["/hidden: directory in tree but not indexed"]

    def test_file_in_path_map(self):
        idx = FileIndex()
        idx._index["/f"] = FileInode(None)
        problems = check_consistency(idx)
        assert any("not a directory" in p for p in problems)

    def test_assert_consistent_raises(self):
        idx = FileIndex()
        idx.get_inode("/").add_item("hidden", DirInode())
        with pytest.raises(AssertionError, match="/hidden"):
            assert_consistent(idx)


class TestOperationSequences:
    """The path map and the tree never diverge."""

    def test_mixed_operations(self):
        idx = FileIndex()
        idx.add_path("/a/b/c", DirInode())
        idx.add_path("/a/b/c/f.txt", FileInode(1))
        idx.add_path_fast("/x/y", DirInode())
        idx.add_path("/a/b2", FileInode(2))
        assert_consistent(idx)

        idx.remove_path("/a/b")
        assert_consistent(idx)
        assert sorted(idx.directories()) == ["/", "/a", "/x", "/x/y"]

        idx.remove_path("/x")
        idx.remove_path("/a")
        assert_consistent(idx)
        assert idx.directories() == ["/"]
        assert idx.ls("/") == []

    @pytest.mark.parametrize("path", ["/a", "/a/b", "/a/b/c/d"])
    def test_add_then_remove_restores_empty_tree(self, path):
        idx = FileIndex()
        idx.add_path(path, DirInode())
        top = "/" + path.split("/")[1]
        idx.remove_path(top)
        assert idx.ls("/") == []
        assert idx.directories() == ["/"]
        assert_consistent(idx)
