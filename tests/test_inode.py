"""Unit tests for FileInode and DirInode."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fileindex import (
    DirInode,
    FileInode,
    FileType,
    ListingConfig,
    Stats,
    is_dir_inode,
    is_file_inode,
)


class TestFileInode(unittest.TestCase):
    """Test the file variant."""
    
    def test_discriminators(self):
        inode = FileInode("payload")
        self.assertTrue(inode.is_file())
        self.assertFalse(inode.is_dir())
        
    def test_payload_roundtrip(self):
        stats = Stats.for_file(size=10)
        inode = FileInode(stats)
        self.assertIs(inode.get_data(), stats)
        
        replacement = Stats.for_file(size=20)
        inode.set_data(replacement)
        self.assertIs(inode.get_data(), replacement)
        
    def test_payload_is_opaque(self):
        """Any object can be stored, including None."""
        self.assertIsNone(FileInode(None).get_data())
        self.assertEqual(FileInode({"k": 1}).get_data(), {"k": 1})


class TestDirInode(unittest.TestCase):
    """Test the directory variant and its child map."""
    
    def setUp(self):
        self.dir = DirInode()
        
    def test_discriminators(self):
        self.assertTrue(self.dir.is_dir())
        self.assertFalse(self.dir.is_file())
        
    def test_new_directory_is_empty(self):
        self.assertEqual(self.dir.get_listing(), [])
        self.assertIsNone(self.dir.get_data())
        
    def test_optional_payload(self):
        self.assertEqual(DirInode("meta").get_data(), "meta")
        
    def test_add_and_get(self):
        child = FileInode("a")
        self.assertTrue(self.dir.add_item("a.txt", child))
        self.assertIs(self.dir.get_item("a.txt"), child)
        self.assertIn("a.txt", self.dir)
        
    def test_add_existing_name_fails_without_mutation(self):
        first = FileInode(1)
        second = FileInode(2)
        self.assertTrue(self.dir.add_item("x", first))
        self.assertFalse(self.dir.add_item("x", second))
        self.assertIs(self.dir.get_item("x"), first)
        self.assertEqual(self.dir.get_listing(), ["x"])
        
    def test_get_missing_returns_none(self):
        self.assertIsNone(self.dir.get_item("nope"))
        
    def test_remove(self):
        child = DirInode()
        self.dir.add_item("sub", child)
        self.assertIs(self.dir.rem_item("sub"), child)
        self.assertIsNone(self.dir.rem_item("sub"))
        self.assertEqual(self.dir.get_listing(), [])
        
    def test_listing_is_a_fresh_list(self):
        self.dir.add_item("a", FileInode(None))
        listing = self.dir.get_listing()
        self.dir.add_item("b", FileInode(None))
        self.assertEqual(listing, ["a"])
        self.assertEqual(sorted(self.dir.get_listing()), ["a", "b"])
        
    def test_empty_directory_is_truthy(self):
        """An empty directory must never be mistaken for a missing one."""
        self.assertTrue(self.dir)
        
    def test_get_stats_defaults(self):
        stats = self.dir.get_stats()
        self.assertEqual(stats.file_type, FileType.DIRECTORY)
        self.assertEqual(stats.size, 4096)
        self.assertEqual(stats.mode, 0o555)
        
    def test_get_stats_with_config(self):
        stats = self.dir.get_stats(ListingConfig(directory_size=512, directory_mode=0o755))
        self.assertEqual(stats.size, 512)
        self.assertEqual(stats.mode, 0o755)


class TestTypeGuards(unittest.TestCase):
    
    def test_guards(self):
        self.assertTrue(is_file_inode(FileInode(None)))
        self.assertFalse(is_file_inode(DirInode()))
        self.assertTrue(is_dir_inode(DirInode()))
        self.assertFalse(is_dir_inode(FileInode(None)))
        
    def test_guards_accept_none(self):
        self.assertFalse(is_file_inode(None))
        self.assertFalse(is_dir_inode(None))


class TestStats(unittest.TestCase):
    
    def test_unknown_size(self):
        stats = Stats.for_file()
        self.assertEqual(stats.size, -1)
        self.assertFalse(stats.size_known)
        self.assertTrue(stats.is_file())
        self.assertFalse(stats.is_directory())
        
    def test_known_size(self):
        self.assertTrue(Stats.for_file(size=0).size_known)
        
    def test_invalid_mode_rejected(self):
        with self.assertRaises(ValueError):
            ListingConfig(file_mode=0o10000)


if __name__ == '__main__':
    unittest.main()
