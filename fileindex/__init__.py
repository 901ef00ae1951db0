"""FileIndex - In-memory path index for virtual filesystems.

FileIndex maps absolute paths to inodes (file or directory records) so a
virtual filesystem can resolve paths, list directories and insert or
remove entries without walking its tree.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from fileindex import FileIndex, FileInode, DirInode

    idx = FileIndex.from_listing({"docs": {"readme.txt": None}, "bin": None})
    idx.ls("/docs")                 # ['readme.txt']
    idx.add_path("/tmp/cache", DirInode())
━━━━━━━━━━━━━━━━━━━━━━━━━━

The index does no path normalization, permission checking or locking.
Callers pass absolute, normalized paths and serialize access themselves.
"""

__version__ = "0.1.0"

from .core.inode import Inode, FileInode, DirInode, is_file_inode, is_dir_inode
from .core.index import FileIndex
from .core.listing import build_index
from .stats import Stats, FileType
from .config import (
    ListingConfig,
    TraversalStrategy,
    UNKNOWN_SIZE,
    DEFAULT_MODE,
    DIRECTORY_SIZE,
)
from .errors import (
    FileIndexError,
    InvalidPathError,
    MissingInodeError,
    PathNotFoundError,
    ListingFormatError,
)
from .adapters.index import IndexAdapter, IndexNode
from .api import traverse_index, walk_paths, count_entries

__all__ = [
    "__version__",
    # Core
    "Inode",
    "FileInode",
    "DirInode",
    "is_file_inode",
    "is_dir_inode",
    "FileIndex",
    "build_index",
    # Payloads and config
    "Stats",
    "FileType",
    "ListingConfig",
    "TraversalStrategy",
    "UNKNOWN_SIZE",
    "DEFAULT_MODE",
    "DIRECTORY_SIZE",
    # Errors
    "FileIndexError",
    "InvalidPathError",
    "MissingInodeError",
    "PathNotFoundError",
    "ListingFormatError",
    # Traversal
    "IndexAdapter",
    "IndexNode",
    "traverse_index",
    "walk_paths",
    "count_entries",
]
