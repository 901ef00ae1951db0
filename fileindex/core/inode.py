"""Inode types for FileIndex.

An inode is either a file or a directory. Files carry an opaque payload
defined by the filesystem using the index (usually a stat record).
Directories own their children through a name -> inode mapping; the
index only keeps a secondary lookup table on top of that ownership.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, TypeVar

from ..config import ListingConfig
from ..stats import Stats

T = TypeVar('T')


class Inode(ABC):
    """Common interface of file and directory inodes.

    There are exactly two implementations, FileInode and DirInode. Code
    that needs variant-specific behavior checks ``is_file()`` /
    ``is_dir()`` or uses the ``is_file_inode`` / ``is_dir_inode`` guards.
    """

    __slots__ = ()

    @abstractmethod
    def is_file(self) -> bool:
        """Is this an inode for a file?"""
        pass

    @abstractmethod
    def is_dir(self) -> bool:
        """Is this an inode for a directory?"""
        pass


class FileInode(Inode, Generic[T]):
    """Inode for a file. Stores an arbitrary, filesystem-specific payload."""

    __slots__ = ('_data',)

    def __init__(self, data: T):
        self._data = data

    def is_file(self) -> bool:
        return True

    def is_dir(self) -> bool:
        return False

    def get_data(self) -> T:
        return self._data

    def set_data(self, data: T) -> None:
        self._data = data

    def __repr__(self) -> str:
        return f"FileInode(data={self._data!r})"


class DirInode(Inode, Generic[T]):
    """Inode for a directory.

    Holds the directory listing (child name -> inode) and an optional
    payload for directory metadata. Child inodes are stored as given,
    not copied: a DirInode added here may later be mutated through the
    index.
    """

    __slots__ = ('_data', '_ls')

    def __init__(self, data: Optional[T] = None):
        self._data = data
        self._ls: Dict[str, Inode] = {}

    def is_file(self) -> bool:
        return False

    def is_dir(self) -> bool:
        return True

    def get_data(self) -> Optional[T]:
        return self._data

    def get_stats(self, config: Optional[ListingConfig] = None) -> Stats:
        """Return a synthetic stat record for this directory.

        Args:
            config: Supplies size and mode; defaults to ListingConfig()

        Returns:
            Stats describing a directory
        """
        config = config or ListingConfig()
        return Stats.for_directory(config.directory_size, config.directory_mode)

    def get_listing(self) -> List[str]:
        """Return the names of the entries in this directory.

        Names are relative to the directory. A new list is built on
        every call, so it never reflects later changes.
        """
        return list(self._ls)

    def get_item(self, name: str) -> Optional[Inode]:
        """Return the inode for ``name``, or None if it does not exist."""
        return self._ls.get(name)

    def add_item(self, name: str, inode: Inode) -> bool:
        """Add ``inode`` to the listing under ``name``.

        Args:
            name: Entry name, must not contain '/'
            inode: Inode to store; the directory takes ownership of it

        Returns:
            True if it was added, False if ``name`` already existed
        """
        if name in self._ls:
            return False
        self._ls[name] = inode
        return True

    def rem_item(self, name: str) -> Optional[Inode]:
        """Remove ``name`` from the listing.

        Returns:
            The removed inode, or None if there was no such entry
        """
        return self._ls.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self._ls

    def __repr__(self) -> str:
        return f"DirInode(entries={len(self._ls)}, data={self._data!r})"


def is_file_inode(inode: Optional[Inode]) -> bool:
    """True if ``inode`` is a file inode (False for None)."""
    return inode is not None and inode.is_file()


def is_dir_inode(inode: Optional[Inode]) -> bool:
    """True if ``inode`` is a directory inode (False for None)."""
    return inode is not None and inode.is_dir()
