"""FileIndex - path to inode bookkeeping for virtual filesystems.

The index is a single-level store mapping *directory* paths to DirInodes.
Files are only reachable through the DirInode that contains them. The
DirInodes own the tree; the path map is a lookup table layered on top so
that resolving a directory never walks the tree.

All paths are assumed to be absolute and already normalized. The index
does no normalization of its own (no joining of adjacent separators, no
'.' or '..' handling).
"""

import logging
import posixpath
from typing import Any, Dict, Generic, Iterator, List, Mapping, Optional, Tuple, TypeVar

from ..errors import InvalidPathError, MissingInodeError
from .inode import DirInode, Inode, is_dir_inode, is_file_inode

logger = logging.getLogger(__name__)

T = TypeVar('T')

ROOT = '/'


class FileIndex(Generic[T]):
    """A simple class for storing a filesystem index.

    Can be used as a partial or a full index, although care must be taken
    if used for the former purpose, especially when directories are
    concerned.

    Example:
        idx = FileIndex()
        idx.add_path('/docs/readme.txt', FileInode(stats))
        idx.ls('/')          # ['docs']
        idx.get_inode('/docs/readme.txt').get_data()
    """

    def __init__(self):
        # Maps directory paths to DirInodes. File inodes never appear here.
        self._index: Dict[str, DirInode[T]] = {}
        self.add_path(ROOT, DirInode())

    @classmethod
    def from_listing(cls, listing: Mapping[str, Any], config=None) -> 'FileIndex':
        """Build an index from a nested directory listing.

        See ``fileindex.core.listing.build_index`` for the listing format.
        """
        from .listing import build_index
        return build_index(listing, config=config, index_cls=cls)

    def add_path(self, path: str, inode: Inode) -> bool:
        """Add the given absolute path to the index if it is not already there.

        Creates any needed parent directories.

        Args:
            path: Absolute path to add
            inode: Inode for the path; the index takes ownership on success

        Returns:
            True if it was added or the same inode is already indexed at
            ``path``; False if there was a conflict (an item in the path is
            a file, or a different item already exists).

        Raises:
            MissingInodeError: If ``inode`` is None
            InvalidPathError: If ``path`` is not absolute

        Note:
            Implicitly created parent directories are not rolled back if a
            later step fails. Only the first insertion of a parent chain,
            into an already indexed ancestor, can conflict; everything after
            it goes into a directory created moments before, which is empty.
            So a failed add leaves no new directories behind unless the tree
            is changed from outside the index in between.
        """
        if inode is None:
            raise MissingInodeError(path)
        if not path.startswith('/'):
            raise InvalidPathError(path)

        # Already indexed: only the very same directory object is accepted
        if path in self._index:
            return self._index[path] is inode

        dirpath, itemname = self._split_path(path)
        parent = self._index.get(dirpath)
        if parent is None and path != ROOT:
            parent = self._create_parents(dirpath)
            if parent is None:
                logger.debug("Could not create parent %s for %s", dirpath, path)
                return False

        if path != ROOT:
            if not parent.add_item(itemname, inode):
                logger.debug(
                    "Name conflict adding %s: %r already exists in %s "
                    "(implicitly created parents are kept)",
                    path, itemname, dirpath)
                return False

        if is_dir_inode(inode):
            self._index[path] = inode
        return True

    def _create_parents(self, dirpath: str) -> Optional[DirInode]:
        """Create ``dirpath`` and every missing directory above it.

        Walks up to the deepest indexed ancestor, then creates the missing
        directories from there downward.

        Returns:
            The DirInode now indexed at ``dirpath``, or None on conflict
        """
        missing = [dirpath]
        current = dirpath
        while True:
            above, _ = self._split_path(current)
            if above == current:
                # Only unnormalized paths such as '//' split onto themselves
                logger.debug("Cannot resolve a parent for %s", current)
                return None
            if above in self._index:
                parent = self._index[above]
                break
            missing.append(above)
            current = above

        for created_path in reversed(missing):
            logger.debug("Creating missing parent directory %s", created_path)
            created = DirInode()
            _, name = self._split_path(created_path)
            if not parent.add_item(name, created):
                logger.debug("Name conflict creating %s", created_path)
                return None
            self._index[created_path] = created
            parent = created
        return parent

    def add_path_fast(self, path: str, inode: Inode) -> bool:
        """Add the given path without the safety checks of ``add_path``.

        Meant for bulk construction from trusted input. The path is not
        checked for absoluteness or prior presence and is used without
        special treatment. Missing parent directories are still created,
        but a failure to attach one is not reported: the directories below
        it are built anyway, detached from the tree.

        Returns:
            False if the item could not be added to its direct parent
            (name already taken), True otherwise
        """
        parent_path, item_name = self._split_path_fast(path)
        parent = self._index.get(parent_path)

        if parent is None:
            missing = [parent_path]
            current = parent_path
            while True:
                above, _ = self._split_path_fast(current)
                if above == current:
                    return False
                parent = self._index.get(above)
                if parent is not None:
                    break
                missing.append(above)
                current = above

            for created_path in reversed(missing):
                created = DirInode()
                _, name = self._split_path_fast(created_path)
                if parent.add_item(name, created):
                    self._index[created_path] = created
                parent = created

        if not parent.add_item(item_name, inode):
            return False

        if inode.is_dir():
            self._index[path] = inode
        return True

    def remove_path(self, path: str) -> Optional[Inode]:
        """Remove the given path. Can be a file or a directory.

        Removing a directory also removes all of its descendants from the
        index. The root directory cannot be removed.

        Returns:
            The removed inode, or None if it did not exist
        """
        if path == ROOT:
            logger.debug("Refusing to remove the root directory")
            return None

        dirpath, itemname = self._split_path(path)
        parent = self._index.get(dirpath)
        if parent is None:
            return None

        inode = parent.rem_item(itemname)
        if inode is None:
            return None

        if is_dir_inode(inode):
            removed = 0
            stack: List[Tuple[str, DirInode]] = [(path, inode)]
            while stack:
                dir_path, directory = stack.pop()
                for name in directory.get_listing():
                    child = directory.rem_item(name)
                    removed += 1
                    if is_dir_inode(child):
                        stack.append((dir_path + '/' + name, child))
                self._index.pop(dir_path, None)
            if removed:
                logger.debug("Cascading removal of %d entries under %s", removed, path)
        return inode

    def ls(self, path: str) -> Optional[List[str]]:
        """Retrieve the directory listing of the given path.

        Returns:
            Names of the entries in ``path``, or None if it is not an
            indexed directory
        """
        item = self._index.get(path)
        if item is None:
            return None
        return item.get_listing()

    def get_inode(self, path: str) -> Optional[Inode]:
        """Return the inode at the given path, or None if it does not exist."""
        dirpath, itemname = self._split_path(path)
        parent = self._index.get(dirpath)
        if parent is None:
            return None
        # Root case
        if dirpath == path:
            return parent
        return parent.get_item(itemname)

    def iter_file_data(self) -> Iterator[T]:
        """Yield the payload of every file in the index."""
        for directory in list(self._index.values()):
            for name in directory.get_listing():
                item = directory.get_item(name)
                if is_file_inode(item):
                    yield item.get_data()

    def directories(self) -> List[str]:
        """Return the paths of all indexed directories."""
        return list(self._index)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.get_inode(path) is not None

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(directories={len(self._index)})"

    @staticmethod
    def _split_path(p: str) -> Tuple[str, str]:
        """Split into a (directory path, item name) pair."""
        dirpath = posixpath.dirname(p)
        itemname = p[len(dirpath) + (0 if dirpath == ROOT else 1):]
        return dirpath, itemname

    @staticmethod
    def _split_path_fast(p: str) -> Tuple[str, str]:
        """Split on the last separator only, with no dirname handling."""
        mark = p.rfind('/')
        parent_path = ROOT if mark == 0 else p[:mark]
        return parent_path, p[mark + 1:]
