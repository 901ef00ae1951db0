"""Index adapter for traversing a FileIndex.

Binds the generic TreeNode/TreeAdapter abstractions to the entries of a
FileIndex, so the traversers in ``fileindex.core.traverser`` can walk it.
"""

import posixpath
from typing import Any, Dict, Iterator, Optional

from ..core.adapter import TreeAdapter
from ..core.index import ROOT, FileIndex
from ..core.inode import Inode
from ..core.node import TreeNode
from ..stats import Stats


class IndexNode(TreeNode):
    """An index entry seen during traversal: an absolute path and its inode.

    Lightweight - it holds a reference to the inode, not a copy, so
    payload changes made through ``inode`` are visible to the index.
    """

    def __init__(self, path: str, inode: Inode):
        self.path = path
        self.inode = inode
        self._metadata: Optional[Dict[str, Any]] = None

    @property
    def name(self) -> str:
        return posixpath.basename(self.path) or ROOT

    def identifier(self) -> str:
        return self.path

    def is_leaf(self) -> bool:
        """Files and empty directories are leaves."""
        if self.inode.is_file():
            return True
        return not self.inode.get_listing()

    def metadata(self) -> Dict[str, Any]:
        if self._metadata is None:
            self._metadata = self._compute_metadata()
        return self._metadata

    def _compute_metadata(self) -> Dict[str, Any]:
        metadata = {
            'name': self.name,
            'path': self.path,
            'type': 'file' if self.inode.is_file() else 'directory',
        }
        data = self.inode.get_data()
        if isinstance(data, Stats):
            metadata['size'] = data.size
            metadata['mode'] = data.mode
        return metadata


class IndexAdapter(TreeAdapter):
    """Adapter for navigating the entries of a FileIndex."""

    def __init__(self, index: FileIndex):
        self.index = index

    def node_for(self, path: str) -> Optional[IndexNode]:
        """Return the IndexNode at ``path``, or None if it is not indexed."""
        inode = self.index.get_inode(path)
        if inode is None:
            return None
        return IndexNode(path, inode)

    def get_children(self, node: IndexNode) -> Iterator[IndexNode]:
        if node.inode.is_file():
            return
        prefix = '' if node.path == ROOT else node.path
        for name in node.inode.get_listing():
            child = node.inode.get_item(name)
            if child is not None:
                yield IndexNode(f"{prefix}/{name}", child)

    def get_parent(self, node: IndexNode) -> Optional[IndexNode]:
        if node.path == ROOT:
            return None
        return self.node_for(posixpath.dirname(node.path))

    def get_depth(self, node: IndexNode) -> int:
        """Depth from the path alone; root = 0."""
        if node.path == ROOT:
            return 0
        return node.path.count('/')
