"""Core components of FileIndex."""

from .inode import Inode, FileInode, DirInode, is_file_inode, is_dir_inode
from .index import FileIndex
from .listing import build_index
from .node import TreeNode
from .adapter import TreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)

__all__ = [
    'Inode',
    'FileInode',
    'DirInode',
    'is_file_inode',
    'is_dir_inode',
    'FileIndex',
    'build_index',
    'TreeNode',
    'TreeAdapter',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'create_traverser',
]
