"""High-level API for walking a FileIndex.

Simple functions covering the common cases, for users who don't need
to assemble adapters and traversers themselves.
"""

from typing import Iterator, Optional, Union

from .adapters.index import IndexAdapter, IndexNode
from .config import TraversalStrategy
from .core.index import ROOT, FileIndex
from .core.traverser import create_traverser
from .errors import PathNotFoundError


def traverse_index(index: FileIndex,
                   start: str = ROOT,
                   strategy: Union[str, TraversalStrategy] = TraversalStrategy.BREADTH_FIRST,
                   max_depth: Optional[int] = None,
                   min_depth: int = 0) -> Iterator[IndexNode]:
    """Walk the entries of an index.
    
    Args:
        index: Index to walk
        start: Path to start from (included at depth 0)
        strategy: Traversal order
        max_depth: Maximum depth below ``start`` (None = unlimited)
        min_depth: Minimum depth below ``start`` before yielding
        
    Yields:
        IndexNode for each entry reached
        
    Raises:
        PathNotFoundError: If ``start`` is not in the index
        
    Example:
        for node in traverse_index(idx, '/docs'):
            print(node.path, node.metadata()['type'])
    """
    adapter = IndexAdapter(index)
    root = adapter.node_for(start)
    if root is None:
        raise PathNotFoundError(start)
    
    traverser = create_traverser(strategy, adapter)
    for node, _depth in traverser.traverse(root, max_depth=max_depth, min_depth=min_depth):
        yield node


def walk_paths(index: FileIndex,
               start: str = ROOT,
               strategy: Union[str, TraversalStrategy] = TraversalStrategy.BREADTH_FIRST,
               max_depth: Optional[int] = None,
               files_only: bool = False) -> Iterator[str]:
    """Yield the absolute paths of the entries reached from ``start``.
    
    Args:
        files_only: Skip directories
    """
    for node in traverse_index(index, start, strategy, max_depth=max_depth):
        if files_only and not node.inode.is_file():
            continue
        yield node.path


def count_entries(index: FileIndex, start: str = ROOT) -> int:
    """Count the entries reachable from ``start``, including ``start`` itself."""
    return sum(1 for _ in traverse_index(index, start))
