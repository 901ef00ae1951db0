"""TreeAdapter abstraction for traversing a FileIndex.

The adapter provides navigation (children, parent, depth) for a tree,
decoupling node representation from the traversal algorithms.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .node import TreeNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree of TreeNodes."""
    
    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node.
        
        Args:
            node: The parent node
            
        Returns:
            Iterator yielding child TreeNode instances
        """
        pass
    
    @abstractmethod
    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.
        
        Returns:
            Parent TreeNode or None if node is the root
        """
        pass
    
    @abstractmethod
    def get_depth(self, node: TreeNode) -> int:
        """Calculate the depth of a node in the tree.
        
        Returns:
            Depth where root = 0
        """
        pass
