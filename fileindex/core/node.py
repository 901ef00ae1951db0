"""TreeNode abstraction for traversing a FileIndex.

The TreeNode is intentionally kept simple - it's a data container.
Navigation logic lives in the TreeAdapter, so traversers never need to
know how the index stores its entries.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class TreeNode(ABC):
    """Abstract base class for nodes yielded during traversal."""
    
    @abstractmethod
    def identifier(self) -> str:
        """Return a unique, stable identifier for this node.
        
        For index entries this is the absolute path.
        """
        pass
    
    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node has no children.
        
        Traversers use this to skip asking the adapter for children.
        """
        pass
    
    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight metadata about this node.
        
        Common fields: name, path, type, and size/mode when known.
        """
        pass
    
    def __str__(self) -> str:
        return self.identifier()
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.identifier()!r})"
    
    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same identifier."""
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.identifier() == other.identifier()
    
    def __hash__(self) -> int:
        return hash(self.identifier())
