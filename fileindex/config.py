"""Configuration for FileIndex.

Defines the defaults used when the index has to invent metadata (bulk
construction from a listing carries names only) and the traversal
strategies available over an index.
"""

from dataclasses import dataclass
from enum import Enum


# Size recorded for files whose size the listing did not provide
UNKNOWN_SIZE = -1

# r-xr-xr-x, the mode given to every entry built from a listing
DEFAULT_MODE = 0o555

# Reported size of a directory with no stored metadata
DIRECTORY_SIZE = 4096


class TraversalStrategy(Enum):
    """How to walk an index."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent


@dataclass
class ListingConfig:
    """Defaults for metadata synthesized by the index.
    
    Listings only name their entries, so file sizes are unknown and
    permission bits are fixed. Callers that need accurate sizes patch
    the file payloads after construction.
    """
    
    unknown_size: int = UNKNOWN_SIZE      # Size sentinel for listed files
    file_mode: int = DEFAULT_MODE         # Permission bits for listed files
    directory_size: int = DIRECTORY_SIZE  # Size reported for directories
    directory_mode: int = DEFAULT_MODE    # Permission bits for directories
    
    def __post_init__(self):
        """Validate permission bits."""
        for name in ('file_mode', 'directory_mode'):
            mode = getattr(self, name)
            if not 0 <= mode <= 0o7777:
                raise ValueError(f"{name} must be within 0..0o7777, got {oct(mode)}")
