"""Bulk construction of a FileIndex from a nested directory listing.

A listing is a plain mapping of entry name to either another mapping
(a subdirectory) or None (a file). Other false values such as False
also mark files; any other value is rejected::

    {
        "docs": {"readme.txt": None},
        "bin": None,
    }

This is the shape produced by directory indexers that pre-fetch a
whole tree, e.g. a JSON listing served next to static content.
"""

import logging
from collections import abc
from typing import Any, List, Mapping, Optional, Tuple

from ..config import ListingConfig
from ..errors import ListingFormatError
from ..stats import Stats
from .index import ROOT, FileIndex
from .inode import DirInode, FileInode, Inode

logger = logging.getLogger(__name__)


def build_index(listing: Mapping[str, Any],
                config: Optional[ListingConfig] = None,
                index_cls: type = FileIndex) -> FileIndex:
    """Construct a new index from a nested listing.

    The listing is walked with an explicit stack instead of recursion,
    so arbitrarily deep trees are fine. Sibling subdirectories are
    processed last-in first-out; only the final structure is guaranteed,
    not the order in which directories were indexed.

    Files get a ``Stats`` payload whose size is ``config.unknown_size``
    (the listing has no size information) and whose mode is
    ``config.file_mode``. Callers that need real sizes must patch them in.

    Args:
        listing: Mapping of name -> nested mapping (directory) or None (file)
        config: Defaults for synthesized file metadata
        index_cls: FileIndex subclass to instantiate

    Returns:
        A fully populated index
    """
    config = config or ListingConfig()
    idx = index_cls()
    root = DirInode()
    idx._index[ROOT] = root

    stack: List[Tuple[str, Mapping[str, Any], DirInode]] = [('', listing, root)]
    files = 0
    while stack:
        pwd, tree, parent = stack.pop()
        for name, children in tree.items():
            path = f"{pwd}/{name}"
            inode: Inode
            if isinstance(children, abc.Mapping):
                inode = DirInode()
                idx._index[path] = inode
                stack.append((path, children, inode))
            elif not children:
                # Listings carry no size information
                inode = FileInode(Stats.for_file(config.unknown_size, config.file_mode))
                files += 1
            else:
                raise ListingFormatError(path, children)
            parent.add_item(name, inode)

    logger.debug("Built index from listing: %d directories, %d files", len(idx), files)
    return idx
