#!/usr/bin/env python3
"""
Example: serving a pre-fetched directory listing.

Builds an index from a nested listing (as a static HTTP filesystem would
download it), patches in a file size learned later, and walks the tree.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fileindex import FileIndex, FileInode, Stats, TraversalStrategy, traverse_index


LISTING = {
    "index.html": None,
    "assets": {
        "app.js": None,
        "img": {"logo.png": None},
    },
    "docs": {"readme.txt": None},
}


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    idx = FileIndex.from_listing(LISTING)
    print(f"Root: {sorted(idx.ls('/'))}")

    # Sizes are unknown until the file is fetched
    readme = idx.get_inode("/docs/readme.txt")
    readme.get_data().size = 2048

    idx.add_path("/cache/session/state.json", FileInode(Stats.for_file(size=12)))

    print("\nTree (pre-order):")
    for node in traverse_index(idx, strategy=TraversalStrategy.DEPTH_FIRST_PRE):
        meta = node.metadata()
        size = meta.get("size", "-")
        print(f"  {node.path:<30} {meta['type']:<10} {size}")

    removed = idx.remove_path("/assets")
    print(f"\nRemoved /assets: {removed!r}")
    print(f"Indexed directories: {sorted(idx.directories())}")


if __name__ == "__main__":
    main()
