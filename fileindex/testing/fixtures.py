"""Test fixtures for FileIndex consumers.

These helpers inspect the internal path map of an index so that test
suites can verify it agrees with the directory tree, without that map
being part of the public API.
"""

from typing import List, Tuple

from ..core.index import ROOT, FileIndex
from ..core.inode import DirInode


def check_consistency(index: FileIndex) -> List[str]:
    """Compare the path map of an index against its directory tree.
    
    Checks that:
    - the root directory is indexed
    - only directories are indexed
    - every indexed directory is the entry of its parent under its name
    - every directory reachable from the root is indexed at its path
    
    Args:
        index: Index to check
        
    Returns:
        Descriptions of every problem found; empty if consistent
    """
    problems: List[str] = []
    path_map = index._index
    
    if ROOT not in path_map:
        return ["root directory '/' is not indexed"]
    
    for path, inode in path_map.items():
        if not isinstance(inode, DirInode):
            problems.append(f"{path}: indexed entry is not a directory ({inode!r})")
            continue
        if path == ROOT:
            continue
        dirpath, name = FileIndex._split_path(path)
        parent = path_map.get(dirpath)
        if parent is None:
            problems.append(f"{path}: parent {dirpath} is not indexed")
        elif parent.get_item(name) is not inode:
            problems.append(f"{path}: not the entry {name!r} of {dirpath}")
    
    # Walk the tree itself; every directory found must be indexed
    stack: List[Tuple[str, DirInode]] = [(ROOT, path_map[ROOT])]
    seen = set()
    while stack:
        path, directory = stack.pop()
        if id(directory) in seen:
            problems.append(f"{path}: directory reachable more than once")
            continue
        seen.add(id(directory))
        prefix = '' if path == ROOT else path
        for name in directory.get_listing():
            child = directory.get_item(name)
            if child is None or not child.is_dir():
                continue
            child_path = f"{prefix}/{name}"
            if path_map.get(child_path) is not child:
                problems.append(f"{child_path}: directory in tree but not indexed")
            stack.append((child_path, child))
    
    return problems


def assert_consistent(index: FileIndex) -> None:
    """Raise AssertionError listing every consistency problem of ``index``."""
    problems = check_consistency(index)
    if problems:
        raise AssertionError(
            "FileIndex is inconsistent:\n  " + "\n  ".join(problems)
        )
