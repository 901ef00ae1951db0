"""Stat records used as inode payloads.

The index itself never looks inside a payload. ``Stats`` is the payload
the index produces on its own: file entries built from a listing and the
synthetic record returned by ``DirInode.get_stats()``.
"""

import time
from dataclasses import dataclass, field
from enum import Enum

from .config import DEFAULT_MODE, DIRECTORY_SIZE, UNKNOWN_SIZE


class FileType(Enum):
    """Types of indexed entries."""
    FILE = 1
    DIRECTORY = 2


@dataclass
class Stats:
    """Minimal stat record: type, size, permission bits and mtime.
    
    A size of ``UNKNOWN_SIZE`` (-1) means the size has not been
    determined yet.
    """
    
    file_type: FileType
    size: int = UNKNOWN_SIZE
    mode: int = DEFAULT_MODE
    mtime: float = field(default_factory=time.time)
    
    def is_file(self) -> bool:
        return self.file_type == FileType.FILE
    
    def is_directory(self) -> bool:
        return self.file_type == FileType.DIRECTORY
    
    @property
    def size_known(self) -> bool:
        """True once a real size has been recorded."""
        return self.size != UNKNOWN_SIZE
    
    @classmethod
    def for_file(cls, size: int = UNKNOWN_SIZE, mode: int = DEFAULT_MODE) -> 'Stats':
        return cls(FileType.FILE, size, mode)
    
    @classmethod
    def for_directory(cls, size: int = DIRECTORY_SIZE, mode: int = DEFAULT_MODE) -> 'Stats':
        return cls(FileType.DIRECTORY, size, mode)
