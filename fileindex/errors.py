"""Exceptions raised by FileIndex.

Expected outcomes such as a missing path or a name collision are reported
through return values (``None`` / ``False``). Exceptions are reserved for
caller mistakes that should stop the operation immediately.
"""


class FileIndexError(Exception):
    """Base class for all FileIndex errors."""
    pass


class InvalidPathError(FileIndexError, ValueError):
    """Raised when a path that must be absolute is not."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path must be absolute, got: {path!r}")


class MissingInodeError(FileIndexError, ValueError):
    """Raised when an insertion is attempted without an inode."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Inode must be specified for path {path!r}")


class PathNotFoundError(FileIndexError, KeyError):
    """Raised when a traversal starts from a path that is not indexed."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return f"Path not found in index: {self.path!r}"


class ListingFormatError(FileIndexError, ValueError):
    """Raised when a directory listing entry is neither a mapping nor a file marker."""

    def __init__(self, path: str, value: object):
        self.path = path
        self.value = value
        super().__init__(
            f"Listing entry {path!r} must be a mapping (directory) or None (file), "
            f"got {type(value).__name__}: {value!r}"
        )
