"""Adapters binding FileIndex to the traversal abstractions."""

from .index import IndexAdapter, IndexNode

__all__ = ['IndexAdapter', 'IndexNode']
