"""Testing utilities for FileIndex consumers."""

from .fixtures import check_consistency, assert_consistent

__all__ = ['check_consistency', 'assert_consistent']
