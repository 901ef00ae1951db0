"""Shared fixtures for the FileIndex test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fileindex import FileIndex


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep or large trees, skipped by run_tests.py")


@pytest.fixture
def sample_listing():
    """Listing with nested directories, files and an empty directory.

    /
      docs/
        readme.txt
        guides/
          intro.md
          setup.md
      bin
      empty/
    """
    return {
        "docs": {
            "readme.txt": None,
            "guides": {
                "intro.md": None,
                "setup.md": None,
            },
        },
        "bin": None,
        "empty": {},
    }


@pytest.fixture
def sample_index(sample_listing):
    return FileIndex.from_listing(sample_listing)
