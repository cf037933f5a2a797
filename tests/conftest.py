"""
Pytest configuration and shared fixtures.
"""

import tempfile
from itertools import compress
from pathlib import Path

import pytest

from chuk_mcp_pcset.catalog import SetClassCatalog


@pytest.fixture(scope="session")
def all_subsets() -> list[list[int]]:
    """Every subset of the aggregate, ascending, indexed by its chroma mask."""
    return [
        list(compress(range(12), ((mask >> i) & 1 for i in range(12)))) for mask in range(4096)
    ]


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in set-class library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_pcset" / "catalog" / "library"


@pytest.fixture
def catalog(library_path: Path) -> SetClassCatalog:
    """Catalogue over the built-in library only."""
    return SetClassCatalog(library_path=library_path)
