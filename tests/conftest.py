from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from storycheck.logging import reset_logging
from tests._fixtures.memory_fs import MemoryFileSystem
from tests._fixtures.tree_builder import TreeBuilder


@pytest.fixture
def tree_builder(tmp_path: Path) -> TreeBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return TreeBuilder(tmp_path)


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Provide an empty in-memory filesystem."""
    return MemoryFileSystem()


@pytest.fixture(autouse=True)
def _isolated_logging() -> Iterator[None]:
    yield
    reset_logging()
