"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bookshelf.catalog import BookRecord, BookStore


@pytest.fixture
def seeded_store() -> BookStore:
    """The default eight-book store."""
    return BookStore.seeded()


@pytest.fixture
def duplicate_store() -> BookStore:
    """A store where id 2 appears twice."""
    return BookStore(
        [
            BookRecord(id=1, title="First", author="A", created_at=0),
            BookRecord(id=2, title="Second", author="B", created_at=1000),
            BookRecord(id=2, title="Second again", author="C", created_at=2000),
        ]
    )


@pytest.fixture
def mock_info(seeded_store: BookStore) -> MagicMock:
    """Create a mock GraphQL info object carrying the seeded store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": seeded_store}
    return info


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a small YAML catalog and return its path."""
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "books:\n"
        "  - id: 10\n"
        "    title: Pedro Páramo\n"
        "    author: Juan Rulfo\n"
        "    createdAt: 0\n"
        "  - id: 11\n"
        "    title: Ficciones\n"
        "    author: Jorge Luis Borges\n"
        "    created_at: 86400000\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
