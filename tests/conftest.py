"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared documents
# ---------------------------------------------------------------------------


@pytest.fixture
def blog_document() -> dict[str, Any]:
    """A post with every kind of relation resolvable."""
    return {
        "id": 1,
        "title": "Hello",
        "author_id": 2,
        "tag_ids": [5, 7],
        "comments": [
            {"id": 10, "text": "first", "author_id": 3},
            {"id": 11, "text": "second", "author_id": 2},
        ],
        "meta": {"version": 4, "editor_id": 3},
        "authors": [{"id": 2, "name": "Ada"}, {"id": 3, "name": "Brian"}],
        "tags": [{"id": 5, "label": "x"}, {"id": 7, "label": "z"}],
    }


@pytest.fixture
def tree_document() -> dict[str, Any]:
    return {
        "id": 1,
        "child_ids": [2, 3],
        "nodes": [
            {"id": 1},
            {"id": 2, "parent_id": 1},
            {"id": 3, "parent_id": 99},
        ],
    }
