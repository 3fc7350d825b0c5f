"""Test setup for cattree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cattree.schemas import CategoryNode  # noqa: E402
from cattree.tree_index import TreeIndex, build_index  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


@pytest.fixture
def forest_payload() -> list[dict]:
    """Category tree as served by the API.

    electronics
      phones
        android
        iphone
      laptops
    fashion
      men
      women
    books
    """
    return [
        {
            "_id": "electronics",
            "title": "Electronics",
            "slug": "electronics",
            "children": [
                {
                    "_id": "phones",
                    "title": "Phones",
                    "slug": "phones",
                    "children": [
                        {"_id": "android", "title": "Android", "slug": "android", "children": []},
                        {"_id": "iphone", "title": "iPhone", "slug": "iphone", "children": []},
                    ],
                },
                {"_id": "laptops", "title": "Laptops", "slug": "laptops", "children": []},
            ],
        },
        {
            "_id": "fashion",
            "title": "Fashion",
            "slug": "fashion",
            "children": [
                {"_id": "men", "title": "Men", "slug": "men", "children": []},
                {"_id": "women", "title": "Women", "slug": "women", "children": []},
            ],
        },
        {"_id": "books", "title": "Books", "slug": "books", "children": []},
    ]


@pytest.fixture
def forest(forest_payload: list[dict]) -> list[CategoryNode]:
    return [CategoryNode.model_validate(node) for node in forest_payload]


@pytest.fixture
def index(forest: list[CategoryNode]) -> TreeIndex:
    return build_index(forest)
