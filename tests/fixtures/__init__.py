"""Fixtures for partial_deep_equal tests"""

from copy import deepcopy
from random import Random
from types import SimpleNamespace

import pytest

__all__ = [
    "big_document",
    "big_document_copy",
    "big_records",
    "shuffled_items",
]


def create_document(seed=42, users=200):
    """Create a deterministic document like a large JSON API response."""
    rand = Random(seed)
    return {
        "meta": {"total": users, "page": 1, "tags": ["api", "v2"]},
        "users": [
            {
                "id": n,
                "name": f"user{n}",
                "email": f"user{n}@example.com",
                "active": rand.random() < 0.8,
                "score": round(rand.uniform(0, 100), 2),
                "roles": rand.sample(["admin", "dev", "ops", "qa", "guest"], 2),
                "address": {
                    "street": f"{rand.randint(1, 999)} Main St",
                    "zip": f"{rand.randint(10000, 99999)}",
                },
            }
            for n in range(users)
        ],
    }


def create_records(count=200):
    return [
        SimpleNamespace(
            id=n,
            name=f"record{n}",
            children=[SimpleNamespace(id=n * 10 + i, value=i) for i in range(5)],
        )
        for n in range(count)
    ]


@pytest.fixture(scope="module")
def big_document():
    return create_document()


@pytest.fixture(scope="module")
def big_document_copy():
    return deepcopy(create_document())


@pytest.fixture(scope="module")
def big_records():
    return create_records()


@pytest.fixture(scope="module")
def shuffled_items():
    items = [{"id": n, "value": f"item{n}"} for n in range(100)]
    shuffled = deepcopy(items)
    Random(7).shuffle(shuffled)
    return items, shuffled
