"""Shared test fixtures.

DynamoDB types covered by ddbformat:
- String (S)
- Number (N) - carried as decimal text
- String Set (SS)
- Number Set (NS)
"""

from decimal import Decimal
from typing import Any

from pytest import fixture

from ddbformat.keys import KeyDefinition


@fixture
def hash_key() -> KeyDefinition:
    return KeyDefinition(name="id", type="S")


@fixture
def range_key() -> KeyDefinition:
    return KeyDefinition(name="ts", type="N")


@fixture
def native_record() -> dict[str, Any]:
    """A record using every supported native value kind."""
    return {
        "id": "user-1",
        "name": "Homer",
        "age": 39,
        "balance": Decimal("12.50"),
        "ratio": 0.25,
        "tags": ["donuts", "beer"],
        "scores": [10, 20, 30],
    }


@fixture
def typed_record() -> dict[str, Any]:
    """The wire form of native_record."""
    return {
        "id": {"S": "user-1"},
        "name": {"S": "Homer"},
        "age": {"N": "39"},
        "balance": {"N": "12.50"},
        "ratio": {"N": "0.25"},
        "tags": {"SS": ["donuts", "beer"]},
        "scores": {"NS": ["10", "20", "30"]},
    }
