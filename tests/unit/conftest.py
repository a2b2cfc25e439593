"""Shared fixtures for unit tests."""

from typing import TYPE_CHECKING

import pytest

from jsonmap import JsonMap

if TYPE_CHECKING:
    from collections.abc import Callable

    from jsonmap._types import JSONValue


SAMPLE_JSON = (
    '{"name": "alice", "age": 42, "ratio": 0.75, "active": true,'
    ' "nickname": null, "tags": ["a", "b"], "address": {"city": "paris"}}'
)


@pytest.fixture
def sample_map() -> "JsonMap[JSONValue]":
    """Provide a map decoded from a document with one value of each JSON type.

    Returns:
        A JsonMap over SAMPLE_JSON.
    """
    return JsonMap.from_json(SAMPLE_JSON)


@pytest.fixture
def make_map() -> "Callable[..., JsonMap[object]]":
    """Factory fixture for creating a map holding a single value.

    Returns:
        A callable that takes a value and returns a JsonMap storing it
        under the key "value".

    Example:
        def test_get_integer(make_map) -> None:
            data = make_map("42")
            assert data.get_integer("value") == 42
    """

    def create_map(value: object) -> "JsonMap[object]":
        return JsonMap[object]().put_value("value", value)

    return create_map
