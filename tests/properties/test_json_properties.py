"""Property-based tests for JSON serialization and parsing."""

import json
from typing import TYPE_CHECKING

from hypothesis import given

from jsonmap._json import parse_json_object, serialize_json

from .strategies import json_object_strategy

if TYPE_CHECKING:
    from jsonmap._types import JSONObject


class TestSerializationRoundtrip:
    """Serialize then parse produces equivalent data."""

    @given(json_object_strategy)
    def test_roundtrip_preserves_data(self, obj: "JSONObject") -> None:
        """parse(serialize(obj)) == obj for any valid JSON object."""
        serialized = serialize_json(obj)
        parsed = parse_json_object(serialized)
        assert parsed == obj

    @given(json_object_strategy)
    def test_roundtrip_preserves_key_order(self, obj: "JSONObject") -> None:
        """Keys come back in the order they were written."""
        parsed = parse_json_object(serialize_json(obj))
        assert list(parsed) == list(obj)

    @given(json_object_strategy)
    def test_serialize_is_deterministic(self, obj: "JSONObject") -> None:
        """serialize(obj) == serialize(obj) always."""
        result1 = serialize_json(obj)
        result2 = serialize_json(obj)
        assert result1 == result2


class TestSerializationProperties:
    """Serialization output format invariants."""

    @given(json_object_strategy)
    def test_reserialization_is_stable(self, obj: "JSONObject") -> None:
        """Parsing and re-serializing gives identical text."""
        serialized = serialize_json(obj)
        reserialized = serialize_json(parse_json_object(serialized))
        assert serialized == reserialized

    @given(json_object_strategy)
    def test_valid_json_output(self, obj: "JSONObject") -> None:
        """Output is parseable by standard json.loads."""
        serialized = serialize_json(obj)
        # Should not raise
        json.loads(serialized)
