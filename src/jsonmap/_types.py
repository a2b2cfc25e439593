"""Type aliases for jsonmap.

This module contains ONLY TypeAlias definitions for JSON values. It has
no dependencies on other jsonmap modules so that every module can import
from it without creating cycles.
"""

from typing import TypeAlias

# JSON type definitions per RFC 8259
# Using string annotations for forward references to avoid runtime | issues
JSONPrimitive: TypeAlias = "str | int | float | bool | None"
"""A JSON primitive value: string, number, boolean, or null."""

JSONArray: TypeAlias = "list[JSONValue]"
"""A JSON array containing any JSON values."""

JSONObject: TypeAlias = "dict[str, JSONValue]"
"""A JSON object mapping string keys to JSON values."""

JSONValue: TypeAlias = "JSONPrimitive | JSONArray | JSONObject"
"""Any JSON value: primitive, array, or object."""
