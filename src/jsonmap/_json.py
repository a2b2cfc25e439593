"""JSON text codec.

Decoding accepts strict RFC 8259 JSON whose root is an object. Encoding
writes any mapping of JSON-representable values, including the fixed-width
scalar types and nested maps.
"""

import json
import logging
import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, NoReturn

from ._constants import COMPACT_SEPARATORS, INDENT_SEPARATORS
from ._exceptions import DecodeError, EncodeError

if TYPE_CHECKING:
    from ._types import JSONObject

__all__ = ["parse_json_object", "serialize_json"]

log = logging.getLogger(__name__)


def _reject_constant(name: str) -> NoReturn:
    """Reject the non-standard constants NaN, Infinity and -Infinity."""
    msg = f"invalid JSON: non-standard constant {name}"
    raise DecodeError(msg)


def _parse_float(text: str) -> float:
    """Decode a JSON number literal, rejecting ones a double cannot hold."""
    result = float(text)
    if math.isinf(result):
        msg = f"invalid JSON: number {text} out of range for a double"
        raise DecodeError(msg)
    return result


def _encode_default(value: object) -> object:
    """Encode mappings that are not dicts as JSON objects."""
    if isinstance(value, Mapping):
        return dict(value.items())  # pyright: ignore[reportUnknownArgumentType]
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def parse_json_object(text: "str | bytes | bytearray") -> "JSONObject":
    """Parse JSON text whose root must be an object.

    Integers decode to int, other numbers to float. Later duplicate keys
    replace earlier ones.

    Args:
        text: The JSON text. Bytes must be UTF-8, UTF-16 or UTF-32.

    Returns:
        The decoded object.

    Raises:
        DecodeError: If the text is not valid JSON, uses NaN or Infinity,
            holds a number too large to represent, nests too deeply for
            the parser, or its root is not an object.
    """
    try:
        result: object = json.loads(
            text, parse_float=_parse_float, parse_constant=_reject_constant
        )
    except DecodeError:
        raise
    except ValueError as exc:
        log.debug("failed to decode JSON text: %s", exc)
        msg = f"invalid JSON: {exc}"
        raise DecodeError(msg) from exc
    except RecursionError as exc:
        log.debug("JSON text nests too deeply to decode")
        msg = "invalid JSON: nesting depth exceeds maximum"
        raise DecodeError(msg) from exc

    if not isinstance(result, dict):
        msg = f"expected JSON object, got {type(result).__name__}"
        raise DecodeError(msg)

    return result  # pyright: ignore[reportUnknownVariableType]


def serialize_json(
    value: "Mapping[str, object]",
    *,
    sort_keys: bool = False,
    indent: "int | None" = None,
) -> str:
    """Serialize a mapping to JSON text.

    Keys are written in the mapping's iteration order unless sort_keys is
    set. Unicode is written as-is rather than escaped. Output is compact
    unless indent is given.

    Args:
        value: The mapping to serialize.
        sort_keys: Write keys in sorted order.
        indent: Pretty-print with this many spaces per level.

    Returns:
        The JSON text.

    Raises:
        EncodeError: If a value is not representable as JSON: an unknown
            type, a NaN or infinite float, or a circular reference.
    """
    root = value if isinstance(value, dict) else dict(value.items())
    separators = COMPACT_SEPARATORS if indent is None else INDENT_SEPARATORS
    try:
        return json.dumps(
            root,
            ensure_ascii=False,
            allow_nan=False,
            sort_keys=sort_keys,
            indent=indent,
            separators=separators,
            default=_encode_default,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        log.debug("failed to encode JSON: %s", exc)
        msg = f"cannot encode as JSON: {exc}"
        raise EncodeError(msg) from exc
