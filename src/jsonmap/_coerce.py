"""Coercion of stored values to requested scalar types.

Each coerce_* function takes a value read out of a map and returns it as
the requested type, or None when it cannot. The checks run in a fixed
order and the first that applies wins:

1. The value already has the requested type: it is returned unchanged.
2. The value is a number and the requested type is numeric: a numeric
   cast is performed. Narrowing never raises; it truncates.
3. The value is a string: it is parsed with the grammar of the requested
   type (integer literal, floating point literal, "true"/"false", or a
   single character).
4. Anything else, including None and booleans asked for as numbers,
   gives None.

No function here raises for a value it cannot coerce.
"""

import logging
import math
from decimal import Decimal
from typing import TypeVar

from ._scalars import (
    Byte,
    Char,
    Float,
    Integer,
    Long,
    Short,
    _FixedWidthInteger,  # pyright: ignore[reportPrivateUsage]
    int_to_float,
    parse_decimal,
    real_to_float,
)
from ._values import ValueKind, classify, is_number

__all__ = [
    "coerce_boolean",
    "coerce_byte",
    "coerce_char",
    "coerce_double",
    "coerce_float",
    "coerce_integer",
    "coerce_long",
    "coerce_short",
    "coerce_string",
]

log = logging.getLogger(__name__)

_IntegerT = TypeVar("_IntegerT", bound=_FixedWidthInteger)

_TRUE = "true"
_FALSE = "false"
_NAN = "NaN"
_INFINITY = "Infinity"
_NEGATIVE_INFINITY = "-Infinity"


def _miss(value: object, target: str) -> None:
    if value is not None:
        log.debug(
            "cannot coerce %s value %r to %s", type(value).__name__, value, target
        )


def _coerce_fixed_width(
    value: object, target: "type[_IntegerT]"
) -> "_IntegerT | None":
    if type(value) is target:
        return value  # pyright: ignore[reportReturnType]
    kind = classify(value)
    if is_number(kind):
        return target(value)
    if kind is ValueKind.STRING:
        try:
            return target(value)
        except ValueError:
            pass
    _miss(value, target.__name__)
    return None


def coerce_byte(value: object) -> "Byte | None":
    """Coerce a stored value to an 8-bit integer."""
    return _coerce_fixed_width(value, Byte)


def coerce_short(value: object) -> "Short | None":
    """Coerce a stored value to a 16-bit integer."""
    return _coerce_fixed_width(value, Short)


def coerce_integer(value: object) -> "Integer | None":
    """Coerce a stored value to a 32-bit integer.

    "42" gives 42, 3.9 gives 3 (truncated), "42.5" gives None.
    """
    return _coerce_fixed_width(value, Integer)


def coerce_long(value: object) -> "Long | None":
    """Coerce a stored value to a 64-bit integer."""
    return _coerce_fixed_width(value, Long)


def coerce_float(value: object) -> "Float | None":
    """Coerce a stored value to a 32-bit float.

    Numbers are rounded to the nearest binary32 value. Strings are parsed
    as floating point literals and then rounded.
    """
    if type(value) is Float:
        return value
    kind = classify(value)
    if is_number(kind) or kind is ValueKind.STRING:
        try:
            return Float(value)
        except ValueError:
            pass
    _miss(value, "Float")
    return None


def coerce_double(value: object) -> "float | None":
    """Coerce a stored value to a double-precision float.

    Integers too large for a double become a signed infinity.
    """
    if type(value) is float:
        return value
    kind = classify(value)
    if kind is ValueKind.INTEGER:
        return int_to_float(int(value))  # pyright: ignore[reportArgumentType]
    if kind is ValueKind.FLOAT:
        return real_to_float(value)
    if kind is ValueKind.STRING:
        try:
            return parse_decimal(value)  # pyright: ignore[reportArgumentType]
        except ValueError:
            pass
    _miss(value, "double")
    return None


def coerce_char(value: object) -> "Char | None":
    """Coerce a stored value to a single character.

    Only strings of length one qualify. Numbers are never converted.
    """
    if type(value) is Char:
        return value
    if classify(value) is ValueKind.STRING and len(value) == 1:  # pyright: ignore[reportArgumentType]
        return Char(value)
    _miss(value, "Char")
    return None


def coerce_boolean(value: object) -> "bool | None":
    """Coerce a stored value to a boolean.

    Strings match "true" or "false" ignoring case. No other spelling is
    accepted, and numbers are never treated as truth values.
    """
    kind = classify(value)
    if kind is ValueKind.BOOLEAN:
        return value  # pyright: ignore[reportReturnType]
    if kind is ValueKind.STRING:
        lowered = value.lower()  # pyright: ignore[reportAttributeAccessIssue]
        if lowered == _TRUE:
            return True
        if lowered == _FALSE:
            return False
    _miss(value, "bool")
    return None


def coerce_string(value: object) -> "str | None":
    """Coerce a stored value to a string.

    Any present value has a string form, so this only returns None for
    None. Booleans render as "true" and "false" to match their JSON
    spelling, and non-finite numbers as "NaN", "Infinity" and "-Infinity"
    so that coerce_double reads them back. Everything else goes through
    str().
    """
    kind = classify(value)
    if kind is ValueKind.ABSENT:
        return None
    if kind is ValueKind.STRING:
        return value  # pyright: ignore[reportReturnType]
    if kind is ValueKind.BOOLEAN:
        return _TRUE if value else _FALSE
    if kind is ValueKind.INTEGER:
        try:
            return str(value)
        except ValueError:
            # int digit limit
            return str(Decimal(int(value)))  # pyright: ignore[reportArgumentType]
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return _NAN
        return _INFINITY if value > 0 else _NEGATIVE_INFINITY
    return str(value)
