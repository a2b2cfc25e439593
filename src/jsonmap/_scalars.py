"""Fixed-width scalar types.

JSON only knows strings, numbers and booleans, and Python only knows
arbitrary-precision ints and double-precision floats. These types give
callers the narrower representations found in other runtimes:

- Byte, Short, Integer, Long: signed two's complement integers of
  8, 16, 32 and 64 bits.
- Float: an IEEE 754 binary32 value.
- Char: a single character.

Each type is a subclass of the matching builtin, so values compare,
hash, and serialize exactly like plain ints, floats and strings.
Constructing one from a number performs a numeric cast: it never raises
for out-of-range input. Constructing one from a string parses it strictly
and raises ValueError when the text is not a literal of the right shape or
does not fit.
"""

import math
import re
import struct
from typing import ClassVar, TypeVar

from ._constants import (
    BYTE_BITS,
    INT_BITS,
    LONG_BITS,
    MAX_INT,
    MAX_LONG,
    MIN_INT,
    MIN_LONG,
    SHORT_BITS,
)
from ._values import ValueKind, classify

__all__ = [
    "Byte",
    "Char",
    "Float",
    "Integer",
    "Long",
    "Short",
    "float_to_integral",
    "int_to_float",
    "parse_decimal",
    "parse_integral",
    "real_to_float",
    "round_to_float32",
    "wrap_bits",
]

_FixedWidthT = TypeVar("_FixedWidthT", bound="_FixedWidthInteger")

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")
_DECIMAL_LITERAL = re.compile(
    r"""
    (?P<sign>[+-]?)
    (?:
        (?P<special>NaN|Infinity)
      | (?P<number>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)[fFdD]?
    )
    """,
    re.VERBOSE,
)


def wrap_bits(value: int, bits: int) -> int:
    """Keep the low-order bits of value as a signed integer of the given width.

    Args:
        value: Any integer.
        bits: Target width in bits.

    Returns:
        The two's complement interpretation of value's low ``bits`` bits.
    """
    span = 1 << bits
    value &= span - 1
    if value >= span >> 1:
        value -= span
    return value


def float_to_integral(value: float, bits: int) -> int:
    """Cast a float to a signed integer of the given width.

    The fractional part is truncated toward zero. NaN becomes 0. Values
    outside the 32-bit range saturate to its bounds (the 64-bit range when
    bits is 64) before narrower widths keep their low-order bits.

    Args:
        value: The float to cast.
        bits: Target width in bits.

    Returns:
        The cast value.
    """
    if math.isnan(value):
        return 0
    lower, upper = (MIN_LONG, MAX_LONG) if bits > INT_BITS else (MIN_INT, MAX_INT)
    if value <= lower:
        result = lower
    elif value >= upper:
        result = upper
    else:
        result = int(value)
    return wrap_bits(result, bits)


def int_to_float(value: int) -> float:
    """Convert an int to a float, overflowing to a signed infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def round_to_float32(value: float) -> float:
    """Round a float to the nearest binary32 value.

    Magnitudes beyond the binary32 range become a signed infinity.
    """
    try:
        packed = struct.pack("<f", value)
    except OverflowError:
        return math.copysign(math.inf, value)
    result: float = struct.unpack("<f", packed)[0]
    return result


def parse_integral(text: str, bits: int) -> int:
    """Parse a base-10 integer literal that must fit the given width.

    Only an optional sign followed by ASCII digits is accepted: no
    whitespace, underscores, or radix prefixes.

    Args:
        text: The literal.
        bits: Width the value must fit in.

    Returns:
        The parsed integer.

    Raises:
        ValueError: If text is not an integer literal or is out of range.
    """
    if _INTEGER_LITERAL.fullmatch(text) is None:
        msg = f"invalid integer literal: {text!r}"
        raise ValueError(msg)
    result = int(text)
    if wrap_bits(result, bits) != result:
        msg = f"integer literal {text!r} out of range for {bits}-bit integer"
        raise ValueError(msg)
    return result


def parse_decimal(text: str) -> float:
    """Parse a decimal or scientific floating point literal.

    Surrounding whitespace is ignored. NaN and Infinity are accepted
    (case-sensitive, optionally signed), as is a trailing f/F/d/D type
    suffix on numeric literals.

    Args:
        text: The literal.

    Returns:
        The parsed value as a double.

    Raises:
        ValueError: If text is not a floating point literal.
    """
    match = _DECIMAL_LITERAL.fullmatch(text.strip())
    if match is None:
        msg = f"invalid floating point literal: {text!r}"
        raise ValueError(msg)
    sign = match.group("sign")
    special = match.group("special")
    if special == "NaN":
        return math.nan
    if special == "Infinity":
        return -math.inf if sign == "-" else math.inf
    return float(sign + match.group("number"))


def real_to_float(value: object) -> float:
    """Convert a real number of any type to a float without raising.

    Values too large for a double become a signed infinity. Values that
    refuse conversion, like Decimal("sNaN"), become NaN.
    """
    try:
        return float(value)  # pyright: ignore[reportArgumentType]
    except OverflowError:
        return -math.inf if value < 0 else math.inf  # pyright: ignore[reportOperatorIssue]
    except ValueError:
        return math.nan


class _FixedWidthInteger(int):
    """Base for signed integers of a fixed bit width."""

    __slots__: ClassVar[tuple[str, ...]] = ()

    bits: ClassVar[int] = LONG_BITS

    def __new__(cls: type[_FixedWidthT], value: object = 0) -> _FixedWidthT:
        kind = classify(value)
        if kind is ValueKind.INTEGER:
            result = wrap_bits(int(value), cls.bits)  # pyright: ignore[reportArgumentType]
        elif kind is ValueKind.FLOAT:
            result = float_to_integral(real_to_float(value), cls.bits)
        elif kind is ValueKind.STRING:
            result = parse_integral(str(value), cls.bits)
        else:
            msg = (
                f"{cls.__name__}() argument must be a number or string, "
                f"not {type(value).__name__}"
            )
            raise TypeError(msg)
        return super().__new__(cls, result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int.__repr__(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)


class Byte(_FixedWidthInteger):
    """An 8-bit signed integer."""

    __slots__: ClassVar[tuple[str, ...]] = ()
    bits: ClassVar[int] = BYTE_BITS


class Short(_FixedWidthInteger):
    """A 16-bit signed integer."""

    __slots__: ClassVar[tuple[str, ...]] = ()
    bits: ClassVar[int] = SHORT_BITS


class Integer(_FixedWidthInteger):
    """A 32-bit signed integer."""

    __slots__: ClassVar[tuple[str, ...]] = ()
    bits: ClassVar[int] = INT_BITS


class Long(_FixedWidthInteger):
    """A 64-bit signed integer."""

    __slots__: ClassVar[tuple[str, ...]] = ()
    bits: ClassVar[int] = LONG_BITS


class Float(float):
    """An IEEE 754 binary32 floating point value.

    The value is stored as the double nearest to the binary32 result, so
    Float(0.1) == 0.10000000149011612. str() gives the shortest decimal
    that still rounds back to the same binary32 value ("0.1").
    """

    __slots__: ClassVar[tuple[str, ...]] = ()

    def __new__(cls, value: object = 0.0) -> "Float":
        kind = classify(value)
        if kind is ValueKind.INTEGER:
            result = int_to_float(int(value))  # pyright: ignore[reportArgumentType]
        elif kind is ValueKind.FLOAT:
            result = real_to_float(value)
        elif kind is ValueKind.STRING:
            result = parse_decimal(str(value))
        else:
            msg = (
                "Float() argument must be a number or string, "
                f"not {type(value).__name__}"
            )
            raise TypeError(msg)
        return super().__new__(cls, round_to_float32(result))

    def __repr__(self) -> str:
        return f"Float({self})"

    def __str__(self) -> str:
        value = float(self)
        if not math.isfinite(value):
            return float.__repr__(self)
        for precision in range(1, 10):
            text = f"{value:.{precision}g}"
            if round_to_float32(float(text)) == value:
                return float.__repr__(float(text))
        return float.__repr__(self)


class Char(str):
    """A string holding exactly one character."""

    __slots__: ClassVar[tuple[str, ...]] = ()

    def __new__(cls, value: object) -> "Char":
        if not isinstance(value, str):
            msg = f"Char() argument must be a string, not {type(value).__name__}"
            raise TypeError(msg)
        if len(value) != 1:
            msg = f"Char() argument must be a single character, got length {len(value)}"
            raise ValueError(msg)
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Char({str.__repr__(self)})"
