"""Classification of stored values.

Every value read out of a map passes through classify() before it is
coerced. The coercion functions dispatch on the resulting ValueKind rather
than testing runtime types themselves.
"""

from decimal import Decimal
from enum import Enum
from numbers import Integral, Real

__all__ = ["ValueKind", "classify", "is_number"]


class ValueKind(Enum):
    """The shape of a stored value as far as coercion is concerned."""

    ABSENT = "absent"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    OTHER = "other"


def classify(value: object) -> ValueKind:
    """Tag a stored value with its ValueKind.

    bool is checked before int because bool is an int subclass, and a
    boolean is never treated as a number. Integral and real numbers from
    outside the builtins (Fraction, Decimal, numpy scalars) are tagged
    INTEGER or FLOAT so they take part in numeric casts.

    Args:
        value: Any value stored in a map.

    Returns:
        The value's kind.
    """
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Integral):
        return ValueKind.INTEGER
    if isinstance(value, (Real, Decimal)):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    return ValueKind.OTHER


def is_number(kind: ValueKind) -> bool:
    """Return True for kinds that take part in numeric casts."""
    return kind is ValueKind.INTEGER or kind is ValueKind.FLOAT
