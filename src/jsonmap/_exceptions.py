"""Exception hierarchy for jsonmap.

Structural failures (bad JSON text, unencodable values, bad arguments) are
raised as exceptions. Coercion failures are never raised; typed getters
return None instead.
"""

__all__ = [
    "DecodeError",
    "EncodeError",
    "InvalidArgumentError",
    "JsonMapError",
]


class JsonMapError(Exception):
    """Base class for all jsonmap errors."""


class DecodeError(JsonMapError, ValueError):
    """JSON text is malformed or its root is not an object."""


class EncodeError(JsonMapError, ValueError):
    """A value in the map cannot be represented as JSON."""


class InvalidArgumentError(JsonMapError, TypeError):
    """An argument is missing or of an unusable type."""
