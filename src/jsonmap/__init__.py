"""A JSON object wrapper with typed, coercing access to its values."""

from importlib.metadata import version

from ._exceptions import DecodeError, EncodeError, InvalidArgumentError, JsonMapError
from ._map import JsonMap
from ._scalars import Byte, Char, Float, Integer, Long, Short

__version__ = version("jsonmap")

__all__ = [
    "Byte",
    "Char",
    "DecodeError",
    "EncodeError",
    "Float",
    "Integer",
    "InvalidArgumentError",
    "JsonMap",
    "JsonMapError",
    "Long",
    "Short",
    "__version__",
]
