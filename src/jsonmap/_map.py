"""JsonMap, a mutable mapping with coercing getters and JSON conversion."""

from collections.abc import Iterable, Mapping, MutableMapping
from typing import TYPE_CHECKING, ClassVar, TypeVar, cast

from ._exceptions import InvalidArgumentError
from ._json import parse_json_object, serialize_json
from ._mixin import MapMixin

if TYPE_CHECKING:
    from ._types import JSONValue

__all__ = ["JsonMap"]

V = TypeVar("V")


class JsonMap(MapMixin[V]):
    """A string-keyed mapping that coerces values on the way out.

    Values that went through JSON lose their original type: a 32-bit float
    comes back as a double, a character as a string. The get_* methods
    recover the type the caller wants, and return None instead of raising
    when the stored value cannot be coerced.

    A JsonMap always delegates to a backing mapping. There are three ways
    to get one:

    - JsonMap(): a new, empty map. Accepts the same arguments as dict() to
      copy initial entries.
    - JsonMap.from_json(text): parse a JSON object.
    - JsonMap.wrap(mapping): share an existing mapping without copying.
      Changes through either reference are visible through the other.

    Example:
        >>> data = JsonMap.from_json('{"port": "8080", "debug": "TRUE"}')
        >>> data.get_integer("port"), data.get_boolean("debug")
        (Integer(8080), True)
        >>> JsonMap().put_value("a", 1).put_value("b", 2).to_json()
        '{"a":1,"b":2}'

    JsonMap is not thread-safe. Callers sharing a wrapped mapping across
    threads must serialize access themselves.
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_delegate",)

    _delegate: "MutableMapping[str, V]"

    def __init__(
        self,
        other: "Mapping[str, V] | Iterable[tuple[str, V]] | None" = None,
        /,
        **kwargs: V,
    ) -> None:
        """Create a map that owns a new dict.

        Args:
            other: Optional mapping or iterable of (key, value) pairs to
                copy in.
            **kwargs: Additional key=value pairs.
        """
        self._delegate = {}
        self.update(other, **kwargs)

    @classmethod
    def wrap(cls, mapping: "MutableMapping[str, V] | None") -> "JsonMap[V]":
        """Wrap an existing mapping.

        The mapping is shared, not copied. Wrapping a JsonMap returns it
        unchanged.

        Args:
            mapping: The mapping to delegate to.

        Returns:
            A JsonMap backed by mapping.

        Raises:
            InvalidArgumentError: If mapping is None or not a mutable mapping.
        """
        if mapping is None:
            msg = "mapping must not be None"
            raise InvalidArgumentError(msg)
        if isinstance(mapping, JsonMap):
            return cast("JsonMap[V]", mapping)
        if not isinstance(mapping, MutableMapping):
            msg = f"expected a mutable mapping, got {type(mapping).__name__}"
            raise InvalidArgumentError(msg)
        instance = cls.__new__(cls)
        instance._delegate = mapping
        return instance

    @classmethod
    def from_json(cls, text: "str | bytes | bytearray") -> "JsonMap[JSONValue]":
        """Parse JSON text into a new map.

        Args:
            text: A JSON document whose root is an object.

        Returns:
            A map over the decoded object.

        Raises:
            DecodeError: If text is not valid JSON or its root is not an
                object.
            InvalidArgumentError: If text is not a str or bytes.
        """
        if not isinstance(text, (str, bytes, bytearray)):
            msg = f"expected JSON text, got {type(text).__name__}"
            raise InvalidArgumentError(msg)
        return cast("JsonMap[JSONValue]", cls.wrap(parse_json_object(text)))

    def _get_state(self) -> "MutableMapping[str, V]":
        return self._delegate

    def to_json(self, *, sort_keys: bool = False, indent: "int | None" = None) -> str:
        """Serialize the map as a JSON object.

        Byte, Short, Integer and Long are written as integers, Float as a
        number and Char as a string, so decoding the result gives back
        plain ints, floats and strs.

        Args:
            sort_keys: Write keys in sorted order instead of insertion order.
            indent: Pretty-print with this many spaces per level.

        Returns:
            The JSON text.

        Raises:
            EncodeError: If a value is not representable as JSON.
        """
        return serialize_json(self._delegate, sort_keys=sort_keys, indent=indent)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._delegate!r})"
