"""Mixin class providing the full map interface.

This module provides MapMixin, an abstract base class that implements the
MutableMapping interface, the named map operations, and the typed
coercing getters on top of a single backing mapping supplied by the
subclass.
"""

from abc import ABC, ABCMeta, abstractmethod
from collections.abc import (
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
    ValuesView,
)
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar, cast, overload

from ._coerce import (
    coerce_boolean,
    coerce_byte,
    coerce_char,
    coerce_double,
    coerce_float,
    coerce_integer,
    coerce_long,
    coerce_short,
    coerce_string,
)

if TYPE_CHECKING:
    from typing import Self

    from ._scalars import Byte, Char, Float, Integer, Long, Short

__all__ = ["MapMixin"]

V = TypeVar("V")
T = TypeVar("T")


class MapMixin(ABC, Generic[V]):
    """Mixin providing the map interface including MutableMapping.

    Subclasses must implement:
    - _get_state(): Returns the MutableMapping[str, V] that all operations
      read from and write to
    """

    __slots__: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def _get_state(self) -> "MutableMapping[str, V]":
        """Return the backing mapping."""
        ...

    # Lookup

    @overload
    def get(self, key: str) -> "V | None": ...  # pragma: no cover

    @overload
    def get(self, key: str, default: "V | T") -> "V | T": ...  # pragma: no cover

    def get(self, key: str, default: object = None) -> object:
        """Get the value stored at key.

        Args:
            key: The key to look up.
            default: Value to return if key not found. Defaults to None.

        Returns:
            The stored value if found, otherwise the default value.
        """
        return self._get_state().get(key, default)

    def has(self, key: str) -> bool:
        """Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        return key in self._get_state()

    def has_value(self, value: object) -> bool:
        """Check if any key maps to a value equal to value.

        This is a linear scan over all values.

        Args:
            value: The value to look for.

        Returns:
            True if some stored value compares equal, False otherwise.
        """
        return any(stored == value for stored in self._get_state().values())

    def count(self) -> int:
        """Get the number of entries."""
        return len(self._get_state())

    def is_empty(self) -> bool:
        """Check whether the map has no entries."""
        return len(self._get_state()) == 0

    def keys(self) -> "KeysView[str]":
        """Get a live view of the keys of the backing mapping."""
        return self._get_state().keys()

    def values(self) -> "ValuesView[V]":
        """Get a live view of the values of the backing mapping."""
        return self._get_state().values()

    def items(self) -> "ItemsView[str, V]":
        """Get a live view of the (key, value) pairs of the backing mapping."""
        return self._get_state().items()

    # Mutation

    def put(self, key: str, value: V) -> "V | None":
        """Store a value, replacing any value already at key.

        A replaced key keeps its original position in iteration order.

        Args:
            key: The key to store under.
            value: The value to store.

        Returns:
            The value previously stored at key, or None if there was none.
        """
        state = self._get_state()
        previous = state.get(key)
        state[key] = value
        return previous

    def put_value(self, key: str, value: V) -> "Self":
        """Store a value and return this map, so calls can be chained.

        Args:
            key: The key to store under.
            value: The value to store.

        Returns:
            This map.
        """
        self._get_state()[key] = value
        return self

    def put_all(self, other: "Mapping[str, V]") -> None:
        """Store every entry of another mapping.

        Entries are written in the other mapping's iteration order, and
        replace existing values on conflict.

        Args:
            other: The mapping to copy entries from.
        """
        state = self._get_state()
        for key, value in other.items():
            state[key] = value

    def remove(self, key: str) -> "V | None":
        """Remove a key if present.

        Args:
            key: The key to remove.

        Returns:
            The removed value, or None if the key was not present.
        """
        return self._get_state().pop(key, None)

    def clear(self) -> None:
        """Remove every entry."""
        self._get_state().clear()

    # MutableMapping protocol

    def __getitem__(self, key: str) -> V:
        """Get the value stored at key.

        Raises:
            KeyError: If the key does not exist.
        """
        return self._get_state()[key]

    def __setitem__(self, key: str, value: V) -> None:
        self._get_state()[key] = value

    def __delitem__(self, key: str) -> None:
        """Remove a key.

        Raises:
            KeyError: If the key does not exist.
        """
        del self._get_state()[key]

    def __contains__(self, key: object) -> bool:
        return key in self._get_state()

    def __iter__(self) -> "Iterator[str]":
        """Iterate over keys in insertion order."""
        return iter(self._get_state())

    def __len__(self) -> int:
        return len(self._get_state())

    def __eq__(self, other: object) -> bool:
        """Compare entries with another mapping, ignoring order."""
        if isinstance(other, MapMixin):
            other = cast("MapMixin[object]", other)._get_state()
        if not isinstance(other, Mapping):
            return NotImplemented
        state = self._get_state()
        if type(state) is dict and type(other) is dict:
            return state == other
        other_items = cast("Mapping[object, object]", other).items()
        return dict(state.items()) == dict(other_items)

    # The backing dict is unhashable, and so is the map
    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def pop(self, key: str, *args: V) -> V:
        """Remove and return the value for key.

        Args:
            key: The key to remove.
            *args: Optional default value if key not found.

        Returns:
            The removed value, or default if provided and key not found.

        Raises:
            KeyError: If key not found and no default provided.
        """
        if len(args) > 1:
            msg = f"pop expected at most 2 arguments, got {1 + len(args)}"
            raise TypeError(msg)
        return self._get_state().pop(key, *args)

    def popitem(self) -> "tuple[str, V]":
        """Remove and return the first (key, value) pair in iteration order.

        Raises:
            KeyError: If the map is empty.
        """
        state = self._get_state()
        try:
            key = next(iter(state))
        except StopIteration:
            msg = "popitem(): map is empty"
            raise KeyError(msg) from None
        return key, state.pop(key)

    def setdefault(self, key: str, default: V) -> V:
        """Get the value for key, storing default first if key is absent."""
        state = self._get_state()
        if key in state:
            return state[key]
        state[key] = default
        return default

    def update(
        self,
        other: "Mapping[str, V] | Iterable[tuple[str, V]] | None" = None,
        /,
        **kwargs: V,
    ) -> None:
        """Update the map from a mapping/iterable and/or keyword arguments.

        Args:
            other: A mapping or iterable of (key, value) pairs.
            **kwargs: Additional key=value pairs.
        """
        state = self._get_state()
        if other is not None:
            if hasattr(other, "keys"):
                mapping = cast("Mapping[str, V]", other)
                for key in mapping:
                    state[key] = mapping[key]
            else:
                iterable = cast("Iterable[tuple[str, V]]", other)
                for key, value in iterable:
                    state[key] = value
        for key, value in kwargs.items():
            state[key] = value

    # Typed getters. Each returns None when the key is missing, the stored
    # value is null, or the value cannot be coerced.

    def get_byte(self, key: str) -> "Byte | None":
        """Get the value at key as an 8-bit integer.

        Numbers are cast with truncation. Strings must be integer literals
        within [-128, 127].
        """
        return coerce_byte(self._get_state().get(key))

    def get_short(self, key: str) -> "Short | None":
        """Get the value at key as a 16-bit integer.

        Numbers are cast with truncation. Strings must be integer literals
        within [-32768, 32767].
        """
        return coerce_short(self._get_state().get(key))

    def get_integer(self, key: str) -> "Integer | None":
        """Get the value at key as a 32-bit integer.

        Numbers are cast with truncation: 3.9 gives 3. Strings must be
        integer literals within the 32-bit range: "42" gives 42 and
        "42.5" gives None.
        """
        return coerce_integer(self._get_state().get(key))

    def get_long(self, key: str) -> "Long | None":
        """Get the value at key as a 64-bit integer."""
        return coerce_long(self._get_state().get(key))

    def get_float(self, key: str) -> "Float | None":
        """Get the value at key as a 32-bit float."""
        return coerce_float(self._get_state().get(key))

    def get_double(self, key: str) -> "float | None":
        """Get the value at key as a double-precision float.

        Integers are widened. Strings must be decimal or scientific
        floating point literals.
        """
        return coerce_double(self._get_state().get(key))

    def get_char(self, key: str) -> "Char | None":
        """Get the value at key as a single character.

        Only one-character strings qualify: "a" gives "a", "ab" gives None.
        """
        return coerce_char(self._get_state().get(key))

    def get_string(self, key: str) -> "str | None":
        """Get the value at key as a string.

        Non-string values are rendered with str(), booleans as "true" or
        "false". Returns None only if the key is missing or null.
        """
        return coerce_string(self._get_state().get(key))

    def get_boolean(self, key: str) -> "bool | None":
        """Get the value at key as a boolean.

        Strings must be "true" or "false" in any letter case.
        """
        return coerce_boolean(self._get_state().get(key))


_ = cast("ABCMeta", cast("object", MutableMapping)).register(MapMixin)
