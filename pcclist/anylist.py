"""A list that holds values of any type and hands them back by exact type."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any, TypeVar

T = TypeVar("T")

_PRINTABLE = (int, float, str)


class BadAnyCast(TypeError):
    """Raised when a stored value is asked for as a type it does not have."""


def _cast(value: Any, kind: type[T]) -> T:
    if type(value) is not kind:
        raise BadAnyCast(
            f"bad any cast: holds {type(value).__name__}, asked for {kind.__name__}"
        )
    return value


def _index(idx: Any) -> int:
    try:
        return operator.index(idx)
    except TypeError:
        raise TypeError(
            f"list indices must be integers, not {type(idx).__name__}"
        ) from None


class ValueRef:
    """A live reference to one slot of a :class:`List`."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, slots: list[Any], index: int) -> None:
        self._slots = slots
        self._index = index

    @property
    def value(self) -> Any:
        """The value currently stored in the slot."""
        return self._slots[self._index]

    def cast(self, kind: type[T]) -> T:
        """Return the value if it is exactly of type ``kind``."""
        return _cast(self.value, kind)

    def assign(self, value: Any) -> ValueRef:
        """Replace the value in the slot, whatever its type."""
        self._slots[self._index] = value
        return self

    def __str__(self) -> str:
        value = self.value
        kind = type(value)
        if kind is float:
            return format(value, "g")
        if kind in _PRINTABLE:
            return str(value)
        return f"[unprintable: {kind.__qualname__}]"

    def __repr__(self) -> str:
        return f"ValueRef({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValueRef):
            other = other.value
        return _cast(self.value, type(other)) == other

    def __ne__(self, other: object) -> bool:
        return not self == other


class List:
    """An ordered collection of values of mixed types."""

    def __init__(self, *args: Any) -> None:
        self._data: list[Any] = []
        for value in args:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        self._data.append(value)

    def insert(self, idx: int, value: Any) -> None:
        """Insert a value before position ``idx``; ``idx`` may equal the size."""
        idx = _index(idx)
        if idx < 0 or idx > len(self._data):
            raise IndexError("insert: index out of range")
        self._data.insert(idx, value)

    def remove(self, idx: int) -> None:
        """Delete the value at position ``idx``."""
        idx = _index(idx)
        if idx < 0 or idx >= len(self._data):
            raise IndexError("remove: index out of range")
        del self._data[idx]

    def clear(self) -> None:
        """Remove every value."""
        self._data.clear()

    def size(self) -> int:
        """Number of values held."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def _checked(self, idx: Any, what: str) -> int:
        idx = _index(idx)
        if idx < 0 or idx >= len(self._data):
            raise IndexError(f"{what}: index out of range")
        return idx

    def __getitem__(self, idx: int) -> ValueRef:
        return ValueRef(self._data, self._checked(idx, "operator[]"))

    def __setitem__(self, idx: int, value: Any) -> None:
        self._data[self._checked(idx, "operator[]")] = value

    def get(self, idx: int, kind: type[T]) -> T:
        """Return the value at ``idx``, which must be exactly of type ``kind``."""
        return _cast(self._data[self._checked(idx, "get")], kind)

    def try_get(self, idx: int, kind: type[T]) -> T | None:
        """Like :meth:`get`, but return None instead of raising."""
        idx = _index(idx)
        if idx < 0 or idx >= len(self._data):
            return None
        value = self._data[idx]
        return value if type(value) is kind else None

    def __iter__(self) -> Iterator[ValueRef]:
        for idx in range(len(self._data)):
            yield ValueRef(self._data, idx)

    def __repr__(self) -> str:
        return f"List({', '.join(repr(v) for v in self._data)})"