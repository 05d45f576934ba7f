"""Fixed-capacity sequence whose visible length is a movable sentinel."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class SentinelArray:
    """A fixed-capacity array exposing only the slots before its sentinel.

    The storage always holds ``capacity`` slots; length, iteration, indexing
    and ``back`` only see the first ``len(self)`` of them.
    """

    __slots__ = ("_data", "_size")

    def __init__(self, capacity: int, values: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        items = list(values)
        if len(items) > capacity:
            raise ValueError(
                f"{len(items)} values do not fit in a capacity of {capacity}"
            )
        self._data: list[Any] = items + [None] * (capacity - len(items))
        self._size = len(items)

    @property
    def capacity(self) -> int:
        """Maximum number of elements the array can hold."""
        return len(self._data)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data[: self._size])

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._data[: self._size])

    def _normalize(self, pos: int) -> int:
        index = pos + self._size if pos < 0 else pos
        if not 0 <= index < self._size:
            raise IndexError(
                f"index {pos} out of range for size {self._size}"
            )
        return index

    def __getitem__(self, pos: int | slice) -> Any:
        if isinstance(pos, slice):
            return self._data[: self._size][pos]
        return self._data[self._normalize(pos)]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._data[self._normalize(pos)] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SentinelArray):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"SentinelArray({self.capacity}, {list(self)!r})"

    def at(self, pos: int) -> Any:
        """Bounds-checked access to a non-negative position."""
        if not 0 <= pos < self._size:
            raise IndexError(
                f"array::at: pos (which is {pos}) >= sentinel (which is {self._size})"
            )
        return self._data[pos]

    def back(self) -> Any:
        """Last visible element."""
        if not self._size:
            raise IndexError("back() on an empty SentinelArray")
        return self._data[self._size - 1]

    def assign(self, values: Iterable[Any]) -> None:
        """Overwrite the leading elements; the sentinel is left unchanged."""
        items = list(values)
        if len(items) > self._size:
            raise ValueError(
                f"cannot assign {len(items)} values to an array of size {self._size}"
            )
        self._data[: len(items)] = items

    def set_sentinel(self, size: int) -> None:
        """Move the artificial end of the array."""
        if not 0 <= size <= self.capacity:
            raise ValueError(
                f"sentinel {size} outside [0, {self.capacity}]"
            )
        self._size = size