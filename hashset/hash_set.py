from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Generic, TypeVar


T = TypeVar("T", bound=Hashable)


class HashSet(Generic[T]):
    """
    Unordered collection of unique values backed by a dict.

    Keys of the dict are the members, values are a None placeholder.
    Iteration order is unspecified: compare results as sets, never as sequences.
    Not synchronized; guard with an external lock when shared between threads.
    """

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._data: dict[T, None] = dict.fromkeys(values)

    @classmethod
    def of(cls, *values: T) -> HashSet[T]:
        """Build a set from positional values, collapsing duplicates."""
        return cls(values)

    def add(self, value: T) -> None:
        self._data[value] = None

    def remove(self, value: T) -> None:
        # absent value is a no-op, unlike builtin set.remove()
        self._data.pop(value, None)

    def has(self, value: T) -> bool:
        return value in self._data

    def len(self) -> int:
        return len(self._data)

    def foreach(self, visitor: Callable[[T], object]) -> None:
        """
        Call visitor once per member, synchronously, in unspecified order.

        :param visitor: must not mutate this set
        """
        for value in self._data:
            visitor(value)

    def to_list(self) -> list[T]:
        """Return a new list with every member exactly once."""
        return list(self._data)

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        if not self._data:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({{{', '.join(map(repr, self._data))}}})"
