"""Ordered list of strings with a few aggregate queries."""

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Generic, TypeVar, overload

S = TypeVar("S", str, bytes)


class StrList(MutableSequence[S], Generic[S]):
    """A list of text values.

    Insertion order is preserved and duplicates are allowed. Besides the
    usual list operations (indexing, slicing, ``insert``, ``append``,
    ``extend``, ``clear``...) it answers a few whole-list questions.

    Two `StrList` instances are equal when they hold equal elements in the
    same order.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[S] = ()) -> None:
        self._items: list[S] = list(items)

    @overload
    def __getitem__(self, index: int) -> S: ...
    @overload
    def __getitem__(self, index: slice) -> "StrList[S]": ...
    def __getitem__(self, index):
        if isinstance(index, slice):
            return StrList(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[S]:
        return iter(self._items)

    def insert(self, index: int, value: S) -> None:
        self._items.insert(index, value)

    def insert_many(self, index: int, values: Iterable[S]) -> None:
        """Insert every item of ``values`` before position ``index``, in order."""
        self._items[index:index] = list(values)

    def clear(self) -> None:
        self._items.clear()

    def front(self) -> S:
        """Return the first element.

        Raises:
            IndexError: If the list is empty.
        """
        if not self._items:
            raise IndexError("front() on an empty StrList")
        return self._items[0]

    def find(self, value: S) -> bool:
        """Return True if an element is exactly equal to ``value``."""
        return value in self._items

    def contains_empty_strings(self) -> bool:
        return any(not item for item in self._items)

    def get_char_count(self) -> int:
        """Return the total number of characters across all elements."""
        return sum(map(len, self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"StrList({self._items!r})"
