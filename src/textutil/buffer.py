"""Mutable text holder used by the in-place string transforms.

Python text types are immutable, so the ``to_*`` transforms of `StrUtil`
operate on a `TextBuffer`: they compute the complete result first and then
swap it into the buffer in one assignment. A buffer may also hold a
``bytearray``; it still holds one after a transform. Callers never observe a
half-updated value.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

S = TypeVar("S", str, bytes)


@dataclass(slots=True)
class TextBuffer(Generic[S]):
    """A mutable reference to a text value.

    Iterating a buffer walks the characters of its current value; every call
    to ``iter()`` starts again from the beginning.

    Example:
        ```py
        buf = TextBuffer("  hi  ")
        str_util_w.to_trimmed(buf, " ")
        assert buf.value == "hi"
        ```
    """

    value: S

    def __len__(self) -> int:
        return len(self.value)

    def __iter__(self) -> Iterator:
        return iter(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)

    def assign(self, value: S) -> None:
        """Replace the held value, keeping the type of the current one.

        A buffer holding a ``bytearray`` keeps holding a ``bytearray``, so
        callers that mutate it directly can keep doing so after a transform.
        """
        if isinstance(self.value, bytearray):
            value = bytearray(value)
        self.value = value
