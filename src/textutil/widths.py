"""Character widths: how characters and text are represented.

textutil works with two character widths through a single implementation:

- ``NARROW``: 8-bit code units. Text is ``bytes`` and a character is the
  ``int`` you get when iterating ``bytes`` (a one-byte ``bytes`` value is also
  accepted). Signed values ``-128..-1`` are accepted as the signed spelling
  of ``0x80..0xFF``. Classification follows the classic C locale.
- ``WIDE``: text is ``str`` and a character is a one-character ``str``.
  Classification follows the classic rules extended with Unicode data.

A `CharWidth` converts characters to integer code points (which is what the
`ClassificationPolicy` works on) and back, and builds width-native text.
"""

import abc
from collections.abc import Iterable
from typing import Any

from textutil.errors import CharWidthError
from textutil.policy import CLASSIC, CLASSIC_UNICODE, ClassificationPolicy

NARROW_MIN = -0x80
NARROW_MAX = 0xFF


class CharWidth(abc.ABC):
    """Interface for a character width."""

    name: str
    bits: int
    text_type: type
    policy: ClassificationPolicy

    @abc.abstractmethod
    def raw(self, c: Any) -> int:
        """Return the raw (possibly signed) value of character ``c``.

        Raises:
            CharWidthError: If ``c`` is not a character of this width.
        """

    @abc.abstractmethod
    def code(self, c: Any) -> int:
        """Return the unsigned code point of character ``c``.

        Raises:
            CharWidthError: If ``c`` is not a character of this width.
        """

    @abc.abstractmethod
    def char(self, code: int) -> Any:
        """Return the width-native character for an unsigned code point."""

    @abc.abstractmethod
    def literal(self, s: str) -> Any:
        """Build width-native text from a ``str`` literal.

        Raises:
            CharWidthError: If ``s`` holds characters this width cannot represent.
        """

    @abc.abstractmethod
    def join(self, chars: Iterable[Any]) -> Any:
        """Build width-native text from an iterable of characters."""

    @abc.abstractmethod
    def check_text(self, text: Any) -> Any:
        """Return ``text`` as width-native text.

        Raises:
            CharWidthError: If ``text`` is not text of this width.
        """

    def char_like(self, c: Any, code: int) -> Any:
        """Return the character for ``code``, spelled the same way as ``c``."""
        return self.char(code)

    @property
    def empty(self) -> Any:
        """The empty text of this width."""
        return self.text_type()

    def __repr__(self) -> str:
        return f"<CharWidth {self.name} ({self.bits}-bit, {self.policy.name})>"


class NarrowWidth(CharWidth):
    """8-bit characters stored in ``bytes``."""

    name = "narrow"
    bits = 8
    text_type = bytes
    policy = CLASSIC

    def raw(self, c: Any) -> int:
        if isinstance(c, (bytes, bytearray)) and len(c) == 1:
            return c[0]
        if isinstance(c, int) and not isinstance(c, bool):
            if NARROW_MIN <= c <= NARROW_MAX:
                return c
        raise CharWidthError(self.name, c)

    def code(self, c: Any) -> int:
        return self.raw(c) & NARROW_MAX

    def char(self, code: int) -> int:
        return code & NARROW_MAX

    def char_like(self, c: Any, code: int) -> int | bytes:
        # one-byte bytes in, one-byte bytes out
        if isinstance(c, (bytes, bytearray)):
            return bytes((code & NARROW_MAX,))
        return self.char(code)

    def literal(self, s: str) -> bytes:
        try:
            return s.encode("latin-1")
        except UnicodeEncodeError as e:
            raise CharWidthError(self.name, s) from e

    def join(self, chars: Iterable[Any]) -> bytes:
        return bytes(self.code(c) for c in chars)

    def check_text(self, text: Any) -> bytes:
        if isinstance(text, (bytes, bytearray, memoryview)):
            return bytes(text)
        raise CharWidthError(self.name, text)


class WideWidth(CharWidth):
    """Unicode characters stored in ``str``."""

    name = "wide"
    bits = 32
    text_type = str
    policy = CLASSIC_UNICODE

    def raw(self, c: Any) -> int:
        if isinstance(c, str) and len(c) == 1:
            return ord(c)
        raise CharWidthError(self.name, c)

    def code(self, c: Any) -> int:
        return self.raw(c)

    def char(self, code: int) -> str:
        return chr(code)

    def literal(self, s: str) -> str:
        return self.check_text(s)

    def join(self, chars: Iterable[Any]) -> str:
        return "".join(chars)

    def check_text(self, text: Any) -> str:
        if isinstance(text, str):
            return text
        raise CharWidthError(self.name, text)


NARROW = NarrowWidth()
WIDE = WideWidth()


def narrow_from_wide(text: str) -> bytes:
    """Convert wide text to narrow text, keeping the low 8 bits of each code point.

    This is a code-unit copy, not an encoder: characters above ``0xFF`` lose
    their high bits. Use ``str.encode`` when a real encoding is wanted.
    """
    return bytes(ord(c) & NARROW_MAX for c in WIDE.check_text(text))


def wide_from_narrow(data: bytes) -> str:
    """Convert narrow text to wide text, widening each byte unchanged."""
    return NARROW.check_text(data).decode("latin-1")
