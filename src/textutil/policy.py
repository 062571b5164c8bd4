"""Fixed character-classification policies.

A `ClassificationPolicy` is the process-wide rule set every character
predicate is evaluated against. It plays the role of the C library's
"classic" locale: it is built once, never mutated, and is not influenced by
`locale.setlocale` or any other runtime setting.

Two policies are provided:

- ``CLASSIC``: the C locale. Only 7-bit ASCII code points are classified;
  anything else is neither alpha, digit, space, control nor printable, and
  has no case mapping.
- ``CLASSIC_UNICODE``: identical to ``CLASSIC`` for 7-bit ASCII, and uses the
  Unicode character database above ``0x7F``. Digits stay ASCII ``0-9``
  only, which matches what C requires of ``iswdigit`` in every locale.

All methods take and return integer code points.
"""

import string
import unicodedata
from dataclasses import dataclass

ASCII_MAX = 0x7F
UNICODE_MAX = 0x10FFFF

_DIGITS = frozenset(map(ord, string.digits))
_UPPER = frozenset(map(ord, string.ascii_uppercase))
_LOWER = frozenset(map(ord, string.ascii_lowercase))
_SPACE = frozenset(map(ord, string.whitespace))
_CASE_OFFSET = ord("a") - ord("A")

# Categories that are never printable: other (C*) plus line/paragraph separators
_NON_PRINTABLE_CATEGORIES = ("Zl", "Zp")


@dataclass(frozen=True, slots=True)
class ClassificationPolicy:
    """Immutable, locale-independent classification rules.

    Attributes:
        name: Short identifier, used in reprs and logs.
        unicode: When True, code points above 0x7F are classified with
            Unicode character data; otherwise they are left unclassified.
    """

    name: str
    unicode: bool = False

    def _unicode_char(self, code: int) -> str | None:
        """Return the character for ``code`` if it falls in the Unicode range."""
        if self.unicode and ASCII_MAX < code <= UNICODE_MAX:
            return chr(code)
        return None

    def is_upper(self, code: int) -> bool:
        if code in _UPPER:
            return True
        ch = self._unicode_char(code)
        return ch is not None and ch.isupper()

    def is_lower(self, code: int) -> bool:
        if code in _LOWER:
            return True
        ch = self._unicode_char(code)
        return ch is not None and ch.islower()

    def is_digit(self, code: int) -> bool:
        return code in _DIGITS

    def is_alpha(self, code: int) -> bool:
        if code in _UPPER or code in _LOWER:
            return True
        ch = self._unicode_char(code)
        return ch is not None and ch.isalpha()

    def is_alpha_num(self, code: int) -> bool:
        return self.is_alpha(code) or self.is_digit(code)

    def is_whitespace(self, code: int) -> bool:
        if code in _SPACE:
            return True
        ch = self._unicode_char(code)
        return ch is not None and ch.isspace()

    def is_control(self, code: int) -> bool:
        if 0 <= code < 0x20 or code == ASCII_MAX:
            return True
        ch = self._unicode_char(code)
        return ch is not None and unicodedata.category(ch) == "Cc"

    def is_printable(self, code: int) -> bool:
        if 0x20 <= code < ASCII_MAX:
            return True
        ch = self._unicode_char(code)
        if ch is None:
            return False
        category = unicodedata.category(ch)
        return not category.startswith("C") and category not in _NON_PRINTABLE_CATEGORIES

    def to_upper(self, code: int) -> int:
        """Map ``code`` to upper case, or return it unchanged.

        Unicode mappings that expand to several code points (``"ß"`` to
        ``"SS"``) have no single-character equivalent and are ignored.
        """
        if code in _LOWER:
            return code - _CASE_OFFSET
        ch = self._unicode_char(code)
        if ch is not None:
            mapped = ch.upper()
            if len(mapped) == 1:
                return ord(mapped)
        return code

    def to_lower(self, code: int) -> int:
        """Map ``code`` to lower case, or return it unchanged."""
        if code in _UPPER:
            return code + _CASE_OFFSET
        ch = self._unicode_char(code)
        if ch is not None:
            mapped = ch.lower()
            if len(mapped) == 1:
                return ord(mapped)
        return code


CLASSIC = ClassificationPolicy("C")
CLASSIC_UNICODE = ClassificationPolicy("C.UNICODE", unicode=True)
