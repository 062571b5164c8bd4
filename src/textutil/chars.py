"""Single-character classification and transformation.

`CharUtil` applies a width's fixed `ClassificationPolicy` to individual
characters and implements the file-name character rules. Every method is
total over the width's character domain and never consults the user's
locale. Use the module-level instances:

- ``char_util`` for narrow characters (``int`` code units from ``bytes``)
- ``char_util_w`` for wide characters (one-character ``str``)
"""

from types import MappingProxyType
from typing import Generic, TypeVar

from textutil.modes import AllowWildcards, ConvertWildcards
from textutil.policy import ASCII_MAX
from textutil.tables import BAD_FILE_CHARS, CONTROL_REPLACEMENT, WILDCARD_CHARS
from textutil.widths import NARROW, WIDE, CharWidth

C = TypeVar("C")

_BAD_FILE_CODES = MappingProxyType(
    {ord(m.special): ord(m.replacement) for m in BAD_FILE_CHARS}
)
_WILDCARD_CODES = MappingProxyType(
    {ord(m.special): ord(m.replacement) for m in WILDCARD_CHARS}
)
_CONTROL_REPLACEMENT_CODE = ord(CONTROL_REPLACEMENT)
_DOT = ord(".")
_SLASH = ord("/")
_BACKSLASH = ord("\\")


class CharUtil(Generic[C]):
    """Character predicates and transforms for one character width."""

    def __init__(self, width: CharWidth) -> None:
        self._width = width
        self._policy = width.policy

    @property
    def width(self) -> CharWidth:
        """Return the character width this instance operates on."""
        return self._width

    def _keep_or_map(self, c: C, code: int, mapped: int) -> C:
        # Hand back the caller's own value when nothing changes
        return c if mapped == code else self._width.char_like(c, mapped)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_upper(self, c: C) -> bool:
        return self._policy.is_upper(self._width.code(c))

    def is_lower(self, c: C) -> bool:
        return self._policy.is_lower(self._width.code(c))

    def is_digit(self, c: C) -> bool:
        return self._policy.is_digit(self._width.code(c))

    def is_numeric(self, c: C) -> bool:
        """Return True for a digit or the decimal point ``.``."""
        code = self._width.code(c)
        return self._policy.is_digit(code) or code == _DOT

    def is_alpha(self, c: C) -> bool:
        return self._policy.is_alpha(self._width.code(c))

    def is_alpha_num(self, c: C) -> bool:
        return self._policy.is_alpha_num(self._width.code(c))

    def is_printable(self, c: C) -> bool:
        return self._policy.is_printable(self._width.code(c))

    def is_whitespace(self, c: C) -> bool:
        return self._policy.is_whitespace(self._width.code(c))

    def is_control_char(self, c: C) -> bool:
        return self._policy.is_control(self._width.code(c))

    def is_extended_ascii(self, c: C) -> bool:
        """Return True if ``c`` lies outside 7-bit ASCII.

        Negative (signed narrow) values count as extended.
        """
        raw = self._width.raw(c)
        return raw < 0 or raw > ASCII_MAX

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def to_upper(self, c: C) -> C:
        code = self._width.code(c)
        return self._keep_or_map(c, code, self._policy.to_upper(code))

    def to_lower(self, c: C) -> C:
        code = self._width.code(c)
        return self._keep_or_map(c, code, self._policy.to_lower(code))

    def forward_slash_to_backslash(self, c: C) -> C:
        code = self._width.code(c)
        return self._keep_or_map(c, code, _BACKSLASH if code == _SLASH else code)

    # ------------------------------------------------------------------
    # File-name characters
    # ------------------------------------------------------------------

    def is_wildcard_file_char(self, c: C) -> bool:
        return self._width.code(c) in _WILDCARD_CODES

    def is_good_file_char(self, c: C) -> bool:
        return self.is_good_file_char_ex(c, AllowWildcards.NO)

    def is_good_file_char_wildcards_ok(self, c: C) -> bool:
        return self.is_good_file_char_ex(c, AllowWildcards.YES)

    def is_good_file_char_ex(self, c: C, allow_wildcards: AllowWildcards) -> bool:
        """Return True if ``c`` may appear in a portable file name.

        Control characters and the reserved characters ``: " < > | /`` are
        never allowed. ``*`` and ``?`` are allowed only with
        ``AllowWildcards.YES``.
        """
        code = self._width.code(c)
        if self._policy.is_control(code):
            return False
        if code in _BAD_FILE_CODES:
            return False
        if allow_wildcards is AllowWildcards.NO and code in _WILDCARD_CODES:
            return False
        return True

    def to_good_file_char(self, c: C) -> C:
        return self.to_good_file_char_ex(c, ConvertWildcards.NO)

    def to_good_file_char_convert_wildcards(self, c: C) -> C:
        return self.to_good_file_char_ex(c, ConvertWildcards.YES)

    def to_good_file_char_ex(self, c: C, convert_wildcards: ConvertWildcards) -> C:
        """Repair a single file-name character.

        Exactly one rule applies, checked in this order:

        1. A control character becomes ``!``.
        2. A reserved character is replaced from the bad-file-char table
           (``:``→``-``, ``"``→``'``, ``<``→``(``, ``>``→``)``, ``|``→``.``,
           ``/``→``\\``).
        3. With ``ConvertWildcards.YES``, ``*`` becomes ``+`` and ``?`` a space.

        Anything else is returned unchanged. ``ConvertWildcards.REMOVE``
        behaves like ``NO`` here; removal happens at string level.

        Args:
            c: Character to repair.
            convert_wildcards: Wildcard handling mode.

        Returns:
            The repaired character, spelled the same way as ``c`` (a one-byte
            ``bytes`` stays ``bytes``).
        """
        code = self._width.code(c)
        if self._policy.is_control(code):
            return self._width.char_like(c, _CONTROL_REPLACEMENT_CODE)
        if (replacement := _BAD_FILE_CODES.get(code)) is not None:
            return self._width.char_like(c, replacement)
        if convert_wildcards is ConvertWildcards.YES:
            if (replacement := _WILDCARD_CODES.get(code)) is not None:
                return self._width.char_like(c, replacement)
        return c


char_util: CharUtil[int] = CharUtil(NARROW)
char_util_w: CharUtil[str] = CharUtil(WIDE)
