"""Whole-string operations built on the character classifier.

`StrUtil` applies `CharUtil` rules across a text value, and also performs
edits on the sequence itself: XML escaping, trimming and wildcard removal.

Every transform is offered in two forms:

- ``get_*`` returns a new text value and leaves its argument alone.
- ``to_*`` updates a `TextBuffer` in place.

Use the module-level instances ``str_util`` (narrow, ``bytes``) and
``str_util_w`` (wide, ``str``).
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from textutil.buffer import TextBuffer
from textutil.chars import CharUtil
from textutil.config import DEFAULT_MIN_DAYS
from textutil.duration import format_duration
from textutil.modes import AllowWildcards, ConvertWildcards
from textutil.tables import XML_REPLACE
from textutil.widths import NARROW, WIDE, CharWidth

logger = logging.getLogger(__name__)

S = TypeVar("S", str, bytes)

_MINUS = "-"


class StrUtil(Generic[S]):
    """String utilities for one character width."""

    def __init__(self, width: CharWidth) -> None:
        self._width = width
        self._chars: CharUtil[Any] = CharUtil(width)
        narrow = width.text_type is bytes
        self._xml_replace = tuple(
            (width.literal(m.symbol), m.xml_code if narrow else m.xml_wide_code)
            for m in XML_REPLACE
        )
        self._minus = width.literal(_MINUS)

    @property
    def width(self) -> CharWidth:
        """Return the character width this instance operates on."""
        return self._width

    @property
    def chars(self) -> CharUtil[Any]:
        """Return the character classifier used for per-character rules."""
        return self._chars

    def _all(self, text: S, predicate: Callable[[Any], bool]) -> bool:
        # Empty text never satisfies a whole-string predicate
        text = self._width.check_text(text)
        return bool(text) and all(map(predicate, text))

    # ------------------------------------------------------------------
    # XML
    # ------------------------------------------------------------------

    def get_xml_safe(self, text: S) -> S:
        """Return ``text`` with XML metacharacters replaced by entities.

        ``&``, ``<``, ``>``, ``"`` and ``'`` become ``&amp;``, ``&lt;``,
        ``&gt;``, ``&quot;`` and ``&apos;``. Each metacharacter is replaced in
        one left-to-right sweep, ``&`` first, so the ampersands of inserted
        entities are never escaped again.
        """
        result = self._width.check_text(text)
        for symbol, entity in self._xml_replace:
            result = result.replace(symbol, entity)
        return result

    def to_xml_safe(self, buf: TextBuffer[S]) -> None:
        buf.assign(self.get_xml_safe(buf.value))

    # ------------------------------------------------------------------
    # Trimming
    # ------------------------------------------------------------------

    def get_trimmed_leading(self, text: S, trim_charset: S) -> S:
        """Return ``text`` without its leading run of ``trim_charset`` characters.

        Characters are removed while they belong to ``trim_charset``; order
        within the charset does not matter. An empty charset trims nothing.
        If every character is in the charset the result is empty.

        Example:
            ```py
            str_util_w.get_trimmed_leading(" \\t x ", " \\t")  # "x "
            ```
        """
        text = self._width.check_text(text)
        return text.lstrip(self._width.check_text(trim_charset))

    def to_trimmed_leading(self, buf: TextBuffer[S], trim_charset: S) -> None:
        buf.assign(self.get_trimmed_leading(buf.value, trim_charset))

    def get_trimmed_trailing(self, text: S, trim_charset: S) -> S:
        """Return ``text`` without its trailing run of ``trim_charset`` characters."""
        text = self._width.check_text(text)
        return text.rstrip(self._width.check_text(trim_charset))

    def to_trimmed_trailing(self, buf: TextBuffer[S], trim_charset: S) -> None:
        buf.assign(self.get_trimmed_trailing(buf.value, trim_charset))

    def get_trimmed(self, text: S, trim_charset: S) -> S:
        """Return ``text`` trimmed of ``trim_charset`` characters on both ends."""
        leading = self.get_trimmed_leading(text, trim_charset)
        if not leading:
            return leading
        result = self.get_trimmed_trailing(leading, trim_charset)
        # leading starts with a non-trim character, so something must survive
        assert result, "trimmed text lost its last non-trim character"
        return result

    def to_trimmed(self, buf: TextBuffer[S], trim_charset: S) -> None:
        buf.assign(self.get_trimmed(buf.value, trim_charset))

    # ------------------------------------------------------------------
    # Whole-string predicates
    # ------------------------------------------------------------------

    def is_digit(self, text: S) -> bool:
        return self._all(text, self._chars.is_digit)

    def is_alpha_num(self, text: S) -> bool:
        return self._all(text, self._chars.is_alpha_num)

    def is_printable(self, text: S) -> bool:
        return self._all(text, self._chars.is_printable)

    def is_extended_ascii(self, text: S) -> bool:
        return self._all(text, self._chars.is_extended_ascii)

    def is_numeric(self, text: S) -> bool:
        """Return True if ``text`` looks like a decimal number.

        One leading minus sign is allowed; everything after it must be a
        digit or ``.``. Empty text and a lone ``-`` are not numeric. No
        further syntax is checked, so ``"1.2.3"`` is numeric.
        """
        text = self._width.check_text(text)
        if text.startswith(self._minus):
            text = text[len(self._minus) :]
        return self._all(text, self._chars.is_numeric)

    # ------------------------------------------------------------------
    # File names
    # ------------------------------------------------------------------

    def is_good_file_name(
        self, text: S, allow_wildcards: AllowWildcards = AllowWildcards.NO
    ) -> bool:
        """Return True if every character of ``text`` is valid in a file name.

        Empty text is considered good; no character in it is invalid.
        """
        text = self._width.check_text(text)
        return all(self._chars.is_good_file_char_ex(c, allow_wildcards) for c in text)

    def contains_wildcard(self, text: S) -> bool:
        return any(map(self._chars.is_wildcard_file_char, self._width.check_text(text)))

    def get_good_file_name(self, text: S, convert_wildcards: ConvertWildcards) -> S:
        """Return ``text`` with every invalid file-name character repaired.

        Control characters become ``!`` and reserved characters get their
        fixed replacements. Wildcards are then handled per
        ``convert_wildcards``:

        - ``NO``: kept as they are.
        - ``YES``: ``*`` becomes ``+`` and ``?`` a space.
        - ``REMOVE``: deleted after the repair pass.

        Args:
            text: File name to sanitize.
            convert_wildcards: Wildcard handling mode.

        Returns:
            The sanitized file name.
        """
        text = self._width.check_text(text)
        mode = (
            ConvertWildcards.YES
            if convert_wildcards is ConvertWildcards.YES
            else ConvertWildcards.NO
        )
        chars = [self._chars.to_good_file_char_ex(c, mode) for c in text]
        if convert_wildcards is ConvertWildcards.REMOVE:
            chars = [c for c in chars if not self._chars.is_wildcard_file_char(c)]
        result = self._width.join(chars)
        if result != text:
            logger.debug(
                "Sanitized %s file name %r -> %r (wildcards=%s)",
                self._width.name,
                text,
                result,
                convert_wildcards.value,
            )
        return result

    def to_good_file_name(
        self, buf: TextBuffer[S], convert_wildcards: ConvertWildcards
    ) -> None:
        buf.assign(self.get_good_file_name(buf.value, convert_wildcards))

    # ------------------------------------------------------------------
    # Case
    # ------------------------------------------------------------------

    def get_upper(self, text: S) -> S:
        text = self._width.check_text(text)
        return self._width.join(map(self._chars.to_upper, text))

    def to_upper(self, buf: TextBuffer[S]) -> None:
        buf.assign(self.get_upper(buf.value))

    def get_lower(self, text: S) -> S:
        text = self._width.check_text(text)
        return self._width.join(map(self._chars.to_lower, text))

    def to_lower(self, buf: TextBuffer[S]) -> None:
        buf.assign(self.get_lower(buf.value))

    # ------------------------------------------------------------------
    # Durations
    # ------------------------------------------------------------------

    def get_duration_str(self, total_seconds: int, min_days: int = DEFAULT_MIN_DAYS) -> S:
        """Format ``total_seconds`` as width-native text.

        See `textutil.duration.format_duration` for the format.
        """
        return self._width.literal(format_duration(total_seconds, min_days))


str_util: StrUtil[bytes] = StrUtil(NARROW)
str_util_w: StrUtil[str] = StrUtil(WIDE)
