"""Static replacement tables.

Each table is an immutable tuple of pairs, built once at import time. The
order of entries is significant: lookups return the first match, and XML
escaping processes the entries in sequence.
"""

from typing import NamedTuple


class FileCharMap(NamedTuple):
    """A file-name character and its replacement."""

    special: str
    replacement: str


class XmlMarkup(NamedTuple):
    """An XML metacharacter and its entity, in narrow and wide spelling."""

    symbol: str
    xml_code: bytes
    xml_wide_code: str


# Characters that are not valid in portable file names
BAD_FILE_CHARS: tuple[FileCharMap, ...] = (
    FileCharMap(":", "-"),
    FileCharMap('"', "'"),
    FileCharMap("<", "("),
    FileCharMap(">", ")"),
    FileCharMap("|", "."),
    FileCharMap("/", "\\"),
)

WILDCARD_CHARS: tuple[FileCharMap, ...] = (
    FileCharMap("*", "+"),
    FileCharMap("?", " "),
)

# "&" must stay first so entities produced later are not escaped again
XML_REPLACE: tuple[XmlMarkup, ...] = (
    XmlMarkup("&", b"&amp;", "&amp;"),
    XmlMarkup("<", b"&lt;", "&lt;"),
    XmlMarkup(">", b"&gt;", "&gt;"),
    XmlMarkup('"', b"&quot;", "&quot;"),
    XmlMarkup("'", b"&apos;", "&apos;"),
)

CONTROL_REPLACEMENT = "!"
