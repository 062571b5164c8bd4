"""Configuration defaults for textutil.

textutil reads no files and no environment variables; configuration is the
set of module-level defaults below plus a lookup for width names.
"""

from textutil.errors import UnknownWidthError
from textutil.widths import NARROW, WIDE, CharWidth

DEFAULT_MIN_DAYS = 3
DEFAULT_TRIM_CHARSET = " \t"

WIDTHS: dict[str, CharWidth] = {NARROW.name: NARROW, WIDE.name: WIDE}


def get_width(name: str) -> CharWidth:
    """Resolve a width by name.

    Args:
        name: ``"narrow"`` or ``"wide"``, case-insensitive, surrounding
            whitespace ignored.

    Returns:
        The matching `CharWidth` instance.

    Raises:
        UnknownWidthError: If ``name`` does not name a known width.
    """
    if (width := WIDTHS.get(name.strip().lower())) is None:
        raise UnknownWidthError(name)
    return width
