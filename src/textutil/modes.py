"""Mode selectors for file-name operations."""

from enum import Enum


class AllowWildcards(Enum):
    """Whether ``*`` and ``?`` count as valid file-name characters."""

    NO = "no"
    YES = "yes"


class ConvertWildcards(Enum):
    """How file-name repair treats ``*`` and ``?``.

    Modes:
    - NO: leave wildcards as they are.
    - YES: replace them (``*`` with ``+``, ``?`` with a space).
    - REMOVE: delete them. A single character cannot be deleted, so at
      character level this behaves like NO.
    """

    NO = "no"
    YES = "yes"
    REMOVE = "remove"
