"""Errors raised by textutil."""

# ============================================================================
#                           General errors
# ============================================================================


class TextUtilError(Exception):
    """Base class for textutil errors."""


# ============================================================================
#                           Width errors
# ============================================================================


class CharWidthError(TextUtilError, TypeError):
    """Raised when a value is not a character or text of the expected width."""

    def __init__(self, width: str, value: object, message: str | None = None) -> None:
        if message is None:
            message = f"{value!r} is not a valid {width} character or text"
        super().__init__(message)
        self.width = width
        self.value = value


class UnknownWidthError(TextUtilError, LookupError):
    """Raised when a width name cannot be resolved."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown character width: {name!r}")
        self.name = name


# ============================================================================
#                           Duration errors
# ============================================================================


class DurationError(TextUtilError, ValueError):
    """Raised when a duration is not a non-negative whole number of seconds."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Duration must be a non-negative integer number of seconds, got {value!r}"
        )
        self.value = value
