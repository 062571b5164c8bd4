"""Unit tests for textutil.errors."""

from textutil.errors import (
    CharWidthError,
    DurationError,
    TextUtilError,
    UnknownWidthError,
)

# pylint: disable=magic-value-comparison


def test_char_width_error_default_message():
    err = CharWidthError("narrow", "x")
    assert str(err) == "'x' is not a valid narrow character or text"
    assert err.width == "narrow"
    assert err.value == "x"
    assert isinstance(err, TextUtilError)
    assert isinstance(err, TypeError)


def test_char_width_error_custom_message():
    assert str(CharWidthError("wide", 1, "custom")) == "custom"


def test_duration_error():
    err = DurationError(-3)
    assert "got -3" in str(err)
    assert err.value == -3
    assert isinstance(err, TextUtilError)
    assert isinstance(err, ValueError)


def test_unknown_width_error():
    err = UnknownWidthError("huge")
    assert str(err) == "Unknown character width: 'huge'"
    assert err.name == "huge"
    assert isinstance(err, LookupError)
