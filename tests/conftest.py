"""Global pytest fixtures for TEXTUTIL.

Most tests run once per character width. The ``width`` fixture is
parametrized over ``NARROW`` and ``WIDE``; the others derive from it so a
test can be written once against plain ``str`` literals:

    ```py
    def test_upper(su, t):
        assert su.get_upper(t("abc")) == t("ABC")
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from textutil.chars import CharUtil, char_util, char_util_w
from textutil.strings import StrUtil, str_util, str_util_w
from textutil.widths import NARROW, WIDE, CharWidth


@pytest.fixture(params=[NARROW, WIDE], ids=lambda w: w.name)
def width(request: pytest.FixtureRequest) -> CharWidth:
    """Each supported character width."""
    return request.param


@pytest.fixture
def su(width: CharWidth) -> StrUtil[Any]:
    """The string utility instance for ``width``."""
    return str_util if width is NARROW else str_util_w


@pytest.fixture
def cu(width: CharWidth) -> CharUtil[Any]:
    """The character utility instance for ``width``."""
    return char_util if width is NARROW else char_util_w


@pytest.fixture
def t(width: CharWidth) -> Callable[[str], Any]:
    """Convert a ``str`` literal to text of ``width``."""
    return width.literal


@pytest.fixture
def ch(width: CharWidth) -> Callable[[str], Any]:
    """Convert a one-character ``str`` literal to a character of ``width``."""

    def make(s: str) -> Any:
        return width.literal(s)[0]

    return make
