"""Unit tests for textutil.duration."""

import pytest

from textutil.duration import SECONDS_PER_DAY, SECONDS_PER_HOUR, format_duration
from textutil.errors import DurationError

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00m:00s"),
        (45, "00m:45s"),
        (60, "01m:00s"),
        (3599, "59m:59s"),
        (3600, "01h:00m:00s"),
        (3661, "01h:01m:01s"),
        (SECONDS_PER_DAY - 1, "23h:59m:59s"),
        # below the day threshold hours keep counting past 23
        (2 * SECONDS_PER_DAY + SECONDS_PER_HOUR, "49h:00m:00s"),
        (3 * SECONDS_PER_DAY, "3d:00h:00m:00s"),
        (3 * SECONDS_PER_DAY + 3661, "3d:01h:01m:01s"),
        (100 * SECONDS_PER_DAY + 59, "100d:00h:00m:59s"),
    ],
)
def test_format_duration_default_threshold(seconds, expected):
    """Days appear from three whole days on; shorter spans use hours or minutes."""
    assert format_duration(seconds) == expected


@pytest.mark.parametrize(
    "seconds, min_days, expected",
    [
        (SECONDS_PER_DAY, 1, "1d:00h:00m:00s"),
        (SECONDS_PER_DAY - 1, 1, "23h:59m:59s"),
        (45, 0, "0d:00h:00m:45s"),
        (10 * SECONDS_PER_DAY, 11, "240h:00m:00s"),
    ],
)
def test_format_duration_custom_threshold(seconds, min_days, expected):
    """``min_days`` moves the switch to the day format."""
    assert format_duration(seconds, min_days=min_days) == expected


@pytest.mark.parametrize("value", [-1, 1.5, 10.0, True, "10", None])
def test_format_duration_rejects_invalid_input(value):
    """Only non-negative integers are durations."""
    with pytest.raises(DurationError, match="non-negative integer"):
        format_duration(value)


def test_duration_error_is_value_error():
    with pytest.raises(ValueError):
        format_duration(-5)
