"""Human-readable elapsed-time formatting."""

from textutil.config import DEFAULT_MIN_DAYS
from textutil.errors import DurationError

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
HOURS_PER_DAY = 24
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY


def _check_seconds(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DurationError(value)
    return value


def format_duration(total_seconds: int, min_days: int = DEFAULT_MIN_DAYS) -> str:
    """Format a number of seconds as ``DDd:HHh:MMm:SSs``.

    Days are shown only once there are at least ``min_days`` of them; the
    hours, minutes and seconds are then taken from what is left after the
    whole days. Below that threshold hours are shown only if there is at
    least one, and they are the total hour count, so they may exceed 23.

    Hours, minutes and seconds are zero-padded to two digits; days are not
    padded.

    Args:
        total_seconds: Elapsed time in whole seconds.
        min_days: Smallest number of whole days that switches to the day
            format.

    Returns:
        The formatted duration, e.g. ``"00m:45s"``, ``"01h:01m:01s"`` or
        ``"3d:00h:00m:00s"``.

    Raises:
        DurationError: If ``total_seconds`` is negative or not an integer.
    """
    total_seconds = _check_seconds(total_seconds)
    days, remainder = divmod(total_seconds, SECONDS_PER_DAY)

    if days >= min_days:
        hours, rest = divmod(remainder, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        return f"{days}d:{hours:02d}h:{minutes:02d}m:{seconds:02d}s"

    hours, rest = divmod(total_seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    if hours == 0:
        return f"{minutes:02d}m:{seconds:02d}s"
    return f"{hours:02d}h:{minutes:02d}m:{seconds:02d}s"
