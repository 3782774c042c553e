"""
Chronos ISO-8601 recurrence strings.

A schedule has the form <repetitions>/<start>/<interval>, for example
R5/2023-01-01T00:00:00Z/PT1H. An empty start means "start immediately".
"""
import re
from datetime import datetime, timedelta, timezone

from chronos_client.core.exceptions import InvalidInputError

RUN_ONCE_NOW_SCHEDULE = "R1//PT2M"
RUN_ONCE_EPSILON = "PT10M"
UNSCHEDULE_SCHEDULE = "R0//PT0M"

_REPETITIONS_PATTERN = re.compile(r"R\d*")


def format_schedule(start_time: datetime | None, interval: str, repetitions: str) -> str:
    """
    Build a schedule string for a job.

    Args:
        start_time: When the job should first run. None (or the zero instant)
            means start immediately.
        interval: ISO-8601 duration between runs, e.g. "PT2M" or "P1D".
        repetitions: "R" to repeat forever, "R<n>" to run n times.

    Returns:
        The schedule string.

    Raises:
        InvalidInputError: If the interval or repetitions are malformed.
    """
    validate_interval(interval)
    validate_repetitions(repetitions)

    return f"{repetitions}/{format_time_string(start_time)}/{interval}"


def run_once_now_schedule() -> str:
    """Start immediately, run once, retry every 2 minutes until it succeeds."""
    return RUN_ONCE_NOW_SCHEDULE


def validate_repetitions(repetitions: str) -> None:
    if not _REPETITIONS_PATTERN.fullmatch(repetitions):
        raise InvalidInputError(f"Repetitions string not formatted correctly: {repetitions!r}")


def validate_interval(interval: str) -> None:
    if not interval.startswith("P"):
        raise InvalidInputError(f"Interval string not formatted correctly: {interval!r}")


def _is_zero(start_time: datetime) -> bool:
    naive = start_time.replace(tzinfo=None)
    return naive == datetime.min and start_time.utcoffset() in (None, timedelta(0))


def format_time_string(start_time: datetime | None) -> str:
    """RFC 3339 timestamp with trimmed fractional seconds; naive times are UTC."""
    if start_time is None or _is_zero(start_time):
        return ""

    if start_time.tzinfo is None:
        start_time = start_time.replace(tzinfo=timezone.utc)

    text = start_time.replace(tzinfo=None, microsecond=0).isoformat()
    if start_time.microsecond:
        text += f".{start_time.microsecond:06d}".rstrip("0")

    offset = start_time.utcoffset()
    if offset == timedelta(0):
        return text + "Z"

    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"
