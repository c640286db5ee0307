"""Modification-time display strings.

Fuzzy mode buckets the age of an entry into its largest whole unit
("3 days", "1 month"). Literal mode renders the modification timestamp itself
as an epoch-relative ``"{days}d {hours}h:{minutes}m"`` breakdown, where
``days`` wraps at 365; it is not an age.
"""

from __future__ import annotations

import time

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400
SECONDS_PER_WEEK = 604_800
# Approximate calendar units; not calendar aware.
SECONDS_PER_MONTH = 2_629_744
SECONDS_PER_YEAR = 31_556_926

FUTURE_LABEL = "future"
NOW_LABEL = "now"

# Largest unit first: (lower bound in seconds, divisor, unit name).
_FUZZY_BUCKETS: tuple[tuple[int, int, str], ...] = (
    (SECONDS_PER_YEAR, SECONDS_PER_YEAR, "year"),
    (SECONDS_PER_MONTH, SECONDS_PER_MONTH, "month"),
    (SECONDS_PER_WEEK, SECONDS_PER_WEEK, "week"),
    (SECONDS_PER_DAY, SECONDS_PER_DAY, "day"),
    (SECONDS_PER_HOUR, SECONDS_PER_HOUR, "hour"),
    (SECONDS_PER_MINUTE, SECONDS_PER_MINUTE, "minute"),
    (1, 1, "second"),
)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_fuzzy_duration(elapsed_seconds: int) -> str:
    """Bucket whole elapsed seconds into a coarse relative-age label.

    Negative input means the timestamp lies in the future and always yields
    ``"future"``.
    """
    if elapsed_seconds < 0:
        return FUTURE_LABEL
    for lower_bound, divisor, unit in _FUZZY_BUCKETS:
        if elapsed_seconds >= lower_bound:
            return _plural(elapsed_seconds // divisor, unit)
    return NOW_LABEL


def format_epoch_breakdown(timestamp: float) -> str:
    """Render ``timestamp`` as days-mod-365, hour-of-day and minute-of-hour."""
    seconds = int(timestamp)
    days = (seconds // SECONDS_PER_DAY) % 365
    hours = (seconds % SECONDS_PER_DAY) // SECONDS_PER_HOUR
    minutes = (seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
    return f"{days}d {hours}h:{minutes}m"


def format_modified(timestamp: float, use_fuzzy: bool, now: float | None = None) -> str:
    """Return the modified-time column text for an epoch ``timestamp``.

    ``now`` defaults to the wall clock and is only consulted in fuzzy mode.
    """
    if not use_fuzzy:
        return format_epoch_breakdown(timestamp)
    if now is None:
        now = time.time()
    delta = now - timestamp
    if delta < 0:
        return FUTURE_LABEL
    return format_fuzzy_duration(int(delta))


__all__ = [
    "FUTURE_LABEL",
    "NOW_LABEL",
    "SECONDS_PER_MONTH",
    "SECONDS_PER_YEAR",
    "format_fuzzy_duration",
    "format_epoch_breakdown",
    "format_modified",
]
