"""Time helpers shared by the recommendation and trending scorers"""

import math
from datetime import datetime, timezone
from typing import Optional

SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def seconds_since(created_at: Optional[datetime], now: Optional[datetime] = None) -> float:
    """
    Elapsed seconds between created_at and now.

    Args:
        created_at: Creation timestamp (naive values are treated as UTC).
            None is treated as "just created" and yields 0.
        now: Reference instant (default: current UTC time)

    Returns:
        Fractional seconds; negative if created_at lies in the future
    """
    if created_at is None:
        return 0.0
    if now is None:
        now = utc_now()
    return (_as_utc(now) - _as_utc(created_at)).total_seconds()


def days_since(created_at: Optional[datetime], now: Optional[datetime] = None) -> float:
    """Fractional days since created_at (for age filters and decay)."""
    return seconds_since(created_at, now) / SECONDS_PER_DAY


def hours_since(created_at: Optional[datetime], now: Optional[datetime] = None) -> float:
    """Fractional hours since created_at."""
    return seconds_since(created_at, now) / SECONDS_PER_HOUR


def natural_log(value: float) -> float:
    """
    ln(value) that never raises.

    Negative (or NaN) input yields NaN and 0 yields -inf, so malformed
    counters propagate through the score instead of aborting the call.
    """
    if math.isnan(value) or value < 0:
        return math.nan
    if value == 0:
        return -math.inf
    return math.log(value)
