"""
Time utilities for token timestamps.
All timestamps are timezone-aware UTC; claims carry whole unix seconds.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """
    Get the current wall-clock time.

    Returns:
        Timezone-aware UTC datetime
    """
    return datetime.now(timezone.utc)


def to_unix(moment: datetime) -> int:
    """
    Convert a datetime to whole unix seconds, rounding toward the past.

    Args:
        moment: Timezone-aware datetime

    Returns:
        Seconds since the unix epoch

    Raises:
        ValueError: If the datetime is naive
    """
    if moment.tzinfo is None:
        raise ValueError("Naive datetime has no defined unix time")
    return (moment - EPOCH) // timedelta(seconds=1)


def from_unix(seconds: int) -> datetime:
    """Convert unix seconds to a UTC datetime."""
    return EPOCH + timedelta(seconds=seconds)


class FrozenClock:
    """
    Clock that only moves when told to.
    Pass an instance wherever a clock callable is accepted.
    """

    def __init__(self, start: Optional[datetime] = None):
        self._now = start if start is not None else utc_now()

    def __call__(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta):
        """Move the clock by ``delta`` (may be negative)."""
        self._now = self._now + delta

    def set(self, moment: datetime):
        """Jump the clock to ``moment``."""
        self._now = moment
