"""
Signed duration strings such as "1h20m", "1.5s" or "-300ms".

A duration is an optional sign followed by one or more decimal numbers,
each with a unit suffix. Valid units are "ns", "us" (or "µs"/"μs"), "ms",
"s", "m" and "h". The bare string "0" is also accepted.
"""

import re
from datetime import timedelta

from ..errors import InvalidDurationError

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_MAX_NS = (1 << 63) - 1

# digits, optional fraction, then everything up to the next number
_GROUP = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def parse_duration_ns(text: str) -> int:
    """
    Parse a duration string into an exact number of nanoseconds.

    Fractions below one nanosecond are truncated.

    Args:
        text: Duration string, e.g. "1h20m"

    Returns:
        Signed nanosecond count

    Raises:
        InvalidDurationError: If the string is not a valid duration
    """
    if not isinstance(text, str):
        raise InvalidDurationError(f"Duration must be a string, got {type(text).__name__}")

    rest = text
    negative = False
    if rest and rest[0] in "+-":
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return 0
    if not rest:
        raise InvalidDurationError(f'Invalid duration "{text}"')

    total = 0
    pos = 0
    while pos < len(rest):
        if rest[pos] not in "0123456789.":
            raise InvalidDurationError(f'Invalid duration "{text}"')

        match = _GROUP.match(rest, pos)
        whole, fraction, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not fraction:
            raise InvalidDurationError(f'Invalid duration "{text}"')
        if not unit:
            raise InvalidDurationError(f'Missing unit in duration "{text}"')
        if unit not in _UNITS:
            raise InvalidDurationError(f'Unknown unit "{unit}" in duration "{text}"')

        scale = _UNITS[unit]
        total += int(whole or "0") * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        if total > _MAX_NS + 1:
            raise InvalidDurationError(f'Invalid duration "{text}"')
        pos = match.end()

    if total > _MAX_NS and not (negative and total == _MAX_NS + 1):
        raise InvalidDurationError(f'Invalid duration "{text}"')

    return -total if negative else total


def parse_duration(text: str) -> timedelta:
    """
    Parse a duration string into a timedelta.

    The result is floored to whole microseconds, the resolution of timedelta.

    Raises:
        InvalidDurationError: If the string is not a valid duration
    """
    return timedelta(microseconds=parse_duration_ns(text) // MICROSECOND)
