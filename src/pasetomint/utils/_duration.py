"""Parsing of human-readable durations such as ``1h``, ``15m`` or ``2h 30m``."""

from __future__ import annotations

import re
from datetime import timedelta

from pasetomint.exceptions import InvalidDurationError

_NANOS_PER_SECOND = 1_000_000_000

# Unit spellings mapped to their length in nanoseconds.
_UNITS: dict[str, int] = {
    **dict.fromkeys(("nsec", "ns"), 1),
    **dict.fromkeys(("usec", "us", "µs"), 1_000),
    **dict.fromkeys(("msec", "ms"), 1_000_000),
    **dict.fromkeys(("seconds", "second", "sec", "s"), _NANOS_PER_SECOND),
    **dict.fromkeys(("minutes", "minute", "min", "m"), 60 * _NANOS_PER_SECOND),
    **dict.fromkeys(("hours", "hour", "hr", "h"), 3_600 * _NANOS_PER_SECOND),
    **dict.fromkeys(("days", "day", "d"), 86_400 * _NANOS_PER_SECOND),
    **dict.fromkeys(("weeks", "week", "w"), 604_800 * _NANOS_PER_SECOND),
    # 30.44 days
    **dict.fromkeys(("months", "month", "M"), 2_630_016 * _NANOS_PER_SECOND),
    # 365.25 days
    **dict.fromkeys(("years", "year", "y"), 31_557_600 * _NANOS_PER_SECOND),
}

_PART = re.compile(r"\s*(?P<number>[0-9]+)\s*(?P<unit>[A-Za-zµ]+)\s*")


def parse_duration(text: str) -> timedelta:
    """
    Parse a duration made of one or more ``<integer><unit>`` parts.

    Parts may be separated by whitespace (``2h 30m``) or written together
    (``2h30m``). Sub-microsecond precision is truncated.
    """
    if not text or not text.strip():
        raise InvalidDurationError(text, "empty duration")

    total_nanos = 0
    position = 0
    while position < len(text):
        match = _PART.match(text, position)
        if match is None:
            raise InvalidDurationError(
                text, f"expected '<number><unit>' at position {position}"
            )
        unit = match.group("unit")
        if unit not in _UNITS:
            raise InvalidDurationError(text, f"unknown time unit {unit!r}")
        try:
            number = int(match.group("number"))
        except ValueError as error:
            raise InvalidDurationError(text, "duration is too large") from error
        total_nanos += number * _UNITS[unit]
        position = match.end()

    try:
        return timedelta(microseconds=total_nanos // 1_000)
    except OverflowError as error:
        raise InvalidDurationError(text, "duration is too large") from error
