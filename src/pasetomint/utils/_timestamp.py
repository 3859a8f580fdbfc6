from __future__ import annotations

from datetime import datetime, timezone

from pasetomint.exceptions import InvalidTimestampError


def parse_timestamp(text: str, claim: str) -> datetime:
    """
    Parse an absolute RFC 3339 timestamp for ``claim``.

    The value must carry a UTC offset (or ``Z``), otherwise the instant it
    names is ambiguous and ``InvalidTimestampError`` is raised.
    """
    try:
        parsed = datetime.fromisoformat(text.strip())
    except ValueError as error:
        raise InvalidTimestampError(claim, text) from error
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise InvalidTimestampError(claim, text)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as error:
        # Offset pushes the UTC instant outside datetime's range.
        raise InvalidTimestampError(claim, text) from error


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` in UTC as ``YYYY-MM-DDTHH:MM:SS[.ffffff]Z``."""
    if moment.tzinfo is None:
        raise ValueError("Cannot format a naive datetime as a claim timestamp")
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
