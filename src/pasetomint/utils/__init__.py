from ._duration import parse_duration
from ._timestamp import format_timestamp, parse_timestamp

__all__ = ["parse_duration", "parse_timestamp", "format_timestamp"]
