from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class AbsoluteExpiry:
    """Token expires at an explicit instant."""

    at: datetime


@dataclass(frozen=True)
class RelativeExpiry:
    """Token expires a fixed duration after it is built."""

    duration: timedelta

    def expires_at(self, now: datetime) -> datetime:
        return now + self.duration


@dataclass(frozen=True)
class NonExpiring:
    """Token intentionally carries no ``exp`` claim."""


Expiry = AbsoluteExpiry | RelativeExpiry | NonExpiring
