from __future__ import annotations

import logging
from datetime import datetime, timedelta

from pasetomint.exceptions import InvalidDurationError, ReservedClaimNameError
from pasetomint.schema import (
    RESERVED_CLAIM_NAMES,
    AbsoluteExpiry,
    ClaimSet,
    ClaimSpec,
    Expiry,
    NonExpiring,
    RegisteredClaim,
    RelativeExpiry,
)
from pasetomint.utils import format_timestamp, parse_duration, parse_timestamp

logger = logging.getLogger(__name__)


class ClaimsBuilder:
    """
    Assembles the canonical claim set of one token.

    ``now`` is the single instant the whole build is based on: relative
    expiry and the default ``iat``/``nbf`` are all derived from it, so the
    same spec built with the same ``now`` always serializes identically.
    """

    def __init__(self, now: datetime) -> None:
        if now.tzinfo is None:
            raise ValueError("ClaimsBuilder requires a timezone-aware 'now'")
        self._now = now

    @property
    def now(self) -> datetime:
        return self._now

    def resolve_expiry(self, spec: ClaimSpec) -> Expiry:
        """
        Pick exactly one expiry strategy for ``spec``.

        A relative duration wins over an explicit ``exp``; with neither the
        token is non-expiring.
        """
        if spec.expires_in is not None:
            if spec.exp is not None:
                logger.warning(
                    "Both 'exp' and 'expires_in' given; using the relative expiry"
                )
            return RelativeExpiry(self._duration(spec.expires_in))
        if spec.exp is not None:
            return AbsoluteExpiry(parse_timestamp(spec.exp, RegisteredClaim.EXPIRATION.value))
        return NonExpiring()

    def build(self, spec: ClaimSpec) -> ClaimSet:
        expiry = self.resolve_expiry(spec)
        registered: dict[RegisteredClaim, str | None] = {}

        if isinstance(expiry, RelativeExpiry):
            try:
                expires_at = expiry.expires_at(self._now)
            except OverflowError as error:
                raise InvalidDurationError(str(spec.expires_in), "expiry is out of range") from error
            registered[RegisteredClaim.EXPIRATION] = format_timestamp(expires_at)
        elif isinstance(expiry, AbsoluteExpiry):
            registered[RegisteredClaim.EXPIRATION] = format_timestamp(expiry.at)

        for claim, value in (
            (RegisteredClaim.AUDIENCE, spec.aud),
            (RegisteredClaim.SUBJECT, spec.sub),
            (RegisteredClaim.ISSUER, spec.iss),
            (RegisteredClaim.TOKEN_ID, spec.jti),
        ):
            if value is not None:
                registered[claim] = value

        registered[RegisteredClaim.ISSUED_AT] = self._time_claim(RegisteredClaim.ISSUED_AT, spec.iat)
        registered[RegisteredClaim.NOT_BEFORE] = self._time_claim(RegisteredClaim.NOT_BEFORE, spec.nbf)

        # Canonical order, independent of assignment order above.
        claims: dict[str, str | None] = {
            claim.value: registered[claim] for claim in RegisteredClaim if claim in registered
        }

        for custom in spec.claims:
            if custom.name in RESERVED_CLAIM_NAMES:
                raise ReservedClaimNameError(custom.name)
            claims[custom.name] = custom.value

        logger.debug(
            "Built claim set with %d registered and %d additional claims",
            len(registered),
            len(claims) - len(registered),
        )
        return ClaimSet(claims, non_expiring=isinstance(expiry, NonExpiring))

    def _time_claim(self, claim: RegisteredClaim, value: str | None) -> str:
        if value is None:
            return format_timestamp(self._now)
        return format_timestamp(parse_timestamp(value, claim.value))

    @staticmethod
    def _duration(value: str | timedelta) -> timedelta:
        if isinstance(value, timedelta):
            if value < timedelta(0):
                raise InvalidDurationError(str(value), "duration must not be negative")
            return value
        return parse_duration(value)
