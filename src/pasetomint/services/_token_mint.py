from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

import pyseto
from pyseto import PysetoError

from pasetomint.exceptions import PrimitiveFailureError
from pasetomint.managers import KeyManager
from pasetomint.schema import ClaimSet, ClaimSpec, SymmetricKey

from ._claims_builder import ClaimsBuilder

logger = logging.getLogger(__name__)


def assemble(key: SymmetricKey, claims: ClaimSet, assertion: str | None = None) -> str:
    """
    Seal ``claims`` into a v4.local token with ``key``.

    The serialized claims and the optional implicit assertion are forwarded
    to the encryption primitive as is; no footer is attached.
    """
    implicit_assertion = assertion.encode("utf-8") if assertion is not None else b""
    try:
        token = pyseto.encode(
            key.to_paseto_key(),
            claims.to_json(),
            footer=b"",
            implicit_assertion=implicit_assertion,
        )
    except (PysetoError, ValueError) as error:
        raise PrimitiveFailureError(f"Failed to encrypt token: {error}") from error
    return token.decode("ascii")


class TokenMint:
    """
    High-level API to mint v4.local tokens with a single symmetric key.
    """

    def __init__(
        self,
        key: SymmetricKey,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.key = key
        self._clock = clock or self._current_time

    @staticmethod
    def _current_time() -> datetime:
        return datetime.now(timezone.utc)

    def build_claims(self, spec: ClaimSpec) -> ClaimSet:
        return ClaimsBuilder(now=self._clock()).build(spec)

    def generate_token(self, spec: ClaimSpec) -> str:
        claims = self.build_claims(spec)
        token = assemble(self.key, claims, spec.assertion)
        logger.info(
            "Minted token (non_expiring=%s, assertion=%s)",
            claims.non_expiring,
            spec.assertion is not None,
        )
        return token

    @staticmethod
    def generate_key() -> SymmetricKey:
        return KeyManager.generate()
