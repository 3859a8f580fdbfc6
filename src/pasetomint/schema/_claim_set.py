from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ._registered_claim import RESERVED_CLAIM_NAMES, RegisteredClaim


class ClaimSet(Mapping[str, "str | None"]):
    """
    Immutable, ordered claims of a single token.

    Registered claims come first in ``RegisteredClaim`` order, followed by
    additional claims in the order they were supplied. ``non_expiring`` is
    set exactly when the token was deliberately built without an ``exp``
    claim.
    """

    __slots__ = ("_claims", "_non_expiring")

    def __init__(
        self,
        claims: Mapping[str, str | None],
        non_expiring: bool = False,
    ) -> None:
        has_expiry = RegisteredClaim.EXPIRATION.value in claims
        if non_expiring and has_expiry:
            raise ValueError("A non-expiring claim set cannot carry 'exp'")
        if not non_expiring and not has_expiry:
            raise ValueError("A claim set without 'exp' must be marked non_expiring")
        self._claims = MappingProxyType(dict(claims))
        self._non_expiring = non_expiring

    @property
    def non_expiring(self) -> bool:
        return self._non_expiring

    @property
    def registered(self) -> dict[str, str | None]:
        return {k: v for k, v in self._claims.items() if k in RESERVED_CLAIM_NAMES}

    @property
    def additional(self) -> dict[str, str | None]:
        return {k: v for k, v in self._claims.items() if k not in RESERVED_CLAIM_NAMES}

    def __getitem__(self, name: str) -> str | None:
        return self._claims[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._claims)

    def __len__(self) -> int:
        return len(self._claims)

    def __repr__(self) -> str:
        return f"ClaimSet({dict(self._claims)!r}, non_expiring={self._non_expiring})"

    def to_dict(self) -> dict[str, str | None]:
        return dict(self._claims)

    def to_json(self) -> bytes:
        """Serialize to compact UTF-8 JSON, keeping claim order."""
        return json.dumps(
            dict(self._claims),
            separators=(",", ":"),
            ensure_ascii=False,
        ).encode("utf-8")
