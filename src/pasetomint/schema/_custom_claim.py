from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomClaim:
    """
    A caller-supplied claim parsed from ``key=value`` or a bare ``key``.

    A bare key is a flag claim: it is present in the token with a null value.
    """

    name: str
    value: str | None = None

    @classmethod
    def parse(cls, text: str) -> CustomClaim:
        name, separator, value = text.partition("=")
        if not name:
            raise ValueError(f"Claim name must not be empty: {text!r}")
        return cls(name=name, value=value if separator else None)
