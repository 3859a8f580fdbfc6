from __future__ import annotations

import base64
import binascii
import secrets

import pyseto

from pasetomint.exceptions import MalformedKeyError

PASETO_VERSION = 4
PASETO_PURPOSE = "local"
KEY_SIZE = 32


class SymmetricKey:
    """
    A v4.local PASETO key: exactly ``KEY_SIZE`` bytes of secret material.

    Never persisted; the bytes are only exposed to the encryption step and to
    the transport encoding used when printing a freshly generated key.
    """

    __slots__ = ("_material",)

    def __init__(self, material: bytes) -> None:
        if len(material) != KEY_SIZE:
            raise MalformedKeyError(
                f"Symmetric key must be exactly {KEY_SIZE} bytes, got {len(material)}"
            )
        self._material = bytes(material)

    @classmethod
    def from_base64(cls, encoded: str) -> SymmetricKey:
        try:
            material = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as error:
            raise MalformedKeyError(f"Key is not valid base64: {error}") from error
        return cls(material)

    @classmethod
    def generate(cls) -> SymmetricKey:
        return cls(secrets.token_bytes(KEY_SIZE))

    def as_bytes(self) -> bytes:
        return self._material

    def to_base64(self) -> str:
        return base64.b64encode(self._material).decode("ascii")

    def to_paseto_key(self) -> pyseto.KeyInterface:
        return pyseto.Key.new(version=PASETO_VERSION, purpose=PASETO_PURPOSE, key=self._material)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymmetricKey):
            return NotImplemented
        return secrets.compare_digest(self._material, other._material)

    def __hash__(self) -> int:
        return hash(self._material)

    def __repr__(self) -> str:
        return f"SymmetricKey(v{PASETO_VERSION}.{PASETO_PURPOSE}, <redacted>)"
