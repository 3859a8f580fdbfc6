import base64
from datetime import datetime, timezone

from pytest import fixture

from pasetomint.schema import SymmetricKey
from pasetomint.services import TokenMint

FIXED_NOW = datetime(2025, 8, 1, 12, 0, 0, tzinfo=timezone.utc)
KEY_BYTES = bytes(range(32))


@fixture
def fixed_now() -> datetime:
    """The single instant every build in a test is based on."""
    return FIXED_NOW


@fixture
def key_bytes() -> bytes:
    return KEY_BYTES


@fixture
def encoded_key() -> str:
    return base64.b64encode(KEY_BYTES).decode("ascii")


@fixture
def symmetric_key() -> SymmetricKey:
    return SymmetricKey(KEY_BYTES)


@fixture
def token_mint(symmetric_key: SymmetricKey, fixed_now: datetime) -> TokenMint:
    """Create a token mint whose clock is frozen at ``fixed_now``."""
    return TokenMint(key=symmetric_key, clock=lambda: fixed_now)
