from ._registered_claim import RESERVED_CLAIM_NAMES, RegisteredClaim
from ._custom_claim import CustomClaim
from ._claim_spec import ClaimSpec
from ._expiry import AbsoluteExpiry, Expiry, NonExpiring, RelativeExpiry
from ._claim_set import ClaimSet
from ._symmetric_key import KEY_SIZE, SymmetricKey

__all__ = [
    "RESERVED_CLAIM_NAMES",
    "RegisteredClaim",
    "CustomClaim",
    "ClaimSpec",
    "AbsoluteExpiry",
    "RelativeExpiry",
    "NonExpiring",
    "Expiry",
    "ClaimSet",
    "KEY_SIZE",
    "SymmetricKey",
]
