from pasetomint.exceptions import TokenMintError
from pasetomint.managers import KeyManager
from pasetomint.schema import ClaimSet, ClaimSpec, CustomClaim, SymmetricKey
from pasetomint.services import ClaimsBuilder, TokenMint, assemble
from pasetomint.settings import Settings

__all__ = [
    "TokenMintError",
    "KeyManager",
    "ClaimSet",
    "ClaimSpec",
    "CustomClaim",
    "SymmetricKey",
    "ClaimsBuilder",
    "TokenMint",
    "assemble",
    "Settings",
]
