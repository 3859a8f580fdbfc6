from ._claims_builder import ClaimsBuilder
from ._token_mint import TokenMint, assemble

__all__ = ["ClaimsBuilder", "TokenMint", "assemble"]
