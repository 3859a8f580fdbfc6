from ._token_mint_error import TokenMintError


class PrimitiveFailureError(TokenMintError):
    """The encryption primitive refused to seal the token."""
