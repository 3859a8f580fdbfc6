from ._token_mint_error import TokenMintError


class MalformedKeyError(TokenMintError):
    """Key material is not valid base64 or has the wrong length."""
