class TokenMintError(Exception):
    """Base class for every error raised while minting a token."""
