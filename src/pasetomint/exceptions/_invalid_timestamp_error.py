from ._token_mint_error import TokenMintError


class InvalidTimestampError(TokenMintError):
    """A time claim could not be parsed as an absolute RFC 3339 instant."""

    def __init__(self, claim: str, value: str) -> None:
        super().__init__(
            f"Invalid timestamp for '{claim}': {value!r}. "
            "Expected an RFC 3339 time with an offset, for example:\n\n"
            "    2025-08-01T12:00:00Z"
        )
        self.claim = claim
        self.value = value
