from ._token_mint_error import TokenMintError


class InvalidDurationError(TokenMintError):
    """Relative expiry text is not a valid duration."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid duration {value!r}: {reason}")
        self.value = value
        self.reason = reason
