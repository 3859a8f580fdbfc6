from ._token_mint_error import TokenMintError


class ReservedClaimNameError(TokenMintError):
    """A custom claim uses the name of a registered claim."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Custom claim '{name}' collides with a registered claim. "
            f"Use the dedicated --{name} option instead."
        )
        self.name = name
