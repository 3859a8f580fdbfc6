from ._token_mint_error import TokenMintError
from ._malformed_key_error import MalformedKeyError
from ._invalid_timestamp_error import InvalidTimestampError
from ._invalid_duration_error import InvalidDurationError
from ._reserved_claim_name_error import ReservedClaimNameError
from ._primitive_failure_error import PrimitiveFailureError

__all__ = [
    "TokenMintError",
    "MalformedKeyError",
    "InvalidTimestampError",
    "InvalidDurationError",
    "ReservedClaimNameError",
    "PrimitiveFailureError",
]
