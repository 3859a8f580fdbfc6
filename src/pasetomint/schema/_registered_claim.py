from enum import Enum


class RegisteredClaim(str, Enum):
    """Registered claim names, in the order they are serialized."""

    ISSUER = "iss"
    SUBJECT = "sub"
    AUDIENCE = "aud"
    EXPIRATION = "exp"
    NOT_BEFORE = "nbf"
    ISSUED_AT = "iat"
    TOKEN_ID = "jti"


RESERVED_CLAIM_NAMES: frozenset[str] = frozenset(claim.value for claim in RegisteredClaim)
