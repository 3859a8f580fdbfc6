from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from os import environ

ENV_PREFIX = "PASETOMINT_"
DEFAULT_LOG_LEVEL = "WARNING"
STDIN_SENTINEL = "-"


@dataclass(frozen=True)
class Settings:
    """
    Settings for key sourcing, claim defaults and logging.

    Attributes:
        key_source (str): Base64 key, or "-" to read it from stdin (default: "-").
        issuer (str | None): Issuer used when none is given explicitly.
        audience (str | None): Audience used when none is given explicitly.
        log_level (str): Logging level name (default: "WARNING").

    Example:
    ```
        settings = Settings(
            key_source="-",
            issuer="my-app",
            audience="my-service",
        )
    ```
    """

    key_source: str = STDIN_SENTINEL
    issuer: str | None = None
    audience: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """
        Example environment:
        - PASETOMINT_KEY = "base64 encoded 32 byte key"
        - PASETOMINT_ISSUER = "my-app"
        - PASETOMINT_AUDIENCE = "my-service"
        - PASETOMINT_LOG_LEVEL = "DEBUG"
        """
        source = environ if env is None else env
        return cls(
            key_source=source.get(f"{ENV_PREFIX}KEY") or STDIN_SENTINEL,
            issuer=source.get(f"{ENV_PREFIX}ISSUER") or None,
            audience=source.get(f"{ENV_PREFIX}AUDIENCE") or None,
            log_level=_log_level(source.get(f"{ENV_PREFIX}LOG_LEVEL")),
        )


def _log_level(value: str | None) -> str:
    """Upper-cased level name, or the default when unset or unknown."""
    level = (value or DEFAULT_LOG_LEVEL).upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level
