from __future__ import annotations

import logging
import sys
from typing import TextIO

from pasetomint.exceptions import MalformedKeyError
from pasetomint.schema import SymmetricKey
from pasetomint.settings import STDIN_SENTINEL

logger = logging.getLogger(__name__)


class KeyManager:
    """
    Resolves v4.local symmetric keys from caller input and generates new ones.

    Keys are accepted as standard base64 text, either given directly or read
    from stdin when the source is "-".
    """

    def __init__(self, stdin: TextIO | None = None) -> None:
        self._stdin = stdin

    def resolve(self, source: str) -> SymmetricKey:
        """Decode a key from ``source``; raises MalformedKeyError on bad input."""
        if source == STDIN_SENTINEL:
            logger.debug("Reading symmetric key from stdin")
            stream = self._stdin if self._stdin is not None else sys.stdin
            try:
                encoded = stream.read().strip()
            except (UnicodeDecodeError, OSError) as error:
                raise MalformedKeyError(f"Could not read key from stdin: {error}") from error
        else:
            logger.debug("Using symmetric key given on the command line")
            encoded = source
        return SymmetricKey.from_base64(encoded)

    @staticmethod
    def generate() -> SymmetricKey:
        logger.debug("Generating new symmetric key")
        return SymmetricKey.generate()

    @staticmethod
    def encode(key: SymmetricKey) -> str:
        return key.to_base64()
