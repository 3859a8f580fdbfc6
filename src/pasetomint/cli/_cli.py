"""Command line interface: ``pasetomint generate`` and ``pasetomint key``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from dotenv import load_dotenv

from pasetomint.exceptions import TokenMintError
from pasetomint.managers import KeyManager
from pasetomint.schema import ClaimSpec, CustomClaim
from pasetomint.services import TokenMint
from pasetomint.settings import Settings

logger = logging.getLogger(__name__)


def _custom_claim(text: str) -> CustomClaim:
    try:
        return CustomClaim.parse(text)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pasetomint",
        description="Mint PASETO v4.local tokens and symmetric keys.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Generate a paseto token")
    generate.add_argument(
        "key",
        nargs="?",
        default=None,
        help='Base64 encoded key, or "-" to read it from stdin '
        "(default: $PASETOMINT_KEY, else stdin)",
    )
    generate.add_argument("--iss", help="Issuer")
    generate.add_argument("--sub", help="Subject")
    generate.add_argument("--aud", help="Audience")
    expiry = generate.add_mutually_exclusive_group()
    expiry.add_argument("--exp", metavar="TIME", help="Expiry as an RFC 3339 time")
    expiry.add_argument(
        "--expires-in",
        metavar="DURATION",
        help="Relative expiry, for example 15m or 2h 30m",
    )
    generate.add_argument("--nbf", metavar="TIME", help="Not before")
    generate.add_argument("--iat", metavar="TIME", help="Issued at")
    generate.add_argument("--jti", help="Token identifier")
    generate.add_argument(
        "-c",
        "--claim",
        action="append",
        default=[],
        type=_custom_claim,
        metavar="KEY=VALUE",
        help="Custom claim; a bare KEY adds a null-valued claim (repeatable)",
    )
    generate.add_argument("--assertion", help="Implicit assertion")

    commands.add_parser("key", help="Generate a base64 encoded symmetric key")
    return parser


def _generate(
    args: argparse.Namespace,
    settings: Settings,
    stdin: TextIO | None,
) -> str:
    key_source = args.key if args.key is not None else settings.key_source
    key = KeyManager(stdin=stdin).resolve(key_source)
    spec = ClaimSpec(
        iss=args.iss if args.iss is not None else settings.issuer,
        sub=args.sub,
        aud=args.aud if args.aud is not None else settings.audience,
        exp=args.exp,
        nbf=args.nbf,
        iat=args.iat,
        jti=args.jti,
        expires_in=args.expires_in,
        assertion=args.assertion,
        claims=tuple(args.claim),
    )
    return TokenMint(key).generate_token(spec)


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    load_dotenv()
    settings = Settings.from_env()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=stderr,
        level="DEBUG" if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "generate":
            output = _generate(args, settings, stdin)
        else:
            output = KeyManager.encode(KeyManager.generate())
    except TokenMintError as error:
        logger.debug("Command %r failed", args.command, exc_info=True)
        print(f"error: {error}", file=stderr)
        return 1

    print(output, file=stdout)
    return 0
