"""hush-jwt CLI — issue and verify tokens from the shell."""

import argparse
import json
import sys
from typing import Any

from hush_jwt.config import DEFAULT_TTL_SECONDS, JWTConfig
from hush_jwt.engine import TokenEngine
from hush_jwt.errors import JWTError


def _parse_claim(value: str) -> tuple[str, Any]:
    """Parse ``key=value``; the value is read as JSON when possible, else kept as text."""
    key, sep, raw = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"claim must be key=value, got '{value}'")
    try:
        return key, json.loads(raw)
    except json.JSONDecodeError:
        return key, raw


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hush-jwt", description="hush-jwt CLI")
    sub = parser.add_subparsers(dest="command")

    issue_cmd = sub.add_parser("issue", help="Issue a signed token")
    issue_cmd.add_argument("--secret", required=True, help="HMAC secret")
    issue_cmd.add_argument(
        "--ttl", type=int, default=DEFAULT_TTL_SECONDS, help="Token lifetime in seconds",
    )
    issue_cmd.add_argument(
        "--claim",
        action="append",
        default=[],
        type=_parse_claim,
        metavar="KEY=VALUE",
        help="Claim to embed (repeatable). Values are parsed as JSON when possible.",
    )
    issue_cmd.add_argument(
        "--no-bearer", action="store_true", help='Omit the "Bearer " prefix',
    )

    verify_cmd = sub.add_parser("verify", help="Verify a token and print its claims")
    verify_cmd.add_argument("--secret", required=True, help="HMAC secret")
    verify_cmd.add_argument("token", help='Token, with or without the "Bearer " prefix')

    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``hush-jwt`` console script."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "issue":
            engine = TokenEngine(JWTConfig(secret=args.secret, ttl=args.ttl))
            print(engine.issue(dict(args.claim), bearer=not args.no_bearer))
        elif args.command == "verify":
            engine = TokenEngine(JWTConfig(secret=args.secret))
            print(json.dumps(engine.verify(args.token), sort_keys=True))
    except JWTError as e:
        print(f"error: {e.code}: {e.message}", file=sys.stderr)
        sys.exit(1)
