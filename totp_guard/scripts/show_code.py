#!/usr/bin/env python
"""CLI helper to print, verify or provision TOTP codes for a Base32 secret."""

from __future__ import annotations

import argparse
import os
import sys

from totp_guard.core.config import settings
from totp_guard.core.errors import InvalidInputError
from totp_guard.core.logging_config import configure_logging
from totp_guard.services.totp_service import Totp


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="totp-guard")
    parser.add_argument("--secret", help="Base32 secret (defaults to $TOTP_SECRET)")
    parser.add_argument("--at", type=int, help="Unix timestamp to derive the code for")
    parser.add_argument("--verify", metavar="CODE", help="check a code instead of printing one")
    parser.add_argument("--window", type=int, help="steps accepted on each side when verifying")
    parser.add_argument("--uri", action="store_true", help="print the provisioning URI")
    parser.add_argument("--issuer", default=settings.ISSUER)
    parser.add_argument("--account")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    secret = args.secret or os.getenv("TOTP_SECRET")
    if not secret:
        print("[error] no secret given – pass --secret or set TOTP_SECRET", file=sys.stderr)
        return 2

    try:
        totp = Totp.from_base32(secret, window=args.window)

        if args.uri:
            if not args.account:
                print("[error] --uri requires --account", file=sys.stderr)
                return 2
            print(totp.key_uri(args.issuer or "", args.account))
            return 0

        if args.verify is not None:
            valid = totp.verify(args.verify, for_time=args.at)
            print("valid" if valid else "invalid")
            return 0 if valid else 1
    except InvalidInputError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 2

    print(totp.now() if args.at is None else totp.at(args.at))
    return 0


if __name__ == "__main__":
    sys.exit(main())
