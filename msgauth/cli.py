"""Command-line entry point for key generation, hashing, signing and verification."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path

from msgauth.core.config import DIGEST_INPUT_HEX_TEXT, DIGEST_INPUT_RAW
from msgauth.core.crypto.canonicalization import concatenate
from msgauth.core.crypto.errors import CryptoError
from msgauth.core.crypto.hashing import uuid
from msgauth.core.crypto.keys import KeyPair
from msgauth.core.crypto.signing import check_signature, fields_hash, sign
from msgauth.core.logging import configure_logging


def _add_key_arguments(parser: argparse.ArgumentParser, *, kind: str) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--key", help=f"{kind} key as hex, Base64 or PEM text.")
    group.add_argument("--key-file", type=Path, help=f"File holding the {kind} key.")


def _add_digest_input_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--digest-input",
        choices=[DIGEST_INPUT_RAW, DIGEST_INPUT_HEX_TEXT],
        default=None,
        help="Digest bytes fed to ECDSA (defaults to MSGAUTH_SIGNATURE_DIGEST_INPUT).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="msgauth",
        description="Sign and verify canonicalized field sets with secp256k1 keys.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("keygen", help="Generate a secp256k1 key pair as PEM text.")
    commands.add_parser("uuid", help="Print a random version-4 UUID.")

    hash_parser = commands.add_parser("hash", help="Show the canonical form and its SHA-256.")
    hash_parser.add_argument("fields", nargs="*")

    sign_parser = commands.add_parser("sign", help="Sign a field set.")
    _add_key_arguments(sign_parser, kind="Private")
    _add_digest_input_argument(sign_parser)
    sign_parser.add_argument("fields", nargs="*")

    verify_parser = commands.add_parser("verify", help="Verify a field-set signature.")
    _add_key_arguments(verify_parser, kind="Public")
    verify_parser.add_argument("--signature", required=True, help="Signature as hex or Base64.")
    _add_digest_input_argument(verify_parser)
    verify_parser.add_argument("fields", nargs="*")

    return parser


def _read_key(args: argparse.Namespace) -> str:
    if args.key_file is not None:
        return args.key_file.read_text(encoding="utf-8")
    return str(args.key)


def _run(args: argparse.Namespace) -> tuple[dict[str, object], int]:
    if args.command == "keygen":
        key_pair = KeyPair.generate()
        return {
            "private_key": key_pair.export_private_key_pem(),
            "public_key": key_pair.export_public_key_pem(),
        }, 0
    if args.command == "uuid":
        return {"uuid": uuid()}, 0
    if args.command == "hash":
        return {"canonical": concatenate(*args.fields), "hash": fields_hash(*args.fields)}, 0
    if args.command == "sign":
        signature = sign(_read_key(args), *args.fields, digest_input=args.digest_input)
        return {"hash": fields_hash(*args.fields), "signature": signature}, 0

    result = check_signature(
        _read_key(args), args.signature, *args.fields, digest_input=args.digest_input
    )
    summary: dict[str, object] = {"valid": result.is_valid, "status": str(result.status)}
    if result.reason:
        summary["reason"] = result.reason
    return summary, 0 if result.is_valid else 1


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        configure_logging()
        summary, exit_code = _run(args)
    except (CryptoError, ValueError, OSError) as exc:
        summary, exit_code = {"error": str(exc)}, 2
    print(json.dumps(summary, indent=2))
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
