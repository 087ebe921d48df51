"""
Field-set signatures.

A field set is canonicalized with :func:`concatenate`, hashed with SHA-256 and
the digest is signed with a secp256k1 key. Keys and signatures cross the
API as text: hex, Base64 or PEM for keys, and hex (or Base64) for signatures.

Which bytes of the digest reach ECDSA is selected by ``digest_input``:

``raw``
    The 32 raw digest bytes. Used on both the signing and verifying side.
``hex-text``
    The UTF-8 bytes of the 64-character hex digest. Earlier releases signed
    this form but verified against the raw bytes, so their signatures only
    verify with this convention selected on the verifying side as well.

The default comes from ``Settings.signature_digest_input``.
"""

from __future__ import annotations

from typing import Any

from msgauth.core.config import DIGEST_INPUT_HEX_TEXT, DIGEST_INPUT_RAW, get_settings
from msgauth.core.crypto.canonicalization import concatenate
from msgauth.core.crypto.encoding import base64_or_hex_to_bytes, bytes_to_hex, hex_to_bytes
from msgauth.core.crypto.errors import InvalidEncodingError, KeyReconstructionError
from msgauth.core.crypto.hashing import sha256_hex
from msgauth.core.crypto.keys import KeyPair
from msgauth.core.crypto.verification import VerificationResult
from msgauth.core.logging import get_logger

logger = get_logger(__name__)

DIGEST_INPUTS = frozenset({DIGEST_INPUT_RAW, DIGEST_INPUT_HEX_TEXT})


def _resolve_digest_input(digest_input: str | None) -> str:
    mode = digest_input or get_settings().signature_digest_input
    if mode not in DIGEST_INPUTS:
        raise ValueError(f"Unsupported digest input: {mode}")
    return mode


def _message_bytes(hash_hex: str, digest_input: str) -> bytes:
    if hash_hex is None or not hash_hex.strip():
        raise InvalidEncodingError("Hash must not be empty")
    if digest_input == DIGEST_INPUT_HEX_TEXT:
        return hash_hex.encode("utf-8")
    return hex_to_bytes(hash_hex)


def fields_hash(*values: Any) -> str:
    """SHA-256 hex digest of the canonical form of ``values``."""
    return sha256_hex(concatenate(*values))


def sign(private_key: str, *values: Any, digest_input: str | None = None) -> str:
    """Sign a field set.

    Parameters
    ----------
    private_key:
        PKCS#8 private key as hex, Base64 or PEM text.
    values:
        Fields to canonicalize and hash.

    Returns
    -------
    str
        Hex-encoded DER signature.
    """
    return sign_hash(private_key, fields_hash(*values), digest_input=digest_input)


def sign_hash(private_key: str, hash_hex: str, *, digest_input: str | None = None) -> str:
    """Sign a precomputed hex digest.

    Raises
    ------
    ValueError
        If ``private_key`` is ``None``.
    InvalidEncodingError, KeyReconstructionError
        If the key or hash text cannot be decoded.
    SigningError
        If the provider rejects the operation.
    """
    if private_key is None:
        raise ValueError("Private key must not be None")

    mode = _resolve_digest_input(digest_input)
    message = _message_bytes(hash_hex, mode)
    signature = KeyPair.from_encoded(private_key=private_key).sign(message)
    logger.debug("fields_signed", digest_input=mode)
    return bytes_to_hex(signature)


def verify_signature(
    public_key: str,
    signature: str,
    *values: Any,
    digest_input: str | None = None,
) -> bool:
    """Check a field-set signature produced by :func:`sign`."""
    return verify_signature_hash(
        public_key, signature, fields_hash(*values), digest_input=digest_input
    )


def verify_signature_hash(
    public_key: str,
    signature: str,
    hash_hex: str,
    *,
    digest_input: str | None = None,
) -> bool:
    """Check a signature over a precomputed hex digest.

    Returns ``False`` for any failure, including undecodable input; use
    :func:`check_signature_hash` to tell those cases apart.
    """
    return check_signature_hash(
        public_key, signature, hash_hex, digest_input=digest_input
    ).is_valid


def check_signature(
    public_key: str,
    signature: str,
    *values: Any,
    digest_input: str | None = None,
) -> VerificationResult:
    return check_signature_hash(
        public_key, signature, fields_hash(*values), digest_input=digest_input
    )


def check_signature_hash(
    public_key: str,
    signature: str,
    hash_hex: str,
    *,
    digest_input: str | None = None,
) -> VerificationResult:
    """Check a signature over a precomputed hex digest.

    Raises
    ------
    ValueError
        If ``public_key`` or ``signature`` is ``None``, or ``digest_input`` is
        unknown. Every other problem is reported in the result.
    """
    if public_key is None or signature is None:
        raise ValueError("Public key and signature must not be None")

    mode = _resolve_digest_input(digest_input)
    try:
        message = _message_bytes(hash_hex, mode)
        signature_bytes = base64_or_hex_to_bytes(signature)
        key_pair = KeyPair.from_encoded(public_key=public_key)
    except (InvalidEncodingError, KeyReconstructionError) as exc:
        logger.debug("signature_input_malformed", error=str(exc))
        return VerificationResult.malformed(str(exc))

    if signature_bytes is None:
        return VerificationResult.malformed("Signature must not be empty")
    if not key_pair.can_verify:
        return VerificationResult.malformed("Public key must not be empty")

    result = key_pair.check(message, signature_bytes)
    logger.debug("signature_checked", status=str(result.status), digest_input=mode)
    return result
