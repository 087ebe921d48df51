"""
Text encodings for keys, digests and signatures.

Converts between bytes and hex, Base64 and the single-line PEM-like envelope
used for exported keys, and infers which of those a piece of text is.

Format inference is deliberately simple: the hex pattern is tested before the
Base64 pattern, so a Base64 string made only of ``[0-9a-fA-F]`` characters
(``"deadbeef"``, for instance) is decoded as hex.
"""

from __future__ import annotations

import base64
import binascii
import re
import struct
from enum import StrEnum

from msgauth.core.crypto.errors import InvalidEncodingError

_HEX_RE = re.compile(r"[a-fA-F0-9]+")
_BASE64_RE = re.compile(r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?")
_WHITESPACE_RE = re.compile(r"\s")

# Stripped in this order; each token carries a dash or space so it cannot
# occur inside a Base64 body.
_PEM_TOKENS = ("-BEGIN", "-END", " PRIVATE", " PUBLIC", "KEY-")

PRIVATE_KEY_LABEL = "PRIVATE KEY"
PUBLIC_KEY_LABEL = "PUBLIC KEY"

_INT32_RANGE = (-(2**31), 2**31 - 1)
_INT64_RANGE = (-(2**63), 2**63 - 1)


class BlobFormat(StrEnum):
    """Encoding inferred for a piece of text."""

    HEX = "hex"
    BASE64 = "base64"
    PEM = "pem"


# ---------------------------------------------------------------------------
# Hex / Base64
# ---------------------------------------------------------------------------


def bytes_to_hex(data: bytes | None) -> str | None:
    """Lower-case hex, two digits per byte."""
    if data is None:
        return None
    return data.hex()


def hex_to_bytes(text: str | None) -> bytes | None:
    """Decode hex text, accepting an optional ``0x`` prefix."""
    if text is None:
        return None
    value = text.strip()
    if not value:
        return b""
    if value.startswith("0x"):
        value = value[2:]
    if not _HEX_RE.fullmatch(value) or len(value) % 2:
        raise InvalidEncodingError(f"Invalid hexadecimal input: {text!r}")
    return bytes.fromhex(value)


def bytes_to_base64(data: bytes | None) -> str | None:
    if data is None:
        return None
    return base64.b64encode(data).decode("ascii")


def base64_to_bytes(text: str | None) -> bytes | None:
    """Decode standard padded Base64."""
    if text is None:
        return None
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncodingError(f"Invalid Base64 input: {text!r}") from exc


def base64_to_hex(text: str | None) -> str | None:
    return bytes_to_hex(base64_to_bytes(text))


def hex_to_base64(text: str | None) -> str | None:
    return bytes_to_base64(hex_to_bytes(text))


# ---------------------------------------------------------------------------
# Fixed-width numbers
# ---------------------------------------------------------------------------


def _check_range(value: int, bounds: tuple[int, int], width: str) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise InvalidEncodingError(f"{value} does not fit in a signed {width} integer")


def int_to_bytes(value: int) -> bytes:
    """4-byte big-endian two's complement."""
    _check_range(value, _INT32_RANGE, "32-bit")
    return struct.pack(">i", value)


def long_to_bytes(value: int) -> bytes:
    """8-byte big-endian two's complement."""
    _check_range(value, _INT64_RANGE, "64-bit")
    return struct.pack(">q", value)


def double_to_bytes(value: float) -> bytes:
    """8-byte big-endian IEEE-754 binary64."""
    return struct.pack(">d", value)


# ---------------------------------------------------------------------------
# PEM and format detection
# ---------------------------------------------------------------------------


def wrap_pem(label: str, der: bytes) -> str:
    """Wrap DER bytes as a single Base64 line between BEGIN/END markers.

    The body is not folded at 64 columns, so strict PEM parsers may refuse it;
    ``base64_or_hex_to_bytes`` reads it back.
    """
    body = base64.b64encode(der).decode("ascii")
    return f"-----BEGIN {label}-----\n{body}\n-----END {label}-----"


def parse_pem_key(text: str) -> str:
    """Strip PEM markers, dashes and whitespace, leaving the Base64 body.

    This is token replacement, not a PEM parser.
    """
    value = text.strip()
    for token in _PEM_TOKENS:
        value = value.replace(token, "")
    value = value.replace("-", "")
    return _WHITESPACE_RE.sub("", value)


def _is_hex(value: str) -> bool:
    return _HEX_RE.fullmatch(value) is not None


def _is_base64(value: str) -> bool:
    return _BASE64_RE.fullmatch(value) is not None


def base64_or_hex_to_bytes(text: str | None) -> bytes | None:
    """Decode hex, Base64 or PEM-wrapped Base64 text.

    Hex is tried first. Blank input decodes to ``None``.

    Raises
    ------
    InvalidEncodingError
        If the normalized text is neither hex nor Base64.
    """
    if text is None or not text.strip():
        return None

    value = parse_pem_key(text)
    if _is_hex(value):
        return hex_to_bytes(value)
    if _is_base64(value):
        return base64_to_bytes(value)
    raise InvalidEncodingError("Invalid input: not a valid hexadecimal or Base64 string")


def is_base64_or_hex(text: str | None) -> bool:
    if text is None or not text.strip():
        return False
    value = parse_pem_key(text)
    return _is_hex(value) or _is_base64(value)


def detect_format(text: str) -> BlobFormat:
    """Infer the encoding of ``text`` using the same precedence as decoding."""
    value = parse_pem_key(text)
    if "-----BEGIN " in text and value and (_is_hex(value) or _is_base64(value)):
        return BlobFormat.PEM
    if value and _is_hex(value):
        return BlobFormat.HEX
    if value and _is_base64(value):
        return BlobFormat.BASE64
    raise InvalidEncodingError("Invalid input: not a valid hexadecimal or Base64 string")
