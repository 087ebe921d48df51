"""
Process-wide algorithm registry.

Maps the algorithm names used at the API surface to the provider objects that
implement them. Both tables are read-only views built at import time; there is
no runtime registration.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from cryptography.hazmat.primitives.asymmetric import ec

from msgauth.core.crypto.errors import AlgorithmUnavailableError

SHA256_ALGORITHM = "SHA-256"
SHA3_256_ALGORITHM = "SHA3-256"
SECP256K1_CURVE = "secp256k1"

# API name -> hashlib name. Lookups are case-insensitive.
HASH_ALGORITHMS: MappingProxyType[str, str] = MappingProxyType(
    {
        "sha-256": "sha256",
        "sha256": "sha256",
        "sha3-256": "sha3_256",
        "sha3_256": "sha3_256",
        "sha-384": "sha384",
        "sha384": "sha384",
        "sha-512": "sha512",
        "sha512": "sha512",
        "sha3-512": "sha3_512",
        "sha3_512": "sha3_512",
    }
)

CURVES: MappingProxyType[str, type[ec.EllipticCurve]] = MappingProxyType(
    {
        SECP256K1_CURVE: ec.SECP256K1,
    }
)


def resolve_hash(algorithm: str) -> Callable[..., Any]:
    """Return a hashlib constructor for ``algorithm``.

    Raises
    ------
    AlgorithmUnavailableError
        If the name is unknown or the local OpenSSL build lacks it.
    """
    name = HASH_ALGORITHMS.get(algorithm.strip().lower())
    if name is None or name not in hashlib.algorithms_available:
        raise AlgorithmUnavailableError(f"{algorithm} algorithm not available")
    return getattr(hashlib, name)


def resolve_curve(curve_name: str) -> ec.EllipticCurve:
    """Return a curve instance for ``curve_name``."""
    curve_cls = CURVES.get(curve_name.strip().lower())
    if curve_cls is None:
        raise AlgorithmUnavailableError(f"{curve_name} curve not available")
    return curve_cls()
