"""Digest helpers and random identifiers."""

from __future__ import annotations

import uuid as _uuid
from dataclasses import dataclass

from msgauth.core.crypto.providers import (
    SHA3_256_ALGORITHM,
    SHA256_ALGORITHM,
    resolve_hash,
)


@dataclass(frozen=True, slots=True)
class Digest:
    """Output of a named hash function."""

    algorithm: str
    value: bytes

    def hex(self) -> str:
        return self.value.hex()

    def __len__(self) -> int:
        return len(self.value)


def _to_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def hash_bytes(data: bytes | str, algorithm: str) -> Digest:
    """Hash ``data`` with the named algorithm.

    Parameters
    ----------
    data:
        Bytes to hash; strings are hashed as UTF-8.
    algorithm:
        Algorithm name such as ``"SHA-256"`` or ``"SHA3-256"``.

    Raises
    ------
    AlgorithmUnavailableError
        If the provider has no such algorithm.
    """
    hasher = resolve_hash(algorithm)
    return Digest(algorithm=algorithm, value=hasher(_to_bytes(data)).digest())


def hash_hex(data: bytes | str, algorithm: str) -> str:
    return hash_bytes(data, algorithm).hex()


def sha256_bytes(data: bytes | str) -> bytes:
    return hash_bytes(data, SHA256_ALGORITHM).value


def sha256_hex(data: bytes | str) -> str:
    return hash_hex(data, SHA256_ALGORITHM)


def sha3_bytes(data: bytes | str) -> bytes:
    return hash_bytes(data, SHA3_256_ALGORITHM).value


def sha3_hex(data: bytes | str) -> str:
    return hash_hex(data, SHA3_256_ALGORITHM)


def uuid() -> str:
    """Random version-4 UUID in canonical text form.

    An opaque unique token; never use it as key material.
    """
    return str(_uuid.uuid4())
