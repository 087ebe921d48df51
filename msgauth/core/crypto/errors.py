"""Exception hierarchy for the crypto core."""

from __future__ import annotations


class CryptoError(Exception):
    """Base class for all message-authentication failures."""


class InvalidEncodingError(CryptoError, ValueError):
    """Raised when hex, Base64 or PEM text cannot be decoded."""


class AlgorithmUnavailableError(CryptoError):
    """Raised when the provider has no implementation for a named algorithm."""


class ProviderError(CryptoError):
    """Raised when the cryptographic provider fails outside of signing."""


class KeyReconstructionError(CryptoError, ValueError):
    """Raised when encoded key bytes cannot be turned into a key."""


class MissingKeyError(CryptoError):
    """Raised when an operation needs a key half the instance does not hold."""


class SigningError(CryptoError):
    """Raised when the provider rejects a signing operation."""


class EncryptionError(CryptoError):
    """Raised when ECIES encryption or decryption fails."""
