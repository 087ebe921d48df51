"""
secp256k1 key material.

``KeyPair`` is an immutable value holding either or both halves of an EC key
pair. Signing uses ECDSA over SHA-256 with a random nonce, so repeated
signatures over the same data differ and all of them verify. Encryption is an
ECIES construction assembled from provider primitives:

    ephemeral point (65 bytes, uncompressed) || nonce (12 bytes) || AES-256-GCM ciphertext

with the AES key derived by HKDF-SHA256 from the ECDH shared secret, salted
with the ephemeral point.

``KeyMaterial`` is the mutable, single-owner holder for callers that need to
regenerate a key in place; it swaps whole ``KeyPair`` values under a lock.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
    load_der_private_key,
    load_der_public_key,
)

from msgauth.core.config import get_settings
from msgauth.core.crypto.encoding import (
    PRIVATE_KEY_LABEL,
    PUBLIC_KEY_LABEL,
    base64_or_hex_to_bytes,
    wrap_pem,
)
from msgauth.core.crypto.errors import (
    AlgorithmUnavailableError,
    EncryptionError,
    KeyReconstructionError,
    MissingKeyError,
    ProviderError,
    SigningError,
)
from msgauth.core.crypto.providers import resolve_curve
from msgauth.core.crypto.verification import VerificationResult
from msgauth.core.logging import get_logger

logger = get_logger(__name__)

_AES_KEY_BYTES = 32
_NONCE_BYTES = 12
_GCM_TAG_BYTES = 16


def _signature_algorithm() -> ec.ECDSA:
    return ec.ECDSA(hashes.SHA256())


def _point_size(curve: ec.EllipticCurve) -> int:
    return 1 + 2 * ((curve.key_size + 7) // 8)


def _derive_aes_key(shared_secret: bytes, ephemeral_point: bytes, info: bytes) -> bytes:
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=_AES_KEY_BYTES,
        salt=ephemeral_point,
        info=info,
    )
    return hkdf.derive(shared_secret)


def _kdf_info(info: bytes | None) -> bytes:
    if info is not None:
        return info
    return get_settings().ecies_kdf_info.encode("utf-8")


def _resolve_curve(curve_name: str | None) -> ec.EllipticCurve:
    return resolve_curve(curve_name or get_settings().curve_name)


def _check_curve(
    key: ec.EllipticCurvePrivateKey | ec.EllipticCurvePublicKey, curve: ec.EllipticCurve
) -> None:
    if key.curve.name != curve.name:
        raise KeyReconstructionError(f"Expected a {curve.name} key, got {key.curve.name}")


def _load_private_key(der: bytes, curve: ec.EllipticCurve) -> ec.EllipticCurvePrivateKey:
    try:
        key = load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyReconstructionError("Malformed PKCS#8 private key") from exc
    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise KeyReconstructionError("Expected an EC private key")
    _check_curve(key, curve)
    return key


def _load_public_key(der: bytes, curve: ec.EllipticCurve) -> ec.EllipticCurvePublicKey:
    try:
        key = load_der_public_key(der)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyReconstructionError("Malformed SubjectPublicKeyInfo public key") from exc
    if not isinstance(key, ec.EllipticCurvePublicKey):
        raise KeyReconstructionError("Expected an EC public key")
    _check_curve(key, curve)
    return key


@dataclass(frozen=True)
class KeyPair:
    """An EC key pair where either half may be absent.

    A pair with only ``private_key`` can sign and decrypt; a pair with only
    ``public_key`` can verify and encrypt.
    """

    private_key: ec.EllipticCurvePrivateKey | None = None
    public_key: ec.EllipticCurvePublicKey | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def generate(cls, curve_name: str | None = None) -> KeyPair:
        """Generate a fresh pair on ``curve_name`` (default from settings)."""
        curve = _resolve_curve(curve_name)
        try:
            private_key = ec.generate_private_key(curve)
        except UnsupportedAlgorithm as exc:
            raise AlgorithmUnavailableError(
                f"{curve.name} is not supported by the provider"
            ) from exc
        except Exception as exc:
            raise ProviderError("Error generating EC keys") from exc
        logger.debug("ec_keypair_generated", curve=curve.name)
        return cls(private_key=private_key, public_key=private_key.public_key())

    @classmethod
    def from_der(
        cls,
        private_der: bytes | None = None,
        public_der: bytes | None = None,
        *,
        curve_name: str | None = None,
    ) -> KeyPair:
        """Rebuild key halves from PKCS#8 / SubjectPublicKeyInfo DER bytes.

        Raises
        ------
        KeyReconstructionError
            If either encoding is malformed, not EC, or on another curve.
        """
        curve = _resolve_curve(curve_name)
        private_key = _load_private_key(private_der, curve) if private_der is not None else None
        public_key = _load_public_key(public_der, curve) if public_der is not None else None
        logger.debug(
            "ec_keypair_reconstructed",
            has_private=private_key is not None,
            has_public=public_key is not None,
        )
        return cls(private_key=private_key, public_key=public_key)

    @classmethod
    def from_encoded(
        cls,
        private_key: str | None = None,
        public_key: str | None = None,
        *,
        curve_name: str | None = None,
    ) -> KeyPair:
        """Rebuild key halves from hex, Base64 or PEM text."""
        return cls.from_der(
            base64_or_hex_to_bytes(private_key),
            base64_or_hex_to_bytes(public_key),
            curve_name=curve_name,
        )

    @property
    def can_sign(self) -> bool:
        return self.private_key is not None

    @property
    def can_verify(self) -> bool:
        return self.public_key is not None

    def _require_private(self, operation: str) -> ec.EllipticCurvePrivateKey:
        if self.private_key is None:
            raise MissingKeyError(f"Private key is required for {operation}")
        return self.private_key

    def _require_public(self, operation: str) -> ec.EllipticCurvePublicKey:
        if self.public_key is None:
            raise MissingKeyError(f"Public key is required for {operation}")
        return self.public_key

    # ------------------------------------------------------------------
    # Signatures
    # ------------------------------------------------------------------

    def sign(self, data: bytes) -> bytes:
        """Return a DER-encoded ECDSA/SHA-256 signature over ``data``."""
        private_key = self._require_private("signing")
        try:
            return private_key.sign(data, _signature_algorithm())
        except Exception as exc:
            raise SigningError("Error signing data") from exc

    def check(self, data: bytes, signature: bytes) -> VerificationResult:
        """Verify ``signature`` over ``data`` and report why it failed, if it did."""
        if self.public_key is None:
            return VerificationResult.malformed("public key is not available")
        try:
            self.public_key.verify(signature, data, _signature_algorithm())
        except InvalidSignature:
            return VerificationResult.invalid()
        except Exception as exc:
            logger.debug("signature_check_failed", error_type=type(exc).__name__)
            return VerificationResult.malformed(str(exc) or type(exc).__name__)
        return VerificationResult.valid()

    def verify(self, data: bytes, signature: bytes) -> bool:
        """``True`` only for a matching signature; never raises."""
        return self.check(data, signature).is_valid

    # ------------------------------------------------------------------
    # ECIES
    # ------------------------------------------------------------------

    def encrypt(self, data: bytes, *, info: bytes | None = None) -> bytes:
        """Encrypt ``data`` to the public half."""
        public_key = self._require_public("encryption")
        try:
            ephemeral = ec.generate_private_key(public_key.curve)
            shared_secret = ephemeral.exchange(ec.ECDH(), public_key)
            point = ephemeral.public_key().public_bytes(
                Encoding.X962, PublicFormat.UncompressedPoint
            )
            key = _derive_aes_key(shared_secret, point, _kdf_info(info))
            nonce = os.urandom(_NONCE_BYTES)
            ciphertext = AESGCM(key).encrypt(nonce, data, point)
        except Exception as exc:
            raise EncryptionError("Error encrypting data") from exc
        return point + nonce + ciphertext

    def decrypt(self, data: bytes, *, info: bytes | None = None) -> bytes:
        """Decrypt an ``encrypt`` payload with the private half."""
        private_key = self._require_private("decryption")
        point_size = _point_size(private_key.curve)
        if len(data) < point_size + _NONCE_BYTES + _GCM_TAG_BYTES:
            raise EncryptionError("corrupted ECIES payload (too short)")
        point = data[:point_size]
        nonce = data[point_size : point_size + _NONCE_BYTES]
        ciphertext = data[point_size + _NONCE_BYTES :]
        try:
            ephemeral = ec.EllipticCurvePublicKey.from_encoded_point(private_key.curve, point)
            shared_secret = private_key.exchange(ec.ECDH(), ephemeral)
            key = _derive_aes_key(shared_secret, point, _kdf_info(info))
            return AESGCM(key).decrypt(nonce, ciphertext, point)
        except Exception as exc:
            raise EncryptionError(
                "decryption failed: key mismatch or corrupted ciphertext"
            ) from exc

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def private_key_bytes(self) -> bytes:
        """PKCS#8 DER encoding of the private half."""
        return self._require_private("export").private_bytes(
            encoding=Encoding.DER,
            format=PrivateFormat.PKCS8,
            encryption_algorithm=NoEncryption(),
        )

    def public_key_bytes(self) -> bytes:
        """SubjectPublicKeyInfo DER encoding of the public half."""
        return self._require_public("export").public_bytes(
            encoding=Encoding.DER,
            format=PublicFormat.SubjectPublicKeyInfo,
        )

    def export_private_key_pem(self) -> str:
        return wrap_pem(PRIVATE_KEY_LABEL, self.private_key_bytes())

    def export_public_key_pem(self) -> str:
        return wrap_pem(PUBLIC_KEY_LABEL, self.public_key_bytes())


class KeyMaterial:
    """Single-owner holder of the current ``KeyPair``.

    Every operation works on a snapshot of the pair, so ``regenerate`` running
    on another thread never mixes halves from two different pairs.
    """

    def __init__(self, key_pair: KeyPair | None = None) -> None:
        self._lock = threading.Lock()
        self._key_pair = key_pair if key_pair is not None else KeyPair.generate()

    @classmethod
    def reconstruct(
        cls,
        private_key_bytes: bytes | None = None,
        public_key_bytes: bytes | None = None,
    ) -> KeyMaterial:
        return cls(KeyPair.from_der(private_key_bytes, public_key_bytes))

    @property
    def key_pair(self) -> KeyPair:
        with self._lock:
            return self._key_pair

    def regenerate(self) -> KeyPair:
        """Replace the held pair with a freshly generated one and return it."""
        fresh = KeyPair.generate()
        with self._lock:
            self._key_pair = fresh
        return fresh

    def sign(self, data: bytes) -> bytes:
        return self.key_pair.sign(data)

    def verify(self, data: bytes, signature: bytes) -> bool:
        return self.key_pair.verify(data, signature)

    def encrypt(self, data: bytes) -> bytes:
        return self.key_pair.encrypt(data)

    def decrypt(self, data: bytes) -> bytes:
        return self.key_pair.decrypt(data)

    def private_key_bytes(self) -> bytes:
        return self.key_pair.private_key_bytes()

    def public_key_bytes(self) -> bytes:
        return self.key_pair.public_key_bytes()

    def export_private_key_pem(self) -> str:
        return self.key_pair.export_private_key_pem()

    def export_public_key_pem(self) -> str:
        return self.key_pair.export_public_key_pem()
