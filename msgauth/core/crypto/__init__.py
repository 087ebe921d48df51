"""
Message-authentication primitives.

Pure library modules for signing and verifying field sets:
- **canonicalization**: pipe-delimited canonical form of field values
- **encoding**: hex, Base64 and PEM conversion with format inference
- **hashing**: SHA-256 / SHA3-256 digests and random identifiers
- **keys**: secp256k1 key pairs (ECDSA signatures, ECIES encryption)
- **signing**: the sign/verify API over canonicalized field sets
- **verification**: detailed verification outcomes
"""

from msgauth.core.crypto.canonicalization import FIELD_DELIMITER, concatenate
from msgauth.core.crypto.encoding import (
    BlobFormat,
    base64_or_hex_to_bytes,
    base64_to_bytes,
    base64_to_hex,
    bytes_to_base64,
    bytes_to_hex,
    detect_format,
    double_to_bytes,
    hex_to_base64,
    hex_to_bytes,
    int_to_bytes,
    is_base64_or_hex,
    long_to_bytes,
    parse_pem_key,
    wrap_pem,
)
from msgauth.core.crypto.errors import (
    AlgorithmUnavailableError,
    CryptoError,
    EncryptionError,
    InvalidEncodingError,
    KeyReconstructionError,
    MissingKeyError,
    ProviderError,
    SigningError,
)
from msgauth.core.crypto.hashing import (
    Digest,
    hash_bytes,
    hash_hex,
    sha3_bytes,
    sha3_hex,
    sha256_bytes,
    sha256_hex,
    uuid,
)
from msgauth.core.crypto.keys import KeyMaterial, KeyPair
from msgauth.core.crypto.providers import SECP256K1_CURVE, SHA3_256_ALGORITHM, SHA256_ALGORITHM
from msgauth.core.crypto.signing import (
    check_signature,
    check_signature_hash,
    fields_hash,
    sign,
    sign_hash,
    verify_signature,
    verify_signature_hash,
)
from msgauth.core.crypto.verification import VerificationResult, VerificationStatus

__all__ = [
    "FIELD_DELIMITER",
    "concatenate",
    "BlobFormat",
    "bytes_to_hex",
    "hex_to_bytes",
    "bytes_to_base64",
    "base64_to_bytes",
    "base64_to_hex",
    "hex_to_base64",
    "int_to_bytes",
    "long_to_bytes",
    "double_to_bytes",
    "parse_pem_key",
    "wrap_pem",
    "base64_or_hex_to_bytes",
    "is_base64_or_hex",
    "detect_format",
    "CryptoError",
    "InvalidEncodingError",
    "AlgorithmUnavailableError",
    "ProviderError",
    "KeyReconstructionError",
    "MissingKeyError",
    "SigningError",
    "EncryptionError",
    "Digest",
    "hash_bytes",
    "hash_hex",
    "sha256_bytes",
    "sha256_hex",
    "sha3_bytes",
    "sha3_hex",
    "uuid",
    "SHA256_ALGORITHM",
    "SHA3_256_ALGORITHM",
    "SECP256K1_CURVE",
    "KeyPair",
    "KeyMaterial",
    "fields_hash",
    "sign",
    "sign_hash",
    "verify_signature",
    "verify_signature_hash",
    "check_signature",
    "check_signature_hash",
    "VerificationResult",
    "VerificationStatus",
]
