"""
Signature verification outcomes.

``bool`` answers from the verify functions collapse every failure to
``False``. The result type here keeps the distinction between a signature
that does not match and input that could not be decoded at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class VerificationStatus(StrEnum):
    VALID = "valid"
    INVALID_SIGNATURE = "invalid-signature"
    MALFORMED_INPUT = "malformed-input"


@dataclass(frozen=True)
class VerificationResult:
    """Result of checking one signature.

    Attributes
    ----------
    status:
        Outcome category.
    reason:
        Human-readable detail for non-valid outcomes, or ``None``.
    """

    status: VerificationStatus
    reason: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.status is VerificationStatus.VALID

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def valid(cls) -> VerificationResult:
        return cls(VerificationStatus.VALID)

    @classmethod
    def invalid(cls, reason: str = "signature does not match") -> VerificationResult:
        return cls(VerificationStatus.INVALID_SIGNATURE, reason)

    @classmethod
    def malformed(cls, reason: str) -> VerificationResult:
        return cls(VerificationStatus.MALFORMED_INPUT, reason)
