"""
Library configuration using Pydantic Settings.
All configuration is loaded from ``MSGAUTH_`` environment variables with sensible defaults.
"""

import warnings
from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DIGEST_INPUT_RAW = "raw"
DIGEST_INPUT_HEX_TEXT = "hex-text"


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Only the knobs that change signing behaviour live here; key material is
    always passed explicitly by the caller.
    """

    model_config = SettingsConfigDict(
        env_prefix="MSGAUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Core Settings
    # ==========================================================================
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ==========================================================================
    # Signature Settings
    # ==========================================================================
    curve_name: Literal["secp256k1"] = Field(
        default="secp256k1",
        description="Elliptic curve used for every generated or reconstructed key",
    )
    signature_digest_input: Literal["raw", "hex-text"] = Field(
        default=DIGEST_INPUT_RAW,
        description=(
            "Bytes fed to ECDSA for a field hash: the raw 32 digest bytes, or the "
            "UTF-8 text of the hex digest (legacy artifacts)."
        ),
    )
    allow_legacy_digest_input: bool = Field(
        default=False,
        description="Permit the hex-text digest convention in production",
    )

    # ==========================================================================
    # ECIES Settings
    # ==========================================================================
    ecies_kdf_info: str = Field(
        default="msgauth-ecies-v1",
        min_length=1,
        description="HKDF info label binding derived keys to this scheme",
    )

    @model_validator(mode="after")
    def _validate_digest_input(self) -> Self:
        """Keep the legacy hex-text convention out of production by default."""
        if self.signature_digest_input != DIGEST_INPUT_HEX_TEXT:
            return self
        if self.environment == "production" and not self.allow_legacy_digest_input:
            raise ValueError(
                "signature_digest_input=hex-text requires allow_legacy_digest_input "
                "in production environment"
            )
        warnings.warn(
            "signature_digest_input is hex-text; signatures use the legacy "
            "convention and are not interchangeable with raw-digest signatures.",
            UserWarning,
            stacklevel=2,
        )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings.

    Using lru_cache ensures settings are loaded once and reused,
    avoiding repeated environment variable parsing.
    """
    return Settings()
