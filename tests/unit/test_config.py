"""Unit tests for settings loading and validation."""

from __future__ import annotations

import warnings

import pytest
from pydantic import ValidationError

from msgauth.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.environment == "development"
    assert settings.log_level == "INFO"
    assert settings.curve_name == "secp256k1"
    assert settings.signature_digest_input == "raw"
    assert settings.ecies_kdf_info == "msgauth-ecies-v1"
    assert settings.allow_legacy_digest_input is False


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MSGAUTH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MSGAUTH_ECIES_KDF_INFO", "other-label")
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.ecies_kdf_info == "other-label"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_unknown_curve_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(curve_name="secp256r1")


def test_unknown_digest_input_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(signature_digest_input="base64")


def test_hex_text_warns_in_development() -> None:
    """Selecting the legacy digest convention emits a warning."""
    with warnings.catch_warnings(record=True) as w:
        warnings.simplefilter("always")
        Settings(signature_digest_input="hex-text")
    assert any("hex-text" in str(x.message) for x in w)


def test_raw_does_not_warn() -> None:
    with warnings.catch_warnings(record=True) as w:
        warnings.simplefilter("always")
        Settings(signature_digest_input="raw")
    assert not [x for x in w if "hex-text" in str(x.message)]


def test_production_rejects_hex_text() -> None:
    with pytest.raises(ValueError, match="allow_legacy_digest_input"):
        Settings(environment="production", signature_digest_input="hex-text")


def test_production_allows_hex_text_when_opted_in() -> None:
    with warnings.catch_warnings(record=True):
        warnings.simplefilter("always")
        settings = Settings(
            environment="production",
            signature_digest_input="hex-text",
            allow_legacy_digest_input=True,
        )
    assert settings.signature_digest_input == "hex-text"
