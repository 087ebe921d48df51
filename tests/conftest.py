"""
Pytest fixtures shared by the unit tests.
Keeps cached settings and MSGAUTH_* environment overrides from leaking between tests.
"""

import os
from collections.abc import Iterator

import pytest

from msgauth.core.config import get_settings
from msgauth.core.crypto.keys import KeyPair


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop MSGAUTH_* variables and reset the settings cache around each test."""
    for name in list(os.environ):
        if name.startswith("MSGAUTH_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def key_pair() -> KeyPair:
    """A freshly generated secp256k1 key pair."""
    return KeyPair.generate()


@pytest.fixture
def other_key_pair() -> KeyPair:
    """A second, unrelated secp256k1 key pair."""
    return KeyPair.generate()
