"""Shared test fixtures for mux JWT signing."""

import base64

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from mux.core.settings import MuxSettings

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537


def _private_bytes(
    key: RSAPrivateKey,
    fmt: serialization.PrivateFormat,
    encoding: serialization.Encoding = serialization.Encoding.PEM,
) -> bytes:
    return key.private_bytes(
        encoding=encoding,
        format=fmt,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host MUX_* variables out of client defaults."""
    for name in ("TOKEN_ID", "TOKEN_SECRET", "SIGNING_KEY", "PRIVATE_KEY", "BASE_URL"):
        monkeypatch.delenv(f"MUX_{name}", raising=False)


@pytest.fixture(scope="session")
def rsa_key() -> RSAPrivateKey:
    """A session-wide RSA-2048 private key."""
    return rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_SIZE,
    )


@pytest.fixture(scope="session")
def other_rsa_key() -> RSAPrivateKey:
    """A second, unrelated RSA-2048 private key."""
    return rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_SIZE,
    )


@pytest.fixture(scope="session")
def pkcs8_pem(rsa_key: RSAPrivateKey) -> str:
    return _private_bytes(rsa_key, serialization.PrivateFormat.PKCS8).decode()


@pytest.fixture(scope="session")
def pkcs1_pem(rsa_key: RSAPrivateKey) -> str:
    return _private_bytes(
        rsa_key, serialization.PrivateFormat.TraditionalOpenSSL
    ).decode()


@pytest.fixture(scope="session")
def pkcs1_der(rsa_key: RSAPrivateKey) -> bytes:
    return _private_bytes(
        rsa_key,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.Encoding.DER,
    )


@pytest.fixture(scope="session")
def pkcs8_b64(pkcs8_pem: str) -> str:
    """PKCS#8 PEM wrapped in base64, as stored in MUX_PRIVATE_KEY."""
    return base64.b64encode(pkcs8_pem.encode()).decode()


@pytest.fixture(scope="session")
def public_pem(rsa_key: RSAPrivateKey) -> str:
    return (
        rsa_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


@pytest.fixture
def empty_settings() -> MuxSettings:
    """Settings with no signing defaults."""
    return MuxSettings()
