"""Signing key id resolution and private key normalization."""

import asyncio
import base64
import binascii
import logging
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from mux.crypto.errors import (
    PRIVATE_KEY_REQUIRED_MESSAGE,
    SIGNING_KEY_REQUIRED_MESSAGE,
    ConfigurationError,
    KeyFormatError,
)
from mux.crypto.types import (
    KEY_HANDLE_TYPES,
    ClientDefaults,
    KeyMaterial,
    MuxJWTSignOptions,
    ParsedKey,
    PemText,
    PrivateKeyInput,
    RawKeyBytes,
    SigningKey,
)

logger = logging.getLogger(__name__)

PEM_BEGIN = "-----BEGIN"
PKCS1_BEGIN = "-----BEGIN RSA PRIVATE"


def get_signing_key(client: ClientDefaults, options: MuxJWTSignOptions) -> str:
    """Return the key id to sign with: explicit option, then client default."""
    if options.key_id:
        logger.debug("Using signing key id from call options")
        return options.key_id
    if client.jwt_signing_key:
        logger.debug("Using signing key id from client defaults")
        return client.jwt_signing_key
    raise ConfigurationError(SIGNING_KEY_REQUIRED_MESSAGE)


def classify_key_material(value: PrivateKeyInput) -> KeyMaterial:
    """Tag raw key input once so later steps dispatch on its variant."""
    if isinstance(value, KEY_HANDLE_TYPES):
        return ParsedKey(key=value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return RawKeyBytes(data=bytes(value))
    if isinstance(value, str):
        return PemText(text=value)
    raise KeyFormatError()


async def load_key_material(
    client: ClientDefaults, options: MuxJWTSignOptions
) -> KeyMaterial:
    """Pick exactly one key material source, first present wins."""
    if options.key_secret:
        logger.debug("Using private key from key_secret option")
        value = options.key_secret
    elif options.key_file_path:
        logger.debug("Reading private key from %s", options.key_file_path)
        path = Path(options.key_file_path)
        value = await asyncio.to_thread(path.read_text, encoding="utf-8")
    elif client.jwt_private_key:
        logger.debug("Using private key from client defaults")
        value = client.jwt_private_key
    else:
        raise ConfigurationError(PRIVATE_KEY_REQUIRED_MESSAGE)
    return classify_key_material(value)


def unwrap_pem_text(text: str) -> str:
    """Return PEM text from direct or base64-encoded PEM input."""
    text = text.strip()
    if text.startswith(PEM_BEGIN):
        return text
    # accept unpadded and URL-safe base64
    text = text.replace("-", "+").replace("_", "/")
    text += "=" * (-len(text) % 4)
    try:
        decoded = base64.b64decode(text).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise KeyFormatError() from exc
    if decoded.startswith(PEM_BEGIN):
        return decoded
    raise KeyFormatError()


def pkcs1_to_pkcs8_pem(pkcs1: bytes) -> str:
    """Rewrap a PKCS#1 RSA private key (PEM or DER bytes) as PKCS#8 PEM."""
    try:
        if pkcs1.lstrip().startswith(PEM_BEGIN.encode()):
            key = serialization.load_pem_private_key(pkcs1, password=None)
        else:
            key = serialization.load_der_private_key(pkcs1, password=None)
    except (ValueError, TypeError) as exc:
        raise KeyFormatError() from exc
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


def import_pkcs8(pem: str) -> RSAPrivateKey:
    """Import PKCS#8 PEM text as an RSA key for RS256 signing."""
    try:
        key = serialization.load_pem_private_key(pem.encode(), password=None)
    except (ValueError, TypeError) as exc:
        raise KeyFormatError() from exc
    if not isinstance(key, RSAPrivateKey):
        raise KeyFormatError()
    return key


def normalize_private_key(material: KeyMaterial) -> SigningKey:
    """Turn classified key material into a key handle for the signer."""
    if isinstance(material, ParsedKey):
        return material.key
    if isinstance(material, RawKeyBytes):
        return import_pkcs8(pkcs1_to_pkcs8_pem(material.data))
    pem = unwrap_pem_text(material.text)
    if pem.startswith(PKCS1_BEGIN):
        pem = pkcs1_to_pkcs8_pem(pem.encode())
    return import_pkcs8(pem)


async def get_private_key(
    client: ClientDefaults, options: MuxJWTSignOptions
) -> SigningKey:
    """Resolve and normalize the private key for one signing call."""
    material = await load_key_material(client, options)
    return normalize_private_key(material)
