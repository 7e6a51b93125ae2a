"""Type definitions for key material, signing options, and claims."""

from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Annotated, Any, Literal, Protocol

from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePrivateKey
from cryptography.hazmat.primitives.asymmetric.ed448 import Ed448PrivateKey
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from pydantic import BaseModel, ConfigDict, Field

SigningKey = (
    RSAPrivateKey | EllipticCurvePrivateKey | Ed25519PrivateKey | Ed448PrivateKey
)
KEY_HANDLE_TYPES = (
    RSAPrivateKey,
    EllipticCurvePrivateKey,
    Ed25519PrivateKey,
    Ed448PrivateKey,
)

PrivateKeyInput = str | bytes | SigningKey
TimeValue = int | str | datetime | timedelta


class ClientDefaults(Protocol):
    """Long-lived signing defaults held by a client instance."""

    jwt_signing_key: str | None
    jwt_private_key: PrivateKeyInput | None


class PemText(BaseModel):
    """Key material supplied as text: PEM or base64-encoded PEM."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class RawKeyBytes(BaseModel):
    """Key material supplied as a byte buffer."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bytes"] = "bytes"
    data: bytes


class ParsedKey(BaseModel):
    """An already-parsed private key object."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["parsed"] = "parsed"
    key: Any


KeyMaterial = Annotated[
    PemText | RawKeyBytes | ParsedKey, Field(discriminator="kind")
]


class SignOptions(BaseModel):
    """Header and registered-claim options for a single token."""

    model_config = ConfigDict(frozen=True)

    algorithm: str | None = None
    issuer: str | None = None
    subject: str | None = None
    audience: str | list[str] | None = None
    not_before: TimeValue | None = None
    expires_in: TimeValue | None = None
    keyid: str | None = None


class MuxJWTSignOptions(BaseModel):
    """Per-call key selection and token options for the jwt resource.

    ``type`` is a single media type, or for ``sign_playback_id`` a list of
    types and ``(type, params)`` pairs to sign several tokens at once.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key_id: str | None = None
    key_secret: PrivateKeyInput | None = None
    key_file_path: str | None = None
    type: str | list[str | tuple[str, dict[str, Any]]] | None = None
    expiration: TimeValue | None = None
    params: Mapping[str, Any] | None = None
