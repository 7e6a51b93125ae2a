"""Error types raised while resolving keys and signing tokens."""

KEY_FORMAT_ERROR_MESSAGE = (
    "Invalid private key format: expected PEM text or base64-encoded PEM"
)

SIGNING_KEY_REQUIRED_MESSAGE = (
    "Signing key required; pass a key_id option to mux.jwt.sign_*(), "
    "a jwt_signing_key argument to Mux(), "
    "or set the MUX_SIGNING_KEY environment variable"
)

PRIVATE_KEY_REQUIRED_MESSAGE = (
    "Private key required; pass a key_secret or key_file_path option "
    "to mux.jwt.sign_*(), a jwt_private_key argument to Mux(), "
    "or set the MUX_PRIVATE_KEY environment variable"
)


class MuxJWTError(Exception):
    """Base class for token signing failures."""


class ConfigurationError(MuxJWTError):
    """No signing key id or private key could be resolved."""


class KeyFormatError(MuxJWTError, TypeError):
    """Private key material is present but cannot be used."""

    def __init__(self, message: str = KEY_FORMAT_ERROR_MESSAGE) -> None:
        super().__init__(message)
