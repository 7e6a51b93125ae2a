"""Mux API client holding credentials and JWT signing defaults."""

from mux.core.settings import MuxSettings
from mux.crypto.types import PrivateKeyInput
from mux.resources.jwt import Jwt


class Mux:
    """Entry point for the Mux API.

    Explicit arguments override values read from ``MUX_*`` environment
    variables. ``jwt_signing_key`` and ``jwt_private_key`` are read by the
    signing helpers and must not be reassigned while signing calls are in
    flight.
    """

    def __init__(
        self,
        *,
        token_id: str | None = None,
        token_secret: str | None = None,
        jwt_signing_key: str | None = None,
        jwt_private_key: PrivateKeyInput | None = None,
        base_url: str | None = None,
        settings: MuxSettings | None = None,
    ) -> None:
        settings = settings or MuxSettings()
        self.token_id = token_id or settings.token_id
        self.token_secret = token_secret or settings.token_secret
        self.jwt_signing_key = jwt_signing_key or settings.signing_key
        self.jwt_private_key = jwt_private_key or settings.private_key
        self.base_url = base_url or settings.base_url
        self.jwt = Jwt(self)
