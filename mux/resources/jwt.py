"""Signed playback, DRM, space, and viewer-count tokens."""

from collections.abc import Mapping
from typing import Any

from mux.crypto.jwt_signer import sign
from mux.crypto.keys import get_private_key, get_signing_key
from mux.crypto.types import (
    ClientDefaults,
    MuxJWTSignOptions,
    SignOptions,
    SigningKey,
)

DEFAULT_EXPIRATION = "7d"
ALGORITHM = "RS256"
SPACE_AUDIENCE = "rt"

TYPE_CLAIM = {
    "video": "v",
    "thumbnail": "t",
    "gif": "g",
    "storyboard": "s",
    "stats": "playback_id",
    "drm_license": "d",
}

TYPE_TOKEN = {
    "video": "playback-token",
    "thumbnail": "thumbnail-token",
    "gif": "gif-token",
    "storyboard": "storyboard-token",
    "stats": "stats-token",
    "drm_license": "drm-license-token",
}

DATA_TYPE_CLAIM = {
    "video": "video_id",
    "asset": "asset_id",
    "playback": "playback_id",
    "live_stream": "live_stream_id",
}


def _claim_for(mapping: dict[str, str], type_: str) -> str:
    try:
        return mapping[type_]
    except (KeyError, TypeError):
        raise ValueError(
            f"Unsupported token type {type_!r}; expected one of {sorted(mapping)}"
        ) from None


class Jwt:
    """Token signing helpers bound to a client's signing defaults."""

    def __init__(self, client: ClientDefaults) -> None:
        self._client = client

    async def _resolve_keys(
        self, options: MuxJWTSignOptions
    ) -> tuple[str, SigningKey]:
        keyid = get_signing_key(self._client, options)
        return keyid, await get_private_key(self._client, options)

    async def _sign_one(
        self,
        subject: str,
        audience: str,
        signing_key: tuple[str, SigningKey],
        options: MuxJWTSignOptions,
        params: Mapping[str, Any] | None = None,
    ) -> str:
        keyid, key = signing_key
        sign_options = SignOptions(
            keyid=keyid,
            subject=subject,
            audience=audience,
            expires_in=options.expiration or DEFAULT_EXPIRATION,
            algorithm=ALGORITHM,
        )
        if params is None:
            params = options.params or {}
        return await sign(params, key, sign_options)

    async def sign_playback_id(
        self, playback_id: str, options: MuxJWTSignOptions | None = None
    ) -> str | dict[str, str]:
        """Sign a playback token.

        A list ``type`` signs one token per entry and returns them keyed by
        token name, e.g. ``{"playback-token": ..., "thumbnail-token": ...}``.
        Entries are type names or ``(type, params)`` pairs.
        """
        options = options or MuxJWTSignOptions()
        signing_key = await self._resolve_keys(options)
        if not isinstance(options.type, (list, tuple)):
            audience = _claim_for(TYPE_CLAIM, options.type or "video")
            return await self._sign_one(playback_id, audience, signing_key, options)

        tokens: dict[str, str] = {}
        for entry in options.type:
            if isinstance(entry, (list, tuple)):
                type_, params = entry
            else:
                type_, params = entry, None
            audience = _claim_for(TYPE_CLAIM, type_)
            tokens[TYPE_TOKEN[type_]] = await self._sign_one(
                playback_id, audience, signing_key, options, params
            )
        return tokens

    async def sign_drm_license(
        self, playback_id: str, options: MuxJWTSignOptions | None = None
    ) -> str:
        """Sign a DRM license token for ``playback_id``."""
        options = options or MuxJWTSignOptions()
        signing_key = await self._resolve_keys(options)
        return await self._sign_one(
            playback_id, TYPE_CLAIM["drm_license"], signing_key, options
        )

    async def sign_space_id(
        self, space_id: str, options: MuxJWTSignOptions | None = None
    ) -> str:
        """Sign a real-time space token."""
        options = options or MuxJWTSignOptions()
        signing_key = await self._resolve_keys(options)
        return await self._sign_one(space_id, SPACE_AUDIENCE, signing_key, options)

    async def sign_viewer_counts(
        self, id: str, options: MuxJWTSignOptions | None = None
    ) -> str:
        """Sign a viewer-count token for a video, asset, playback, or live stream id."""
        options = options or MuxJWTSignOptions()
        audience = _claim_for(DATA_TYPE_CLAIM, options.type or "video")
        signing_key = await self._resolve_keys(options)
        return await self._sign_one(id, audience, signing_key, options)
