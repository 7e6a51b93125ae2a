"""JWT claim assembly and signing."""

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

import jwt

from mux.crypto.timespan import to_numeric_date
from mux.crypto.types import SignOptions, SigningKey

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "RS256"


def _as_is(value: Any, _now: int) -> Any:
    return value


# (option field, registered claim, converter), applied in this order
CLAIM_APPLIERS: tuple[tuple[str, str, Callable[[Any, int], Any]], ...] = (
    ("issuer", "iss", _as_is),
    ("subject", "sub", _as_is),
    ("audience", "aud", _as_is),
    ("not_before", "nbf", to_numeric_date),
    ("expires_in", "exp", to_numeric_date),
)


def build_claims(
    payload: Mapping[str, Any], options: SignOptions, now: int | None = None
) -> dict[str, Any]:
    """Merge the caller payload with kid and the registered claims set in options."""
    now = int(time.time()) if now is None else now
    claims = dict(payload)
    if options.keyid:
        claims["kid"] = options.keyid
    for field, claim, convert in CLAIM_APPLIERS:
        value = getattr(options, field)
        if value is not None:
            claims[claim] = convert(value, now)
    return claims


async def sign(
    payload: Mapping[str, Any], key: SigningKey, options: SignOptions
) -> str:
    """Sign ``payload`` with ``key`` and return a compact JWS token."""
    algorithm = options.algorithm or DEFAULT_ALGORITHM
    claims = build_claims(payload, options)
    logger.debug(
        "Signing %s token sub=%s aud=%s",
        algorithm,
        claims.get("sub"),
        claims.get("aud"),
    )
    return jwt.encode(claims, key, algorithm=algorithm)
