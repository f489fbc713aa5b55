"""TokenEngine — issues and verifies HMAC-signed tokens."""

import logging
import math
import time
from collections.abc import Callable, Mapping
from typing import Any

from hush_jwt.config import JWTConfig
from hush_jwt.core.claims import build_payload, check_caller_claims
from hush_jwt.core.encoding import decode_segment, encode_segment
from hush_jwt.core.signing import sign, signature_matches
from hush_jwt.errors import (
    ClaimsMalformedError,
    InvalidClaimsError,
    JWTError,
    SignatureInvalidError,
    TokenExpiredError,
    TokenMalformedError,
    TokenMissingError,
)
from hush_jwt.result import AuthResult

logger = logging.getLogger("hush_jwt.engine")

BEARER_PREFIX = "Bearer "


def strip_scheme(value: str | None) -> str:
    """Remove a leading ``Bearer`` label (any case) and surrounding whitespace."""
    if not value:
        return ""
    value = value.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == "bearer":
        return rest.strip()
    return value


class TokenEngine:
    """Stateless token issuer/verifier bound to one configuration.

    The algorithm always comes from ``config``; a token's header is never
    consulted. The engine holds no mutable state, so one instance can be
    shared across threads and tasks.

    Args:
        config: The engine configuration.
        clock: Returns the current Unix time in seconds (default ``time.time``).
    """

    def __init__(self, config: JWTConfig, *, clock: Callable[[], float] = time.time) -> None:
        self._config = config
        self._clock = clock

    @property
    def config(self) -> JWTConfig:
        return self._config

    def _now(self) -> int:
        return int(self._clock())

    def issue(self, claims: Mapping[str, Any], *, bearer: bool = True) -> str:
        """Create a signed token carrying ``claims``.

        Args:
            claims: Caller claims; must not use any standard claim key.
            bearer: Prefix the token with ``"Bearer "``.

        Returns:
            The encoded token string.

        Raises:
            UnsupportedAlgorithmError: Configured algorithm is not HS256.
            InvalidConfigError: Secret or TTL is invalid.
            InvalidClaimsError: Claims collide with reserved keys or are not
                JSON-serializable.
        """
        config = self._config
        config.validate()

        header_segment = encode_segment({"typ": "JWT", "alg": config.algorithm})

        check_caller_claims(claims)
        payload = build_payload(claims, config, self._now())
        try:
            claims_segment = encode_segment(payload)
        except (TypeError, ValueError) as e:
            raise InvalidClaimsError(f"user info is not JSON-serializable: {e}") from e

        signature = sign(header_segment, claims_segment, config.secret)
        token = f"{header_segment}.{claims_segment}.{signature}"

        logger.debug("Issued token (exp=%s, claim keys=%s)", payload["exp"], ", ".join(sorted(claims)))
        return BEARER_PREFIX + token if bearer else token

    def verify(self, token: str | None) -> dict[str, Any]:
        """Verify a token and return its decoded claims.

        Accepts a bare token or an ``Authorization`` header value. Only the
        signature and ``exp`` are enforced.

        Raises:
            UnsupportedAlgorithmError: Configured algorithm is not HS256.
            InvalidConfigError: Secret or TTL is invalid.
            TokenMissingError: Nothing to verify.
            TokenMalformedError: Not three dot-separated segments.
            SignatureInvalidError: Signature does not match.
            ClaimsMalformedError: Claims are not a base64url JSON object with a numeric ``exp``.
            TokenExpiredError: ``exp`` is in the past.
        """
        config = self._config
        config.validate()

        raw = strip_scheme(token)
        if not raw:
            raise TokenMissingError()
        if not raw.isascii():
            raise TokenMalformedError("Token must contain only ASCII characters")

        parts = raw.split(".")
        if len(parts) != 3:
            raise TokenMalformedError(f"Token must have exactly three segments, got {len(parts)}")
        header_segment, claims_segment, signature_segment = parts

        if not signature_matches(header_segment, claims_segment, signature_segment, config.secret):
            raise SignatureInvalidError()

        try:
            payload = decode_segment(claims_segment)
        except ValueError as e:
            raise ClaimsMalformedError(f"Token claims could not be decoded: {e}") from e

        exp = payload.get("exp")
        if exp is None:
            raise ClaimsMalformedError("Token claims have no exp")
        if isinstance(exp, bool) or not isinstance(exp, (int, float)):
            raise ClaimsMalformedError("Token exp is not a number")
        if isinstance(exp, float) and not math.isfinite(exp):
            raise ClaimsMalformedError("Token exp is not a finite number")

        if exp < self._now() - config.leeway:
            raise TokenExpiredError()

        return payload

    def authenticate(self, token: str | None) -> AuthResult:
        """Verify a token without raising.

        Returns:
            ``AuthResult.success`` with the claims, or ``AuthResult.failure``
            carrying the error that rejected the token.
        """
        try:
            return AuthResult.success(self.verify(token))
        except JWTError as e:
            logger.debug("Token rejected: %s (%s)", e.code, e.message)
            return AuthResult.failure(e)
