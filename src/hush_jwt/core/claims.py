"""Standard claim set and payload assembly."""

import uuid
from collections.abc import Mapping
from typing import Any

from hush_jwt.config import JWTConfig
from hush_jwt.errors import InvalidClaimsError

# Registered claim names, reserved for the engine.
STANDARD_CLAIMS = ("iss", "sub", "aud", "exp", "nbf", "iat", "jti")


def check_caller_claims(claims: Any) -> None:
    """Reject caller claims that are not a string-keyed mapping or that use reserved keys.

    Raises:
        InvalidClaimsError: With the colliding keys sorted and comma-joined in
            the message and available as ``keys``.
    """
    if not isinstance(claims, Mapping):
        raise InvalidClaimsError("user info type is not a mapping.")

    bad_keys = [k for k in claims if not isinstance(k, str)]
    if bad_keys:
        raise InvalidClaimsError(f"user info keys must be strings, got {bad_keys!r}.")

    reserved = tuple(sorted(set(claims).intersection(STANDARD_CLAIMS)))
    if reserved:
        joined = ",".join(reserved)
        raise InvalidClaimsError(f"user info [{joined}] does not allowed to use.", keys=reserved)


def build_payload(claims: Mapping[str, Any], config: JWTConfig, now: int) -> dict[str, Any]:
    """Merge caller claims over the standard claims the engine populates.

    ``exp`` is always set. ``iss``, ``aud``, ``iat`` and ``jti`` are added only
    when the config asks for them; unset standard claims are left out.
    """
    standard: dict[str, Any] = {"exp": int(now + config.ttl_seconds)}
    if config.issuer is not None:
        standard["iss"] = config.issuer
    if config.audience is not None:
        standard["aud"] = config.audience
    if config.issued_at:
        standard["iat"] = now
    if config.token_id:
        standard["jti"] = uuid.uuid4().hex

    return {**standard, **claims}
