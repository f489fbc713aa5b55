"""hush-jwt configuration — an immutable dataclass built once per engine."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from hush_jwt.errors import InvalidConfigError, UnsupportedAlgorithmError

JWT_ALGORITHM = "HS256"

# Recognised algorithm names. Only JWT_ALGORITHM is implemented.
DECLARED_ALGORITHMS = (
    "HS256",
    "HS384",
    "HS512",
    "RS256",
    "RS384",
    "RS512",
    "ES256",
    "ES384",
    "ES512",
)

DEFAULT_TTL_SECONDS = 60 * 60 * 24 * 365  # 365 days

# Short option names accepted by from_mapping, mapped to field names.
_MAPPING_ALIASES = {"alg": "algorithm"}


def _coerce_ttl(ttl: Any) -> int | float:
    if isinstance(ttl, str):
        try:
            ttl = float(ttl.strip())
        except ValueError:
            raise InvalidConfigError("jwt config [ttl] invalid.")
    if isinstance(ttl, bool) or not isinstance(ttl, (int, float)):
        raise InvalidConfigError("jwt config [ttl] invalid.")
    if (isinstance(ttl, float) and not math.isfinite(ttl)) or ttl < 0:
        raise InvalidConfigError("jwt config [ttl] invalid.")
    if isinstance(ttl, float) and ttl.is_integer():
        return int(ttl)
    return ttl


@dataclass(frozen=True, slots=True)
class JWTConfig:
    """Token engine settings.

    Values are checked by :meth:`validate`, which the engine runs before
    every issue and verify call. Build a new config (and a new engine) to
    change anything.

    Example:
        JWTConfig(secret="s3cret")                        # HS256, 365 day TTL
        JWTConfig(secret="s3cret", ttl=900, issuer="api")  # 15 minutes, iss set
    """

    secret: str | bytes
    algorithm: str = JWT_ALGORITHM
    ttl: int | float | str = DEFAULT_TTL_SECONDS
    leeway: int = 0
    issuer: str | None = None
    audience: str | None = None
    issued_at: bool = False
    token_id: bool = False
    # Reserved for asymmetric algorithms, not read by the engine.
    public_key: str | None = None
    private_key: str | None = None
    password: str | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "JWTConfig":
        """Build a config from an already-loaded mapping.

        Accepts the field names above plus ``alg`` as an alias for
        ``algorithm``. ``None`` values fall back to the field default.

        Raises:
            InvalidConfigError: On unknown option names or a missing secret.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _MAPPING_ALIASES.get(key, key)
            if name not in known:
                raise InvalidConfigError(f"jwt config [{key}] is not recognised.")
            if value is not None:
                kwargs[name] = value
        if "secret" not in kwargs:
            raise InvalidConfigError("jwt config [secret] is required.")
        return cls(**kwargs)

    @property
    def ttl_seconds(self) -> int | float:
        """The TTL as a number, rejecting booleans, non-numerics and negatives."""
        return _coerce_ttl(self.ttl)

    def validate(self) -> None:
        """Check the configuration, raising on the first problem found.

        Raises:
            UnsupportedAlgorithmError: Algorithm unknown or not HS256.
            InvalidConfigError: Empty or asymmetric secret, bad TTL or leeway.
        """
        if self.algorithm not in DECLARED_ALGORITHMS:
            raise UnsupportedAlgorithmError(f"Algorithm [{self.algorithm}] does not exist.")
        if self.algorithm != JWT_ALGORITHM:
            raise UnsupportedAlgorithmError(f"only {JWT_ALGORITHM} algorithm is supported.")

        from hush_jwt.core.signing import prepare_key

        prepare_key(self.secret)

        _coerce_ttl(self.ttl)

        if isinstance(self.leeway, bool) or not isinstance(self.leeway, int) or self.leeway < 0:
            raise InvalidConfigError("jwt config [leeway] invalid.")
