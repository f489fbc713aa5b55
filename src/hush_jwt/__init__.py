"""hush-jwt — compact HMAC-signed authentication tokens."""

__version__ = "0.1.0"

from hush_jwt.config import JWTConfig
from hush_jwt.core.claims import STANDARD_CLAIMS
from hush_jwt.engine import TokenEngine
from hush_jwt.errors import (
    ClaimsMalformedError,
    ConfigError,
    InvalidClaimsError,
    InvalidConfigError,
    JWTError,
    SignatureInvalidError,
    TokenExpiredError,
    TokenMalformedError,
    TokenMissingError,
    TokenVerificationError,
    UnsupportedAlgorithmError,
)
from hush_jwt.result import ABSENT, AuthResult

__all__ = [
    "ABSENT",
    "AuthResult",
    "ClaimsMalformedError",
    "ConfigError",
    "InvalidClaimsError",
    "InvalidConfigError",
    "JWTConfig",
    "JWTError",
    "STANDARD_CLAIMS",
    "SignatureInvalidError",
    "TokenEngine",
    "TokenExpiredError",
    "TokenMalformedError",
    "TokenMissingError",
    "TokenVerificationError",
    "UnsupportedAlgorithmError",
]
