"""Error types raised by the token engine.

Every error carries a human-readable ``message`` and a machine ``code`` so
adapters can report them without inspecting the class hierarchy.
"""


class JWTError(Exception):
    """Base class for all hush-jwt errors."""

    def __init__(self, message: str, code: str):
        self.message = message
        self.code = code
        super().__init__(message)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigError(JWTError):
    """The engine configuration cannot be used."""


class UnsupportedAlgorithmError(ConfigError):
    """Configured algorithm is unknown or not implemented."""

    def __init__(self, message: str):
        super().__init__(message, "unsupported_algorithm")


class InvalidConfigError(ConfigError):
    """A configuration value is missing or out of range."""

    def __init__(self, message: str):
        super().__init__(message, "invalid_config")


# ---------------------------------------------------------------------------
# Issuance
# ---------------------------------------------------------------------------


class InvalidClaimsError(JWTError):
    """Caller claims cannot be encoded into a token.

    ``keys`` holds the offending reserved keys (sorted) when the failure is a
    collision with the standard claim set, otherwise it is empty.
    """

    def __init__(self, message: str, keys: tuple[str, ...] = ()):
        self.keys = keys
        super().__init__(message, "invalid_claims")


# ---------------------------------------------------------------------------
# Verification
# ---------------------------------------------------------------------------


class TokenVerificationError(JWTError):
    """Raised when a presented token is rejected."""


class TokenMissingError(TokenVerificationError):
    def __init__(self, message: str = "No token provided"):
        super().__init__(message, "token_missing")


class TokenMalformedError(TokenVerificationError):
    def __init__(self, message: str = "Token must have exactly three segments"):
        super().__init__(message, "token_malformed")


class SignatureInvalidError(TokenVerificationError):
    def __init__(self, message: str = "Token signature is invalid"):
        super().__init__(message, "signature_invalid")


class ClaimsMalformedError(TokenVerificationError):
    def __init__(self, message: str = "Token claims could not be decoded"):
        super().__init__(message, "claims_malformed")


class TokenExpiredError(TokenVerificationError):
    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, "token_expired")
