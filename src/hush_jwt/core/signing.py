"""HMAC signing and constant-time signature comparison."""

import hmac

from jwt.algorithms import HMACAlgorithm
from jwt.exceptions import InvalidKeyError
from jwt.utils import base64url_encode

from hush_jwt.errors import InvalidConfigError

_HS256 = HMACAlgorithm(HMACAlgorithm.SHA256)


def prepare_key(secret: str | bytes) -> bytes:
    """Normalise an HMAC secret to bytes.

    Raises:
        InvalidConfigError: If the secret is empty, or looks like a PEM/SSH
            key (an asymmetric key must never be used as an HMAC secret).
    """
    if not isinstance(secret, (str, bytes)) or not secret:
        raise InvalidConfigError("jwt config [secret] must be a non-empty string.")
    try:
        return _HS256.prepare_key(secret)
    except InvalidKeyError as e:
        raise InvalidConfigError(f"jwt config [secret] invalid: {e}") from e


def signing_input(header_segment: str, claims_segment: str) -> bytes:
    return f"{header_segment}.{claims_segment}".encode("utf-8")


def sign(header_segment: str, claims_segment: str, secret: str | bytes) -> str:
    """Compute the base64url HMAC-SHA256 signature segment."""
    digest = _HS256.sign(signing_input(header_segment, claims_segment), prepare_key(secret))
    return base64url_encode(digest).decode("ascii")


def signature_matches(
    header_segment: str, claims_segment: str, signature_segment: str, secret: str | bytes,
) -> bool:
    """Recompute the signature and compare it to the presented one in constant time.

    Non-ASCII input is compared as UTF-8 and simply fails to match.
    """
    digest = _HS256.sign(signing_input(header_segment, claims_segment), prepare_key(secret))
    expected = base64url_encode(digest)
    return hmac.compare_digest(expected, signature_segment.encode("utf-8"))
