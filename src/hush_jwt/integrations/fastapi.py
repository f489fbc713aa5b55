"""FastAPI dependencies for hush-jwt."""

from fastapi import HTTPException, Request

from hush_jwt.engine import TokenEngine
from hush_jwt.errors import TokenMissingError
from hush_jwt.result import AuthResult


def _extract_token(request: Request, cookie_name: str | None) -> str | None:
    """Token resolution order:

    1. ``Authorization`` header (``Bearer <token>`` or a bare token)
    2. Cookie named ``cookie_name`` (if configured)
    """
    auth_header = request.headers.get("Authorization")
    if auth_header:
        return auth_header
    if cookie_name:
        return request.cookies.get(cookie_name)
    return None


def create_claims_dep(engine: TokenEngine, *, cookie_name: str | None = None):
    """Create a FastAPI dependency that always yields an :class:`AuthResult`.

    Missing or invalid tokens produce a failure result rather than a 401,
    leaving the decision to the route.
    """

    async def current_claims(request: Request) -> AuthResult:
        token = _extract_token(request, cookie_name)
        if token is None:
            return AuthResult.failure(TokenMissingError())
        return engine.authenticate(token)

    return current_claims


def create_require_token_dep(engine: TokenEngine, *, cookie_name: str | None = None):
    """Create a FastAPI dependency that rejects the request with 401 unless the token verifies."""
    current_claims = create_claims_dep(engine, cookie_name=cookie_name)

    async def require_token(request: Request) -> AuthResult:
        result = await current_claims(request)
        if not result.ok:
            raise HTTPException(
                status_code=401,
                detail={"error": result.error_code, "message": result.error_message},
            )
        return result

    return require_token
