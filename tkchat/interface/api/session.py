"""Session cookie handling and actor resolution for API routes."""

from uuid import UUID

from fastapi import HTTPException, Response, status

from tkchat.config import Settings
from tkchat.domain.service import JWTService, RoleService
from tkchat.domain.value import Actor, UserId
from tkchat.util.jwt import JWTError

COOKIE_NAME = "auth_token"


async def require_actor(
    auth_token: str | None, jwt_service: JWTService, role_service: RoleService
) -> Actor:
    """Resolve the caller from the session cookie.

    The role set is read from the grant table on every request, never
    from the token.

    Raises:
        HTTPException: 401 if the cookie is missing or invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        payload = jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )

    return await role_service.resolve_actor(UserId(UUID(payload.user_id)))


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the HTTP-only session cookie.

    Production serves the console and API from different hosts, which
    needs SameSite=None and therefore Secure.
    """
    is_production = settings.environment == "production"
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        domain=settings.auth.cookie_domain,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Delete the session cookie with the domain and path it was set with."""
    response.delete_cookie(
        key=COOKIE_NAME,
        domain=settings.auth.cookie_domain,
        path="/",
    )
