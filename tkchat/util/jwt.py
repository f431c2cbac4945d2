"""Session token encoding with PyJWT.

A session token names the account and nothing else. Roles are looked up
from the grant table on each request, so a promotion or demotion takes
effect without reissuing tokens.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from tkchat.config import AuthSettings

REQUIRED_CLAIMS = ["user_id", "email", "exp"]


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    user_id: str
    email: str
    exp: datetime


class JWTError(Exception):
    """Session token could not be accepted."""


def create_token(user_id: str, email: str, settings: AuthSettings) -> str:
    """Sign a session token valid for ``jwt_expiry_days``."""
    claims = {
        "user_id": user_id,
        "email": email,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry, then return the claims.

    Raises:
        JWTError: "Token has expired" or "Invalid token"
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e
    return TokenPayload.model_validate(claims)
