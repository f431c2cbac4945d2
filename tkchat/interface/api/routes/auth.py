"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from tkchat.application.usecase.auth import (
    AccountInfo,
    ChangePasswordRequest,
    ChangePasswordUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    RegisterRequest,
    RegisterUseCase,
    RequestPasswordResetRequest,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
    SignInRequest,
    SignInUseCase,
)
from tkchat.config import Settings
from tkchat.domain.error import NotFoundError
from tkchat.domain.service import JWTService, RoleService
from tkchat.interface.api.session import (
    clear_session_cookie,
    require_actor,
    set_session_cookie,
)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class SignInAPIRequest(BaseModel):
    """Sign in request."""

    email: str
    password: str


class ChangePasswordAPIRequest(BaseModel):
    """Change password request."""

    password: str
    confirm_password: str


class PasswordResetAPIRequest(BaseModel):
    """Password reset request."""

    email: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return the current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: AccountInfo | None = None


@router.post(
    "/register", response_model=AccountInfo, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AccountInfo:
    """Create an account from an invite and sign it in.

    Example:
        POST /auth/register
        {
            "token": "2b0c...",
            "password": "Str0ng!pass",
            "confirm_password": "Str0ng!pass",
            "full_name": "Alice Example"
        }
    """
    result = await register_use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    return result.account


@router.post("/login", response_model=AccountInfo)
async def sign_in(
    request: SignInAPIRequest,
    response: Response,
    sign_in_use_case: FromDishka[SignInUseCase],
    settings: FromDishka[Settings],
) -> AccountInfo:
    """Sign in with email and password."""
    result = await sign_in_use_case.execute(
        SignInRequest(email=request.email, password=request.password)
    )
    set_session_cookie(response, result.token, settings)
    return result.account


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without a session: returns authenticated=false instead
    of an error.
    """
    try:
        actor = await require_actor(auth_token, jwt_service, role_service)
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(actor=actor)
        )
        return AuthStatusResponse(authenticated=True, user=user)
    except HTTPException:
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # Valid token for an account that no longer exists
        return AuthStatusResponse(authenticated=False)


@router.post("/password", status_code=status.HTTP_204_NO_CONTENT)
async def change_password(
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Change the signed-in user's password."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    await change_password_use_case.execute(
        ChangePasswordRequest(
            actor=actor,
            password=request.password,
            confirm_password=request.confirm_password,
        )
    )


@router.post("/password/reset", response_model=RequestPasswordResetResponse)
async def request_password_reset(
    request: PasswordResetAPIRequest,
    request_password_reset_use_case: FromDishka[RequestPasswordResetUseCase],
) -> RequestPasswordResetResponse:
    """Send a recovery link. Answers the same whether or not the email is known."""
    return await request_password_reset_use_case.execute(
        RequestPasswordResetRequest(email=request.email)
    )
