"""User administration routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from tkchat.application.usecase.auth import AccountInfo
from tkchat.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    SetAccountStatusRequest,
    SetAccountStatusResponse,
    SetAccountStatusUseCase,
    SetUserRoleRequest,
    SetUserRoleResponse,
    SetUserRoleUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from tkchat.domain.service import JWTService, RoleService
from tkchat.domain.value import AccountStatus, AppRole
from tkchat.interface.api.session import require_actor

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing one's own profile."""

    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    avatar_url: str | None = None


class SetRoleAPIRequest(BaseModel):
    """API request for changing a role."""

    role: AppRole


class SetStatusAPIRequest(BaseModel):
    """API request for changing an account status."""

    account_status: AccountStatus


@router.get("/", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> ListUsersResponse:
    """List accounts with the caller's per-row permissions."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    return await list_users_use_case.execute(ListUsersRequest(actor=actor))


@router.patch("/me", response_model=AccountInfo)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> AccountInfo:
    """Edit the signed-in user's name, phone or avatar URL."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            actor=actor,
            full_name=request.full_name,
            phone=request.phone,
            avatar_url=request.avatar_url,
        )
    )


@router.put("/{user_id}/role", response_model=SetUserRoleResponse)
async def set_user_role(
    user_id: UUID,
    request: SetRoleAPIRequest,
    set_user_role_use_case: FromDishka[SetUserRoleUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> SetUserRoleResponse:
    """Change another user's role."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    return await set_user_role_use_case.execute(
        SetUserRoleRequest(actor=actor, target_id=str(user_id), role=request.role)
    )


@router.put("/{user_id}/status", response_model=SetAccountStatusResponse)
async def set_account_status(
    user_id: UUID,
    request: SetStatusAPIRequest,
    set_account_status_use_case: FromDishka[SetAccountStatusUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> SetAccountStatusResponse:
    """Activate or deactivate another user's account."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    return await set_account_status_use_case.execute(
        SetAccountStatusRequest(
            actor=actor,
            target_id=str(user_id),
            account_status=request.account_status,
        )
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete another user's account."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    await delete_user_use_case.execute(
        DeleteUserRequest(actor=actor, target_id=str(user_id))
    )
