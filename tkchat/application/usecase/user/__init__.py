"""User use cases."""

from tkchat.application.usecase.user.delete_user import (
    DeleteUserRequest,
    DeleteUserUseCase,
)
from tkchat.application.usecase.user.list_users import (
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UserItem,
)
from tkchat.application.usecase.user.set_account_status import (
    SetAccountStatusRequest,
    SetAccountStatusResponse,
    SetAccountStatusUseCase,
)
from tkchat.application.usecase.user.set_user_role import (
    SetUserRoleRequest,
    SetUserRoleResponse,
    SetUserRoleUseCase,
)
from tkchat.application.usecase.user.update_profile import (
    UpdateProfileRequest,
    UpdateProfileUseCase,
)

__all__ = [
    "DeleteUserRequest",
    "DeleteUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "SetAccountStatusRequest",
    "SetAccountStatusResponse",
    "SetAccountStatusUseCase",
    "SetUserRoleRequest",
    "SetUserRoleResponse",
    "SetUserRoleUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "UserItem",
]
