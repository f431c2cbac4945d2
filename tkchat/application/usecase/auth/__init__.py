"""Auth use cases."""

from tkchat.application.usecase.auth.account import AccountInfo, account_info
from tkchat.application.usecase.auth.change_password import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
)
from tkchat.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from tkchat.application.usecase.auth.register import (
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from tkchat.application.usecase.auth.request_password_reset import (
    RequestPasswordResetRequest,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
)
from tkchat.application.usecase.auth.sign_in import (
    SignInRequest,
    SignInResponse,
    SignInUseCase,
)

__all__ = [
    "AccountInfo",
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
    "RequestPasswordResetRequest",
    "RequestPasswordResetResponse",
    "RequestPasswordResetUseCase",
    "SignInRequest",
    "SignInResponse",
    "SignInUseCase",
    "account_info",
]
