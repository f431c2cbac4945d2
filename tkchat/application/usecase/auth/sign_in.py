"""Sign in use case."""

import logfire
from pydantic import BaseModel

from tkchat.application.usecase.auth.account import AccountInfo, account_info
from tkchat.domain.error import AccountInactiveError
from tkchat.domain.service import (
    IdentityService,
    JWTService,
    ProfileService,
    RoleService,
)
from tkchat.domain.value import AccountStatus, Email


class SignInRequest(BaseModel):
    """Sign in request."""

    email: str
    password: str


class SignInResponse(BaseModel):
    """Sign in response."""

    account: AccountInfo
    token: str  # JWT session token


class SignInUseCase:
    """Use case for email and password sign in."""

    def __init__(
        self,
        identity_service: IdentityService,
        profile_service: ProfileService,
        role_service: RoleService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize sign in use case.

        Args:
            identity_service: Identity domain service
            profile_service: Profile domain service
            role_service: Role store
            jwt_service: JWT token domain service
        """
        self.identity_service = identity_service
        self.profile_service = profile_service
        self.role_service = role_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Execute sign in flow.

        Raises:
            InvalidCredentialsError: If the identity service rejects the credentials
            AccountInactiveError: If the account has been deactivated
        """
        email = Email(request.email)
        with logfire.span("sign_in.execute", email=email.root):
            account = await self.identity_service.authenticate(email, request.password)
            profile = await self.profile_service.ensure_profile(account.id, email)

            if profile.account_status == AccountStatus.INACTIVE:
                logfire.warn("Inactive account sign in", user_id=str(account.id))
                raise AccountInactiveError(str(account.id))

            roles = await self.role_service.ensure_default(account.id)
            profile = await self.profile_service.record_sign_in(profile)
            token = self.jwt_service.create_token(str(account.id), email.root)

            logfire.info("User signed in", user_id=str(account.id))
            return SignInResponse(account=account_info(profile, roles), token=token)
