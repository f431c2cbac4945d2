"""Register use case."""

import logfire
from pydantic import BaseModel, Field

from tkchat.application.usecase.auth.account import AccountInfo, account_info
from tkchat.domain.error import (
    InvalidOrExpiredInviteError,
    InviteEmailMismatchError,
    InviteRequiredError,
    WeakPasswordError,
)
from tkchat.domain.service import (
    IdentityService,
    InviteService,
    JWTService,
    ProfileService,
    RoleService,
)
from tkchat.domain.value import AppRole, Email, InviteToken, unmet_requirements
from tkchat.util.observability import mask_token


class RegisterRequest(BaseModel):
    """Register request."""

    token: str | None = None
    email: str | None = None  # Optional; must match the invited email if sent
    password: str
    confirm_password: str | None = None
    full_name: str = Field(min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=50)


class RegisterResponse(BaseModel):
    """Register response."""

    account: AccountInfo
    token: str  # JWT session token


class RegisterUseCase:
    """Use case for invite-only account creation.

    The invite is claimed before the account exists so two registrations
    racing on one token cannot both succeed. A failed account creation
    hands the claim back.
    """

    def __init__(
        self,
        invite_service: InviteService,
        identity_service: IdentityService,
        profile_service: ProfileService,
        role_service: RoleService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize register use case.

        Args:
            invite_service: Invite domain service
            identity_service: Identity domain service
            profile_service: Profile domain service
            role_service: Role store
            jwt_service: JWT token domain service
        """
        self.invite_service = invite_service
        self.identity_service = identity_service
        self.profile_service = profile_service
        self.role_service = role_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Steps:
        1. Require a token
        2. Validate it and take the invited email as authoritative
        3. Reject a differing client email
        4. Check the password policy
        5. Claim the invite
        6. Create the identity account, releasing the claim on failure
        7. Create the profile, seed the user role, link the invite
        8. Issue a session token

        Raises:
            InviteRequiredError: If no token was given
            InvalidOrExpiredInviteError: If the token does not admit registration
            InviteEmailMismatchError: If the email differs from the invited one
            WeakPasswordError: If the password fails the policy
            IdentityServiceError: If the identity service rejects the account
        """
        if not request.token or not request.token.strip():
            logfire.warn("Registration without invite token")
            raise InviteRequiredError()

        with logfire.span("register.execute", token=mask_token(request.token.strip())):
            try:
                token = InviteToken(root=request.token)
            except ValueError:
                raise InvalidOrExpiredInviteError()

            invite = await self.invite_service.validate(token)
            if not invite:
                raise InvalidOrExpiredInviteError()
            email = invite.email

            if request.email is not None and request.email.strip().lower() != email.root:
                logfire.warn("Registration email mismatch", invite_id=str(invite.id))
                raise InviteEmailMismatchError()

            unmet = unmet_requirements(request.password)
            if (
                request.confirm_password is not None
                and request.confirm_password != request.password
            ):
                unmet.append("Passwords match")
            if unmet:
                logfire.info("Registration password rejected", unmet=unmet)
                raise WeakPasswordError(unmet)

            if not await self.invite_service.claim(invite.id):
                raise InvalidOrExpiredInviteError()

            try:
                account = await self.identity_service.create_account(
                    email, request.password, request.full_name, request.phone
                )
            except Exception:
                await self.invite_service.release(invite.id)
                raise

            profile = await self.profile_service.ensure_profile(
                account.id, email, request.full_name, request.phone
            )
            await self.role_service.grant(account.id, AppRole.USER)
            await self.invite_service.record_acceptance(invite.id, account.id)
            roles = await self.role_service.roles_of(account.id)
            profile = await self.profile_service.get_by_id(profile.id)

            session_token = self.jwt_service.create_token(str(account.id), email.root)
            logfire.info(
                "User registered", user_id=str(account.id), invite_id=str(invite.id)
            )
            return RegisterResponse(
                account=account_info(profile, roles), token=session_token
            )
