"""Set account status use case."""

from uuid import UUID

from pydantic import BaseModel

from tkchat.domain.service import UserAdminService
from tkchat.domain.value import AccountStatus, Actor, UserId


class SetAccountStatusRequest(BaseModel):
    """Set account status request."""

    actor: Actor
    target_id: str
    account_status: AccountStatus


class SetAccountStatusResponse(BaseModel):
    """Set account status response."""

    user_id: str
    account_status: AccountStatus


class SetAccountStatusUseCase:
    """Use case for activating or deactivating another user's account."""

    def __init__(self, user_admin_service: UserAdminService) -> None:
        """Initialize set account status use case.

        Args:
            user_admin_service: Account administration domain service
        """
        self.user_admin_service = user_admin_service

    async def execute(
        self, request: SetAccountStatusRequest
    ) -> SetAccountStatusResponse:
        """Change the status.

        Raises:
            NotFoundError: If the target does not exist
            UnauthorizedError: If the policy denies the change
        """
        profile = await self.user_admin_service.set_account_status(
            request.actor, UserId(UUID(request.target_id)), request.account_status
        )
        return SetAccountStatusResponse(
            user_id=str(profile.id), account_status=profile.account_status
        )
