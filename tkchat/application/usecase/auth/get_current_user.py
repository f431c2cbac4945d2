"""Get current user use case."""

from pydantic import BaseModel

from tkchat.application.usecase.auth.account import AccountInfo, account_info
from tkchat.domain.service import ProfileService
from tkchat.domain.value import Actor


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    actor: Actor


class GetCurrentUserUseCase:
    """Use case for getting the signed-in account."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get current user use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetCurrentUserRequest) -> AccountInfo:
        """Return the actor's profile with the roles resolved for this request.

        Raises:
            NotFoundError: If the profile no longer exists
        """
        profile = await self.profile_service.get_by_id(request.actor.user_id)
        return account_info(profile, set(request.actor.roles))
