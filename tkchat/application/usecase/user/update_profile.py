"""Update profile use case."""

from pydantic import BaseModel, Field

from tkchat.application.usecase.auth.account import AccountInfo, account_info
from tkchat.domain.service import ProfileService
from tkchat.domain.value import Actor


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    actor: Actor
    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    avatar_url: str | None = Field(default=None)


class UpdateProfileUseCase:
    """Use case for editing the signed-in user's own profile.

    Email, role and status are not editable here.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> AccountInfo:
        """Apply the given fields and return the updated account.

        Raises:
            NotFoundError: If the profile does not exist
        """
        profile = await self.profile_service.update(
            request.actor.user_id,
            full_name=request.full_name,
            phone=request.phone,
            avatar_url=request.avatar_url,
        )
        return account_info(profile, set(request.actor.roles))
