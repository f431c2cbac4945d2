"""Delete user use case."""

from uuid import UUID

from pydantic import BaseModel

from tkchat.domain.service import UserAdminService
from tkchat.domain.value import Actor, UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    actor: Actor
    target_id: str


class DeleteUserUseCase:
    """Use case for deleting another user's account. Owners only."""

    def __init__(self, user_admin_service: UserAdminService) -> None:
        """Initialize delete user use case.

        Args:
            user_admin_service: Account administration domain service
        """
        self.user_admin_service = user_admin_service

    async def execute(self, request: DeleteUserRequest) -> None:
        """Delete the account.

        Raises:
            NotFoundError: If the target does not exist
            UnauthorizedError: If the policy denies the deletion
        """
        await self.user_admin_service.delete_user(
            request.actor, UserId(UUID(request.target_id))
        )
