"""Change password use case."""

import logfire
from pydantic import BaseModel

from tkchat.domain.error import WeakPasswordError
from tkchat.domain.service import IdentityService
from tkchat.domain.value import Actor, unmet_requirements


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    actor: Actor
    password: str
    confirm_password: str


class ChangePasswordUseCase:
    """Use case for changing the signed-in user's password."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize change password use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: ChangePasswordRequest) -> None:
        """Check the policy, then update the password.

        Raises:
            WeakPasswordError: If the password fails the policy or confirmation
        """
        with logfire.span(
            "change_password.execute", user_id=str(request.actor.user_id)
        ):
            unmet = unmet_requirements(request.password)
            if request.confirm_password != request.password:
                unmet.append("Passwords match")
            if unmet:
                raise WeakPasswordError(unmet)

            await self.identity_service.change_password(
                request.actor.user_id, request.password
            )
