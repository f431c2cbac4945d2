"""Validate invite use case."""

import logfire
from pydantic import BaseModel, ValidationError

from tkchat.domain.service import InviteService
from tkchat.domain.value import InviteToken
from tkchat.util.observability import mask_token


class ValidateInviteRequest(BaseModel):
    """Validate invite request."""

    token: str


class ValidateInviteResponse(BaseModel):
    """Validate invite response.

    Deliberately minimal: the invite row itself never leaves the server.
    """

    is_valid: bool
    email: str | None = None


class ValidateInviteUseCase:
    """Use case for checking an invite token before showing the sign-up form.

    Callable anonymously. Unknown, used, expired and malformed tokens all
    produce the same negative answer.
    """

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize validate invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: ValidateInviteRequest) -> ValidateInviteResponse:
        """Validate an invite token.

        Args:
            request: Validation request with token

        Returns:
            Whether the token admits registration, and for which email
        """
        with logfire.span("validate_invite.execute", token=mask_token(request.token)):
            try:
                token = InviteToken(root=request.token)
            except ValidationError:
                logfire.info("Malformed invite token")
                return ValidateInviteResponse(is_valid=False)

            invite = await self.invite_service.validate(token)
            if not invite:
                return ValidateInviteResponse(is_valid=False)

            return ValidateInviteResponse(is_valid=True, email=invite.email.root)
