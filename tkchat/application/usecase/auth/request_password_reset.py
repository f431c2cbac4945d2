"""Request password reset use case."""

import logfire
from pydantic import BaseModel

from tkchat.adapter.error import IdentityServiceError
from tkchat.config import Settings
from tkchat.domain.service import IdentityService
from tkchat.domain.value import Email


class RequestPasswordResetRequest(BaseModel):
    """Request password reset request."""

    email: str


class RequestPasswordResetResponse(BaseModel):
    """Request password reset response.

    Identical for known and unknown emails.
    """

    message: str = "If the email has an account, a reset link has been sent."


class RequestPasswordResetUseCase:
    """Use case for sending a password recovery link."""

    def __init__(self, identity_service: IdentityService, settings: Settings) -> None:
        """Initialize request password reset use case.

        Args:
            identity_service: Identity domain service
            settings: Application settings
        """
        self.identity_service = identity_service
        self.settings = settings

    async def execute(
        self, request: RequestPasswordResetRequest
    ) -> RequestPasswordResetResponse:
        """Ask the identity service to send a reset link.

        Identity service failures are logged, not surfaced.
        """
        email = Email(request.email)
        with logfire.span("request_password_reset.execute", email=email.root):
            try:
                await self.identity_service.request_password_reset(
                    email, f"{self.settings.api.frontend_url}/reset-password"
                )
            except IdentityServiceError as e:
                logfire.warn("Password reset request failed", error=str(e))
            return RequestPasswordResetResponse()
