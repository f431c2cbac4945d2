"""List invites use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from tkchat.application.usecase.invite.links import build_invite_url
from tkchat.config import Settings
from tkchat.domain.model.common import utcnow
from tkchat.domain.service import Capability, InviteService, require_capability
from tkchat.domain.value import Actor, InviteStatus


class ListInvitesRequest(BaseModel):
    """List invites request."""

    actor: Actor
    limit: int = Field(default=100, ge=1, le=500)
    offset: int = Field(default=0, ge=0)


class InviteItem(BaseModel):
    """Invite as shown in the admin console."""

    invite_id: str
    email: str
    invited_by: str
    status: InviteStatus  # Effective status, expired when stale
    created_at: datetime
    expires_at: datetime
    accepted_at: datetime | None
    invite_url: str


class ListInvitesResponse(BaseModel):
    """List invites response."""

    invites: list[InviteItem]


class ListInvitesUseCase:
    """Use case for the admin console's invite list."""

    def __init__(self, invite_service: InviteService, settings: Settings) -> None:
        """Initialize list invites use case.

        Args:
            invite_service: Invite domain service
            settings: Application settings
        """
        self.invite_service = invite_service
        self.settings = settings

    async def execute(self, request: ListInvitesRequest) -> ListInvitesResponse:
        """List invites newest first.

        Raises:
            UnauthorizedError: If the actor cannot manage invites
        """
        with logfire.span(
            "list_invites.execute", actor_id=str(request.actor.user_id)
        ):
            require_capability(request.actor, Capability.MANAGE_INVITES)

            invites = await self.invite_service.list_invites(
                request.limit, request.offset
            )
            now = utcnow()
            frontend_url = self.settings.api.frontend_url

            return ListInvitesResponse(
                invites=[
                    InviteItem(
                        invite_id=str(invite.id),
                        email=invite.email.root,
                        invited_by=str(invite.invited_by),
                        status=invite.effective_status(now),
                        created_at=invite.created_at,
                        expires_at=invite.expires_at,
                        accepted_at=invite.accepted_at,
                        invite_url=build_invite_url(frontend_url, invite),
                    )
                    for invite in invites
                ]
            )
