"""Revoke invite use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tkchat.domain.service import Capability, InviteService, require_capability
from tkchat.domain.value import Actor, InviteId


class RevokeInviteRequest(BaseModel):
    """Revoke invite request."""

    actor: Actor
    invite_id: str


class RevokeInviteUseCase:
    """Use case for deleting an invite from the admin console."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize revoke invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: RevokeInviteRequest) -> None:
        """Delete an invite.

        Raises:
            UnauthorizedError: If the actor cannot manage invites
            NotFoundError: If the invite does not exist
        """
        with logfire.span(
            "revoke_invite.execute", actor_id=str(request.actor.user_id)
        ):
            require_capability(request.actor, Capability.MANAGE_INVITES)
            await self.invite_service.revoke(InviteId(UUID(request.invite_id)))
