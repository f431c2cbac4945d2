"""Issue invite use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from tkchat.adapter.error import NotificationError
from tkchat.application.usecase.invite.links import build_invite_url
from tkchat.config import Settings
from tkchat.domain.error import AlreadyRegisteredError
from tkchat.domain.service import (
    Capability,
    IdentityService,
    InviteNotification,
    InviteService,
    NotificationService,
    ProfileService,
    require_capability,
)
from tkchat.domain.value import Actor, Email


class IssueInviteRequest(BaseModel):
    """Request to invite one email address."""

    actor: Actor
    email: str


class IssueInviteResponse(BaseModel):
    """Issued invite with its registration link."""

    invite_id: str
    email: str
    token: str
    expires_at: datetime
    invite_url: str
    warning: str | None = None


class IssueInviteUseCase:
    """Use case for issuing an invite and notifying the invitee.

    Notification is best effort: the invite stands even when delivery
    fails, and the caller gets the link to share by hand.
    """

    def __init__(
        self,
        invite_service: InviteService,
        profile_service: ProfileService,
        identity_service: IdentityService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            profile_service: Profile domain service
            identity_service: Identity domain service
            notification_service: Notification domain service
            settings: Application settings
        """
        self.invite_service = invite_service
        self.profile_service = profile_service
        self.identity_service = identity_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: IssueInviteRequest) -> IssueInviteResponse:
        """Issue an invite.

        Raises:
            UnauthorizedError: If the actor cannot manage invites
            AlreadyRegisteredError: If the email already has an account
            DuplicateInviteError: If an active invite exists for the email
        """
        with logfire.span(
            "issue_invite.execute", actor_id=str(request.actor.user_id)
        ):
            require_capability(request.actor, Capability.MANAGE_INVITES)
            email = Email(request.email)

            if await self.profile_service.get_by_email(email) or (
                await self.identity_service.is_registered(email)
            ):
                logfire.warn("Invitee already registered", email=email.root)
                raise AlreadyRegisteredError(email.root)

            invite = await self.invite_service.issue(request.actor.user_id, email)
            invite_url = build_invite_url(self.settings.api.frontend_url, invite)

            warning = None
            try:
                await self.notification_service.notify_invite(
                    InviteNotification(
                        email=email.root,
                        invite_url=invite_url,
                        expires_at=invite.expires_at,
                        invited_by=str(request.actor.user_id),
                    )
                )
            except NotificationError as e:
                logfire.warn(
                    "Invite notification failed", invite_id=str(invite.id), error=str(e)
                )
                warning = (
                    "Invite created but the notification could not be sent. "
                    "Share the link manually."
                )

            return IssueInviteResponse(
                invite_id=str(invite.id),
                email=email.root,
                token=invite.token.root,
                expires_at=invite.expires_at,
                invite_url=invite_url,
                warning=warning,
            )
