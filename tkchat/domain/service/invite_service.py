"""Invite domain service."""

from datetime import timedelta
from uuid import uuid4

import logfire

from tkchat.domain.error import DuplicateInviteError, NotFoundError
from tkchat.domain.model.common import utcnow
from tkchat.domain.model.invite import Invite
from tkchat.domain.repository import InviteRepository
from tkchat.domain.value import Email, InviteId, InviteStatus, InviteToken, UserId
from tkchat.util.observability import mask_token

from .base import Service


class InviteService(Service):
    """Domain service for issuing, validating and consuming invites."""

    def __init__(
        self, invite_repository: InviteRepository, expiry_days: int = 7
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            expiry_days: Lifetime of a new invite
        """
        self.invite_repository = invite_repository
        self.expiry_days = expiry_days

    async def issue(self, invited_by: UserId, email: Email) -> Invite:
        """Create a pending invite for an email.

        Args:
            invited_by: Administrator issuing the invite
            email: Normalized invitee email

        Returns:
            Created invite

        Raises:
            DuplicateInviteError: If an active invite already exists
        """
        with logfire.span(
            "invite_service.issue", invited_by=str(invited_by), email=email.root
        ):
            now = utcnow()
            existing = await self.invite_repository.find_active_by_email(email, now)
            if existing:
                logfire.warn(
                    "Active invite already exists",
                    email=email.root,
                    invite_id=str(existing.id),
                )
                raise DuplicateInviteError(existing)

            invite = Invite(
                id=InviteId(uuid4()),
                email=email,
                invited_by=invited_by,
                # uuid4 carries 122 random bits from the OS CSPRNG
                token=InviteToken(str(uuid4())),
                status=InviteStatus.PENDING,
                created_at=now,
                expires_at=now + timedelta(days=self.expiry_days),
            )

            saved = await self.invite_repository.save(invite)
            logfire.info(
                "Invite issued",
                invite_id=str(saved.id),
                invited_by=str(invited_by),
                email=email.root,
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def validate(self, token: InviteToken) -> Invite | None:
        """Resolve a token to its invite if it admits registration.

        Unknown, accepted and expired tokens all yield None. Nothing is
        written.

        Args:
            token: Invite token

        Returns:
            The active invite, or None
        """
        with logfire.span("invite_service.validate", token=mask_token(token.root)):
            invite = await self.invite_repository.find_by_token(token)
            if invite is None or not invite.is_active():
                logfire.info("Invite rejected", token=mask_token(token.root))
                return None
            logfire.info("Invite valid", invite_id=str(invite.id))
            return invite

    async def claim(self, invite_id: InviteId) -> bool:
        """Atomically mark an invite accepted before the account exists.

        Args:
            invite_id: Invite to claim

        Returns:
            True if this caller won the pending-to-accepted transition
        """
        with logfire.span("invite_service.claim", invite_id=str(invite_id)):
            claimed = await self.invite_repository.claim(invite_id, utcnow())
            if claimed:
                logfire.info("Invite claimed", invite_id=str(invite_id))
            else:
                logfire.warn("Invite claim lost", invite_id=str(invite_id))
            return claimed

    async def release(self, invite_id: InviteId) -> None:
        """Return a claimed invite to pending so the invitee can retry."""
        with logfire.span("invite_service.release", invite_id=str(invite_id)):
            await self.invite_repository.release(invite_id)
            logfire.info("Invite released", invite_id=str(invite_id))

    async def record_acceptance(self, invite_id: InviteId, user_id: UserId) -> Invite:
        """Link a claimed invite to the account created from it.

        Raises:
            NotFoundError: If the invite does not exist
        """
        with logfire.span(
            "invite_service.record_acceptance",
            invite_id=str(invite_id),
            user_id=str(user_id),
        ):
            invite = await self.invite_repository.find_by_id(invite_id)
            if invite is None:
                logfire.error("Invite not found for acceptance", invite_id=str(invite_id))
                raise NotFoundError("Invite", str(invite_id))

            accepted = invite.model_copy(
                update={
                    "status": InviteStatus.ACCEPTED,
                    "accepted_at": invite.accepted_at or utcnow(),
                    "accepted_by_user_id": user_id,
                }
            )
            saved = await self.invite_repository.save(accepted)
            siblings = await self.invite_repository.accept_pending_for_email(
                invite.email, user_id, saved.accepted_at or utcnow()
            )
            logfire.info(
                "Invite accepted",
                invite_id=str(invite_id),
                user_id=str(user_id),
                also_accepted=siblings,
            )
            return saved

    async def list_invites(self, limit: int = 100, offset: int = 0) -> list[Invite]:
        """List invites, newest first."""
        with logfire.span("invite_service.list_invites", limit=limit, offset=offset):
            invites = await self.invite_repository.list_all(limit, offset)
            logfire.info("Invites listed", count=len(invites))
            return invites

    async def revoke(self, invite_id: InviteId) -> None:
        """Delete an invite.

        Raises:
            NotFoundError: If the invite does not exist
        """
        with logfire.span("invite_service.revoke", invite_id=str(invite_id)):
            deleted = await self.invite_repository.delete(invite_id)
            if not deleted:
                logfire.warn("Invite not found for revocation", invite_id=str(invite_id))
                raise NotFoundError("Invite", str(invite_id))
            logfire.info("Invite revoked", invite_id=str(invite_id))

