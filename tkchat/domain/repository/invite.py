"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from tkchat.domain.model.invite import Invite
from tkchat.domain.value import Email, InviteId, InviteToken, UserId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InviteToken) -> Invite | None:
        """Find an invite by token.

        Args:
            token: The invite token

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_email(self, email: Email, now: datetime) -> Invite | None:
        """Find the most recent pending, unexpired invite for an email.

        Args:
            email: Normalized invitee email
            now: Instant to evaluate expiry against

        Returns:
            The active invite if any, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update).

        Args:
            invite: The invite to save

        Returns:
            The saved invite
        """
        pass

    @abstractmethod
    async def claim(self, invite_id: InviteId, accepted_at: datetime) -> bool:
        """Atomically move a pending invite to accepted.

        Equivalent to ``UPDATE ... SET status='accepted' WHERE id=? AND
        status='pending'``; exactly one concurrent caller can win.

        Args:
            invite_id: Invite to claim
            accepted_at: Acceptance timestamp to record

        Returns:
            True if this call performed the transition, False otherwise
        """
        pass

    @abstractmethod
    async def release(self, invite_id: InviteId) -> None:
        """Return a claimed invite to pending after a failed registration.

        Args:
            invite_id: Invite to release
        """
        pass

    @abstractmethod
    async def accept_pending_for_email(
        self, email: Email, user_id: UserId, accepted_at: datetime
    ) -> int:
        """Mark every pending invite for an email as accepted by an account.

        Args:
            email: Normalized invitee email
            user_id: Account created for that email
            accepted_at: Acceptance timestamp to record

        Returns:
            Number of invites updated
        """
        pass

    @abstractmethod
    async def list_all(self, limit: int = 100, offset: int = 0) -> list[Invite]:
        """List invites, newest first.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        pass

    @abstractmethod
    async def delete(self, invite_id: InviteId) -> bool:
        """Delete an invite.

        Args:
            invite_id: Invite to delete

        Returns:
            True if a row was deleted
        """
        pass
