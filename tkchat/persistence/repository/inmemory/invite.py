"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Optional

from tkchat.domain.model.invite import Invite
from tkchat.domain.repository.invite import InviteRepository
from tkchat.domain.value import Email, InviteId, InviteStatus, InviteToken, UserId


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self) -> None:
        self._invites: list[Invite] = []

    def _index(self, invite_id: InviteId) -> int | None:
        for i, invite in enumerate(self._invites):
            if invite.id == invite_id:
                return i
        return None

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        i = self._index(invite_id)
        return self._invites[i] if i is not None else None

    async def find_by_token(self, token: InviteToken) -> Optional[Invite]:
        """Find an invite by its token."""
        for invite in self._invites:
            if invite.token == token:
                return invite
        return None

    async def find_active_by_email(
        self, email: Email, now: datetime
    ) -> Optional[Invite]:
        """Find the newest pending, unexpired invite for an email."""
        matches = [
            invite
            for invite in self._invites
            if invite.email == email and invite.is_active(now)
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches[0] if matches else None

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update)."""
        i = self._index(invite.id)
        if i is not None:
            self._invites[i] = invite
        else:
            self._invites.append(invite)
        return invite

    async def claim(self, invite_id: InviteId, accepted_at: datetime) -> bool:
        """Conditionally flip pending to accepted."""
        i = self._index(invite_id)
        if i is None or not self._invites[i].is_active(accepted_at):
            return False
        self._invites[i] = self._invites[i].model_copy(
            update={"status": InviteStatus.ACCEPTED, "accepted_at": accepted_at}
        )
        return True

    async def release(self, invite_id: InviteId) -> None:
        """Put a claimed invite back to pending."""
        i = self._index(invite_id)
        if i is None:
            return
        invite = self._invites[i]
        if invite.status == InviteStatus.ACCEPTED and invite.accepted_by_user_id is None:
            self._invites[i] = invite.model_copy(
                update={"status": InviteStatus.PENDING, "accepted_at": None}
            )

    async def accept_pending_for_email(
        self, email: Email, user_id: UserId, accepted_at: datetime
    ) -> int:
        """Accept every pending invite for an email."""
        count = 0
        for i, invite in enumerate(self._invites):
            if invite.email == email and invite.status == InviteStatus.PENDING:
                self._invites[i] = invite.model_copy(
                    update={
                        "status": InviteStatus.ACCEPTED,
                        "accepted_at": accepted_at,
                        "accepted_by_user_id": user_id,
                    }
                )
                count += 1
        return count

    async def list_all(self, limit: int = 100, offset: int = 0) -> list[Invite]:
        """List invites, newest first."""
        ordered = sorted(self._invites, key=lambda inv: inv.created_at, reverse=True)
        return ordered[offset : offset + limit]

    async def delete(self, invite_id: InviteId) -> bool:
        """Delete an invite."""
        i = self._index(invite_id)
        if i is None:
            return False
        del self._invites[i]
        return True
