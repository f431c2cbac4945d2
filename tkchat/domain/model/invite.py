"""Invite entity.

Registration is invite-only. An administrator issues an invite for one
email address; the invitee registers through a link carrying the token.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tkchat.domain.model.common import DomainModel, utcnow
from tkchat.domain.value import Email, InviteId, InviteStatus, InviteToken, UserId


class Invite(DomainModel):
    """Single-use, time-bounded registration credential for one email.

    Business rules:
    - At most one active (pending and unexpired) invite per email is acted on
    - Pending moves to accepted exactly once, at successful registration
    - Expiry is computed when read; the stored status stays pending
    """

    id: InviteId
    email: Email
    invited_by: UserId
    token: InviteToken
    status: InviteStatus = InviteStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    accepted_by_user_id: Optional[UserId] = None

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the expiry instant has passed."""
        return self.expires_at <= (now or utcnow())

    def is_active(self, now: datetime | None = None) -> bool:
        """Pending and not yet expired; the only state that admits registration."""
        return self.status == InviteStatus.PENDING and not self.is_expired(now)

    def effective_status(self, now: datetime | None = None) -> InviteStatus:
        """Status as presented to readers, with staleness applied."""
        if self.status == InviteStatus.PENDING and self.is_expired(now):
            return InviteStatus.EXPIRED
        return self.status
