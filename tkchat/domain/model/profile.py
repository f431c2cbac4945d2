"""Profile entity.

One profile per account, keyed by the identity service's account id.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tkchat.domain.model.common import DomainModel, utcnow
from tkchat.domain.value import AccountStatus, Email, ProfileRole, UserId


class Profile(DomainModel):
    """Display metadata for an account.

    ``role`` is a cache of the grant table kept for older readers; the
    grant table is authoritative.
    """

    id: UserId
    email: Optional[Email] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    role: ProfileRole = ProfileRole.USER
    account_status: AccountStatus = AccountStatus.ACTIVE
    created_at: datetime = Field(default_factory=utcnow)
    last_sign_in_at: Optional[datetime] = None

    @property
    def display_name(self) -> str | None:
        """Full name, falling back to the email."""
        if self.full_name:
            return self.full_name
        return self.email.root if self.email else None
