"""Role grant entity."""

from datetime import datetime

from pydantic import Field

from tkchat.domain.model.common import DomainModel, utcnow
from tkchat.domain.value import AppRole, RoleGrantId, UserId


class RoleGrant(DomainModel):
    """One role held by one user. Unique per (user_id, role)."""

    id: RoleGrantId
    user_id: UserId
    role: AppRole
    created_at: datetime = Field(default_factory=utcnow)
