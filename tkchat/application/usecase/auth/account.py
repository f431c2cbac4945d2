"""Account view shared by the auth use cases."""

from datetime import datetime

from pydantic import BaseModel

from tkchat.domain.model.profile import Profile
from tkchat.domain.service import is_elevated
from tkchat.domain.value import AccountStatus, AppRole


class AccountInfo(BaseModel):
    """Signed-in account as returned to the console."""

    user_id: str
    email: str | None
    full_name: str | None
    phone: str | None
    avatar_url: str | None
    account_status: AccountStatus
    roles: list[AppRole]
    is_admin: bool
    created_at: datetime
    last_sign_in_at: datetime | None


def account_info(profile: Profile, roles: set[AppRole]) -> AccountInfo:
    """Build the account view from a profile and its role set."""
    return AccountInfo(
        user_id=str(profile.id),
        email=profile.email.root if profile.email else None,
        full_name=profile.full_name,
        phone=profile.phone,
        avatar_url=profile.avatar_url,
        account_status=profile.account_status,
        roles=sorted(roles, key=lambda role: role.value),
        is_admin=is_elevated(roles),
        created_at=profile.created_at,
        last_sign_in_at=profile.last_sign_in_at,
    )
