"""Test configuration and shared helpers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from dishka import AsyncContainer

from tkchat.adapter.identity.client import MockIdentityClient
from tkchat.domain.model.invite import Invite
from tkchat.domain.model.profile import Profile
from tkchat.domain.repository import InviteRepository, ProfileRepository
from tkchat.domain.service import RoleService
from tkchat.domain.value import (
    AccountStatus,
    Actor,
    AppRole,
    Email,
    InviteId,
    InviteStatus,
    InviteToken,
    UserId,
)

STRONG_PASSWORD = "Str0ng!pass"


async def seed_user(
    env: AsyncContainer,
    email: str,
    roles: set[AppRole] | None = None,
    password: str = STRONG_PASSWORD,
    full_name: str | None = None,
    account_status: AccountStatus = AccountStatus.ACTIVE,
) -> Actor:
    """Create an identity account, a profile and grants for a test user.

    Every user holds ``user``; ``roles`` adds to it.

    Returns:
        Actor for the seeded user
    """
    identity = await env.get(MockIdentityClient)
    profile_repo = await env.get(ProfileRepository)
    role_service = await env.get(RoleService)

    account = identity.add_account(email, password)
    await profile_repo.save(
        Profile(
            id=account.id,
            email=account.email,
            full_name=full_name,
            account_status=account_status,
        )
    )
    for role in {AppRole.USER} | (roles or set()):
        await role_service.grant(account.id, role)

    return await role_service.resolve_actor(account.id)


async def seed_invite(
    env: AsyncContainer,
    email: str,
    invited_by: UserId | None = None,
    expires_in: timedelta = timedelta(days=7),
    status: InviteStatus = InviteStatus.PENDING,
) -> Invite:
    """Store an invite directly, bypassing the duplicate check."""
    invite_repo = await env.get(InviteRepository)
    now = datetime.now(timezone.utc)
    invite = Invite(
        id=InviteId(uuid4()),
        email=Email(email),
        invited_by=invited_by or UserId(uuid4()),
        token=InviteToken(str(uuid4())),
        status=status,
        created_at=now,
        expires_at=now + expires_in,
    )
    return await invite_repo.save(invite)
