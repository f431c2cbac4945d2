"""Unit tests for ListInvitesUseCase and RevokeInviteUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from tkchat.application.usecase.invite import (
    ListInvitesRequest,
    ListInvitesUseCase,
    RevokeInviteRequest,
    RevokeInviteUseCase,
)
from tkchat.domain.error import NotFoundError, UnauthorizedError
from tkchat.domain.value import AppRole, InviteStatus
from tests.conftest import seed_invite, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListInvites:
    """Tests for ListInvitesUseCase."""

    @pytest.mark.asyncio
    async def test_stale_pending_invites_listed_as_expired(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListInvitesUseCase)
        admin = await seed_user(unit_env, "admin@example.com", {AppRole.ADMIN})
        fresh = await seed_invite(unit_env, "fresh@example.com")
        stale = await seed_invite(
            unit_env, "stale@example.com", expires_in=timedelta(days=-1)
        )

        # Act
        response = await use_case.execute(ListInvitesRequest(actor=admin))

        # Assert
        statuses = {item.invite_id: item.status for item in response.invites}
        assert statuses[str(fresh.id)] == InviteStatus.PENDING
        assert statuses[str(stale.id)] == InviteStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_plain_user_cannot_list(self, unit_env):
        use_case = await unit_env.get(ListInvitesUseCase)
        user = await seed_user(unit_env, "user@example.com")

        with pytest.raises(UnauthorizedError):
            await use_case.execute(ListInvitesRequest(actor=user))


class TestRevokeInvite:
    """Tests for RevokeInviteUseCase."""

    @pytest.mark.asyncio
    async def test_admin_revokes_invite(self, unit_env):
        revoke = await unit_env.get(RevokeInviteUseCase)
        list_invites = await unit_env.get(ListInvitesUseCase)
        admin = await seed_user(unit_env, "admin@example.com", {AppRole.ADMIN})
        invite = await seed_invite(unit_env, "friend@example.com")

        await revoke.execute(RevokeInviteRequest(actor=admin, invite_id=str(invite.id)))

        response = await list_invites.execute(ListInvitesRequest(actor=admin))
        assert response.invites == []

    @pytest.mark.asyncio
    async def test_revoke_unknown_invite(self, unit_env):
        revoke = await unit_env.get(RevokeInviteUseCase)
        admin = await seed_user(unit_env, "admin@example.com", {AppRole.ADMIN})

        with pytest.raises(NotFoundError):
            await revoke.execute(
                RevokeInviteRequest(actor=admin, invite_id=str(uuid4()))
            )
