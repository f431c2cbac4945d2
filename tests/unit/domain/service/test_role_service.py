"""Unit tests for RoleService."""

from uuid import uuid4

import pytest

from tkchat.domain.error import NotFoundError, UnauthorizedError
from tkchat.domain.repository import ProfileRepository, RoleRepository
from tkchat.domain.service import RoleService
from tkchat.domain.value import AppRole, ProfileRole, UserId
from tests.conftest import seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGrants:
    """Tests for grant, revoke and role resolution."""

    @pytest.mark.asyncio
    async def test_grant_is_idempotent(self, unit_env):
        """Granting a held role adds nothing."""
        # Arrange
        role_service = await unit_env.get(RoleService)
        role_repo = await unit_env.get(RoleRepository)
        actor = await seed_user(unit_env, "alice@example.com")

        # Act
        added = await role_service.grant(actor.user_id, AppRole.USER)

        # Assert
        assert added is False
        assert len(await role_repo.find_by_user(actor.user_id)) == 1

    @pytest.mark.asyncio
    async def test_profile_cache_follows_grants(self, unit_env):
        """The cached profile role tracks admin membership."""
        role_service = await unit_env.get(RoleService)
        profile_repo = await unit_env.get(ProfileRepository)
        actor = await seed_user(unit_env, "bob@example.com")

        await role_service.grant(actor.user_id, AppRole.ADMIN)
        promoted = await profile_repo.find_by_id(actor.user_id)
        await role_service.revoke(actor.user_id, AppRole.ADMIN)
        demoted = await profile_repo.find_by_id(actor.user_id)

        assert promoted.role == ProfileRole.ADMIN
        assert demoted.role == ProfileRole.USER

    @pytest.mark.asyncio
    async def test_resolve_actor_reads_grant_table(self, unit_env):
        role_service = await unit_env.get(RoleService)
        actor = await seed_user(unit_env, "owner@example.com", {AppRole.OWNER})

        resolved = await role_service.resolve_actor(actor.user_id)

        assert resolved.roles == frozenset({AppRole.USER, AppRole.OWNER})
        assert resolved.is_admin

    @pytest.mark.asyncio
    async def test_roles_of_many_includes_users_without_grants(self, unit_env):
        role_service = await unit_env.get(RoleService)
        actor = await seed_user(unit_env, "carol@example.com", {AppRole.ADMIN})
        stranger = UserId(uuid4())

        roles = await role_service.roles_of_many([actor.user_id, stranger])

        assert roles[actor.user_id] == {AppRole.USER, AppRole.ADMIN}
        assert roles[stranger] == set()


    @pytest.mark.asyncio
    async def test_ensure_default_seeds_user_once(self, unit_env):
        role_service = await unit_env.get(RoleService)
        role_repo = await unit_env.get(RoleRepository)
        user_id = UserId(uuid4())

        first = await role_service.ensure_default(user_id)
        second = await role_service.ensure_default(user_id)

        assert first == second == {AppRole.USER}
        assert len(await role_repo.find_by_user(user_id)) == 1

    @pytest.mark.asyncio
    async def test_ensure_default_leaves_existing_grants(self, unit_env):
        role_service = await unit_env.get(RoleService)
        actor = await seed_user(unit_env, "owner@example.com", {AppRole.OWNER})

        roles = await role_service.ensure_default(actor.user_id)

        assert roles == {AppRole.USER, AppRole.OWNER}


class TestSetRole:
    """Tests for set_role."""

    @pytest.mark.asyncio
    async def test_admin_promotes_plain_user(self, unit_env):
        """Admins may make a plain user an admin."""
        # Arrange
        role_service = await unit_env.get(RoleService)
        admin = await seed_user(unit_env, "admin@example.com", {AppRole.ADMIN})
        target = await seed_user(unit_env, "user@example.com")

        # Act
        roles = await role_service.set_role(admin, target.user_id, AppRole.ADMIN)

        # Assert
        assert roles == {AppRole.USER, AppRole.ADMIN}
        assert await role_service.roles_of(target.user_id) == roles

    @pytest.mark.asyncio
    async def test_admin_cannot_demote_admin(self, unit_env):
        """A denied change leaves the target's grants untouched."""
        # Arrange
        role_service = await unit_env.get(RoleService)
        role_repo = await unit_env.get(RoleRepository)
        admin = await seed_user(unit_env, "admin1@example.com", {AppRole.ADMIN})
        other = await seed_user(unit_env, "admin2@example.com", {AppRole.ADMIN})
        before = await role_repo.find_by_user(other.user_id)

        # Act / Assert
        with pytest.raises(UnauthorizedError):
            await role_service.set_role(admin, other.user_id, AppRole.USER)

        assert await role_repo.find_by_user(other.user_id) == before

    @pytest.mark.asyncio
    async def test_admin_cannot_mint_owner(self, unit_env):
        role_service = await unit_env.get(RoleService)
        admin = await seed_user(unit_env, "admin@example.com", {AppRole.ADMIN})
        target = await seed_user(unit_env, "user@example.com")

        with pytest.raises(UnauthorizedError):
            await role_service.set_role(admin, target.user_id, AppRole.OWNER)

        assert await role_service.roles_of(target.user_id) == {AppRole.USER}

    @pytest.mark.asyncio
    async def test_owner_demotes_admin(self, unit_env):
        """Setting user strips admin and refreshes the cache."""
        role_service = await unit_env.get(RoleService)
        profile_repo = await unit_env.get(ProfileRepository)
        owner = await seed_user(unit_env, "owner@example.com", {AppRole.OWNER})
        admin = await seed_user(unit_env, "admin@example.com", {AppRole.ADMIN})

        roles = await role_service.set_role(owner, admin.user_id, AppRole.USER)

        assert roles == {AppRole.USER}
        assert await role_service.roles_of(admin.user_id) == {AppRole.USER}
        profile = await profile_repo.find_by_id(admin.user_id)
        assert profile.role == ProfileRole.USER

    @pytest.mark.asyncio
    async def test_owner_cannot_change_own_role(self, unit_env):
        role_service = await unit_env.get(RoleService)
        owner = await seed_user(unit_env, "owner@example.com", {AppRole.OWNER})

        with pytest.raises(UnauthorizedError):
            await role_service.set_role(owner, owner.user_id, AppRole.USER)

    @pytest.mark.asyncio
    async def test_unknown_target_raises_not_found(self, unit_env):
        role_service = await unit_env.get(RoleService)
        owner = await seed_user(unit_env, "owner@example.com", {AppRole.OWNER})

        with pytest.raises(NotFoundError):
            await role_service.set_role(owner, UserId(uuid4()), AppRole.ADMIN)
