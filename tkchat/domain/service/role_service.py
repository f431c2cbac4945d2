"""Role store domain service."""

from uuid import uuid4

import logfire

from tkchat.domain.error import NotFoundError, UnauthorizedError
from tkchat.domain.model.role import RoleGrant
from tkchat.domain.repository import ProfileRepository, RoleRepository
from tkchat.domain.value import Actor, AppRole, RoleGrantId, UserId

from .authorization import Action, can_act_on, can_assign_role, profile_role_for
from .base import Service


class RoleService(Service):
    """Domain service for role grants.

    The grant table is authoritative; every change here also refreshes the
    role label cached on the profile.
    """

    def __init__(
        self, role_repository: RoleRepository, profile_repository: ProfileRepository
    ) -> None:
        """Initialize role service.

        Args:
            role_repository: Role grant repository
            profile_repository: Profile repository, for the cached label
        """
        self.role_repository = role_repository
        self.profile_repository = profile_repository

    async def roles_of(self, user_id: UserId) -> set[AppRole]:
        """Get the role set held by a user."""
        grants = await self.role_repository.find_by_user(user_id)
        return {grant.role for grant in grants}

    async def roles_of_many(self, user_ids: list[UserId]) -> dict[UserId, set[AppRole]]:
        """Get role sets for several users; users without grants map to empty."""
        found = await self.role_repository.find_by_users(user_ids)
        return {user_id: found.get(user_id, set()) for user_id in user_ids}

    async def resolve_actor(self, user_id: UserId) -> Actor:
        """Build the actor value for an authenticated user.

        Args:
            user_id: Authenticated account ID

        Returns:
            Actor carrying the server-side role set
        """
        with logfire.span("role_service.resolve_actor", user_id=str(user_id)):
            roles = await self.roles_of(user_id)
            logfire.info(
                "Actor resolved",
                user_id=str(user_id),
                roles=sorted(role.value for role in roles),
            )
            return Actor(user_id=user_id, roles=frozenset(roles))

    async def grant(self, user_id: UserId, role: AppRole) -> bool:
        """Grant a role. Granting a held role is a no-op.

        Returns:
            True if a new grant was written
        """
        with logfire.span(
            "role_service.grant", user_id=str(user_id), role=role.value
        ):
            added = await self.role_repository.add(
                RoleGrant(id=RoleGrantId(uuid4()), user_id=user_id, role=role)
            )
            await self._refresh_cache(user_id)
            logfire.info(
                "Role granted" if added else "Role already held",
                user_id=str(user_id),
                role=role.value,
            )
            return added

    async def revoke(self, user_id: UserId, role: AppRole) -> bool:
        """Revoke a role.

        Returns:
            True if a grant was removed
        """
        with logfire.span(
            "role_service.revoke", user_id=str(user_id), role=role.value
        ):
            removed = await self.role_repository.remove(user_id, role)
            await self._refresh_cache(user_id)
            logfire.info(
                "Role revoked" if removed else "Role not held",
                user_id=str(user_id),
                role=role.value,
            )
            return removed

    async def set_role(
        self, actor: Actor, target_id: UserId, role: AppRole
    ) -> set[AppRole]:
        """Replace a user's grants with {user, role}.

        Setting ``user`` strips admin and owner.

        Args:
            actor: User performing the change
            target_id: User whose role changes
            role: Role to hold in addition to ``user``

        Returns:
            The target's new role set

        Raises:
            NotFoundError: If the target has no profile
            UnauthorizedError: If the policy denies the change
        """
        with logfire.span(
            "role_service.set_role",
            actor_id=str(actor.user_id),
            target_id=str(target_id),
            role=role.value,
        ):
            profile = await self.profile_repository.find_by_id(target_id)
            if not profile:
                logfire.warn("Target user not found", target_id=str(target_id))
                raise NotFoundError("User", str(target_id))

            target_roles = await self.roles_of(target_id)
            allowed = can_act_on(
                actor.roles, actor.user_id, target_id, target_roles, Action.CHANGE_ROLE
            ) and can_assign_role(actor.roles, role)
            if not allowed:
                logfire.warn(
                    "Role change denied",
                    actor_id=str(actor.user_id),
                    target_id=str(target_id),
                    role=role.value,
                )
                raise UnauthorizedError(
                    Action.CHANGE_ROLE.value, str(actor.user_id), str(target_id)
                )

            desired = {AppRole.USER, role}
            for stale in target_roles - desired:
                await self.role_repository.remove(target_id, stale)
            for missing in desired - target_roles:
                await self.role_repository.add(
                    RoleGrant(id=RoleGrantId(uuid4()), user_id=target_id, role=missing)
                )
            await self._refresh_cache(target_id)

            logfire.info(
                "Role changed",
                actor_id=str(actor.user_id),
                target_id=str(target_id),
                roles=sorted(r.value for r in desired),
            )
            return desired

    async def ensure_default(self, user_id: UserId) -> set[AppRole]:
        """Seed the `user` grant for an account that holds no role yet.

        Returns:
            The account's role set after seeding
        """
        with logfire.span("role_service.ensure_default", user_id=str(user_id)):
            roles = await self.roles_of(user_id)
            if roles:
                return roles
            await self.grant(user_id, AppRole.USER)
            logfire.info("Default role seeded", user_id=str(user_id))
            return {AppRole.USER}

    async def remove_all(self, user_id: UserId) -> int:
        """Drop every grant a user holds."""
        with logfire.span("role_service.remove_all", user_id=str(user_id)):
            removed = await self.role_repository.remove_all(user_id)
            logfire.info("Grants removed", user_id=str(user_id), count=removed)
            return removed

    async def _refresh_cache(self, user_id: UserId) -> None:
        roles = await self.roles_of(user_id)
        await self.profile_repository.set_role_cache(user_id, profile_role_for(roles))
