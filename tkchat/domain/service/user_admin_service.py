"""Account administration domain service."""

import logfire

from tkchat.domain.error import NotFoundError, UnauthorizedError
from tkchat.domain.model.profile import Profile
from tkchat.domain.repository import ProfileRepository
from tkchat.domain.value import AccountStatus, Actor, UserId

from .authorization import Action, can_act_on
from .base import Service
from .identity_service import IdentityService
from .role_service import RoleService


class UserAdminService(Service):
    """Domain service for actions one user takes on another's account.

    Every action is checked against the authorization policy before any
    row is touched.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        role_service: RoleService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize user admin service.

        Args:
            profile_repository: Profile repository
            role_service: Role store, for target role sets and grant cleanup
            identity_service: Identity service, for account deletion
        """
        self.profile_repository = profile_repository
        self.role_service = role_service
        self.identity_service = identity_service

    async def _authorize(
        self, actor: Actor, target_id: UserId, action: Action
    ) -> Profile:
        target = await self.profile_repository.find_by_id(target_id)
        if not target:
            logfire.warn("Target user not found", target_id=str(target_id))
            raise NotFoundError("User", str(target_id))

        target_roles = await self.role_service.roles_of(target_id)
        if not can_act_on(actor.roles, actor.user_id, target_id, target_roles, action):
            logfire.warn(
                "Action denied",
                action=action.value,
                actor_id=str(actor.user_id),
                target_id=str(target_id),
            )
            raise UnauthorizedError(action.value, str(actor.user_id), str(target_id))
        return target

    async def set_account_status(
        self, actor: Actor, target_id: UserId, status: AccountStatus
    ) -> Profile:
        """Activate or deactivate an account.

        Args:
            actor: User performing the change
            target_id: Account to change
            status: New status

        Returns:
            Updated profile

        Raises:
            NotFoundError: If the target does not exist
            UnauthorizedError: If the policy denies the change
        """
        with logfire.span(
            "user_admin_service.set_account_status",
            actor_id=str(actor.user_id),
            target_id=str(target_id),
            status=status.value,
        ):
            target = await self._authorize(actor, target_id, Action.SET_ACCOUNT_STATUS)
            saved = await self.profile_repository.save(
                target.model_copy(update={"account_status": status})
            )
            logfire.info(
                "Account status changed",
                target_id=str(target_id),
                status=status.value,
            )
            return saved

    async def delete_user(self, actor: Actor, target_id: UserId) -> None:
        """Delete an account with its grants and profile.

        The identity account goes first; if that call fails nothing local
        is removed.

        Raises:
            NotFoundError: If the target does not exist
            UnauthorizedError: If the policy denies the deletion
        """
        with logfire.span(
            "user_admin_service.delete_user",
            actor_id=str(actor.user_id),
            target_id=str(target_id),
        ):
            await self._authorize(actor, target_id, Action.DELETE_USER)
            await self.identity_service.delete_account(target_id)
            await self.role_service.remove_all(target_id)
            await self.profile_repository.delete(target_id)
            logfire.info(
                "User deleted", actor_id=str(actor.user_id), target_id=str(target_id)
            )
