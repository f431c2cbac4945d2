"""List users use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from tkchat.domain.service import (
    Action,
    Capability,
    ProfileService,
    RoleService,
    can_act_on,
    require_capability,
)
from tkchat.domain.value import AccountStatus, Actor, AppRole, UserId


class ListUsersRequest(BaseModel):
    """List users request."""

    actor: Actor


class UserItem(BaseModel):
    """One row of the admin console's user table.

    The permission flags come from the same policy that guards the
    mutations, so the console never offers an action the server refuses.
    """

    user_id: str
    email: str | None
    full_name: str | None
    phone: str | None
    avatar_url: str | None
    account_status: AccountStatus
    roles: list[AppRole]
    created_at: datetime
    last_sign_in_at: datetime | None
    can_change_role: bool
    can_change_status: bool
    can_delete: bool


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserItem]


class ListUsersUseCase:
    """Use case for the admin console's user list."""

    def __init__(
        self, profile_service: ProfileService, role_service: RoleService
    ) -> None:
        """Initialize list users use case.

        Args:
            profile_service: Profile domain service
            role_service: Role store
        """
        self.profile_service = profile_service
        self.role_service = role_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """List every account with its roles and the actor's permissions on it.

        Raises:
            UnauthorizedError: If the actor cannot manage users
        """
        with logfire.span(
            "list_users.execute", actor_id=str(request.actor.user_id)
        ):
            actor = request.actor
            require_capability(actor, Capability.MANAGE_USERS)

            profiles = await self.profile_service.list_all()
            roles = await self.role_service.roles_of_many([p.id for p in profiles])

            def allowed(
                target_id: UserId, target_roles: set[AppRole], action: Action
            ) -> bool:
                return can_act_on(
                    actor.roles, actor.user_id, target_id, target_roles, action
                )

            users = []
            for profile in profiles:
                target_roles = roles[profile.id]
                users.append(
                    UserItem(
                        user_id=str(profile.id),
                        email=profile.email.root if profile.email else None,
                        full_name=profile.full_name,
                        phone=profile.phone,
                        avatar_url=profile.avatar_url,
                        account_status=profile.account_status,
                        roles=sorted(target_roles, key=lambda role: role.value),
                        created_at=profile.created_at,
                        last_sign_in_at=profile.last_sign_in_at,
                        can_change_role=allowed(
                            profile.id, target_roles, Action.CHANGE_ROLE
                        ),
                        can_change_status=allowed(
                            profile.id, target_roles, Action.SET_ACCOUNT_STATUS
                        ),
                        can_delete=allowed(
                            profile.id, target_roles, Action.DELETE_USER
                        ),
                    )
                )

            return ListUsersResponse(users=users)
