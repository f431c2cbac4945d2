"""Set user role use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tkchat.domain.service import RoleService
from tkchat.domain.value import Actor, AppRole, UserId


class SetUserRoleRequest(BaseModel):
    """Set user role request."""

    actor: Actor
    target_id: str
    role: AppRole


class SetUserRoleResponse(BaseModel):
    """Set user role response."""

    user_id: str
    roles: list[AppRole]


class SetUserRoleUseCase:
    """Use case for changing another user's role."""

    def __init__(self, role_service: RoleService) -> None:
        """Initialize set user role use case.

        Args:
            role_service: Role store
        """
        self.role_service = role_service

    async def execute(self, request: SetUserRoleRequest) -> SetUserRoleResponse:
        """Change a role through the role store, which enforces the policy.

        Raises:
            NotFoundError: If the target does not exist
            UnauthorizedError: If the policy denies the change
        """
        with logfire.span(
            "set_user_role.execute", actor_id=str(request.actor.user_id)
        ):
            target_id = UserId(UUID(request.target_id))
            roles = await self.role_service.set_role(
                request.actor, target_id, request.role
            )
            return SetUserRoleResponse(
                user_id=str(target_id),
                roles=sorted(roles, key=lambda role: role.value),
            )
