"""In-memory role grant repository for testing."""

from tkchat.domain.model.role import RoleGrant
from tkchat.domain.repository.role import RoleRepository
from tkchat.domain.value import AppRole, UserId


class InMemoryRoleRepository(RoleRepository):
    """In-memory implementation of RoleRepository for testing."""

    def __init__(self) -> None:
        self._grants: list[RoleGrant] = []

    async def find_by_user(self, user_id: UserId) -> list[RoleGrant]:
        """List every grant held by a user."""
        return [grant for grant in self._grants if grant.user_id == user_id]

    async def find_by_users(
        self, user_ids: list[UserId]
    ) -> dict[UserId, set[AppRole]]:
        """Resolve role sets for several users."""
        wanted = set(user_ids)
        roles: dict[UserId, set[AppRole]] = {}
        for grant in self._grants:
            if grant.user_id in wanted:
                roles.setdefault(grant.user_id, set()).add(grant.role)
        return roles

    async def add(self, grant: RoleGrant) -> bool:
        """Insert a grant unless the pair already exists."""
        for existing in self._grants:
            if existing.user_id == grant.user_id and existing.role == grant.role:
                return False
        self._grants.append(grant)
        return True

    async def remove(self, user_id: UserId, role: AppRole) -> bool:
        """Delete one grant."""
        before = len(self._grants)
        self._grants = [
            g for g in self._grants if not (g.user_id == user_id and g.role == role)
        ]
        return len(self._grants) < before

    async def remove_all(self, user_id: UserId) -> int:
        """Delete every grant for a user."""
        before = len(self._grants)
        self._grants = [g for g in self._grants if g.user_id != user_id]
        return before - len(self._grants)
