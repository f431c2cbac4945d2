"""Role grant repository interface."""

from abc import ABC, abstractmethod

from tkchat.domain.model.role import RoleGrant
from tkchat.domain.value import AppRole, UserId


class RoleRepository(ABC):
    """Repository for RoleGrant entity.

    The grant table is the single source of truth for role membership.
    """

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[RoleGrant]:
        """List every grant held by a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            Grants, possibly empty
        """
        pass

    @abstractmethod
    async def find_by_users(
        self, user_ids: list[UserId]
    ) -> dict[UserId, set[AppRole]]:
        """Resolve role sets for several users in one query.

        Args:
            user_ids: Users to resolve

        Returns:
            Mapping of user ID to role set; users without grants are absent
        """
        pass

    @abstractmethod
    async def add(self, grant: RoleGrant) -> bool:
        """Insert a grant unless the (user_id, role) pair already exists.

        Args:
            grant: Grant to insert

        Returns:
            True if a row was inserted, False if it already existed
        """
        pass

    @abstractmethod
    async def remove(self, user_id: UserId, role: AppRole) -> bool:
        """Delete one grant.

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def remove_all(self, user_id: UserId) -> int:
        """Delete every grant for a user.

        Returns:
            Number of rows deleted
        """
        pass
