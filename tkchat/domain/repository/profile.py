"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tkchat.domain.model.profile import Profile
from tkchat.domain.value import Email, ProfileRole, UserId


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by account ID.

        Args:
            user_id: The account's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[Profile]:
        """Find a profile by normalized email.

        Args:
            email: The account email

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[Profile]:
        """Fetch several profiles at once; unknown IDs are skipped."""
        pass

    @abstractmethod
    async def list_all(self) -> list[Profile]:
        """List all profiles ordered by full name."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass

    @abstractmethod
    async def set_role_cache(self, user_id: UserId, role: ProfileRole) -> None:
        """Overwrite the denormalized role label on a profile.

        Args:
            user_id: The account's unique identifier
            role: Label derived from the grant set
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a profile.

        Returns:
            True if a row was deleted
        """
        pass
