"""In-memory profile repository for testing."""

from typing import Optional

from tkchat.domain.model.profile import Profile
from tkchat.domain.repository.profile import ProfileRepository
from tkchat.domain.value import Email, ProfileRole, UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by account ID."""
        return self._profiles.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[Profile]:
        """Find a profile by email."""
        for profile in self._profiles.values():
            if profile.email == email:
                return profile
        return None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[Profile]:
        """Fetch several profiles; unknown IDs are skipped."""
        return [self._profiles[uid] for uid in user_ids if uid in self._profiles]

    async def list_all(self) -> list[Profile]:
        """List all profiles ordered by full name, unnamed last."""
        return sorted(
            self._profiles.values(),
            key=lambda p: (p.full_name is None, p.full_name or ""),
        )

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        self._profiles[profile.id] = profile
        return profile

    async def set_role_cache(self, user_id: UserId, role: ProfileRole) -> None:
        """Overwrite the cached role label."""
        profile = self._profiles.get(user_id)
        if profile:
            self._profiles[user_id] = profile.model_copy(update={"role": role})

    async def delete(self, user_id: UserId) -> bool:
        """Delete a profile."""
        return self._profiles.pop(user_id, None) is not None
