"""Profile domain service."""

import logfire

from tkchat.domain.error import NotFoundError
from tkchat.domain.model.common import utcnow
from tkchat.domain.model.profile import Profile
from tkchat.domain.repository import ProfileRepository
from tkchat.domain.value import Email, UserId

from .base import Service


class ProfileService(Service):
    """Domain service for account profiles."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_id(self, user_id: UserId) -> Profile:
        """Get a profile by account ID.

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.get_by_id", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return profile

    async def get_by_email(self, email: Email) -> Profile | None:
        """Get a profile by email, if any."""
        with logfire.span("profile_service.get_by_email", email=email.root):
            profile = await self.profile_repository.find_by_email(email)
            if profile:
                logfire.info("Profile found", email=email.root, user_id=str(profile.id))
            return profile

    async def ensure_profile(
        self,
        user_id: UserId,
        email: Email,
        full_name: str | None = None,
        phone: str | None = None,
    ) -> Profile:
        """Return the profile for an account, creating it with defaults if absent.

        An existing profile is returned unchanged.

        Args:
            user_id: Account ID from the identity service
            email: Account email
            full_name: Display name for a new profile
            phone: Phone for a new profile

        Returns:
            The existing or newly created profile
        """
        with logfire.span("profile_service.ensure_profile", user_id=str(user_id)):
            existing = await self.profile_repository.find_by_id(user_id)
            if existing:
                return existing

            profile = Profile(
                id=user_id,
                email=email,
                full_name=full_name or None,
                phone=phone or None,
            )
            saved = await self.profile_repository.save(profile)
            logfire.info("Profile created", user_id=str(user_id), email=email.root)
            return saved

    async def update(
        self,
        user_id: UserId,
        full_name: str | None = None,
        phone: str | None = None,
        avatar_url: str | None = None,
    ) -> Profile:
        """Update the editable fields; None leaves a field unchanged.

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.update", user_id=str(user_id)):
            profile = await self.get_by_id(user_id)
            updates: dict[str, str] = {}
            if full_name is not None:
                updates["full_name"] = full_name
            if phone is not None:
                updates["phone"] = phone
            if avatar_url is not None:
                updates["avatar_url"] = avatar_url

            if not updates:
                return profile

            saved = await self.profile_repository.save(profile.model_copy(update=updates))
            logfire.info(
                "Profile updated", user_id=str(user_id), fields=sorted(updates)
            )
            return saved

    async def save(self, profile: Profile) -> Profile:
        """Persist a modified profile."""
        return await self.profile_repository.save(profile)

    async def record_sign_in(self, profile: Profile) -> Profile:
        """Stamp the last sign-in time."""
        with logfire.span("profile_service.record_sign_in", user_id=str(profile.id)):
            return await self.profile_repository.save(
                profile.model_copy(update={"last_sign_in_at": utcnow()})
            )

    async def list_all(self) -> list[Profile]:
        """List every profile ordered by name."""
        with logfire.span("profile_service.list_all"):
            profiles = await self.profile_repository.list_all()
            logfire.info("Profiles listed", count=len(profiles))
            return profiles

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, Profile]:
        """Look up several profiles, keyed by ID."""
        if not user_ids:
            return {}
        profiles = await self.profile_repository.find_by_ids(user_ids)
        return {profile.id: profile for profile in profiles}

    async def delete(self, user_id: UserId) -> bool:
        """Delete a profile.

        Returns:
            True if a profile was deleted
        """
        with logfire.span("profile_service.delete", user_id=str(user_id)):
            deleted = await self.profile_repository.delete(user_id)
            logfire.info("Profile deleted", user_id=str(user_id), deleted=deleted)
            return deleted
