"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tkchat.domain.model import Profile
from tkchat.domain.repository import ProfileRepository
from tkchat.domain.value import Email, ProfileRole, UserId
from tkchat.persistence.mappers import profile_to_dict, row_to_profile
from tkchat.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by account ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[Profile]:
        """Find a profile by email."""
        stmt = select(profiles_table).where(profiles_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[Profile]:
        """Fetch several profiles in one query."""
        if not user_ids:
            return []
        stmt = select(profiles_table).where(profiles_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def list_all(self) -> list[Profile]:
        """List all profiles ordered by full name."""
        stmt = select(profiles_table).order_by(
            profiles_table.c.full_name.asc().nulls_last()
        )
        result = await self.session.execute(stmt)
        return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        profile_dict = profile_to_dict(profile)

        existing = await self.find_by_id(profile.id)

        if existing:
            stmt = (
                update(profiles_table)
                .where(profiles_table.c.id == profile.id)
                .values(**profile_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = insert(profiles_table).values(**profile_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return profile

    async def set_role_cache(self, user_id: UserId, role: ProfileRole) -> None:
        """Overwrite the cached role label."""
        stmt = (
            update(profiles_table)
            .where(profiles_table.c.id == user_id)
            .values(role=role.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, user_id: UserId) -> bool:
        """Delete a profile; grants cascade."""
        stmt = delete(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
