"""PostgreSQL implementation of RoleGrant repository."""

from collections import defaultdict

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tkchat.domain.model import RoleGrant
from tkchat.domain.repository import RoleRepository
from tkchat.domain.value import AppRole, UserId
from tkchat.persistence.mappers import role_grant_to_dict, row_to_role_grant
from tkchat.persistence.tables import user_roles_table


class PostgresRoleRepository(RoleRepository):
    """PostgreSQL implementation of RoleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: UserId) -> list[RoleGrant]:
        """List every grant held by a user."""
        stmt = select(user_roles_table).where(user_roles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return [row_to_role_grant(dict(row)) for row in result.mappings().all()]

    async def find_by_users(
        self, user_ids: list[UserId]
    ) -> dict[UserId, set[AppRole]]:
        """Resolve role sets for several users (batch query)."""
        if not user_ids:
            return {}

        stmt = select(user_roles_table.c.user_id, user_roles_table.c.role).where(
            user_roles_table.c.user_id.in_(user_ids)
        )
        result = await self.session.execute(stmt)

        roles: dict[UserId, set[AppRole]] = defaultdict(set)
        for row in result.all():
            roles[UserId(row.user_id)].add(AppRole(row.role))
        return dict(roles)

    async def add(self, grant: RoleGrant) -> bool:
        """Insert a grant, ignoring an existing (user_id, role) pair."""
        stmt = (
            insert(user_roles_table)
            .values(**role_grant_to_dict(grant))
            .on_conflict_do_nothing(constraint="uq_user_roles_user_role")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def remove(self, user_id: UserId, role: AppRole) -> bool:
        """Delete one grant."""
        stmt = delete(user_roles_table).where(
            and_(
                user_roles_table.c.user_id == user_id,
                user_roles_table.c.role == role.value,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def remove_all(self, user_id: UserId) -> int:
        """Delete every grant for a user."""
        stmt = delete(user_roles_table).where(user_roles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
