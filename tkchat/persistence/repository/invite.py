"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tkchat.domain.model import Invite
from tkchat.domain.repository import InviteRepository
from tkchat.domain.value import Email, InviteId, InviteStatus, InviteToken, UserId
from tkchat.persistence.mappers import invite_to_dict, row_to_invite
from tkchat.persistence.tables import invites_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_token(self, token: InviteToken) -> Optional[Invite]:
        """Find an invite by its token."""
        stmt = select(invites_table).where(invites_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_active_by_email(
        self, email: Email, now: datetime
    ) -> Optional[Invite]:
        """Find the newest pending, unexpired invite for an email.

        Uses idx_invites_email_status.
        """
        stmt = (
            select(invites_table)
            .where(
                and_(
                    invites_table.c.email == email.root,
                    invites_table.c.status == InviteStatus.PENDING.value,
                    invites_table.c.expires_at > now,
                )
            )
            .order_by(invites_table.c.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update)."""
        invite_dict = invite_to_dict(invite)

        existing = await self.find_by_id(invite.id)

        if existing:
            stmt = (
                update(invites_table)
                .where(invites_table.c.id == invite.id)
                .values(**invite_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = insert(invites_table).values(**invite_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return invite

    async def claim(self, invite_id: InviteId, accepted_at: datetime) -> bool:
        """Conditionally flip pending to accepted.

        The row lock taken by the UPDATE serializes concurrent claims; only
        one of them sees the pending row.
        """
        stmt = (
            update(invites_table)
            .where(
                and_(
                    invites_table.c.id == invite_id,
                    invites_table.c.status == InviteStatus.PENDING.value,
                    invites_table.c.expires_at > accepted_at,
                )
            )
            .values(status=InviteStatus.ACCEPTED.value, accepted_at=accepted_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1  # type: ignore[attr-defined]

    async def release(self, invite_id: InviteId) -> None:
        """Put a claimed invite back to pending."""
        stmt = (
            update(invites_table)
            .where(
                and_(
                    invites_table.c.id == invite_id,
                    invites_table.c.status == InviteStatus.ACCEPTED.value,
                    invites_table.c.accepted_by_user_id.is_(None),
                )
            )
            .values(status=InviteStatus.PENDING.value, accepted_at=None)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def accept_pending_for_email(
        self, email: Email, user_id: UserId, accepted_at: datetime
    ) -> int:
        """Accept every pending invite for an email."""
        stmt = (
            update(invites_table)
            .where(
                and_(
                    invites_table.c.email == email.root,
                    invites_table.c.status == InviteStatus.PENDING.value,
                )
            )
            .values(
                status=InviteStatus.ACCEPTED.value,
                accepted_at=accepted_at,
                accepted_by_user_id=user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def list_all(self, limit: int = 100, offset: int = 0) -> list[Invite]:
        """List invites, newest first."""
        stmt = (
            select(invites_table)
            .order_by(invites_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def delete(self, invite_id: InviteId) -> bool:
        """Delete an invite."""
        stmt = delete(invites_table).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
