"""PostgreSQL implementation of BugReport repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tkchat.domain.model import BugReport
from tkchat.domain.repository import BugReportRepository
from tkchat.domain.value import BugReportId
from tkchat.persistence.mappers import bug_report_to_dict, row_to_bug_report
from tkchat.persistence.tables import bug_reports_table


class PostgresBugReportRepository(BugReportRepository):
    """PostgreSQL implementation of BugReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, report_id: BugReportId) -> Optional[BugReport]:
        """Find a report by ID."""
        stmt = select(bug_reports_table).where(bug_reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_bug_report(dict(row)) if row else None

    async def list_all(self) -> list[BugReport]:
        """List all reports, newest first."""
        stmt = select(bug_reports_table).order_by(bug_reports_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_bug_report(dict(row)) for row in result.mappings().all()]

    async def save(self, report: BugReport) -> BugReport:
        """Save a report (create or update)."""
        report_dict = bug_report_to_dict(report)

        existing = await self.find_by_id(report.id)

        if existing:
            stmt = (
                update(bug_reports_table)
                .where(bug_reports_table.c.id == report.id)
                .values(**report_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = insert(bug_reports_table).values(**report_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return report

    async def delete(self, report_id: BugReportId) -> bool:
        """Delete a report."""
        stmt = delete(bug_reports_table).where(bug_reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
