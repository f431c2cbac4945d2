"""Bug report domain service."""

from uuid import uuid4

import logfire

from tkchat.domain.error import NotFoundError, ValidationError
from tkchat.domain.model.bug_report import BugReport
from tkchat.domain.repository import BugReportRepository
from tkchat.domain.value import BugReportId, BugReportStatus, UserId

from .base import Service


class BugReportService(Service):
    """Domain service for bug reports."""

    def __init__(self, bug_report_repository: BugReportRepository) -> None:
        """Initialize bug report service.

        Args:
            bug_report_repository: Bug report repository
        """
        self.bug_report_repository = bug_report_repository

    async def submit(
        self, user_id: UserId, description: str, screenshot_url: str | None = None
    ) -> BugReport:
        """Store a new pending report.

        Raises:
            ValidationError: If the description is blank
        """
        with logfire.span("bug_report_service.submit", user_id=str(user_id)):
            description = description.strip()
            if not description:
                raise ValidationError("Description is required")

            report = BugReport(
                id=BugReportId(uuid4()),
                user_id=user_id,
                description=description,
                screenshot_url=screenshot_url or None,
                status=BugReportStatus.PENDING,
            )
            saved = await self.bug_report_repository.save(report)
            logfire.info(
                "Bug report submitted", report_id=str(saved.id), user_id=str(user_id)
            )
            return saved

    async def get_by_id(self, report_id: BugReportId) -> BugReport:
        """Get a report.

        Raises:
            NotFoundError: If the report does not exist
        """
        report = await self.bug_report_repository.find_by_id(report_id)
        if not report:
            logfire.warn("Bug report not found", report_id=str(report_id))
            raise NotFoundError("BugReport", str(report_id))
        return report

    async def list_all(self) -> list[BugReport]:
        """List every report, newest first."""
        with logfire.span("bug_report_service.list_all"):
            reports = await self.bug_report_repository.list_all()
            logfire.info("Bug reports listed", count=len(reports))
            return reports

    async def toggle_status(self, report_id: BugReportId) -> BugReport:
        """Flip a report between pending and fixed."""
        with logfire.span("bug_report_service.toggle_status", report_id=str(report_id)):
            report = await self.get_by_id(report_id)
            status = (
                BugReportStatus.FIXED
                if report.status == BugReportStatus.PENDING
                else BugReportStatus.PENDING
            )
            saved = await self.bug_report_repository.save(
                report.model_copy(update={"status": status})
            )
            logfire.info(
                "Bug report status changed",
                report_id=str(report_id),
                status=status.value,
            )
            return saved

    async def delete(self, report_id: BugReportId) -> None:
        """Delete a report.

        Raises:
            NotFoundError: If the report does not exist
        """
        with logfire.span("bug_report_service.delete", report_id=str(report_id)):
            deleted = await self.bug_report_repository.delete(report_id)
            if not deleted:
                logfire.warn("Bug report not found", report_id=str(report_id))
                raise NotFoundError("BugReport", str(report_id))
            logfire.info("Bug report deleted", report_id=str(report_id))
