"""In-memory bug report repository for testing."""

from typing import Optional

from tkchat.domain.model.bug_report import BugReport
from tkchat.domain.repository.bug_report import BugReportRepository
from tkchat.domain.value import BugReportId


class InMemoryBugReportRepository(BugReportRepository):
    """In-memory implementation of BugReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[BugReportId, BugReport] = {}

    async def find_by_id(self, report_id: BugReportId) -> Optional[BugReport]:
        """Find a report by ID."""
        return self._reports.get(report_id)

    async def list_all(self) -> list[BugReport]:
        """List all reports, newest first."""
        return sorted(self._reports.values(), key=lambda r: r.created_at, reverse=True)

    async def save(self, report: BugReport) -> BugReport:
        """Save a report (create or update)."""
        self._reports[report.id] = report
        return report

    async def delete(self, report_id: BugReportId) -> bool:
        """Delete a report."""
        return self._reports.pop(report_id, None) is not None
