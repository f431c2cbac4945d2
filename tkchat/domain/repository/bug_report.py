"""Bug report repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tkchat.domain.model.bug_report import BugReport
from tkchat.domain.value import BugReportId


class BugReportRepository(ABC):
    """Repository for BugReport entity."""

    @abstractmethod
    async def find_by_id(self, report_id: BugReportId) -> Optional[BugReport]:
        """Find a report by ID."""
        pass

    @abstractmethod
    async def list_all(self) -> list[BugReport]:
        """List all reports, newest first."""
        pass

    @abstractmethod
    async def save(self, report: BugReport) -> BugReport:
        """Save a report (create or update)."""
        pass

    @abstractmethod
    async def delete(self, report_id: BugReportId) -> bool:
        """Delete a report.

        Returns:
            True if a row was deleted
        """
        pass
