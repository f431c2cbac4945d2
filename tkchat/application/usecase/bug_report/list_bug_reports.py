"""List bug reports use case."""

from datetime import date, datetime

import logfire
from pydantic import BaseModel

from tkchat.domain.service import (
    BugReportService,
    Capability,
    ProfileService,
    require_capability,
)
from tkchat.domain.value import Actor, BugReportStatus

UNKNOWN_USER = "Unknown user"


class ListBugReportsRequest(BaseModel):
    """List bug reports request with optional filters."""

    actor: Actor
    status: BugReportStatus | None = None
    name: str | None = None  # Case-insensitive substring of the reporter name
    date_from: date | None = None  # Inclusive
    date_to: date | None = None  # Inclusive


class BugReportItem(BaseModel):
    """Bug report as shown in the admin console."""

    report_id: str
    user_id: str | None
    user_name: str
    description: str
    screenshot_url: str | None
    status: BugReportStatus
    created_at: datetime


class ListBugReportsResponse(BaseModel):
    """List bug reports response."""

    reports: list[BugReportItem]


class ListBugReportsUseCase:
    """Use case for the admin console's bug report list."""

    def __init__(
        self, bug_report_service: BugReportService, profile_service: ProfileService
    ) -> None:
        """Initialize list bug reports use case.

        Args:
            bug_report_service: Bug report domain service
            profile_service: Profile domain service
        """
        self.bug_report_service = bug_report_service
        self.profile_service = profile_service

    async def execute(self, request: ListBugReportsRequest) -> ListBugReportsResponse:
        """List reports newest first, filtered.

        Raises:
            UnauthorizedError: If the actor cannot manage bug reports
        """
        with logfire.span(
            "list_bug_reports.execute", actor_id=str(request.actor.user_id)
        ):
            require_capability(request.actor, Capability.MANAGE_BUG_REPORTS)

            reports = await self.bug_report_service.list_all()
            user_ids = list({r.user_id for r in reports if r.user_id is not None})
            profiles = await self.profile_service.find_by_ids(user_ids)

            needle = request.name.strip().lower() if request.name else None
            items = []
            for report in reports:
                profile = profiles.get(report.user_id) if report.user_id else None
                user_name = (profile.display_name if profile else None) or UNKNOWN_USER

                if request.status and report.status != request.status:
                    continue
                if needle and needle not in user_name.lower():
                    continue
                day = report.created_at.date()
                if request.date_from and day < request.date_from:
                    continue
                if request.date_to and day > request.date_to:
                    continue

                items.append(
                    BugReportItem(
                        report_id=str(report.id),
                        user_id=str(report.user_id) if report.user_id else None,
                        user_name=user_name,
                        description=report.description,
                        screenshot_url=report.screenshot_url,
                        status=report.status,
                        created_at=report.created_at,
                    )
                )

            return ListBugReportsResponse(reports=items)
