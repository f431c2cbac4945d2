"""Submit bug report use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from tkchat.adapter.error import NotificationError
from tkchat.config import Settings
from tkchat.domain.service import (
    BugReportNotification,
    BugReportService,
    NotificationService,
    ProfileService,
)
from tkchat.domain.value import Actor, BugReportStatus


class SubmitBugReportRequest(BaseModel):
    """Submit bug report request."""

    actor: Actor
    description: str = Field(max_length=5000)
    screenshot_url: str | None = None


class SubmitBugReportResponse(BaseModel):
    """Submit bug report response."""

    report_id: str
    status: BugReportStatus
    created_at: datetime
    warning: str | None = None


class SubmitBugReportUseCase:
    """Use case for reporting a problem from the console.

    The report is stored first; forwarding it to the triage webhook is
    best effort.
    """

    def __init__(
        self,
        bug_report_service: BugReportService,
        profile_service: ProfileService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize submit bug report use case.

        Args:
            bug_report_service: Bug report domain service
            profile_service: Profile domain service
            notification_service: Notification domain service
            settings: Application settings
        """
        self.bug_report_service = bug_report_service
        self.profile_service = profile_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: SubmitBugReportRequest) -> SubmitBugReportResponse:
        """Store the report and forward it.

        Raises:
            ValidationError: If the description is blank
        """
        with logfire.span(
            "submit_bug_report.execute", user_id=str(request.actor.user_id)
        ):
            report = await self.bug_report_service.submit(
                request.actor.user_id, request.description, request.screenshot_url
            )

            profile = await self.profile_service.find_by_ids([request.actor.user_id])
            reporter = profile.get(request.actor.user_id)
            user_label = (reporter.display_name if reporter else None) or str(
                request.actor.user_id
            )

            warning = None
            try:
                await self.notification_service.notify_bug_report(
                    BugReportNotification(
                        company=self.settings.notifications.company,
                        user=user_label,
                        description=report.description,
                        image_link=report.screenshot_url,
                    )
                )
            except NotificationError as e:
                logfire.warn(
                    "Bug report notification failed",
                    report_id=str(report.id),
                    error=str(e),
                )
                warning = "Report saved but the support team could not be notified."

            return SubmitBugReportResponse(
                report_id=str(report.id),
                status=report.status,
                created_at=report.created_at,
                warning=warning,
            )
