"""Toggle bug report status use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tkchat.domain.service import BugReportService, Capability, require_capability
from tkchat.domain.value import Actor, BugReportId, BugReportStatus


class ToggleBugReportRequest(BaseModel):
    """Toggle bug report request."""

    actor: Actor
    report_id: str


class ToggleBugReportResponse(BaseModel):
    """Toggle bug report response."""

    report_id: str
    status: BugReportStatus


class ToggleBugReportUseCase:
    """Use case for flipping a report between pending and fixed."""

    def __init__(self, bug_report_service: BugReportService) -> None:
        """Initialize toggle bug report use case.

        Args:
            bug_report_service: Bug report domain service
        """
        self.bug_report_service = bug_report_service

    async def execute(self, request: ToggleBugReportRequest) -> ToggleBugReportResponse:
        """Flip the status.

        Raises:
            UnauthorizedError: If the actor cannot manage bug reports
            NotFoundError: If the report does not exist
        """
        with logfire.span(
            "toggle_bug_report.execute", actor_id=str(request.actor.user_id)
        ):
            require_capability(request.actor, Capability.MANAGE_BUG_REPORTS)
            report = await self.bug_report_service.toggle_status(
                BugReportId(UUID(request.report_id))
            )
            return ToggleBugReportResponse(
                report_id=str(report.id), status=report.status
            )
