"""Delete bug report use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tkchat.domain.service import BugReportService, Capability, require_capability
from tkchat.domain.value import Actor, BugReportId


class DeleteBugReportRequest(BaseModel):
    """Delete bug report request."""

    actor: Actor
    report_id: str


class DeleteBugReportUseCase:
    """Use case for deleting a report."""

    def __init__(self, bug_report_service: BugReportService) -> None:
        """Initialize delete bug report use case.

        Args:
            bug_report_service: Bug report domain service
        """
        self.bug_report_service = bug_report_service

    async def execute(self, request: DeleteBugReportRequest) -> None:
        """Delete the report.

        Raises:
            UnauthorizedError: If the actor cannot manage bug reports
            NotFoundError: If the report does not exist
        """
        with logfire.span(
            "delete_bug_report.execute", actor_id=str(request.actor.user_id)
        ):
            require_capability(request.actor, Capability.MANAGE_BUG_REPORTS)
            await self.bug_report_service.delete(BugReportId(UUID(request.report_id)))
