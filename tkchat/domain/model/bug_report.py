"""Bug report entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tkchat.domain.model.common import DomainModel, utcnow
from tkchat.domain.value import BugReportId, BugReportStatus, UserId


class BugReport(DomainModel):
    """Problem report submitted from the console, triaged by admins."""

    id: BugReportId
    user_id: Optional[UserId] = None
    description: str = Field(min_length=1)
    screenshot_url: Optional[str] = None
    status: BugReportStatus = BugReportStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
