"""Bug report use cases."""

from tkchat.application.usecase.bug_report.delete_bug_report import (
    DeleteBugReportRequest,
    DeleteBugReportUseCase,
)
from tkchat.application.usecase.bug_report.list_bug_reports import (
    BugReportItem,
    ListBugReportsRequest,
    ListBugReportsResponse,
    ListBugReportsUseCase,
)
from tkchat.application.usecase.bug_report.submit_bug_report import (
    SubmitBugReportRequest,
    SubmitBugReportResponse,
    SubmitBugReportUseCase,
)
from tkchat.application.usecase.bug_report.toggle_bug_report import (
    ToggleBugReportRequest,
    ToggleBugReportResponse,
    ToggleBugReportUseCase,
)

__all__ = [
    "BugReportItem",
    "DeleteBugReportRequest",
    "DeleteBugReportUseCase",
    "ListBugReportsRequest",
    "ListBugReportsResponse",
    "ListBugReportsUseCase",
    "SubmitBugReportRequest",
    "SubmitBugReportResponse",
    "SubmitBugReportUseCase",
    "ToggleBugReportRequest",
    "ToggleBugReportResponse",
    "ToggleBugReportUseCase",
]
