"""Bug report routes."""

from datetime import date
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from tkchat.application.usecase.bug_report import (
    DeleteBugReportRequest,
    DeleteBugReportUseCase,
    ListBugReportsRequest,
    ListBugReportsResponse,
    ListBugReportsUseCase,
    SubmitBugReportRequest,
    SubmitBugReportResponse,
    SubmitBugReportUseCase,
    ToggleBugReportRequest,
    ToggleBugReportResponse,
    ToggleBugReportUseCase,
)
from tkchat.domain.service import JWTService, RoleService
from tkchat.domain.value import BugReportStatus
from tkchat.interface.api.session import require_actor

router = APIRouter(prefix="/bug-reports", tags=["bug-reports"], route_class=DishkaRoute)


class SubmitBugReportAPIRequest(BaseModel):
    """API request for reporting a problem."""

    description: str
    screenshot_url: str | None = None


@router.post(
    "/", response_model=SubmitBugReportResponse, status_code=status.HTTP_201_CREATED
)
async def submit_bug_report(
    request: SubmitBugReportAPIRequest,
    submit_bug_report_use_case: FromDishka[SubmitBugReportUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> SubmitBugReportResponse:
    """Report a problem. Any signed-in user may submit."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    return await submit_bug_report_use_case.execute(
        SubmitBugReportRequest(
            actor=actor,
            description=request.description,
            screenshot_url=request.screenshot_url,
        )
    )


@router.get("/", response_model=ListBugReportsResponse)
async def list_bug_reports(
    list_bug_reports_use_case: FromDishka[ListBugReportsUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
    status_filter: BugReportStatus | None = Query(default=None, alias="status"),
    name: str | None = Query(default=None),
    date_from: date | None = Query(default=None),
    date_to: date | None = Query(default=None),
) -> ListBugReportsResponse:
    """List reports, newest first, with optional filters."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    return await list_bug_reports_use_case.execute(
        ListBugReportsRequest(
            actor=actor,
            status=status_filter,
            name=name,
            date_from=date_from,
            date_to=date_to,
        )
    )


@router.post("/{report_id}/toggle", response_model=ToggleBugReportResponse)
async def toggle_bug_report(
    report_id: UUID,
    toggle_bug_report_use_case: FromDishka[ToggleBugReportUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleBugReportResponse:
    """Flip a report between pending and fixed."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    return await toggle_bug_report_use_case.execute(
        ToggleBugReportRequest(actor=actor, report_id=str(report_id))
    )


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bug_report(
    report_id: UUID,
    delete_bug_report_use_case: FromDishka[DeleteBugReportUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a report."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    await delete_bug_report_use_case.execute(
        DeleteBugReportRequest(actor=actor, report_id=str(report_id))
    )
