"""Unit tests for bug report use cases."""

from datetime import date, datetime, timezone

import pytest

from tkchat.adapter.webhook.client import MockNotifier
from tkchat.application.usecase.bug_report import (
    DeleteBugReportRequest,
    DeleteBugReportUseCase,
    ListBugReportsRequest,
    ListBugReportsUseCase,
    SubmitBugReportRequest,
    SubmitBugReportUseCase,
    ToggleBugReportRequest,
    ToggleBugReportUseCase,
)
from tkchat.domain.error import UnauthorizedError
from tkchat.domain.repository import BugReportRepository, ProfileRepository
from tkchat.domain.value import AppRole, BugReportStatus
from tests.conftest import seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _backdate(env, report_id: str, day: date) -> None:
    repo = await env.get(BugReportRepository)
    for report in await repo.list_all():
        if str(report.id) == report_id:
            created_at = datetime(day.year, day.month, day.day, 12, tzinfo=timezone.utc)
            await repo.save(report.model_copy(update={"created_at": created_at}))


class TestSubmitBugReport:
    """Tests for SubmitBugReportUseCase."""

    @pytest.mark.asyncio
    async def test_submit_forwards_to_webhook(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SubmitBugReportUseCase)
        notifier = await unit_env.get(MockNotifier)
        user = await seed_user(unit_env, "user@example.com", full_name="Ana Souza")

        # Act
        response = await use_case.execute(
            SubmitBugReportRequest(
                actor=user,
                description="Messages disappear after reload",
                screenshot_url="https://cdn.example.com/shot.png",
            )
        )

        # Assert
        assert response.status == BugReportStatus.PENDING
        assert response.warning is None
        sent = notifier.bug_reports[0]
        assert sent.company == "TK Solution"
        assert sent.user == "Ana Souza"
        assert sent.description == "Messages disappear after reload"
        assert sent.image_link == "https://cdn.example.com/shot.png"

    @pytest.mark.asyncio
    async def test_reporter_without_name_is_labelled_by_email(self, unit_env):
        use_case = await unit_env.get(SubmitBugReportUseCase)
        notifier = await unit_env.get(MockNotifier)
        user = await seed_user(unit_env, "anon@example.com")

        await use_case.execute(
            SubmitBugReportRequest(actor=user, description="Crash on login")
        )

        assert notifier.bug_reports[0].user == "anon@example.com"

    @pytest.mark.asyncio
    async def test_webhook_failure_keeps_report(self, unit_env):
        use_case = await unit_env.get(SubmitBugReportUseCase)
        notifier = await unit_env.get(MockNotifier)
        repo = await unit_env.get(BugReportRepository)
        user = await seed_user(unit_env, "user@example.com")
        notifier.fail = True

        response = await use_case.execute(
            SubmitBugReportRequest(actor=user, description="Crash on login")
        )

        assert response.warning is not None
        assert len(await repo.list_all()) == 1


class TestListBugReports:
    """Tests for ListBugReportsUseCase."""

    @pytest.mark.asyncio
    async def test_filters_by_status_name_and_dates(self, unit_env):
        """Filters combine; date bounds are inclusive."""
        # Arrange
        submit = await unit_env.get(SubmitBugReportUseCase)
        toggle = await unit_env.get(ToggleBugReportUseCase)
        list_reports = await unit_env.get(ListBugReportsUseCase)
        admin = await seed_user(unit_env, "admin@example.com", {AppRole.ADMIN})
        ana = await seed_user(unit_env, "ana@example.com", full_name="Ana Souza")
        bruno = await seed_user(unit_env, "bruno@example.com", full_name="Bruno Lima")

        first = await submit.execute(
            SubmitBugReportRequest(actor=ana, description="First")
        )
        second = await submit.execute(
            SubmitBugReportRequest(actor=bruno, description="Second")
        )
        third = await submit.execute(
            SubmitBugReportRequest(actor=ana, description="Third")
        )
        await _backdate(unit_env, first.report_id, date(2026, 1, 10))
        await _backdate(unit_env, second.report_id, date(2026, 1, 15))
        await _backdate(unit_env, third.report_id, date(2026, 1, 20))
        await toggle.execute(
            ToggleBugReportRequest(actor=admin, report_id=third.report_id)
        )

        # Act
        by_name = await list_reports.execute(
            ListBugReportsRequest(actor=admin, name="ana")
        )
        by_status = await list_reports.execute(
            ListBugReportsRequest(actor=admin, status=BugReportStatus.FIXED)
        )
        by_dates = await list_reports.execute(
            ListBugReportsRequest(
                actor=admin, date_from=date(2026, 1, 10), date_to=date(2026, 1, 15)
            )
        )

        # Assert
        assert [r.description for r in by_name.reports] == ["Third", "First"]
        assert [r.description for r in by_status.reports] == ["Third"]
        assert [r.description for r in by_dates.reports] == ["Second", "First"]

    @pytest.mark.asyncio
    async def test_deleted_reporter_shows_placeholder(self, unit_env):
        submit = await unit_env.get(SubmitBugReportUseCase)
        list_reports = await unit_env.get(ListBugReportsUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        admin = await seed_user(unit_env, "admin@example.com", {AppRole.ADMIN})
        user = await seed_user(unit_env, "gone@example.com")
        await submit.execute(SubmitBugReportRequest(actor=user, description="Bug"))
        await profile_repo.delete(user.user_id)

        response = await list_reports.execute(ListBugReportsRequest(actor=admin))

        assert response.reports[0].user_name == "Unknown user"

    @pytest.mark.asyncio
    async def test_plain_user_cannot_list(self, unit_env):
        list_reports = await unit_env.get(ListBugReportsUseCase)
        user = await seed_user(unit_env, "user@example.com")

        with pytest.raises(UnauthorizedError):
            await list_reports.execute(ListBugReportsRequest(actor=user))


class TestToggleAndDeleteBugReport:
    """Tests for ToggleBugReportUseCase and DeleteBugReportUseCase."""

    @pytest.mark.asyncio
    async def test_admin_toggles_and_deletes(self, unit_env):
        submit = await unit_env.get(SubmitBugReportUseCase)
        toggle = await unit_env.get(ToggleBugReportUseCase)
        delete = await unit_env.get(DeleteBugReportUseCase)
        list_reports = await unit_env.get(ListBugReportsUseCase)
        admin = await seed_user(unit_env, "admin@example.com", {AppRole.ADMIN})
        report = await submit.execute(
            SubmitBugReportRequest(actor=admin, description="Bug")
        )

        toggled = await toggle.execute(
            ToggleBugReportRequest(actor=admin, report_id=report.report_id)
        )
        await delete.execute(
            DeleteBugReportRequest(actor=admin, report_id=report.report_id)
        )

        assert toggled.status == BugReportStatus.FIXED
        remaining = await list_reports.execute(ListBugReportsRequest(actor=admin))
        assert remaining.reports == []

    @pytest.mark.asyncio
    async def test_plain_user_cannot_toggle(self, unit_env):
        submit = await unit_env.get(SubmitBugReportUseCase)
        toggle = await unit_env.get(ToggleBugReportUseCase)
        user = await seed_user(unit_env, "user@example.com")
        report = await submit.execute(
            SubmitBugReportRequest(actor=user, description="Bug")
        )

        with pytest.raises(UnauthorizedError):
            await toggle.execute(
                ToggleBugReportRequest(actor=user, report_id=report.report_id)
            )
