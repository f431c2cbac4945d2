"""End-to-end tests for user administration and bug reports."""

import pytest

from tkchat.adapter.identity.client import MockIdentityClient
from tkchat.adapter.webhook.client import MockNotifier
from tkchat.domain.value import AccountStatus, AppRole
from tests.conftest import STRONG_PASSWORD, seed_user
from tests.harness import create_api_fixture

api = create_api_fixture()


async def _login(client, email: str, password: str = STRONG_PASSWORD):
    return await client.post(
        "/auth/login", json={"email": email, "password": password}
    )


class TestSession:
    """Sign in, sign out and session status."""

    @pytest.mark.asyncio
    async def test_health(self, api):
        client, _ = api

        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_me_without_cookie(self, api):
        client, _ = api

        response = await client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    @pytest.mark.asyncio
    async def test_login_then_logout(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "owner@tksolution.example", {AppRole.OWNER})

        login = await _login(client, "owner@tksolution.example")
        me = await client.get("/auth/me")
        await client.post("/auth/logout")
        after = await client.get("/auth/me")

        assert login.status_code == 200
        assert login.json()["roles"] == ["owner", "user"]
        assert login.json()["is_admin"] is True
        assert me.json()["authenticated"] is True
        assert after.json()["authenticated"] is False

    @pytest.mark.asyncio
    async def test_wrong_password(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "user@example.com")

        response = await _login(client, "user@example.com", "Wr0ng!pass")

        assert response.status_code == 401
        assert "auth_token" not in response.cookies

    @pytest.mark.asyncio
    async def test_inactive_account_blocked(self, api):
        client, container = api
        async with container() as env:
            await seed_user(
                env, "gone@example.com", account_status=AccountStatus.INACTIVE
            )

        response = await _login(client, "gone@example.com")

        assert response.status_code == 403
        assert response.json()["error"] == "AccountInactiveError"

    @pytest.mark.asyncio
    async def test_password_reset_answers_the_same(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "user@example.com")
        identity = await container.get(MockIdentityClient)

        known = await client.post(
            "/auth/password/reset", json={"email": "user@example.com"}
        )
        unknown = await client.post(
            "/auth/password/reset", json={"email": "nobody@example.com"}
        )

        assert known.status_code == unknown.status_code == 200
        assert known.json() == unknown.json()
        assert identity.password_resets[0][0] == "user@example.com"

    @pytest.mark.asyncio
    async def test_change_password(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "user@example.com")
        await _login(client, "user@example.com")

        weak = await client.post(
            "/auth/password", json={"password": "short", "confirm_password": "short"}
        )
        changed = await client.post(
            "/auth/password",
            json={"password": "N3w!password", "confirm_password": "N3w!password"},
        )
        await client.post("/auth/logout")
        relogin = await _login(client, "user@example.com", "N3w!password")

        assert weak.status_code == 400
        assert "At least 8 characters" in weak.json()["unmet"]
        assert changed.status_code == 204
        assert relogin.status_code == 200


class TestUserAdministration:
    """Role and status changes through the users API."""

    @pytest.mark.asyncio
    async def test_anonymous_list_rejected(self, api):
        client, _ = api

        response = await client.get("/users/")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_plain_user_list_rejected(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "user@example.com")
        await _login(client, "user@example.com")

        response = await client.get("/users/")

        assert response.status_code == 403
        assert response.json()["error"] == "UnauthorizedError"

    @pytest.mark.asyncio
    async def test_admin_sees_row_permissions(self, api):
        client, container = api
        async with container() as env:
            admin = await seed_user(env, "admin@example.com", {AppRole.ADMIN})
            peer = await seed_user(env, "peer@example.com", {AppRole.ADMIN})
            user = await seed_user(env, "user@example.com")
        await _login(client, "admin@example.com")

        response = await client.get("/users/")

        rows = {row["user_id"]: row for row in response.json()["users"]}
        assert rows[str(admin.user_id)]["can_change_role"] is False
        assert rows[str(peer.user_id)]["can_change_role"] is False
        assert rows[str(user.user_id)]["can_change_role"] is True
        assert rows[str(user.user_id)]["can_delete"] is False

    @pytest.mark.asyncio
    async def test_admin_promotes_user(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "admin@example.com", {AppRole.ADMIN})
            user = await seed_user(env, "user@example.com")
        await _login(client, "admin@example.com")

        response = await client.put(
            f"/users/{user.user_id}/role", json={"role": "admin"}
        )

        assert response.status_code == 200
        assert response.json()["roles"] == ["admin", "user"]

    @pytest.mark.asyncio
    async def test_admin_cannot_demote_admin(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "admin@example.com", {AppRole.ADMIN})
            peer = await seed_user(env, "peer@example.com", {AppRole.ADMIN})
        await _login(client, "admin@example.com")

        response = await client.put(
            f"/users/{peer.user_id}/role", json={"role": "user"}
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_promotion_applies_to_next_request(self, api):
        # Arrange
        client, container = api
        async with container() as env:
            await seed_user(env, "owner@example.com", {AppRole.OWNER})
            user = await seed_user(env, "user@example.com")

        await _login(client, "user@example.com")
        before = await client.get("/invites/")

        # Act
        await client.post("/auth/logout")
        await _login(client, "owner@example.com")
        await client.put(f"/users/{user.user_id}/role", json={"role": "admin"})
        await client.post("/auth/logout")
        await _login(client, "user@example.com")
        after = await client.get("/invites/")

        # Assert
        assert before.status_code == 403
        assert after.status_code == 200

    @pytest.mark.asyncio
    async def test_deactivated_user_cannot_sign_in(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "admin@example.com", {AppRole.ADMIN})
            user = await seed_user(env, "user@example.com")
        await _login(client, "admin@example.com")

        response = await client.put(
            f"/users/{user.user_id}/status", json={"account_status": "inactive"}
        )
        await client.post("/auth/logout")
        login = await _login(client, "user@example.com")

        assert response.json()["account_status"] == "inactive"
        assert login.status_code == 403

    @pytest.mark.asyncio
    async def test_owner_deletes_user(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "owner@example.com", {AppRole.OWNER})
            user = await seed_user(env, "user@example.com")
        await _login(client, "owner@example.com")

        deleted = await client.delete(f"/users/{user.user_id}")
        listed = await client.get("/users/")

        assert deleted.status_code == 204
        assert str(user.user_id) not in {
            row["user_id"] for row in listed.json()["users"]
        }

    @pytest.mark.asyncio
    async def test_update_own_profile(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "user@example.com", full_name="Old Name")
        await _login(client, "user@example.com")

        response = await client.patch("/users/me", json={"full_name": "New Name"})

        assert response.status_code == 200
        assert response.json()["full_name"] == "New Name"


class TestBugReports:
    """Bug report submission and triage."""

    @pytest.mark.asyncio
    async def test_submit_and_triage(self, api):
        # Arrange
        client, container = api
        async with container() as env:
            await seed_user(env, "user@example.com", full_name="Maria Silva")
            await seed_user(env, "admin@example.com", {AppRole.ADMIN})
        notifier = await container.get(MockNotifier)

        # Act
        await _login(client, "user@example.com")
        submitted = await client.post(
            "/bug-reports/", json={"description": "Chat window freezes"}
        )
        await client.post("/auth/logout")
        await _login(client, "admin@example.com")
        listed = await client.get("/bug-reports/", params={"name": "maria"})
        report_id = submitted.json()["report_id"]
        toggled = await client.post(f"/bug-reports/{report_id}/toggle")
        fixed = await client.get("/bug-reports/", params={"status": "fixed"})

        # Assert
        assert submitted.status_code == 201
        assert submitted.json()["status"] == "pending"
        assert len(notifier.bug_reports) == 1
        assert [r["user_name"] for r in listed.json()["reports"]] == ["Maria Silva"]
        assert toggled.json()["status"] == "fixed"
        assert [r["report_id"] for r in fixed.json()["reports"]] == [report_id]

    @pytest.mark.asyncio
    async def test_plain_user_cannot_list(self, api):
        client, container = api
        async with container() as env:
            await seed_user(env, "user@example.com")
        await _login(client, "user@example.com")

        response = await client.get("/bug-reports/")

        assert response.status_code == 403
