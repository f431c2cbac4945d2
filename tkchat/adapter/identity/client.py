"""Identity service client implementation.

Talks to a GoTrue-compatible auth API (the one Supabase exposes under
``/auth/v1``). Public endpoints are called with the anon key; lookups,
password updates and deletions go through the admin endpoints with the
service role key.
"""

from uuid import UUID, uuid4

import httpx
import logfire

from tkchat.adapter.error import (
    AccountExistsError,
    IdentityServiceError,
    InvalidCredentialsError,
)
from tkchat.domain.service.identity_service import IdentityAccount, IdentityClient
from tkchat.domain.value import Email, UserId


class RealIdentityClient(IdentityClient):
    """HTTP client for the identity service."""

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        service_role_key: str,
        timeout: float = 15.0,
    ) -> None:
        """Initialize identity client.

        Args:
            base_url: Auth API base URL
            anon_key: Public API key
            service_role_key: Privileged API key for admin endpoints
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.service_role_key = service_role_key
        self.timeout = timeout

    def _headers(self, admin: bool = False) -> dict[str, str]:
        key = self.service_role_key if admin else self.anon_key
        return {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        admin: bool = False,
        json: dict | None = None,
        params: dict | None = None,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.request(
                    method,
                    f"{self.base_url}{path}",
                    headers=self._headers(admin),
                    json=json,
                    params=params,
                )
        except httpx.HTTPError as e:
            logfire.error("Identity service HTTP error", path=path, error=str(e))
            raise IdentityServiceError(f"HTTP error calling identity service: {e}")

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        return (
            body.get("msg")
            or body.get("error_description")
            or body.get("message")
            or response.text
        )

    @staticmethod
    def _account(data: dict) -> IdentityAccount:
        user = data.get("user", data)
        return IdentityAccount(id=UserId(UUID(user["id"])), email=Email(user["email"]))

    async def sign_up(
        self, email: Email, password: str, metadata: dict[str, str]
    ) -> IdentityAccount:
        """Create an account with email and password."""
        response = await self._request(
            "POST",
            "/signup",
            json={"email": email.root, "password": password, "data": metadata},
        )

        if response.status_code in (400, 422):
            message = self._error_message(response)
            if "registered" in message.lower() or "exists" in message.lower():
                raise AccountExistsError(message)
            logfire.error("Identity sign up rejected", status_code=response.status_code)
            raise IdentityServiceError(message)
        if response.status_code >= 300:
            logfire.error(
                "Identity sign up failed",
                status_code=response.status_code,
                error=self._error_message(response),
            )
            raise IdentityServiceError(f"Sign up failed: {response.status_code}")

        return self._account(response.json())

    async def sign_in(self, email: Email, password: str) -> IdentityAccount:
        """Exchange email and password for the account."""
        response = await self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            json={"email": email.root, "password": password},
        )

        if response.status_code in (400, 401):
            raise InvalidCredentialsError("Invalid email or password")
        if response.status_code >= 300:
            logfire.error(
                "Identity sign in failed",
                status_code=response.status_code,
                error=self._error_message(response),
            )
            raise IdentityServiceError(f"Sign in failed: {response.status_code}")

        return self._account(response.json())

    async def email_registered(self, email: Email) -> bool:
        """Look the email up through the admin user listing."""
        response = await self._request(
            "GET",
            "/admin/users",
            admin=True,
            params={"filter": email.root, "per_page": 50},
        )
        if response.status_code >= 300:
            logfire.error(
                "Identity user lookup failed", status_code=response.status_code
            )
            raise IdentityServiceError(f"User lookup failed: {response.status_code}")

        users = response.json().get("users", [])
        return any(
            (user.get("email") or "").lower() == email.root for user in users
        )

    async def update_password(self, user_id: UserId, password: str) -> None:
        """Replace an account's password."""
        response = await self._request(
            "PUT", f"/admin/users/{user_id}", admin=True, json={"password": password}
        )
        if response.status_code >= 300:
            logfire.error(
                "Identity password update failed", status_code=response.status_code
            )
            raise IdentityServiceError(
                f"Password update failed: {response.status_code}"
            )

    async def send_password_reset(self, email: Email, redirect_to: str) -> None:
        """Ask the identity service to mail a recovery link."""
        response = await self._request(
            "POST",
            "/recover",
            params={"redirect_to": redirect_to},
            json={"email": email.root},
        )
        if response.status_code >= 300:
            logfire.error(
                "Identity recovery request failed", status_code=response.status_code
            )
            raise IdentityServiceError(
                f"Recovery request failed: {response.status_code}"
            )

    async def delete_account(self, user_id: UserId) -> None:
        """Delete an account through the admin API."""
        response = await self._request("DELETE", f"/admin/users/{user_id}", admin=True)
        if response.status_code == 404:
            logfire.warn("Identity account already absent", user_id=str(user_id))
            return
        if response.status_code >= 300:
            logfire.error(
                "Identity account deletion failed", status_code=response.status_code
            )
            raise IdentityServiceError(f"Deletion failed: {response.status_code}")


class MockIdentityClient(IdentityClient):
    """In-memory identity service for testing.

    Keeps accounts in a dict and records every call. Set ``fail_sign_up``
    to make the next sign ups raise.
    """

    def __init__(self) -> None:
        """Initialize an empty account store."""
        self.accounts: dict[str, tuple[IdentityAccount, str]] = {}
        self.metadata: dict[UserId, dict[str, str]] = {}
        self.sign_up_calls: list[str] = []
        self.password_resets: list[tuple[str, str]] = []
        self.deleted: list[UserId] = []
        self.fail_sign_up = False

    def add_account(self, email: str, password: str) -> IdentityAccount:
        """Seed an account directly."""
        account = IdentityAccount(id=UserId(uuid4()), email=Email(email))
        self.accounts[account.email.root] = (account, password)
        return account

    async def sign_up(
        self, email: Email, password: str, metadata: dict[str, str]
    ) -> IdentityAccount:
        """Create an account in memory."""
        self.sign_up_calls.append(email.root)
        if self.fail_sign_up:
            raise IdentityServiceError("Identity service unavailable")
        if email.root in self.accounts:
            raise AccountExistsError("User already registered")
        account = self.add_account(email.root, password)
        self.metadata[account.id] = dict(metadata)
        return account

    async def sign_in(self, email: Email, password: str) -> IdentityAccount:
        """Check credentials against the in-memory store."""
        entry = self.accounts.get(email.root)
        if entry is None or entry[1] != password:
            raise InvalidCredentialsError("Invalid email or password")
        return entry[0]

    async def email_registered(self, email: Email) -> bool:
        """Whether the store holds the email."""
        return email.root in self.accounts

    async def update_password(self, user_id: UserId, password: str) -> None:
        """Replace a stored password."""
        for key, (account, _) in self.accounts.items():
            if account.id == user_id:
                self.accounts[key] = (account, password)
                return
        raise IdentityServiceError(f"Unknown account: {user_id}")

    async def send_password_reset(self, email: Email, redirect_to: str) -> None:
        """Record the reset request."""
        self.password_resets.append((email.root, redirect_to))

    async def delete_account(self, user_id: UserId) -> None:
        """Drop an account from the store."""
        self.deleted.append(user_id)
        self.accounts = {
            key: entry
            for key, entry in self.accounts.items()
            if entry[0].id != user_id
        }
