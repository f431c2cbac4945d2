"""Account identity domain service.

Accounts, credentials and password resets are owned by an external
identity service. This module defines the client interface the domain
needs and a thin service that traces every call.
"""

import logfire

from tkchat.domain.value import Email, UserId
from tkchat.domain.value.common import ValueObject

from .base import Service


class IdentityAccount(ValueObject):
    """Account as reported by the identity service."""

    id: UserId
    email: Email


class IdentityClient:
    """Generic identity service client interface.

    Implementations raise ``tkchat.adapter.error.IdentityServiceError``
    (or a subclass) on failure.
    """

    async def sign_up(
        self, email: Email, password: str, metadata: dict[str, str]
    ) -> IdentityAccount:
        """Create an account with email and password."""
        raise NotImplementedError

    async def sign_in(self, email: Email, password: str) -> IdentityAccount:
        """Verify credentials and return the account."""
        raise NotImplementedError

    async def email_registered(self, email: Email) -> bool:
        """Whether an account already exists for the email."""
        raise NotImplementedError

    async def update_password(self, user_id: UserId, password: str) -> None:
        """Replace an account's password."""
        raise NotImplementedError

    async def send_password_reset(self, email: Email, redirect_to: str) -> None:
        """Send a password recovery link."""
        raise NotImplementedError

    async def delete_account(self, user_id: UserId) -> None:
        """Delete an account."""
        raise NotImplementedError


class IdentityService(Service):
    """Domain service fronting the identity service client."""

    def __init__(self, identity_client: IdentityClient) -> None:
        """Initialize identity service.

        Args:
            identity_client: Identity service client implementation
        """
        self.identity_client = identity_client

    async def create_account(
        self, email: Email, password: str, full_name: str, phone: str | None
    ) -> IdentityAccount:
        """Create an account bound to a validated email.

        Args:
            email: Validated invitee email
            password: Password that already passed the policy
            full_name: Display name stored as account metadata
            phone: Optional phone stored as account metadata

        Returns:
            The created account
        """
        with logfire.span("identity_service.create_account", email=email.root):
            metadata = {"full_name": full_name}
            if phone:
                metadata["phone"] = phone
            account = await self.identity_client.sign_up(email, password, metadata)
            logfire.info(
                "Account created", user_id=str(account.id), email=email.root
            )
            return account

    async def authenticate(self, email: Email, password: str) -> IdentityAccount:
        """Verify credentials.

        Args:
            email: Account email
            password: Account password

        Returns:
            The authenticated account
        """
        with logfire.span("identity_service.authenticate", email=email.root):
            account = await self.identity_client.sign_in(email, password)
            logfire.info("Credentials verified", user_id=str(account.id))
            return account

    async def is_registered(self, email: Email) -> bool:
        """Check whether an email already belongs to an account."""
        with logfire.span("identity_service.is_registered", email=email.root):
            registered = await self.identity_client.email_registered(email)
            logfire.info(
                "Account existence check", email=email.root, registered=registered
            )
            return registered

    async def change_password(self, user_id: UserId, password: str) -> None:
        """Replace a password that already passed the policy."""
        with logfire.span("identity_service.change_password", user_id=str(user_id)):
            await self.identity_client.update_password(user_id, password)
            logfire.info("Password changed", user_id=str(user_id))

    async def request_password_reset(self, email: Email, redirect_to: str) -> None:
        """Ask the identity service to send a recovery link."""
        with logfire.span(
            "identity_service.request_password_reset", email=email.root
        ):
            await self.identity_client.send_password_reset(email, redirect_to)
            logfire.info("Password reset requested", email=email.root)

    async def delete_account(self, user_id: UserId) -> None:
        """Delete an account from the identity service."""
        with logfire.span("identity_service.delete_account", user_id=str(user_id)):
            await self.identity_client.delete_account(user_id)
            logfire.info("Account deleted", user_id=str(user_id))
